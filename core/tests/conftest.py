from types import SimpleNamespace
from typing import Any, Callable

import httpx
import pytest

from core.schemas import AuthSession, AuthUser
from core.services.internal.session_store import SessionStore

USER_ID = "11111111-1111-1111-1111-111111111111"
FRIEND_ID = "22222222-2222-2222-2222-222222222222"


@pytest.fixture
def api_settings() -> SimpleNamespace:
    return SimpleNamespace(
        SUPABASE_URL="https://backend.test",
        SUPABASE_ANON_KEY="anon-key",
        SUPABASE_REST_URL="https://backend.test/rest/v1",
        SUPABASE_AUTH_URL="https://backend.test/auth/v1",
        SUPABASE_STORAGE_URL="https://backend.test/storage/v1",
        API_MAX_RETRIES=2,
        API_RETRY_INITIAL_DELAY=0,
        API_RETRY_BACKOFF_FACTOR=2,
        API_RETRY_MAX_DELAY=0,
        API_TIMEOUT=5,
    )


@pytest.fixture
def auth_session() -> AuthSession:
    return AuthSession(
        access_token="user-token",
        refresh_token="refresh",
        user=AuthUser(id=USER_ID, email="ana@example.com", user_metadata={"username": "ana"}),
    )


@pytest.fixture
def anonymous_store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def session_store(auth_session: AuthSession) -> SessionStore:
    store = SessionStore()
    store.set(auth_session)
    return store


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_http_client(recorded_requests: list[httpx.Request]) -> Callable[[Callable[[httpx.Request], Any]], httpx.AsyncClient]:
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(_record))

    return factory
