from typing import Any

import httpx
from dependency_injector import containers, providers

from config.app_settings import settings
from core.ai_coach.generator import WorkoutGenerator, build_llm_client
from core.infra.auth_repository import HTTPAuthRepository
from core.infra.feedback_repository import HTTPFeedbackRepository
from core.infra.friend_repository import HTTPFriendRepository
from core.infra.profile_repository import HTTPProfileRepository
from core.infra.storage_repository import HTTPStorageRepository
from core.infra.workout_repository import HTTPWorkoutRepository
from core.services.internal import APIService
from core.services.internal.auth_service import AuthService
from core.services.internal.feedback_service import FeedbackService
from core.services.internal.friend_service import FriendService
from core.services.internal.profile_service import ProfileService
from core.services.internal.session_store import SessionStore
from core.services.internal.workout_service import WorkoutHistoryService


def build_http_client(**_: Any) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.API_TIMEOUT,
        limits=httpx.Limits(
            max_connections=settings.API_MAX_CONNECTIONS,
            max_keepalive_connections=settings.API_MAX_KEEPALIVE_CONNECTIONS,
        ),
    )


async def close_http_client(client: httpx.AsyncClient) -> None:
    await client.aclose()


class App(containers.DeclarativeContainer):
    http_client = providers.Resource(build_http_client, shutdown=close_http_client)
    session_store = providers.Singleton(SessionStore)
    llm_client = providers.Singleton(build_llm_client, settings=settings)

    auth_repository = providers.Factory(
        HTTPAuthRepository, client=http_client, settings=settings, session_store=session_store
    )
    profile_repository = providers.Factory(
        HTTPProfileRepository, client=http_client, settings=settings, session_store=session_store
    )
    storage_repository = providers.Factory(
        HTTPStorageRepository, client=http_client, settings=settings, session_store=session_store
    )
    workout_repository = providers.Factory(
        HTTPWorkoutRepository, client=http_client, settings=settings, session_store=session_store
    )
    friend_repository = providers.Factory(
        HTTPFriendRepository, client=http_client, settings=settings, session_store=session_store
    )
    feedback_repository = providers.Factory(
        HTTPFeedbackRepository, client=http_client, settings=settings, session_store=session_store
    )

    auth_service = providers.Factory(
        AuthService, repository=auth_repository, profiles=profile_repository, session_store=session_store
    )
    profile_service = providers.Factory(
        ProfileService,
        repository=profile_repository,
        storage=storage_repository,
        session_store=session_store,
        bucket=settings.PROFILE_PICTURES_BUCKET,
        search_limit=settings.USER_SEARCH_LIMIT,
    )
    workout_service = providers.Factory(
        WorkoutHistoryService,
        repository=workout_repository,
        session_store=session_store,
        friend_history_limit=settings.FRIEND_HISTORY_LIMIT,
    )
    friend_service = providers.Factory(FriendService, repository=friend_repository, session_store=session_store)
    feedback_service = providers.Factory(FeedbackService, repository=feedback_repository, session_store=session_store)
    ai_coach_service = providers.Factory(
        WorkoutGenerator, client=llm_client, profiles=profile_service, settings=settings
    )


_container: App | None = None


def create_container() -> App:
    return App()


def set_container(container: App) -> None:
    global _container
    _container = container


def get_container() -> App:
    if _container is None:
        raise RuntimeError("Container is not initialized")
    return _container


def init_app() -> App:
    container = create_container()
    set_container(container)
    APIService.configure(get_container)
    return container


async def shutdown_container(container: App) -> None:
    # a plain-function resource is only reset by shutdown_resources, the client needs an explicit close
    client = container.http_client() if container.http_client.initialized else None
    shutdown_result = container.shutdown_resources()
    if shutdown_result is not None:
        await shutdown_result
    if client is not None:
        await close_http_client(client)
