from typing import Any

from loguru import logger

from core.schemas import AuthSession, AuthUser
from core.services.internal.api_client import APIClient, APIClientHTTPError, APIClientTransportError


class HTTPAuthRepository(APIClient):
    @staticmethod
    def _parse_session(data: Any) -> AuthSession | None:
        if isinstance(data, dict) and data.get("access_token") and isinstance(data.get("user"), dict):
            return AuthSession.model_validate(data)
        return None

    async def sign_up(self, email: str, password: str, metadata: dict[str, Any]) -> tuple[AuthUser | None, AuthSession | None]:
        """Create an account. The session is ``None`` when email confirmation is pending."""
        payload = {"email": email, "password": password, "data": metadata}
        _, data = await self._api_request("post", self._auth("signup"), payload)
        session = self._parse_session(data)
        if session is not None:
            return session.user, session
        if isinstance(data, dict) and data.get("id"):
            return AuthUser.model_validate(data), None
        if isinstance(data, dict) and isinstance(data.get("user"), dict):
            return AuthUser.model_validate(data["user"]), None
        logger.warning(f"Unexpected sign up response for email={email}")
        return None, None

    async def sign_in(self, email: str, password: str) -> AuthSession | None:
        _, data = await self._api_request(
            "post",
            self._auth("token"),
            {"email": email, "password": password},
            params={"grant_type": "password"},
            retry_server_errors=False,
        )
        return self._parse_session(data)

    async def sign_out(self) -> bool:
        try:
            status, _ = await self._api_request("post", self._auth("logout"), allow_statuses={401, 403})
        except (APIClientHTTPError, APIClientTransportError) as exc:
            logger.error(f"Sign out request failed: {exc}")
            return False
        return status in (200, 204)

    async def get_user(self) -> AuthUser | None:
        if not self.session_store.access_token:
            return None
        try:
            status, data = await self._api_request("get", self._auth("user"), allow_statuses={401, 403})
        except (APIClientHTTPError, APIClientTransportError) as exc:
            logger.error(f"Auth user lookup failed: {exc}")
            return None
        if status == 200 and isinstance(data, dict):
            return AuthUser.model_validate(data)
        logger.info(f"Auth user lookup rejected HTTP={status}")
        return None


__all__ = ["HTTPAuthRepository"]
