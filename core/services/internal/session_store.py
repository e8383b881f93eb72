from loguru import logger

from core.exceptions import NotAuthenticatedError
from core.schemas import AuthSession, AuthUser


class SessionStore:
    """Holds the signed-in user's session for the lifetime of the client."""

    def __init__(self) -> None:
        self._session: AuthSession | None = None

    @property
    def session(self) -> AuthSession | None:
        return self._session

    @property
    def access_token(self) -> str | None:
        return self._session.access_token if self._session else None

    @property
    def user(self) -> AuthUser | None:
        return self._session.user if self._session else None

    def set(self, session: AuthSession) -> None:
        self._session = session
        logger.debug(f"session_stored user_id={session.user.id}")

    def clear(self) -> None:
        if self._session is not None:
            logger.debug(f"session_cleared user_id={self._session.user.id}")
        self._session = None

    def require_user(self) -> AuthUser:
        user = self.user
        if user is None:
            raise NotAuthenticatedError()
        return user


__all__ = ["SessionStore"]
