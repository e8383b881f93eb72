from loguru import logger

from core.domain.auth_repository import AuthRepository
from core.domain.profile_repository import ProfileRepository
from core.exceptions import BackendServiceError, UsernameTakenError
from core.schemas import AuthSession, AuthUser
from core.services.internal.session_store import SessionStore


class AuthService:
    def __init__(self, repository: AuthRepository, profiles: ProfileRepository, session_store: SessionStore) -> None:
        self._repository = repository
        self._profiles = profiles
        self._session_store = session_store

    async def sign_up(self, email: str, password: str, username: str) -> AuthUser:
        username = username.strip()
        if await self._profiles.username_exists(username):
            raise UsernameTakenError(username)
        # the profile row is created server-side from the user metadata
        user, session = await self._repository.sign_up(email.strip(), password, {"username": username})
        if user is None:
            raise BackendServiceError("Sign up failed", code=400, details=email)
        if session is not None:
            self._session_store.set(session)
        logger.info(f"User signed up user_id={user.id} confirmed={session is not None}")
        return user

    async def sign_in(self, email: str, password: str) -> AuthSession:
        session = await self._repository.sign_in(email.strip(), password)
        if session is None:
            raise BackendServiceError("Invalid login response", code=502, details=email)
        self._session_store.set(session)
        logger.info(f"User signed in user_id={session.user.id}")
        return session

    async def sign_out(self) -> None:
        if self._session_store.session is None:
            return
        try:
            await self._repository.sign_out()
        finally:
            self._session_store.clear()

    async def current_user(self) -> AuthUser | None:
        if self._session_store.session is None:
            return None
        user = await self._repository.get_user()
        if user is None:
            logger.info("Stored session rejected by backend, clearing it")
            self._session_store.clear()
        return user

    def is_authenticated(self) -> bool:
        return self._session_store.session is not None

    def require_auth(self) -> AuthUser:
        return self._session_store.require_user()
