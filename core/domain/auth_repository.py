from typing import Any, Protocol

from core.schemas import AuthSession, AuthUser


class AuthRepository(Protocol):
    async def sign_up(
        self, email: str, password: str, metadata: dict[str, Any]
    ) -> tuple[AuthUser | None, AuthSession | None]: ...

    async def sign_in(self, email: str, password: str) -> AuthSession | None: ...

    async def sign_out(self) -> bool: ...

    async def get_user(self) -> AuthUser | None: ...
