from typing import Any, Protocol

from core.schemas import FriendProfile, UserProfile


class ProfileRepository(Protocol):
    async def get_profile(self, user_id: str) -> UserProfile | None: ...

    async def username_exists(self, username: str) -> bool: ...

    async def update_profile(self, user_id: str, data: dict[str, Any]) -> UserProfile | None: ...

    async def search_profiles(self, query: str, *, exclude_id: str, limit: int) -> list[FriendProfile]: ...
