from datetime import datetime
from typing import Any

from loguru import logger

from core.domain.profile_repository import ProfileRepository
from core.domain.storage_repository import StorageRepository
from core.exceptions import BackendServiceError, ProfileNotFoundError
from core.schemas import FriendProfile, UserProfile
from core.services.internal.session_store import SessionStore

_IMAGE_EXTENSIONS: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/heic": "heic",
}

_PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class ProfileService:
    def __init__(
        self,
        repository: ProfileRepository,
        storage: StorageRepository,
        session_store: SessionStore,
        *,
        bucket: str = "profile-pictures",
        search_limit: int = 20,
    ) -> None:
        self._repository = repository
        self._storage = storage
        self._session_store = session_store
        self._bucket = bucket
        self._search_limit = search_limit

    async def get_profile(self, user_id: str) -> UserProfile | None:
        return await self._repository.get_profile(user_id)

    async def get_current_profile(self) -> UserProfile | None:
        user = self._session_store.require_user()
        return await self._repository.get_profile(user.id)

    async def get_current_profile_or_none(self) -> UserProfile | None:
        """Profile of the signed-in user, ``None`` for anonymous callers."""
        user = self._session_store.user
        if user is None:
            return None
        return await self._repository.get_profile(user.id)

    async def is_profile_complete(self) -> bool:
        profile = await self.get_current_profile_or_none()
        return profile is not None and profile.is_complete

    async def update_current_profile(self, data: dict[str, Any]) -> UserProfile:
        user = self._session_store.require_user()
        payload = {key: value for key, value in data.items() if key not in _PROTECTED_FIELDS}
        profile = await self._repository.update_profile(user.id, payload)
        if profile is None:
            raise ProfileNotFoundError(user.id)
        return profile

    async def username_exists(self, username: str) -> bool:
        return await self._repository.username_exists(username.strip())

    async def search_users(self, query: str) -> list[FriendProfile]:
        user = self._session_store.require_user()
        needle = query.strip()
        if not needle:
            return []
        return await self._repository.search_profiles(needle, exclude_id=user.id, limit=self._search_limit)

    async def _remove_existing_pictures(self, user_id: str) -> None:
        paths = await self._storage.list_objects(self._bucket, user_id)
        if paths and not await self._storage.remove(self._bucket, paths):
            logger.error(f"Failed to delete existing profile pictures user_id={user_id} count={len(paths)}")

    async def upload_profile_picture(self, content: bytes, content_type: str = "image/jpeg") -> str:
        user = self._session_store.require_user()
        extension = _IMAGE_EXTENSIONS.get(content_type.lower(), "jpg")
        timestamp = int(datetime.now().timestamp() * 1000)
        path = f"{user.id}/profile-picture-{timestamp}.{extension}"

        await self._remove_existing_pictures(user.id)
        if not await self._storage.upload(self._bucket, path, content, content_type):
            raise BackendServiceError("Failed to upload profile picture", details=path)

        public_url = self._storage.public_url(self._bucket, path)
        if await self._repository.update_profile(user.id, {"profile_picture_url": public_url}) is None:
            raise ProfileNotFoundError(user.id)
        return public_url

    async def delete_profile_picture(self) -> None:
        user = self._session_store.require_user()
        await self._remove_existing_pictures(user.id)
        if await self._repository.update_profile(user.id, {"profile_picture_url": None}) is None:
            raise ProfileNotFoundError(user.id)
