from loguru import logger

from core.domain.friend_repository import FriendRepository
from core.exceptions import AlreadyFriendsError, BackendServiceError, FriendRequestExistsError
from core.schemas import FriendRequest, Friendship
from core.services.internal.session_store import SessionStore


class FriendService:
    def __init__(self, repository: FriendRepository, session_store: SessionStore) -> None:
        self._repository = repository
        self._session_store = session_store

    async def send_friend_request(self, receiver_id: str) -> None:
        user = self._session_store.require_user()
        if receiver_id == user.id:
            raise ValueError("cannot send a friend request to yourself")
        if await self._repository.friendship_exists(user.id, receiver_id):
            raise AlreadyFriendsError(receiver_id)
        if await self._repository.request_exists(user.id, receiver_id):
            raise FriendRequestExistsError(receiver_id)
        if not await self._repository.create_request(user.id, receiver_id):
            raise BackendServiceError("Failed to send friend request", details=receiver_id)

    async def get_pending_friend_requests(self) -> list[FriendRequest]:
        user = self._session_store.require_user()
        return await self._repository.pending_requests(user.id)

    async def _rpc(self, function: str, payload: dict[str, str]) -> None:
        self._session_store.require_user()
        if not await self._repository.call_rpc(function, payload):
            raise BackendServiceError(f"{function} failed", details=str(payload))

    async def accept_friend_request(self, request_id: str) -> None:
        await self._rpc("accept_friend_request", {"request_id": request_id})
        logger.info(f"Friend request accepted id={request_id}")

    async def decline_friend_request(self, request_id: str) -> None:
        await self._rpc("decline_friend_request", {"request_id": request_id})
        logger.info(f"Friend request declined id={request_id}")

    async def get_friends(self) -> list[Friendship]:
        user = self._session_store.require_user()
        return await self._repository.friendships(user.id)

    async def remove_friend(self, friend_id: str) -> None:
        await self._rpc("remove_friendship", {"friend_user_id": friend_id})
        logger.info(f"Friendship removed friend_id={friend_id}")
