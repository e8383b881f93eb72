from typing import Any, Protocol

from core.schemas import FriendRequest, Friendship


class FriendRepository(Protocol):
    async def friendship_exists(self, user_id: str, other_id: str) -> bool: ...

    async def request_exists(self, user_id: str, other_id: str) -> bool: ...

    async def create_request(self, sender_id: str, receiver_id: str) -> bool: ...

    async def pending_requests(self, receiver_id: str) -> list[FriendRequest]: ...

    async def friendships(self, user_id: str) -> list[Friendship]: ...

    async def call_rpc(self, function: str, payload: dict[str, Any]) -> bool: ...
