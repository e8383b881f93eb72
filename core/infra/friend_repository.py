from typing import Any

from loguru import logger

from core.enums import FriendRequestStatus
from core.schemas import FriendRequest, Friendship
from core.services.internal.api_client import APIClient, APIClientHTTPError, APIClientTransportError

from .profile_repository import FRIEND_PROFILE_FIELDS


def _pair_filter(left: str, right: str, first_id: str, second_id: str) -> str:
    return (
        f"(and({left}.eq.{first_id},{right}.eq.{second_id}),"
        f"and({left}.eq.{second_id},{right}.eq.{first_id}))"
    )


class HTTPFriendRepository(APIClient):
    async def _exists(self, table: str, or_filter: str) -> bool:
        status, data = await self._api_request(
            "get",
            self._rest(table),
            params={"select": "id", "or": or_filter, "limit": 1},
        )
        return status == 200 and isinstance(data, list) and bool(data)

    async def friendship_exists(self, user_id: str, other_id: str) -> bool:
        return await self._exists("friendships", _pair_filter("user_id", "friend_id", user_id, other_id))

    async def request_exists(self, user_id: str, other_id: str) -> bool:
        return await self._exists("friend_requests", _pair_filter("sender_id", "receiver_id", user_id, other_id))

    async def create_request(self, sender_id: str, receiver_id: str) -> bool:
        status, _ = await self._api_request(
            "post",
            self._rest("friend_requests"),
            {"sender_id": sender_id, "receiver_id": receiver_id},
        )
        if status in (200, 201):
            logger.info(f"Friend request sent sender={sender_id} receiver={receiver_id}")
            return True
        logger.error(f"Failed to send friend request sender={sender_id} receiver={receiver_id}. HTTP={status}")
        return False

    async def pending_requests(self, receiver_id: str) -> list[FriendRequest]:
        params = {
            "select": f"*,sender_profile:profiles!sender_id({FRIEND_PROFILE_FIELDS})",
            "receiver_id": f"eq.{receiver_id}",
            "status": f"eq.{FriendRequestStatus.pending.value}",
            "order": "created_at.desc",
        }
        try:
            status, data = await self._api_request("get", self._rest("friend_requests"), params=params)
        except (APIClientHTTPError, APIClientTransportError) as exc:
            logger.error(f"Pending friend requests lookup failed receiver={receiver_id}: {exc}")
            return []
        if status != 200 or not isinstance(data, list):
            return []
        return [FriendRequest.model_validate(item) for item in data]

    async def friendships(self, user_id: str) -> list[Friendship]:
        params = {
            "select": f"*,friend_profile:profiles!friend_id({FRIEND_PROFILE_FIELDS})",
            "user_id": f"eq.{user_id}",
            "order": "created_at.desc",
        }
        try:
            status, data = await self._api_request("get", self._rest("friendships"), params=params)
        except (APIClientHTTPError, APIClientTransportError) as exc:
            logger.error(f"Friends lookup failed user_id={user_id}: {exc}")
            return []
        if status != 200 or not isinstance(data, list):
            return []
        return [Friendship.model_validate(item) for item in data]

    async def call_rpc(self, function: str, payload: dict[str, Any]) -> bool:
        status, _ = await self._api_request(
            "post", self._rest(f"rpc/{function}"), payload, retry_server_errors=False
        )
        if status in (200, 204):
            logger.info(f"RPC {function} succeeded")
            return True
        logger.error(f"RPC {function} failed. HTTP={status}")
        return False


__all__ = ["HTTPFriendRepository"]
