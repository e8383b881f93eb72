from typing import Any

import pytest

from core.exceptions import AlreadyFriendsError, BackendServiceError, FriendRequestExistsError
from core.services.internal.friend_service import FriendService

USER_ID = "11111111-1111-1111-1111-111111111111"
FRIEND_ID = "22222222-2222-2222-2222-222222222222"


class DummyFriendRepository:
    def __init__(self, *, friends: bool = False, pending: bool = False, rpc_ok: bool = True) -> None:
        self.friends = friends
        self.pending = pending
        self.rpc_ok = rpc_ok
        self.created: list[tuple[str, str]] = []
        self.rpc_calls: list[tuple[str, dict[str, Any]]] = []

    async def friendship_exists(self, user_id: str, other_id: str) -> bool:
        return self.friends

    async def request_exists(self, user_id: str, other_id: str) -> bool:
        return self.pending

    async def create_request(self, sender_id: str, receiver_id: str) -> bool:
        self.created.append((sender_id, receiver_id))
        return True

    async def pending_requests(self, receiver_id: str) -> list:
        return []

    async def friendships(self, user_id: str) -> list:
        return []

    async def call_rpc(self, function: str, payload: dict[str, Any]) -> bool:
        self.rpc_calls.append((function, payload))
        return self.rpc_ok


@pytest.mark.asyncio
async def test_send_friend_request(session_store) -> None:
    repository = DummyFriendRepository()
    await FriendService(repository, session_store).send_friend_request(FRIEND_ID)
    assert repository.created == [(USER_ID, FRIEND_ID)]


@pytest.mark.asyncio
async def test_send_request_to_self_is_rejected(session_store) -> None:
    repository = DummyFriendRepository()
    with pytest.raises(ValueError):
        await FriendService(repository, session_store).send_friend_request(USER_ID)
    assert repository.created == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("repository", "error"),
    [
        (DummyFriendRepository(friends=True), AlreadyFriendsError),
        (DummyFriendRepository(pending=True), FriendRequestExistsError),
    ],
)
async def test_duplicate_requests_are_rejected(session_store, repository, error) -> None:
    with pytest.raises(error):
        await FriendService(repository, session_store).send_friend_request(FRIEND_ID)
    assert repository.created == []


@pytest.mark.asyncio
async def test_request_lifecycle_goes_through_rpc(session_store) -> None:
    repository = DummyFriendRepository()
    service = FriendService(repository, session_store)

    await service.accept_friend_request("r1")
    await service.decline_friend_request("r2")
    await service.remove_friend(FRIEND_ID)

    assert repository.rpc_calls == [
        ("accept_friend_request", {"request_id": "r1"}),
        ("decline_friend_request", {"request_id": "r2"}),
        ("remove_friendship", {"friend_user_id": FRIEND_ID}),
    ]


@pytest.mark.asyncio
async def test_failed_rpc_raises(session_store) -> None:
    service = FriendService(DummyFriendRepository(rpc_ok=False), session_store)
    with pytest.raises(BackendServiceError):
        await service.accept_friend_request("r1")
