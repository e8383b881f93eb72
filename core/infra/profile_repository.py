from datetime import datetime, timezone
from typing import Any

from loguru import logger

from core.schemas import FriendProfile, UserProfile
from core.services.internal.api_client import APIClient, APIClientHTTPError, APIClientTransportError

FRIEND_PROFILE_FIELDS = "id,username,sex,date_of_birth,weight,weight_unit,height,height_unit,fitness_goals"


class HTTPProfileRepository(APIClient):
    async def get_profile(self, user_id: str) -> UserProfile | None:
        try:
            status, data = await self._api_request(
                "get",
                self._rest("profiles"),
                params={"select": "*", "id": f"eq.{user_id}", "limit": 1},
            )
        except (APIClientHTTPError, APIClientTransportError) as exc:
            logger.error(f"Profile lookup failed id={user_id}: {exc}")
            return None
        if status == 200 and isinstance(data, list) and data:
            return UserProfile.model_validate(data[0])
        logger.info(f"Profile id={user_id} not found. HTTP={status}")
        return None

    async def username_exists(self, username: str) -> bool:
        status, data = await self._api_request(
            "get",
            self._rest("profiles"),
            params={"select": "username", "username": f"eq.{username}", "limit": 1},
        )
        return status == 200 and isinstance(data, list) and bool(data)

    async def update_profile(self, user_id: str, data: dict[str, Any]) -> UserProfile | None:
        payload = {**data, "updated_at": datetime.now(timezone.utc).isoformat()}
        status, response = await self._api_request(
            "patch",
            self._rest("profiles"),
            payload,
            params={"id": f"eq.{user_id}"},
            headers={"Prefer": "return=representation"},
        )
        if status in (200, 204) and isinstance(response, list) and response:
            logger.info(f"Profile id={user_id} updated")
            return UserProfile.model_validate(response[0])
        logger.error(f"Failed to update profile id={user_id}. HTTP={status}")
        return None

    async def search_profiles(self, query: str, *, exclude_id: str, limit: int) -> list[FriendProfile]:
        try:
            status, data = await self._api_request(
                "get",
                self._rest("profiles"),
                params={
                    "select": FRIEND_PROFILE_FIELDS,
                    "username": f"ilike.*{query}*",
                    "id": f"neq.{exclude_id}",
                    "limit": limit,
                },
            )
        except (APIClientHTTPError, APIClientTransportError) as exc:
            logger.error(f"User search failed query={query!r}: {exc}")
            return []
        if status != 200 or not isinstance(data, list):
            return []
        return [FriendProfile.model_validate(item) for item in data]


__all__ = ["FRIEND_PROFILE_FIELDS", "HTTPProfileRepository"]
