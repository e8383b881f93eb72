from typing import Any

from loguru import logger

from core.schemas import WorkoutHistory
from core.services.internal.api_client import APIClient, APIClientHTTPError, APIClientTransportError


class HTTPWorkoutRepository(APIClient):
    async def create_workout(self, row: dict[str, Any]) -> WorkoutHistory | None:
        status, data = await self._api_request(
            "post",
            self._rest("workout_history"),
            [row],
            headers={"Prefer": "return=representation"},
        )
        if status in (200, 201) and isinstance(data, list) and data:
            saved = WorkoutHistory.model_validate(data[0])
            logger.info(f"Workout saved id={saved.id} user_id={saved.user_id}")
            return saved
        logger.error(f"Failed to save workout for user_id={row.get('user_id')}. HTTP={status}")
        return None

    async def list_workouts(
        self, user_id: str, *, completed_only: bool = False, limit: int | None = None
    ) -> list[WorkoutHistory]:
        params: dict[str, Any] = {"select": "*", "user_id": f"eq.{user_id}", "order": "created_at.desc"}
        if completed_only:
            params["completed"] = "eq.true"
        if limit is not None:
            params["limit"] = limit
        try:
            status, data = await self._api_request("get", self._rest("workout_history"), params=params)
        except (APIClientHTTPError, APIClientTransportError) as exc:
            logger.error(f"Workout history lookup failed user_id={user_id}: {exc}")
            return []
        if status != 200 or not isinstance(data, list):
            return []
        return [WorkoutHistory.model_validate(item) for item in data]

    async def get_workout(self, workout_id: str, user_id: str) -> WorkoutHistory | None:
        try:
            status, data = await self._api_request(
                "get",
                self._rest("workout_history"),
                params={"select": "*", "id": f"eq.{workout_id}", "user_id": f"eq.{user_id}", "limit": 1},
            )
        except (APIClientHTTPError, APIClientTransportError) as exc:
            logger.error(f"Workout lookup failed id={workout_id}: {exc}")
            return None
        if status == 200 and isinstance(data, list) and data:
            return WorkoutHistory.model_validate(data[0])
        return None

    async def update_workout(self, workout_id: str, user_id: str, data: dict[str, Any]) -> bool:
        status, response = await self._api_request(
            "patch",
            self._rest("workout_history"),
            data,
            params={"id": f"eq.{workout_id}", "user_id": f"eq.{user_id}"},
            headers={"Prefer": "return=representation"},
        )
        if status in (200, 204) and isinstance(response, list) and response:
            return True
        logger.warning(f"Workout update matched no rows id={workout_id} user_id={user_id}. HTTP={status}")
        return False

    async def delete_workout(self, workout_id: str, user_id: str) -> bool:
        status, _ = await self._api_request(
            "delete",
            self._rest("workout_history"),
            params={"id": f"eq.{workout_id}", "user_id": f"eq.{user_id}"},
        )
        if status in (200, 204):
            logger.info(f"Workout deleted id={workout_id}")
            return True
        logger.error(f"Failed to delete workout id={workout_id}. HTTP={status}")
        return False


__all__ = ["HTTPWorkoutRepository"]
