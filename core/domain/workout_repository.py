from typing import Any, Protocol

from core.schemas import WorkoutHistory


class WorkoutRepository(Protocol):
    async def create_workout(self, row: dict[str, Any]) -> WorkoutHistory | None: ...

    async def list_workouts(
        self, user_id: str, *, completed_only: bool = False, limit: int | None = None
    ) -> list[WorkoutHistory]: ...

    async def get_workout(self, workout_id: str, user_id: str) -> WorkoutHistory | None: ...

    async def update_workout(self, workout_id: str, user_id: str, data: dict[str, Any]) -> bool: ...

    async def delete_workout(self, workout_id: str, user_id: str) -> bool: ...
