from datetime import datetime, timezone

from loguru import logger

from core.domain.workout_repository import WorkoutRepository
from core.exceptions import BackendServiceError, WorkoutNotFoundError
from core.schemas import WorkoutHistory, WorkoutParams, WorkoutPlan
from core.services.internal.session_store import SessionStore

MIN_RATING = 1
MAX_RATING = 5


class WorkoutHistoryService:
    def __init__(self, repository: WorkoutRepository, session_store: SessionStore, *, friend_history_limit: int = 20) -> None:
        self._repository = repository
        self._session_store = session_store
        self._friend_history_limit = friend_history_limit

    async def save_workout(self, params: WorkoutParams, plan: WorkoutPlan) -> WorkoutHistory:
        user = self._session_store.require_user()
        row = {
            "user_id": user.id,
            "workout_type": params.workout_type,
            "time_available": params.time_available,
            "mood": params.mood,
            "muscle_focus": params.muscle_focus,
            "equipment": params.equipment_value,
            "workout_data": plan.model_dump(by_alias=True, exclude_none=True),
            "completed": False,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        saved = await self._repository.create_workout(row)
        if saved is None:
            raise BackendServiceError("Failed to save workout", details=user.id)
        return saved

    async def get_workout_history(self) -> list[WorkoutHistory]:
        user = self._session_store.require_user()
        return await self._repository.list_workouts(user.id)

    async def mark_workout_completed(self, workout_id: str, rating: int | None = None) -> None:
        user = self._session_store.require_user()
        if rating is not None and not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError(f"rating must be between {MIN_RATING} and {MAX_RATING}")
        updated = await self._repository.update_workout(workout_id, user.id, {"completed": True, "rating": rating or None})
        if not updated:
            raise WorkoutNotFoundError(workout_id)

    async def delete_workout(self, workout_id: str) -> None:
        user = self._session_store.require_user()
        if await self._repository.get_workout(workout_id, user.id) is None:
            raise WorkoutNotFoundError(workout_id)
        if not await self._repository.delete_workout(workout_id, user.id):
            raise BackendServiceError("Failed to delete workout", details=workout_id)
        logger.info(f"Workout removed from history id={workout_id} user_id={user.id}")

    async def get_friend_workout_history(self, friend_id: str) -> list[WorkoutHistory]:
        # visibility between friends is enforced by row-level security
        return await self._repository.list_workouts(
            friend_id, completed_only=True, limit=self._friend_history_limit
        )
