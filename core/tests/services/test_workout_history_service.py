from typing import Any

import pytest

from core.exceptions import NotAuthenticatedError, WorkoutNotFoundError
from core.schemas import WorkoutHistory, WorkoutParams, WorkoutPlan
from core.services.internal.workout_service import WorkoutHistoryService

USER_ID = "11111111-1111-1111-1111-111111111111"

PARAMS = WorkoutParams(
    workout_type="strength", time_available="40-60", mood="happy", muscle_focus="legs", equipment=["dumbbells", "bands"]
)


class DummyWorkoutRepository:
    def __init__(self, *, existing: bool = True, updated: bool = True) -> None:
        self.existing = existing
        self.updated = updated
        self.rows: list[dict[str, Any]] = []
        self.updates: list[dict[str, Any]] = []
        self.list_calls: list[tuple[str, bool, int | None]] = []
        self.deleted: list[str] = []

    async def create_workout(self, row: dict[str, Any]) -> WorkoutHistory | None:
        self.rows.append(row)
        return WorkoutHistory.model_validate({"id": "w1", **row})

    async def list_workouts(self, user_id: str, *, completed_only: bool = False, limit: int | None = None):
        self.list_calls.append((user_id, completed_only, limit))
        return []

    async def get_workout(self, workout_id: str, user_id: str) -> WorkoutHistory | None:
        if not self.existing:
            return None
        return WorkoutHistory(
            id=workout_id,
            user_id=user_id,
            workout_type="strength",
            time_available="40-60",
            mood="happy",
            muscle_focus="legs",
            equipment="none",
        )

    async def update_workout(self, workout_id: str, user_id: str, data: dict[str, Any]) -> bool:
        self.updates.append(data)
        return self.updated

    async def delete_workout(self, workout_id: str, user_id: str) -> bool:
        self.deleted.append(workout_id)
        return True


@pytest.mark.asyncio
async def test_save_workout_serializes_plan(session_store) -> None:
    repository = DummyWorkoutRepository()
    service = WorkoutHistoryService(repository, session_store)
    plan = WorkoutPlan.model_validate(
        {"title": "Legs", "exercises": [{"name": "Squat", "restBetweenSets": "60s"}], "totalTime": "45 min"}
    )

    saved = await service.save_workout(PARAMS, plan)

    row = repository.rows[0]
    assert row["user_id"] == USER_ID
    assert row["equipment"] == "dumbbells,bands"
    assert row["completed"] is False
    assert row["workout_data"]["totalTime"] == "45 min"
    assert row["workout_data"]["exercises"][0]["restBetweenSets"] == "60s"
    assert saved.plan.title == "Legs"


@pytest.mark.asyncio
async def test_save_requires_authentication(anonymous_store) -> None:
    service = WorkoutHistoryService(DummyWorkoutRepository(), anonymous_store)
    with pytest.raises(NotAuthenticatedError):
        await service.save_workout(PARAMS, WorkoutPlan())


@pytest.mark.asyncio
async def test_mark_completed_with_rating(session_store) -> None:
    repository = DummyWorkoutRepository()
    service = WorkoutHistoryService(repository, session_store)

    await service.mark_workout_completed("w1", rating=4)
    await service.mark_workout_completed("w1")

    assert repository.updates == [{"completed": True, "rating": 4}, {"completed": True, "rating": None}]


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [0, 6])
async def test_mark_completed_rejects_out_of_range_rating(session_store, rating: int) -> None:
    repository = DummyWorkoutRepository()
    service = WorkoutHistoryService(repository, session_store)
    with pytest.raises(ValueError):
        await service.mark_workout_completed("w1", rating=rating)
    assert repository.updates == []


@pytest.mark.asyncio
async def test_mark_completed_unknown_workout(session_store) -> None:
    service = WorkoutHistoryService(DummyWorkoutRepository(updated=False), session_store)
    with pytest.raises(WorkoutNotFoundError):
        await service.mark_workout_completed("missing")


@pytest.mark.asyncio
async def test_delete_checks_ownership(session_store) -> None:
    repository = DummyWorkoutRepository(existing=False)
    service = WorkoutHistoryService(repository, session_store)
    with pytest.raises(WorkoutNotFoundError):
        await service.delete_workout("w1")
    assert repository.deleted == []


@pytest.mark.asyncio
async def test_friend_history_is_completed_only_and_limited(session_store) -> None:
    repository = DummyWorkoutRepository()
    service = WorkoutHistoryService(repository, session_store, friend_history_limit=5)

    await service.get_friend_workout_history("friend")
    await service.get_workout_history()

    assert repository.list_calls == [("friend", True, 5), (USER_ID, False, None)]
