import asyncio
from typing import Any

import pytest

from core import workflows
from core.exceptions import NotAuthenticatedError
from core.schemas import AuthSession, AuthUser, WorkoutParams, WorkoutPlan
from core.services.internal import APIService

PARAMS = WorkoutParams(workout_type="hiit", time_available="15-25", mood="happy", muscle_focus="legs")
SESSION = AuthSession(access_token="t", user=AuthUser(id="u1"))


class DummyAuth:
    def __init__(self, authenticated: bool = True) -> None:
        self.authenticated = authenticated

    async def sign_in(self, email: str, password: str) -> AuthSession:
        return SESSION

    def require_auth(self) -> AuthUser:
        if not self.authenticated:
            raise NotAuthenticatedError()
        return SESSION.user


class DummyProfile:
    def __init__(self, complete: bool) -> None:
        self.complete = complete

    async def is_profile_complete(self) -> bool:
        return self.complete


class DummyGenerator:
    def __init__(self) -> None:
        self.calls: list[WorkoutParams] = []

    async def generate(self, params: WorkoutParams) -> WorkoutPlan:
        self.calls.append(params)
        return WorkoutPlan(title="Leg Day")


class DummyContainer:
    def __init__(self, *, authenticated: bool = True, complete: bool = True) -> None:
        self.generator = DummyGenerator()
        self.auth_service = lambda: DummyAuth(authenticated)
        self.profile_service = lambda: DummyProfile(complete)
        self.ai_coach_service = lambda: self.generator

    def workout_service(self) -> Any:
        raise AssertionError("not used")


@pytest.mark.parametrize("complete", [True, False])
def test_sign_in_reports_profile_completeness(complete: bool) -> None:
    APIService.configure(lambda c=DummyContainer(complete=complete): c)
    assert asyncio.run(workflows.sign_in("ana@example.com", "secret")) is complete


def test_generate_workout_requires_authentication() -> None:
    container = DummyContainer(authenticated=False)
    APIService.configure(lambda: container)

    with pytest.raises(NotAuthenticatedError):
        asyncio.run(workflows.generate_workout(PARAMS))
    assert container.generator.calls == []


def test_generate_workout_delegates_to_generator() -> None:
    container = DummyContainer()
    APIService.configure(lambda: container)

    plan = asyncio.run(workflows.generate_workout(PARAMS))

    assert plan.title == "Leg Day"
    assert container.generator.calls == [PARAMS]
