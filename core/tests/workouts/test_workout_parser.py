import json

import pytest

from core.ai_coach import parse_workout_response
from core.exceptions import WorkoutGenerationError

PAYLOAD = {
    "title": "Upper Body Blast",
    "description": "Quick push session",
    "exercises": [
        {
            "name": "Push-Up",
            "sets": "3",
            "reps": 12,
            "restBetweenSets": "60 seconds",
            "instructions": "Keep your core tight",
            "videoUrl": "",
        },
        "not an exercise",
        {"sets": 2},
        {"name": "Plank", "duration": "30 seconds", "instructions": None},
    ],
    "warmup": "Arm circles",
    "cooldown": "Stretch",
    "totalTime": 30,
    "difficulty": "beginner",
}


def test_parses_plan_and_normalizes_fields() -> None:
    plan = parse_workout_response(json.dumps(PAYLOAD))
    assert plan.title == "Upper Body Blast"
    assert plan.total_time == "30"
    assert [e.name for e in plan.exercises] == ["Push-Up", "Plank"]
    push_up = plan.exercises[0]
    assert push_up.sets == 3
    assert push_up.reps == "12"
    assert push_up.rest_between_sets == "60 seconds"
    assert push_up.video_url is None
    assert plan.exercises[1].instructions == ""


def test_extracts_json_wrapped_in_text() -> None:
    content = "Here is your plan:\n```json\n" + json.dumps(PAYLOAD) + "\n```"
    assert parse_workout_response(content).difficulty == "beginner"


@pytest.mark.parametrize(
    ("content", "reason"),
    [
        (None, "empty_response"),
        ("   ", "empty_response"),
        ("no json here", "invalid_json"),
        ("[1, 2, 3]", "invalid_json"),
        ('{"title": ["bad"]}', "invalid_plan"),
    ],
)
def test_invalid_responses(content: str | None, reason: str) -> None:
    with pytest.raises(WorkoutGenerationError) as exc_info:
        parse_workout_response(content)
    assert exc_info.value.reason == reason


def test_plan_dump_uses_camel_case_aliases() -> None:
    plan = parse_workout_response(json.dumps(PAYLOAD))
    data = plan.model_dump(by_alias=True, exclude_none=True)
    assert data["totalTime"] == "30"
    assert data["exercises"][0]["restBetweenSets"] == "60 seconds"
    assert "videoUrl" not in data["exercises"][0]


def test_null_text_fields_do_not_reject_the_plan() -> None:
    plan = parse_workout_response(
        '{"title": null, "description": null, "totalTime": null, "difficulty": null, "exercises": [{"name": "Squat"}]}'
    )
    assert plan.title == ""
    assert plan.description == ""
    assert plan.total_time == ""
    assert [e.name for e in plan.exercises] == ["Squat"]
