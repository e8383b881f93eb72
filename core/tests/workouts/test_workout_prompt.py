from datetime import date

from core.ai_coach import SYSTEM_MESSAGE, build_workout_prompt
from core.ai_coach.prompts import age_from_birth_date, format_equipment
from core.enums import Equipment, Mood, MuscleFocus, TimeAvailable, WorkoutType
from core.schemas import UserProfile, WorkoutParams

PARAMS = WorkoutParams(
    workout_type="strength",
    time_available="25-40",
    mood="energetic",
    muscle_focus="upper-body",
    equipment="dumbbells,bands",
)


def test_prompt_without_profile() -> None:
    prompt = build_workout_prompt(PARAMS)
    assert "Create a detailed strength workout plan" in prompt
    assert "Takes approximately 25-40 minutes to complete" in prompt
    assert "Focuses on the upper-body muscle group(s)" in prompt
    assert "Uses the following equipment: dumbbells, and bands" in prompt
    assert "feeling energetic" in prompt
    assert "Additional information about the user" not in prompt
    assert '"videoUrl"' in prompt
    assert "JSON" in SYSTEM_MESSAGE


def test_prompt_with_profile() -> None:
    profile = UserProfile(
        id="u1",
        username="ana",
        date_of_birth="1990-06-15",
        weight=70.0,
        weight_unit="kg",
        height=175.5,
        height_unit="cm",
        fitness_level="intermediate",
        fitness_goals="build strength",
        injuries="left knee",
    )
    prompt = build_workout_prompt(PARAMS, profile, today=date(2024, 6, 14))
    assert "Additional information about the user:" in prompt
    assert "- Fitness level: intermediate" in prompt
    assert "- Age: 33" in prompt
    assert "- Weight: 70 kg" in prompt
    assert "- Height: 175.5 cm" in prompt
    assert "- Fitness goals: build strength" in prompt
    assert "- Injuries or limitations to consider: left knee" in prompt


def test_prompt_skips_missing_profile_fields() -> None:
    profile = UserProfile(id="u1", username="ana")
    prompt = build_workout_prompt(PARAMS, profile)
    assert "Additional information about the user:" in prompt
    assert "- Age" not in prompt
    assert "- Weight" not in prompt


def test_two_hour_label() -> None:
    params = PARAMS.model_copy(update={"time_available": "120"})
    assert "Takes approximately 120 minutes (2 hours)" in build_workout_prompt(params)


def test_format_equipment() -> None:
    assert format_equipment([]) == "none"
    assert format_equipment(["none"]) == "none"
    assert format_equipment(["a", "b"]) == "a, and b"
    assert format_equipment(["a", "b", "c"]) == "a, b, and c"


def test_age_from_birth_date() -> None:
    today = date(2024, 1, 1)
    assert age_from_birth_date("2000-01-01", today=today) == 24
    assert age_from_birth_date("2000-01-02", today=today) == 23
    assert age_from_birth_date("2000-01-01T00:00:00Z", today=today) == 24
    assert age_from_birth_date("not-a-date", today=today) is None
    assert age_from_birth_date(None) is None
    assert age_from_birth_date("2030-01-01", today=today) is None


def test_params_accept_enum_members_and_render_labels() -> None:
    params = WorkoutParams(
        workout_type=WorkoutType.both,
        time_available=TimeAvailable.two_hours,
        mood=Mood.stressed,
        muscle_focus=MuscleFocus.core,
        equipment=[Equipment.bands, Equipment.kettlebells],
    )
    assert params.workout_type == "both"
    assert params.equipment == ["bands", "kettlebells"]
    assert params.equipment_value == "bands,kettlebells"
    assert params.readable_label("workout_type") == "Strength & Cardio"
    assert params.readable_label("time_available") == "2 hours"
    assert params.readable_label("mood") == "Stressed"
    assert params.readable_label("muscle_focus") == "Core"
    assert params.readable_label("equipment") == "Resistance Bands, Kettlebells"
