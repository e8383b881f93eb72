from core.ai_coach import enhance_exercise, enhance_workout
from core.ai_coach.exercise_catalog import EXERCISE_VIDEO_TABLE
from core.schemas import WorkoutExercise, WorkoutPlan


def _plan(*exercises: dict) -> WorkoutPlan:
    return WorkoutPlan.model_validate({"title": "Test", "exercises": list(exercises)})


def test_missing_video_is_filled_from_catalog() -> None:
    exercise = WorkoutExercise(name="Push-Up", sets=3, reps="10")
    enhanced = enhance_exercise(exercise)
    assert enhanced.video_url == EXERCISE_VIDEO_TABLE["push-up"]
    assert enhanced.image_url == "https://img.youtube.com/vi/IODxDxX7oi4/hqdefault.jpg"
    assert enhanced.sets == 3
    assert exercise.video_url is None


def test_llm_video_is_never_replaced() -> None:
    plan = _plan(
        {"name": "Push-Up", "sets": 3, "reps": "10"},
        {"name": "Lunge", "videoUrl": "https://existing"},
    )
    enhanced = enhance_workout(plan)
    assert enhanced.exercises[0].video_url == EXERCISE_VIDEO_TABLE["push-up"]
    assert enhanced.exercises[1].video_url == "https://existing"
    assert enhanced.exercises[1].image_url is None


def test_thumbnail_derived_from_llm_youtube_video() -> None:
    exercise = WorkoutExercise(name="Mystery Move", videoUrl="https://youtu.be/abcdefghijk")
    enhanced = enhance_exercise(exercise)
    assert enhanced.video_url == "https://youtu.be/abcdefghijk"
    assert enhanced.image_url == "https://img.youtube.com/vi/abcdefghijk/hqdefault.jpg"


def test_existing_image_is_kept() -> None:
    exercise = WorkoutExercise(name="plank", imageUrl="https://cdn.example.com/plank.png")
    enhanced = enhance_exercise(exercise)
    assert enhanced.video_url == EXERCISE_VIDEO_TABLE["plank"]
    assert enhanced.image_url == "https://cdn.example.com/plank.png"


def test_unknown_exercise_is_left_untouched() -> None:
    exercise = WorkoutExercise(name="nonexistent-exercise-xyz123")
    assert enhance_exercise(exercise) is exercise


def test_enhance_workout_keeps_order_and_other_fields() -> None:
    plan = _plan({"name": "Squats"}, {"name": "Unknown drill"}, {"name": "Tree Pose"})
    plan = plan.model_copy(update={"warmup": "march", "difficulty": "beginner"})
    enhanced = enhance_workout(plan)
    assert [e.name for e in enhanced.exercises] == ["Squats", "Unknown drill", "Tree Pose"]
    assert enhanced.exercises[1].video_url is None
    assert enhanced.exercises[2].video_url == EXERCISE_VIDEO_TABLE["tree pose"]
    assert enhanced.warmup == "march"
    assert enhanced.difficulty == "beginner"
    assert plan.exercises[0].video_url is None


def test_empty_plan() -> None:
    assert enhance_workout(WorkoutPlan()).exercises == []
