from loguru import logger

from core.schemas import WorkoutExercise, WorkoutPlan

from .exercise_catalog import build_youtube_thumbnail_url, resolve_exercise_resource


def enhance_exercise(exercise: WorkoutExercise) -> WorkoutExercise:
    """Fill a missing video (and its thumbnail) from the local catalog.

    A video supplied by the LLM always takes precedence: the catalog is not
    consulted for it and only the thumbnail may be derived from that video.
    """
    if exercise.video_url:
        if exercise.image_url:
            return exercise
        thumbnail = build_youtube_thumbnail_url(exercise.video_url)
        return exercise.model_copy(update={"image_url": thumbnail}) if thumbnail else exercise

    resource = resolve_exercise_resource(exercise.name)
    if resource is None:
        return exercise
    update: dict[str, str] = {"video_url": resource.video_url}
    if not exercise.image_url and resource.image_url:
        update["image_url"] = resource.image_url
    return exercise.model_copy(update=update)


def enhance_workout(plan: WorkoutPlan) -> WorkoutPlan:
    exercises = [enhance_exercise(exercise) for exercise in plan.exercises]
    filled = sum(1 for before, after in zip(plan.exercises, exercises) if not before.video_url and after.video_url)
    missing = sum(1 for exercise in exercises if not exercise.video_url)
    logger.debug(f"workout_enhanced exercises={len(exercises)} filled={filled} without_video={missing}")
    return plan.model_copy(update={"exercises": exercises})


__all__ = ["enhance_exercise", "enhance_workout"]
