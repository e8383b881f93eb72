"""User flows that span several services, resolved through ``APIService``."""

from loguru import logger

from core.enums import FeedbackType
from core.schemas import Feedback, WorkoutHistory, WorkoutParams, WorkoutPlan
from core.services.internal import APIService


async def sign_in(email: str, password: str) -> bool:
    """Sign in and return whether the profile is complete.

    ``False`` means the caller should send the user through profile setup first.
    """
    session = await APIService.auth.sign_in(email, password)
    complete = await APIService.profile.is_profile_complete()
    logger.info(f"sign_in_flow user_id={session.user.id} profile_complete={complete}")
    return complete


async def generate_workout(params: WorkoutParams) -> WorkoutPlan:
    await APIService.auth.require_auth()
    return await APIService.ai_coach.generate(params)


async def save_generated_workout(params: WorkoutParams, plan: WorkoutPlan) -> WorkoutHistory:
    return await APIService.workout.save_workout(params, plan)


async def send_feedback(
    feedback_type: FeedbackType | str, subject: str, message: str, email: str | None = None
) -> Feedback:
    return await APIService.feedback.submit_feedback(feedback_type, subject, message, email)


__all__ = ["generate_workout", "save_generated_workout", "send_feedback", "sign_in"]
