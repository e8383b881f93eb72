from core.domain.feedback_repository import FeedbackRepository
from core.enums import FeedbackType
from core.exceptions import BackendServiceError
from core.schemas import Feedback
from core.services.internal.session_store import SessionStore


class FeedbackService:
    """Stores user feedback; anonymous callers are allowed."""

    def __init__(self, repository: FeedbackRepository, session_store: SessionStore) -> None:
        self._repository = repository
        self._session_store = session_store

    async def submit_feedback(
        self,
        feedback_type: FeedbackType | str,
        subject: str,
        message: str,
        email: str | None = None,
    ) -> Feedback:
        user = self._session_store.user
        # raises a ValueError (pydantic ValidationError) on blank subject or message
        feedback = Feedback(
            user_id=user.id if user else None,
            feedback_type=feedback_type,
            subject=subject,
            message=message,
            email=email,
        )
        if not await self._repository.submit_feedback(feedback):
            raise BackendServiceError("Failed to submit feedback", details=str(feedback.feedback_type))
        return feedback
