from loguru import logger

from core.schemas import Feedback
from core.services.internal.api_client import APIClient


class HTTPFeedbackRepository(APIClient):
    async def submit_feedback(self, feedback: Feedback) -> bool:
        status, _ = await self._api_request(
            "post",
            self._rest("feedback"),
            feedback.model_dump(mode="json"),
            retry_server_errors=False,
        )
        if status in (200, 201):
            logger.info(f"Feedback submitted type={feedback.feedback_type} user_id={feedback.user_id}")
            return True
        logger.error(f"Failed to submit feedback type={feedback.feedback_type}. HTTP={status}")
        return False


__all__ = ["HTTPFeedbackRepository"]
