from typing import Protocol

from core.schemas import Feedback


class FeedbackRepository(Protocol):
    async def submit_feedback(self, feedback: Feedback) -> bool: ...
