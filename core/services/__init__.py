from core.services.internal import APIService
from core.services.internal.auth_service import AuthService
from core.services.internal.feedback_service import FeedbackService
from core.services.internal.friend_service import FriendService
from core.services.internal.profile_service import ProfileService
from core.services.internal.workout_service import WorkoutHistoryService


__all__ = [
    "APIService",
    "AuthService",
    "FeedbackService",
    "FriendService",
    "ProfileService",
    "WorkoutHistoryService",
]
