class BackendServiceError(Exception):
    def __init__(self, message: str, code: int = 500, details: str = ""):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        return f"Error {self.code}: {self.message} - {self.details}"


class NotAuthenticatedError(BackendServiceError):
    def __init__(self, message: str = "User not authenticated") -> None:
        super().__init__(message, code=401)


class UsernameTakenError(BackendServiceError):
    def __init__(self, username: str):
        super().__init__("Username already taken", code=409, details=username)
        self.username = username


class ProfileNotFoundError(BackendServiceError):
    def __init__(self, user_id: str):
        super().__init__(f"No profile found for user {user_id}", code=404)
        self.user_id = user_id


class AlreadyFriendsError(BackendServiceError):
    def __init__(self, friend_id: str):
        super().__init__("Already friends with this user", code=409, details=friend_id)
        self.friend_id = friend_id


class FriendRequestExistsError(BackendServiceError):
    def __init__(self, receiver_id: str):
        super().__init__("Friend request already exists", code=409, details=receiver_id)
        self.receiver_id = receiver_id


class WorkoutNotFoundError(BackendServiceError):
    def __init__(self, workout_id: str):
        super().__init__("Workout not found or access denied", code=404, details=workout_id)
        self.workout_id = workout_id


class WorkoutGenerationError(Exception):
    def __init__(self, message: str = "Failed to generate workout plan", *, reason: str | None = None) -> None:
        super().__init__(message)
        self.reason = reason
