from enum import Enum


class WorkoutType(str, Enum):
    strength = "strength"
    cardio = "cardio"
    both = "both"
    flexibility = "flexibility"
    hiit = "hiit"

    def __str__(self) -> str:
        return self.value


class TimeAvailable(str, Enum):
    very_short = "10-15"
    short = "15-25"
    medium = "25-40"
    long = "40-60"
    very_long = "60-90"
    two_hours = "120"

    def __str__(self) -> str:
        return self.value


class Mood(str, Enum):
    happy = "happy"
    energetic = "energetic"
    normal = "normal"
    tired = "tired"
    stressed = "stressed"
    sad = "sad"

    def __str__(self) -> str:
        return self.value


class MuscleFocus(str, Enum):
    full_body = "full-body"
    upper_body = "upper-body"
    lower_body = "lower-body"
    core = "core"
    back = "back"
    chest = "chest"
    arms = "arms"
    legs = "legs"

    def __str__(self) -> str:
        return self.value


class Equipment(str, Enum):
    none = "none"
    dumbbells = "dumbbells"
    kettlebells = "kettlebells"
    bands = "bands"
    full_gym = "full-gym"
    treadmill = "treadmill"
    yoga_mat = "yoga-mat"
    exercise_ball = "exercise-ball"

    def __str__(self) -> str:
        return self.value


class FriendRequestStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    declined = "declined"

    def __str__(self) -> str:
        return self.value


class WeightUnit(str, Enum):
    kg = "kg"
    lbs = "lbs"

    def __str__(self) -> str:
        return self.value


class HeightUnit(str, Enum):
    cm = "cm"
    ft = "ft"

    def __str__(self) -> str:
        return self.value


class FeedbackType(str, Enum):
    bug = "bug"
    feature = "feature"
    improvement = "improvement"
    general = "general"

    def __str__(self) -> str:
        return self.value
