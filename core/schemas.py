from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.enums import FeedbackType, FriendRequestStatus, HeightUnit, WeightUnit

_READABLE_LABELS: dict[str, dict[str, str]] = {
    "workout_type": {
        "strength": "Strength Training",
        "cardio": "Cardio",
        "both": "Strength & Cardio",
        "flexibility": "Flexibility",
        "hiit": "HIIT",
    },
    "time_available": {
        "10-15": "10-15 minutes",
        "15-25": "15-25 minutes",
        "25-40": "25-40 minutes",
        "40-60": "40-60 minutes",
        "60-90": "60-90 minutes",
        "120": "2 hours",
    },
    "muscle_focus": {
        "full-body": "Full Body",
        "upper-body": "Upper Body",
        "lower-body": "Lower Body",
    },
    "equipment": {
        "none": "No Equipment",
        "bands": "Resistance Bands",
        "full-gym": "Full Gym",
        "yoga-mat": "Yoga Mat",
        "exercise-ball": "Exercise Ball",
    },
}


class AuthUser(BaseModel):
    id: str
    email: str | None = None
    user_metadata: dict[str, Any] = Field(default_factory=dict)
    model_config = ConfigDict(extra="ignore")


class AuthSession(BaseModel):
    access_token: str
    refresh_token: str = ""
    token_type: str = "bearer"
    expires_in: int | None = None
    user: AuthUser
    model_config = ConfigDict(extra="ignore")


class UserProfile(BaseModel):
    id: str
    username: str
    sex: str | None = None
    date_of_birth: str | None = None
    weight: float | None = None
    weight_unit: str = WeightUnit.kg.value
    height: float | None = None
    height_unit: str = HeightUnit.cm.value
    fitness_level: str | None = None
    fitness_goals: str | None = None
    injuries: str | None = None
    profile_picture_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    model_config = ConfigDict(extra="ignore")

    @field_validator("weight_unit", "height_unit", mode="before")
    @classmethod
    def _default_unit(cls, value: Any, info: Any) -> str:
        if value:
            return str(value)
        return WeightUnit.kg.value if info.field_name == "weight_unit" else HeightUnit.cm.value

    @property
    def is_complete(self) -> bool:
        """Whether the fields required before generating workouts are filled in."""
        return bool(self.sex and self.date_of_birth and self.height and self.weight)


class FriendProfile(BaseModel):
    id: str
    username: str
    sex: str | None = None
    date_of_birth: str | None = None
    weight: float | None = None
    weight_unit: str | None = None
    height: float | None = None
    height_unit: str | None = None
    fitness_goals: str | None = None
    created_at: str | None = None
    model_config = ConfigDict(extra="ignore")


class FriendRequest(BaseModel):
    id: str
    sender_id: str
    receiver_id: str
    status: FriendRequestStatus = FriendRequestStatus.pending
    created_at: str | None = None
    updated_at: str | None = None
    sender_profile: FriendProfile | None = None
    receiver_profile: FriendProfile | None = None
    model_config = ConfigDict(extra="ignore")


class Friendship(BaseModel):
    id: str
    user_id: str
    friend_id: str
    created_at: str | None = None
    friend_profile: FriendProfile | None = None
    model_config = ConfigDict(extra="ignore")


class WorkoutParams(BaseModel):
    workout_type: str
    time_available: str
    mood: str
    muscle_focus: str
    equipment: list[str] = Field(default_factory=list)
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("workout_type", "time_available", "mood", "muscle_focus", mode="before")
    @classmethod
    def _normalize_choice(cls, value: Any) -> str:
        if hasattr(value, "value"):
            return str(value.value)
        return str(value or "").strip()

    @field_validator("equipment", mode="before")
    @classmethod
    def _split_equipment(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            items: list[Any] = value.split(",")
        else:
            items = list(value)
        result: list[str] = []
        for item in items:
            text = str(item.value if hasattr(item, "value") else item).strip()
            if text:
                result.append(text)
        return result

    @property
    def equipment_value(self) -> str:
        """Comma-separated form used by the workout history table."""
        return ",".join(self.equipment)

    def readable_label(self, field: str) -> str:
        labels = _READABLE_LABELS.get(field, {})
        if field == "equipment":
            return ", ".join(labels.get(item, item.capitalize()) for item in self.equipment)
        value = str(getattr(self, field))
        if field in {"workout_type", "time_available"}:
            return labels.get(value, value)
        return labels.get(value, value.capitalize())


class WorkoutExercise(BaseModel):
    name: str
    sets: int | None = None
    reps: str | None = None
    duration: str | None = None
    rest_between_sets: str | None = Field(default=None, alias="restBetweenSets")
    instructions: str = ""
    video_url: str | None = Field(default=None, alias="videoUrl")
    image_url: str | None = Field(default=None, alias="imageUrl")
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: Any) -> str:
        return str(value or "").strip()

    @field_validator("sets", mode="before")
    @classmethod
    def _coerce_sets(cls, value: Any) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError:
            return None

    @field_validator("reps", "duration", "rest_between_sets", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        if value is None:
            return None
        return str(value)

    @field_validator("instructions", mode="before")
    @classmethod
    def _coerce_instructions(cls, value: Any) -> str:
        return str(value) if value is not None else ""

    @field_validator("video_url", "image_url", mode="before")
    @classmethod
    def _blank_url_to_none(cls, value: Any) -> str | None:
        text = str(value or "").strip()
        return text or None


class WorkoutPlan(BaseModel):
    title: str = ""
    description: str = ""
    exercises: list[WorkoutExercise] = Field(default_factory=list)
    warmup: str | None = None
    cooldown: str | None = None
    total_time: str = Field(default="", alias="totalTime")
    difficulty: str = ""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("exercises", mode="before")
    @classmethod
    def _drop_invalid_exercises(cls, value: Any) -> list[Any]:
        if not isinstance(value, list):
            return []
        return [
            item
            for item in value
            if isinstance(item, WorkoutExercise) or (isinstance(item, dict) and str(item.get("name") or "").strip())
        ]

    @field_validator("title", "description", "total_time", "difficulty", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return str(value) if value is not None else ""


class WorkoutHistory(BaseModel):
    id: str
    user_id: str
    workout_type: str
    time_available: str
    mood: str
    muscle_focus: str
    equipment: str
    workout_data: dict[str, Any] = Field(default_factory=dict)
    completed: bool = False
    rating: int | None = None
    created_at: str | None = None
    model_config = ConfigDict(extra="ignore")

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> str:
        return str(value)

    @field_validator("workout_data", mode="before")
    @classmethod
    def _ensure_dict(cls, value: Any) -> dict[str, Any]:
        return value if isinstance(value, dict) else {}

    @property
    def plan(self) -> WorkoutPlan:
        return WorkoutPlan.model_validate(self.workout_data)


class Feedback(BaseModel):
    user_id: str | None = None
    feedback_type: FeedbackType = FeedbackType.general
    subject: str
    message: str
    email: str | None = None
    model_config = ConfigDict(extra="ignore")

    @field_validator("subject", "message", mode="before")
    @classmethod
    def _require_text(cls, value: Any, info: Any) -> str:
        text = str(value or "").strip()
        if not text:
            raise ValueError(f"{info.field_name} must not be blank")
        return text

    @field_validator("email", mode="before")
    @classmethod
    def _blank_email_to_none(cls, value: Any) -> str | None:
        text = str(value or "").strip()
        return text or None
