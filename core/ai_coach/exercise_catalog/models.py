from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExerciseResource:
    video_url: str
    image_url: str | None = None


__all__ = ["ExerciseResource"]
