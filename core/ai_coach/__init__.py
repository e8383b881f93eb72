"""AI coach domain utilities."""

from .enhance import enhance_exercise, enhance_workout
from .parsers import parse_workout_response
from .prompts import SYSTEM_MESSAGE, build_workout_prompt

__all__ = [
    "SYSTEM_MESSAGE",
    "build_workout_prompt",
    "enhance_exercise",
    "enhance_workout",
    "parse_workout_response",
]
