from .constants import MODIFIER_TOKENS
from .models import ExerciseResource
from .resolver import (
    match_exercise_key,
    normalize_exercise_name,
    resolve_exercise_resource,
    resolve_exercise_video,
    strip_modifiers,
)
from .table import EXERCISE_VIDEO_TABLE, build_resource_table
from .youtube import build_youtube_embed_url, build_youtube_thumbnail_url, extract_youtube_video_id

__all__ = [
    "EXERCISE_VIDEO_TABLE",
    "MODIFIER_TOKENS",
    "ExerciseResource",
    "build_resource_table",
    "build_youtube_embed_url",
    "build_youtube_thumbnail_url",
    "extract_youtube_video_id",
    "match_exercise_key",
    "normalize_exercise_name",
    "resolve_exercise_resource",
    "resolve_exercise_video",
    "strip_modifiers",
]
