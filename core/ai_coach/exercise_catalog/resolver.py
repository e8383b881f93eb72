"""Resolve free-text exercise names to demonstration videos.

LLM-generated names vary a lot in phrasing ("Dumbbell Bicep Curls (slow tempo)",
"Standing Single-Arm Row"), so lookups go through tiers of decreasing
confidence and the first tier that produces a key wins:

1. exact match on the normalized name
2. exact match after dropping modifier tokens (equipment, position, tempo, difficulty)
3. substring match on the normalized name
4. substring match on the modifier-stripped name
5. word overlap between the name and a key

Every function here is pure; "no match" is ``None``, never an exception.
"""

import re
from typing import Mapping

from .constants import MODIFIER_TOKENS
from .models import ExerciseResource
from .table import EXERCISE_VIDEO_TABLE
from .youtube import build_youtube_thumbnail_url

MIN_OVERLAP_WORD_LENGTH = 3

_PUNCTUATION_RE = re.compile(r"[^\w\s'-]")


def normalize_exercise_name(name: object) -> str:
    return " ".join(str(name or "").split()).lower()


def _split_words(text: str) -> list[str]:
    words = []
    for word in _PUNCTUATION_RE.sub(" ", text).split():
        word = word.strip("-'")
        if word:
            words.append(word)
    return words


def strip_modifiers(name: object) -> str:
    normalized = normalize_exercise_name(name)
    return " ".join(word for word in _split_words(normalized) if word not in MODIFIER_TOKENS)


def _substring_match(query: str, table: Mapping[str, str]) -> str | None:
    if not query:
        return None
    best_key: str | None = None
    best_distance = 0
    for key in table:
        if key not in query and query not in key:
            continue
        distance = abs(len(key) - len(query))
        # strict comparison keeps the earlier key on ties
        if best_key is None or distance < best_distance:
            best_key = key
            best_distance = distance
    return best_key


def _overlap_match(query: str, table: Mapping[str, str]) -> str | None:
    query_words = [word for word in _split_words(query) if len(word) >= MIN_OVERLAP_WORD_LENGTH]
    if not query_words:
        return None
    best_key: str | None = None
    best_count = 0
    for key in table:
        key_words = _split_words(key)
        if not key_words:
            continue
        matched = sum(
            1
            for word in query_words
            if any(word in key_word or key_word in word for key_word in key_words)
        )
        if matched <= len(key_words) // 2:
            continue
        if matched > best_count:
            best_key = key
            best_count = matched
    return best_key


def match_exercise_key(name: object, table: Mapping[str, str] = EXERCISE_VIDEO_TABLE) -> str | None:
    """Return the table key that best matches ``name`` or ``None``."""
    normalized = normalize_exercise_name(name)
    if not normalized:
        return None
    if normalized in table:
        return normalized

    cleaned = strip_modifiers(normalized)
    if cleaned and cleaned in table:
        return cleaned

    return (
        _substring_match(normalized, table)
        or _substring_match(cleaned, table)
        or _overlap_match(normalized, table)
    )


def resolve_exercise_video(name: object, table: Mapping[str, str] = EXERCISE_VIDEO_TABLE) -> str | None:
    key = match_exercise_key(name, table)
    return table[key] if key is not None else None


def resolve_exercise_resource(
    name: object, table: Mapping[str, str] = EXERCISE_VIDEO_TABLE
) -> ExerciseResource | None:
    video_url = resolve_exercise_video(name, table)
    if video_url is None:
        return None
    return ExerciseResource(video_url=video_url, image_url=build_youtube_thumbnail_url(video_url))


__all__ = [
    "MIN_OVERLAP_WORD_LENGTH",
    "match_exercise_key",
    "normalize_exercise_name",
    "resolve_exercise_resource",
    "resolve_exercise_video",
    "strip_modifiers",
]
