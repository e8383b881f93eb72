import json
import re
from typing import Any

from pydantic import ValidationError

from core.exceptions import WorkoutGenerationError
from core.schemas import WorkoutPlan


def _extract_json(text: str) -> str | None:
    """Return the first JSON object found within ``text``."""
    match = re.search(r"\{.*\}", text, re.S)
    if match:
        return match.group(0)
    return None


def _load_payload(raw: str) -> dict[str, Any] | None:
    candidates = [raw]
    extracted = _extract_json(raw)
    if extracted and extracted != raw:
        candidates.append(extracted)
    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data
    return None


def parse_workout_response(content: str | None) -> WorkoutPlan:
    """Validate and deserialize the workout plan JSON returned by the LLM."""
    text = (content or "").strip()
    if not text:
        raise WorkoutGenerationError(reason="empty_response")
    data = _load_payload(text)
    if data is None:
        raise WorkoutGenerationError(reason="invalid_json")
    try:
        return WorkoutPlan.model_validate(data)
    except ValidationError as exc:
        raise WorkoutGenerationError(reason="invalid_plan") from exc


__all__ = ["parse_workout_response"]
