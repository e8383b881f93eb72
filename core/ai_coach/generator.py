from typing import Any, Protocol

from loguru import logger
from openai import AsyncOpenAI

from core.exceptions import WorkoutGenerationError
from core.schemas import UserProfile, WorkoutParams, WorkoutPlan

from .enhance import enhance_workout
from .parsers import parse_workout_response
from .prompts import SYSTEM_MESSAGE, build_workout_prompt


class ProfileProvider(Protocol):
    async def get_current_profile_or_none(self) -> UserProfile | None: ...


class GeneratorSettings(Protocol):
    LLM_API_KEY: str
    LLM_API_URL: str
    AGENT_MODEL: str
    LLM_TIMEOUT: float


def build_llm_client(settings: GeneratorSettings) -> AsyncOpenAI:
    return AsyncOpenAI(
        api_key=settings.LLM_API_KEY or None,
        base_url=settings.LLM_API_URL or None,
        timeout=settings.LLM_TIMEOUT,
    )


class WorkoutGenerator:
    """Generates workout plans with the chat-completions API."""

    def __init__(self, client: AsyncOpenAI, profiles: ProfileProvider | None, settings: GeneratorSettings) -> None:
        self._client = client
        self._profiles = profiles
        self._model = settings.AGENT_MODEL

    async def _load_profile(self) -> UserProfile | None:
        if self._profiles is None:
            return None
        try:
            return await self._profiles.get_current_profile_or_none()
        except Exception as exc:  # noqa: BLE001
            logger.warning(f"workout_profile_unavailable error={exc}")
            return None

    async def _complete(self, prompt: str) -> str | None:
        messages: list[Any] = [
            {"role": "system", "content": SYSTEM_MESSAGE},
            {"role": "user", "content": prompt},
        ]
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=messages,
            response_format={"type": "json_object"},
        )
        if not response.choices:
            return None
        return response.choices[0].message.content

    async def generate(self, params: WorkoutParams) -> WorkoutPlan:
        profile = await self._load_profile()
        prompt = build_workout_prompt(params, profile)
        logger.info(
            f"workout_generation_start type={params.workout_type} time={params.time_available} "
            f"focus={params.muscle_focus} profile={'yes' if profile else 'no'}"
        )
        try:
            content = await self._complete(prompt)
            plan = parse_workout_response(content)
        except WorkoutGenerationError as exc:
            logger.error(f"workout_generation_invalid_response reason={exc.reason}")
            raise
        except Exception as exc:  # noqa: BLE001
            logger.exception(f"workout_generation_failed error={exc}")
            raise WorkoutGenerationError(reason=type(exc).__name__) from exc

        enhanced = enhance_workout(plan)
        logger.info(f"workout_generation_done title={enhanced.title!r} exercises={len(enhanced.exercises)}")
        return enhanced


__all__ = ["WorkoutGenerator", "build_llm_client"]
