from datetime import date

from core.schemas import UserProfile, WorkoutParams

SYSTEM_MESSAGE = (
    "You are a professional fitness coach specialized in creating personalized workout routines. "
    "Provide detailed, safe, and effective workout plans based on the user's preferences and profile "
    "information. Format your response as structured JSON."
)

TIME_RANGE_MAP: dict[str, str] = {
    "10-15": "10-15 minutes",
    "15-25": "15-25 minutes",
    "25-40": "25-40 minutes",
    "40-60": "40-60 minutes",
    "60-90": "60-90 minutes",
    "120": "120 minutes (2 hours)",
}

WORKOUT_PROMPT = """Create a detailed {workout_type} workout plan that:
- Takes approximately {time_range} to complete
- Focuses on the {muscle_focus} muscle group(s)
- Uses the following equipment: {equipment}
- Is suitable for someone who is feeling {mood}
"""

RESPONSE_FORMAT_PROMPT = """

Please provide a complete workout plan in JSON format with the following structure:
{
  "title": "Catchy title for the workout",
  "description": "Brief description of the workout and its benefits",
  "exercises": [
    {
      "name": "Exercise name",
      "sets": number of sets (if applicable),
      "reps": "number or range of repetitions" (if applicable),
      "duration": "time duration" (if applicable for timed exercises),
      "restBetweenSets": "rest time between sets",
      "instructions": "detailed instructions on how to perform the exercise correctly",
      "videoUrl": "a relevant YouTube video URL demonstrating proper form for this exercise (must be a valid YouTube URL)"
    }
  ],
  "warmup": "brief warmup routine description",
  "cooldown": "brief cooldown routine description",
  "totalTime": "estimated total time",
  "difficulty": "beginner/intermediate/advanced"
}

IMPORTANT: For each exercise, please include both a videoUrl (YouTube video) and imageUrl that demonstrate proper form and technique. Use well-known fitness YouTube channels and reputable fitness image sources. The visual elements are crucial for user safety and proper exercise execution."""


def format_equipment(items: list[str]) -> str:
    if not items:
        return "none"
    if len(items) == 1:
        return items[0]
    return ", ".join([*items[:-1], f"and {items[-1]}"])


def age_from_birth_date(value: str | None, *, today: date | None = None) -> int | None:
    if not value:
        return None
    try:
        born = date.fromisoformat(str(value)[:10])
    except ValueError:
        return None
    current = today or date.today()
    years = current.year - born.year - ((current.month, current.day) < (born.month, born.day))
    return years if years >= 0 else None


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _profile_lines(profile: UserProfile, today: date | None = None) -> list[str]:
    lines: list[str] = []
    if profile.fitness_level:
        lines.append(f"- Fitness level: {profile.fitness_level}")
    age = age_from_birth_date(profile.date_of_birth, today=today)
    if age is not None:
        lines.append(f"- Age: {age}")
    if profile.weight:
        lines.append(f"- Weight: {_format_number(profile.weight)} {profile.weight_unit or 'kg'}")
    if profile.height:
        lines.append(f"- Height: {_format_number(profile.height)} {profile.height_unit or 'cm'}")
    if profile.fitness_goals:
        lines.append(f"- Fitness goals: {profile.fitness_goals}")
    if profile.injuries:
        lines.append(f"- Injuries or limitations to consider: {profile.injuries}")
    return lines


def build_workout_prompt(params: WorkoutParams, profile: UserProfile | None = None, *, today: date | None = None) -> str:
    prompt = WORKOUT_PROMPT.format(
        workout_type=params.workout_type,
        time_range=TIME_RANGE_MAP.get(params.time_available, params.time_available),
        muscle_focus=params.muscle_focus,
        equipment=format_equipment(params.equipment),
        mood=params.mood,
    )
    if profile is not None:
        prompt += "\nAdditional information about the user:"
        for line in _profile_lines(profile, today):
            prompt += f"\n{line}"
    return prompt + RESPONSE_FORMAT_PROMPT


__all__ = [
    "RESPONSE_FORMAT_PROMPT",
    "SYSTEM_MESSAGE",
    "TIME_RANGE_MAP",
    "WORKOUT_PROMPT",
    "age_from_birth_date",
    "build_workout_prompt",
    "format_equipment",
]
