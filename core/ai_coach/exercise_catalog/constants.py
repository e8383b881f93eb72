EQUIPMENT_MODIFIERS: frozenset[str] = frozenset(
    {
        "dumbbell",
        "dumbbells",
        "barbell",
        "barbells",
        "kettlebell",
        "kettlebells",
        "bodyweight",
        "cable",
        "machine",
        "band",
        "bands",
        "resistance",
        "weighted",
    }
)
POSITION_MODIFIERS: frozenset[str] = frozenset(
    {
        "single",
        "seated",
        "standing",
        "alternating",
        "lying",
        "kneeling",
        "incline",
        "decline",
    }
)
TEMPO_MODIFIERS: frozenset[str] = frozenset({"slow", "fast", "explosive", "controlled", "tempo", "paused"})
DIFFICULTY_MODIFIERS: frozenset[str] = frozenset({"beginner", "intermediate", "advanced", "easy", "hard", "modified"})

MODIFIER_TOKENS: frozenset[str] = EQUIPMENT_MODIFIERS | POSITION_MODIFIERS | TEMPO_MODIFIERS | DIFFICULTY_MODIFIERS

__all__ = [
    "DIFFICULTY_MODIFIERS",
    "EQUIPMENT_MODIFIERS",
    "MODIFIER_TOKENS",
    "POSITION_MODIFIERS",
    "TEMPO_MODIFIERS",
]
