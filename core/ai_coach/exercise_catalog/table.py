from types import MappingProxyType
from typing import Iterable, Mapping
from urllib.parse import urlsplit

_EXERCISE_VIDEOS: tuple[tuple[str, str], ...] = (
    # strength
    ("push-up", "https://www.youtube.com/watch?v=IODxDxX7oi4"),
    ("pushup", "https://www.youtube.com/watch?v=IODxDxX7oi4"),
    ("push up", "https://www.youtube.com/watch?v=IODxDxX7oi4"),
    ("squat", "https://www.youtube.com/watch?v=aclHkVaku9U"),
    ("squats", "https://www.youtube.com/watch?v=aclHkVaku9U"),
    ("plank", "https://www.youtube.com/watch?v=pSHjTRCQxIw"),
    ("lunge", "https://www.youtube.com/watch?v=3XDriUn0udo"),
    ("lunges", "https://www.youtube.com/watch?v=3XDriUn0udo"),
    ("burpee", "https://www.youtube.com/watch?v=818SkLY1KoA"),
    ("burpees", "https://www.youtube.com/watch?v=818SkLY1KoA"),
    ("deadlift", "https://www.youtube.com/watch?v=VytU5OSPUJM"),
    ("deadlifts", "https://www.youtube.com/watch?v=VytU5OSPUJM"),
    ("bicep curl", "https://www.youtube.com/watch?v=ykJmrZ5v0Oo"),
    ("bicep curls", "https://www.youtube.com/watch?v=ykJmrZ5v0Oo"),
    ("tricep dip", "https://www.youtube.com/watch?v=0326dy_-CzM"),
    ("tricep dips", "https://www.youtube.com/watch?v=0326dy_-CzM"),
    ("mountain climber", "https://www.youtube.com/watch?v=nmwgirgXLYM"),
    ("mountain climbers", "https://www.youtube.com/watch?v=nmwgirgXLYM"),
    ("jumping jack", "https://www.youtube.com/watch?v=iSSAk4XCsRA"),
    ("jumping jacks", "https://www.youtube.com/watch?v=iSSAk4XCsRA"),
    # core
    ("sit-up", "https://www.youtube.com/watch?v=1fbU_MkV7NE"),
    ("sit up", "https://www.youtube.com/watch?v=1fbU_MkV7NE"),
    ("situp", "https://www.youtube.com/watch?v=1fbU_MkV7NE"),
    ("crunch", "https://www.youtube.com/watch?v=Xyd_fa5zoEU"),
    ("crunches", "https://www.youtube.com/watch?v=Xyd_fa5zoEU"),
    ("russian twist", "https://www.youtube.com/watch?v=wkD8rjkodUI"),
    ("russian twists", "https://www.youtube.com/watch?v=wkD8rjkodUI"),
    # cardio
    ("high knees", "https://www.youtube.com/watch?v=8ophJzCdKmw"),
    ("butt kicks", "https://www.youtube.com/watch?v=5MgAjJwFnuk"),
    ("jumping lunge", "https://www.youtube.com/watch?v=rvqV3Vgqiyc"),
    ("jumping lunges", "https://www.youtube.com/watch?v=rvqV3Vgqiyc"),
    # yoga / flexibility
    ("downward dog", "https://www.youtube.com/watch?v=M_8HBQRzA2k"),
    ("child pose", "https://www.youtube.com/watch?v=2CWw0qHjPJY"),
    ("child's pose", "https://www.youtube.com/watch?v=2CWw0qHjPJY"),
    ("warrior pose", "https://www.youtube.com/watch?v=_VoX6QfTgHM"),
    ("tree pose", "https://www.youtube.com/watch?v=YgJbLQQ3yII"),
)


def _is_absolute_url(value: str) -> bool:
    parts = urlsplit(value)
    return parts.scheme in {"http", "https"} and bool(parts.netloc)


def build_resource_table(items: Iterable[tuple[str, str]] | Mapping[str, str]) -> Mapping[str, str]:
    """Build a read-only name -> URL table.

    Keys are lowercased and whitespace-collapsed; insertion order is kept since
    it breaks ties between equally good matches. Raises ``ValueError`` on
    duplicate keys, blank keys or non-absolute URLs.
    """
    pairs = items.items() if isinstance(items, Mapping) else items
    table: dict[str, str] = {}
    for raw_name, raw_url in pairs:
        name = " ".join(str(raw_name).split()).lower()
        url = str(raw_url).strip()
        if not name:
            raise ValueError("exercise_table_blank_key")
        if name in table:
            raise ValueError(f"exercise_table_duplicate_key name={name}")
        if not _is_absolute_url(url):
            raise ValueError(f"exercise_table_invalid_url name={name} url={url}")
        table[name] = url
    return MappingProxyType(table)


EXERCISE_VIDEO_TABLE: Mapping[str, str] = build_resource_table(_EXERCISE_VIDEOS)

__all__ = ["EXERCISE_VIDEO_TABLE", "build_resource_table"]
