import re

_YOUTUBE_ID_RE = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})"
)


def extract_youtube_video_id(url: str | None) -> str | None:
    match = _YOUTUBE_ID_RE.search(str(url or ""))
    return match.group(1) if match else None


def build_youtube_embed_url(url: str | None) -> str | None:
    video_id = extract_youtube_video_id(url)
    if video_id is None:
        return None
    return f"https://www.youtube.com/embed/{video_id}?rel=0&showinfo=0&controls=1"


def build_youtube_thumbnail_url(url: str | None) -> str | None:
    video_id = extract_youtube_video_id(url)
    if video_id is None:
        return None
    return f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg"


__all__ = ["build_youtube_embed_url", "build_youtube_thumbnail_url", "extract_youtube_video_id"]
