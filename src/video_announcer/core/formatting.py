"""Text helpers shared by sources and announcement rendering."""

import re

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def _duration_parts(iso: str) -> tuple[int, int, int] | None:
    match = _DURATION_RE.match(iso or "")
    if not match or not any(match.groups()):
        return None
    hours, minutes, seconds = (int(group or 0) for group in match.groups())
    return hours, minutes, seconds


def parse_duration_seconds(iso: str) -> int:
    """
    Convert an ISO 8601 duration (PT#H#M#S, every part optional) to seconds.

    Unparseable input yields 0.
    """
    parts = _duration_parts(iso)
    if parts is None:
        return 0
    hours, minutes, seconds = parts
    return hours * 3600 + minutes * 60 + seconds


def format_duration(iso: str) -> str:
    """Render an ISO 8601 duration as H:MM:SS or M:SS ("" if unparseable)."""
    parts = _duration_parts(iso)
    if parts is None:
        return ""
    hours, minutes, seconds = parts
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_count(value: int) -> str:
    """Abbreviate a view/like count: 1.2M, 4.5K or the literal number."""
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return str(value)


def truncate_description(text: str, limit: int = 100) -> str:
    """Cut a description to `limit` characters plus an ellipsis."""
    if len(text) > limit:
        return text[:limit].strip() + "…"
    return text
