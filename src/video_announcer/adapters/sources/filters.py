"""Shared filtering utilities for sources."""

from video_announcer.core import VideoRecord


def is_long_form(video: VideoRecord, min_seconds: int = 120) -> bool:
    """
    Check that a video is not short-form content.

    The API's "medium" duration class is only a hint; this check on the
    parsed duration is the authoritative threshold.

    Args:
        video: Video to check
        min_seconds: Minimum accepted duration in seconds

    Returns:
        True if the parsed duration is at least `min_seconds`
    """
    return video.duration_seconds >= min_seconds
