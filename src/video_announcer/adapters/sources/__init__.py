"""Source adapters for fetching videos."""

from video_announcer.adapters.sources.youtube_source import YouTubeSource

__all__ = ["YouTubeSource"]
