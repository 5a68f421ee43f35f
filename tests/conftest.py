"""Shared test fixtures."""

import pytest

from video_announcer.core import VideoRecord


@pytest.fixture
def make_video():
    """Factory for video records with sensible defaults."""

    def _make(video_id: str = "abc123", **overrides) -> VideoRecord:
        fields = {
            "video_id": video_id,
            "title": f"Video {video_id}",
            "channel_title": "Test Channel",
            "description": "A long-form drawing tutorial",
            "thumbnail": f"https://i.ytimg.com/vi/{video_id}/maxresdefault.jpg",
            "published_at": "2026-10-01T12:00:00Z",
            "view_count": 1000,
            "like_count": 100,
            "duration": "PT10M5S",
        }
        fields.update(overrides)
        return VideoRecord(**fields)

    return _make
