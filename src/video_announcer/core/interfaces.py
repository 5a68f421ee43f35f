"""Core interfaces for adapters."""

from abc import ABC, abstractmethod

from video_announcer.core.entities import Topic, VideoRecord


class VideoSource(ABC):
    """Interface for retrieving candidate videos."""

    @abstractmethod
    async def fetch_channel_videos(self, channel_id: str, limit: int) -> list[VideoRecord]:
        """Fetch the newest long-form videos of a channel."""
        pass

    @abstractmethod
    async def fetch_topic_videos(self, topic: Topic, limit: int) -> list[VideoRecord]:
        """Fetch the most viewed recent long-form videos for a topic."""
        pass


class Ledger(ABC):
    """Interface for remembering already announced videos."""

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Check whether a delivery key was already recorded."""
        pass

    @abstractmethod
    def record(self, key: str) -> None:
        """Record a delivery key. Recording twice is a no-op."""
        pass

    def filter_unseen(self, videos: list[VideoRecord]) -> tuple[list[VideoRecord], int]:
        """Filter out already delivered videos, keeping their order.

        Returns:
            Tuple of (unseen_videos, filtered_count)
        """
        unseen = []
        filtered_count = 0

        for video in videos:
            if self.contains(video.delivery_key):
                filtered_count += 1
            else:
                unseen.append(video)

        return unseen, filtered_count


class AnnouncementPublisher(ABC):
    """Interface for destination feeds."""

    @abstractmethod
    async def resolve_destination(self, destination_id: str) -> str:
        """Make sure the destination exists and return its identifier."""
        pass

    @abstractmethod
    async def send_announcement(
        self, destination_id: str, video: VideoRecord, topic: Topic
    ) -> None:
        """Render and send one announcement."""
        pass
