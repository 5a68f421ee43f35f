"""Business logic use cases."""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Optional

from video_announcer.core import (
    TOPIC_ORDER,
    AnnouncementPublisher,
    FeaturedSource,
    Ledger,
    PassReport,
    Topic,
    VideoRecord,
    VideoSource,
)

logger = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


class PassState(str, Enum):
    """Phase of the aggregation pass currently running."""

    IDLE = "idle"
    FETCHING_FEATURED = "fetching_featured"
    DELIVERING_FEATURED = "delivering_featured"
    FETCHING_TOPICS = "fetching_topics"
    DELIVERING_TOPICS = "delivering_topics"


class AnnouncementService:
    """Service for collecting new videos and announcing them in their feeds."""

    def __init__(
        self,
        source: VideoSource,
        publisher: AnnouncementPublisher,
        ledger: Ledger,
        destination_ids: dict[Topic, str],
        featured_channels: list[FeaturedSource],
        channel_limit: int = 3,
        topic_limit: int = 2,
        pacing_interval: float = 2.0,
        sleep: Optional[Sleeper] = None,
    ) -> None:
        self.source = source
        self.publisher = publisher
        self.ledger = ledger
        self.destination_ids = destination_ids
        self.featured_channels = featured_channels
        self.channel_limit = channel_limit
        self.topic_limit = topic_limit
        self.pacing_interval = pacing_interval
        self.sleep = sleep or asyncio.sleep
        self.state = PassState.IDLE

    async def run_pass(self) -> PassReport:
        """Run one full aggregation pass: featured channels, then topic searches."""
        report = PassReport()
        logger.info("Running content aggregation...")

        try:
            destinations = await self._resolve_destinations()
        except Exception as e:
            logger.error("Could not find one or more channels. Check your channel IDs. (%s)", e)
            report.aborted = True
            report.error = str(e)
            return report

        try:
            for featured in self.featured_channels:
                try:
                    await self._process_featured(featured, destinations[featured.topic], report)
                except Exception as e:
                    logger.exception("Featured channel %s failed: %s", featured.channel_id, e)

            for topic in TOPIC_ORDER:
                try:
                    await self._process_topic(topic, destinations[topic], report)
                except Exception as e:
                    logger.exception("Topic search for %s failed: %s", topic.value, e)
        finally:
            self.state = PassState.IDLE

        logger.info(
            "Content aggregation complete: %d delivered, %d failed, %d already announced",
            report.delivered,
            report.failed,
            report.skipped,
        )
        return report

    async def _resolve_destinations(self) -> dict[Topic, str]:
        destinations = {}
        for topic in TOPIC_ORDER:
            destinations[topic] = await self.publisher.resolve_destination(
                self.destination_ids[topic]
            )
        return destinations

    async def _process_featured(
        self, featured: FeaturedSource, destination_id: str, report: PassReport
    ) -> None:
        label = featured.name or featured.channel_id

        self.state = PassState.FETCHING_FEATURED
        videos = await self.source.fetch_channel_videos(featured.channel_id, self.channel_limit)
        new_videos = self._filter_new(videos, report)

        if not new_videos:
            logger.info("No new videos from featured channel %s", label)
            return

        logger.info(
            "Posting %d video(s) from %s",
            len(new_videos),
            new_videos[0].channel_title or label,
        )
        self.state = PassState.DELIVERING_FEATURED
        await self.deliver_videos(new_videos, destination_id, featured.topic, report)

    async def _process_topic(self, topic: Topic, destination_id: str, report: PassReport) -> None:
        self.state = PassState.FETCHING_TOPICS
        videos = await self.source.fetch_topic_videos(topic, self.topic_limit)
        new_videos = self._filter_new(videos, report)

        if not new_videos:
            logger.info("No new YouTube videos for %s", topic.value)
            return

        logger.info("Posting %d YouTube video(s) for %s", len(new_videos), topic.value)
        self.state = PassState.DELIVERING_TOPICS
        await self.deliver_videos(new_videos, destination_id, topic, report)

    def _filter_new(self, videos: list[VideoRecord], report: PassReport) -> list[VideoRecord]:
        new_videos, skipped = self.ledger.filter_unseen(videos)
        report.skipped += skipped
        return new_videos

    async def deliver_videos(
        self,
        videos: list[VideoRecord],
        destination_id: str,
        topic: Topic,
        report: Optional[PassReport] = None,
    ) -> PassReport:
        """Deliver videos one at a time, pausing after each successful send.

        The pause is only taken when another video follows. A failed send is
        logged and skipped without touching the ledger, so the video stays
        eligible for the next pass.
        """
        report = report if report is not None else PassReport()
        pause_pending = False

        for video in videos:
            if pause_pending:
                await self.sleep(self.pacing_interval)
                pause_pending = False

            try:
                await self.publisher.send_announcement(destination_id, video, topic)
            except Exception as e:
                logger.error("Failed to post video: %s (%s)", video.title, e)
                report.failed += 1
                continue

            self.ledger.record(video.delivery_key)
            report.delivered += 1
            pause_pending = True

        return report
