"""YouTube Data API source for channel uploads and topic searches."""

import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import httpx

from video_announcer.adapters.sources.filters import is_long_form
from video_announcer.core import Topic, VideoRecord, VideoSource

logger = logging.getLogger(__name__)

QuerySelector = Callable[[list[str]], str]


class YouTubeSource(VideoSource):
    """Fetch long-form videos from the YouTube Data API v3.

    Every retrieval failure is logged and turned into an empty result, so
    callers cannot tell "nothing new" apart from "request failed".
    """

    def __init__(
        self,
        api_key: Optional[str],
        search_queries: dict[Topic, list[str]],
        api_base: str = "https://www.googleapis.com/youtube/v3",
        timeout: float = 30.0,
        search_max_results: int = 15,
        search_window_days: int = 30,
        min_duration_seconds: int = 120,
        query_selector: Optional[QuerySelector] = None,
    ) -> None:
        self.api_key = api_key
        self.search_queries = search_queries
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.search_max_results = search_max_results
        self.search_window_days = search_window_days
        self.min_duration_seconds = min_duration_seconds
        self.query_selector = query_selector or random.choice

    async def fetch_channel_videos(self, channel_id: str, limit: int = 3) -> list[VideoRecord]:
        """Fetch up to `limit` newest long-form uploads of a channel."""
        if not self.api_key:
            return []

        params = {
            "part": "id",
            "channelId": channel_id,
            "type": "video",
            "order": "date",
            "maxResults": limit,
            "videoDuration": "medium",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                video_ids = await self._search(client, params)
                if not video_ids:
                    return []
                return await self._get_video_details(client, video_ids)
        except Exception as e:
            logger.error("Failed to fetch channel videos (%s): %s", channel_id, e)
            return []

    async def fetch_topic_videos(self, topic: Topic, limit: int = 2) -> list[VideoRecord]:
        """Fetch the most viewed long-form videos of the last weeks for a topic."""
        if not self.api_key:
            logger.info("YouTube API key not set, skipping YouTube videos for %s", topic.value)
            return []

        queries = self.search_queries.get(topic) or []
        if not queries:
            logger.warning("No search queries configured for %s", topic.value)
            return []
        query = self.query_selector(queries)
        logger.debug("Searching %s videos with query '%s'", topic.value, query)

        published_after = datetime.now(timezone.utc) - timedelta(days=self.search_window_days)
        params = {
            "part": "id",
            "q": query,
            "type": "video",
            "order": "viewCount",
            "maxResults": self.search_max_results,
            "videoDuration": "medium",
            "publishedAfter": published_after.strftime("%Y-%m-%dT%H:%M:%SZ"),
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                video_ids = await self._search(client, params)
                if not video_ids:
                    return []
                videos = await self._get_video_details(client, video_ids)
        except Exception as e:
            logger.error("Failed to fetch YouTube videos for '%s': %s", topic.value, e)
            return []

        videos.sort(key=lambda v: v.view_count, reverse=True)
        return videos[:limit]

    async def _search(self, client: httpx.AsyncClient, params: dict) -> list[str]:
        """Run a search request and return the matching video IDs."""
        response = await client.get(
            f"{self.api_base}/search",
            params={**params, "key": self.api_key},
        )
        response.raise_for_status()

        data = response.json()
        return [
            item["id"]["videoId"]
            for item in data.get("items", [])
            if item.get("id", {}).get("videoId")
        ]

    async def _get_video_details(
        self, client: httpx.AsyncClient, video_ids: list[str]
    ) -> list[VideoRecord]:
        """Resolve video IDs to full records, dropping short-form videos."""
        response = await client.get(
            f"{self.api_base}/videos",
            params={
                "part": "snippet,statistics,contentDetails",
                "id": ",".join(video_ids),
                "key": self.api_key,
            },
        )
        response.raise_for_status()

        videos = [self._create_video(item) for item in response.json().get("items", [])]
        return [v for v in videos if is_long_form(v, self.min_duration_seconds)]

    def _create_video(self, item: dict) -> VideoRecord:
        """Create a video record from a `videos` API item."""
        snippet = item["snippet"]
        statistics = item.get("statistics", {})

        return VideoRecord(
            video_id=item["id"],
            title=snippet.get("title", ""),
            channel_title=snippet.get("channelTitle", ""),
            description=snippet.get("description", ""),
            thumbnail=self._best_thumbnail(snippet.get("thumbnails", {})),
            published_at=snippet.get("publishedAt", ""),
            view_count=int(statistics.get("viewCount", 0)),
            like_count=int(statistics.get("likeCount", 0)),
            duration=item.get("contentDetails", {}).get("duration", ""),
        )

    @staticmethod
    def _best_thumbnail(thumbnails: dict) -> str:
        for size in ("maxres", "high", "medium", "default"):
            if size in thumbnails:
                return thumbnails[size]["url"]
        return ""
