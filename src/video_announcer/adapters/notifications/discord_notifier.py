"""Discord announcement adapter."""

import logging
from urllib.parse import quote

import httpx

from video_announcer.core import (
    TOPIC_THEMES,
    AnnouncementPublisher,
    DeliveryError,
    DestinationNotFoundError,
    Topic,
    VideoRecord,
)
from video_announcer.core.formatting import format_count, format_duration, truncate_description

logger = logging.getLogger(__name__)

ZERO_WIDTH_SPACE = "​"


def build_embed(video: VideoRecord, topic: Topic) -> dict:
    """Render a video as a topic-themed Discord embed.

    Args:
        video: Video to announce
        topic: Topic selecting color, icon, label and accent

    Returns:
        Embed object as expected by the Discord REST API
    """
    theme = TOPIC_THEMES[topic]
    views = format_count(video.view_count)
    likes = format_count(video.like_count)
    duration = format_duration(video.duration)
    snippet = truncate_description(video.description)

    description = (
        (f"> *{snippet}*\n\n" if snippet else "")
        + f"\U0001F441️  `{views}`  "
        + f"•  \U0001F44D  `{likes}`  "
        + (f"•  ⏱️  `{duration}`" if duration else "")
        + f"\n{ZERO_WIDTH_SPACE}"
    )

    embed = {
        "color": theme.color,
        "author": {
            "name": f"{theme.accent}  {video.channel_title}",
            "url": f"https://www.youtube.com/results?search_query={quote(video.channel_title, safe='')}",
        },
        "title": video.title,
        "url": video.url,
        "description": description,
        "image": {"url": video.thumbnail},
        "fields": [
            {
                "name": ZERO_WIDTH_SPACE,
                "value": f"> ▶️  [**Watch on YouTube  →**]({video.url})",
            }
        ],
        "footer": {"text": f"{theme.icon}  {theme.label}  │  YouTube"},
    }
    if video.published_at:
        embed["timestamp"] = video.published_at

    return embed


class DiscordNotifier(AnnouncementPublisher):
    """Send announcements to Discord text channels via the bot REST API."""

    def __init__(
        self,
        bot_token: str,
        api_base: str = "https://discord.com/api/v10",
        timeout: float = 30.0,
    ) -> None:
        """Initialize Discord notifier.

        Args:
            bot_token: Bot token used in the Authorization header.
            api_base: Discord REST API base URL.
            timeout: Request timeout in seconds.
        """
        self.bot_token = bot_token
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bot {self.bot_token}",
            "Content-Type": "application/json",
        }

    async def resolve_destination(self, destination_id: str) -> str:
        """Check that the channel exists and is visible to the bot.

        Raises:
            DestinationNotFoundError: If the channel cannot be fetched.
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(
                    f"{self.api_base}/channels/{destination_id}",
                    headers=self._get_headers(),
                )
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise DestinationNotFoundError(
                    f"Could not find channel {destination_id}: {e}"
                ) from e

        return destination_id

    async def send_announcement(
        self, destination_id: str, video: VideoRecord, topic: Topic
    ) -> None:
        """Send one themed announcement to a channel.

        Raises:
            DeliveryError: If Discord rejects the message or is unreachable.
        """
        payload = {"embeds": [build_embed(video, topic)]}

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(
                    f"{self.api_base}/channels/{destination_id}/messages",
                    headers=self._get_headers(),
                    json=payload,
                )
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise DeliveryError(f"Discord rejected announcement for {video.video_id}: {e}") from e

        logger.debug("Announced %s in channel %s", video.video_id, destination_id)
