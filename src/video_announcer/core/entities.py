"""Core domain entities."""

from dataclasses import dataclass
from enum import Enum

from video_announcer.core.formatting import parse_duration_seconds

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


class Topic(str, Enum):
    """Topic of a destination feed."""

    DESIGN = "design"
    PHOTOGRAPHY = "photography"


# Fixed processing order for topic searches
TOPIC_ORDER = (Topic.DESIGN, Topic.PHOTOGRAPHY)


def delivery_key(video_id: str) -> str:
    """Canonical identity used to suppress duplicate announcements."""
    return WATCH_URL.format(video_id=video_id)


@dataclass(frozen=True)
class VideoRecord:
    """A YouTube video resolved to full detail."""

    video_id: str
    title: str
    channel_title: str
    description: str
    thumbnail: str
    published_at: str
    view_count: int
    like_count: int
    duration: str

    def __post_init__(self) -> None:
        if not self.video_id:
            raise ValueError("Video ID cannot be empty")

    @property
    def url(self) -> str:
        return WATCH_URL.format(video_id=self.video_id)

    @property
    def delivery_key(self) -> str:
        return delivery_key(self.video_id)

    @property
    def duration_seconds(self) -> int:
        return parse_duration_seconds(self.duration)


@dataclass(frozen=True)
class FeaturedSource:
    """A channel whose latest uploads are always announced."""

    channel_id: str
    topic: Topic
    name: str = ""

    def __post_init__(self) -> None:
        if not self.channel_id:
            raise ValueError("Channel ID cannot be empty")


@dataclass(frozen=True)
class TopicTheme:
    """Visual theme applied to a topic's announcements."""

    color: int
    icon: str
    label: str
    accent: str


TOPIC_THEMES: dict[Topic, TopicTheme] = {
    Topic.DESIGN: TopicTheme(
        color=0x9B59B6,
        icon="\U0001F3A8",
        label="Art & Design",
        accent="\U0001F58C️",
    ),
    Topic.PHOTOGRAPHY: TopicTheme(
        color=0xE67E22,
        icon="\U0001F4F7",
        label="Photography",
        accent="\U0001F305",
    ),
}


@dataclass
class PassReport:
    """Outcome of one aggregation pass."""

    delivered: int = 0
    failed: int = 0
    skipped: int = 0
    aborted: bool = False
    error: str = ""
