"""Core domain layer."""

from video_announcer.core.entities import (
    TOPIC_ORDER,
    TOPIC_THEMES,
    FeaturedSource,
    PassReport,
    Topic,
    TopicTheme,
    VideoRecord,
    delivery_key,
)
from video_announcer.core.errors import (
    ConfigurationError,
    DeliveryError,
    DestinationNotFoundError,
)
from video_announcer.core.interfaces import AnnouncementPublisher, Ledger, VideoSource
from video_announcer.core.ledger import InMemoryLedger

__all__ = [
    "VideoRecord",
    "FeaturedSource",
    "Topic",
    "TopicTheme",
    "TOPIC_ORDER",
    "TOPIC_THEMES",
    "PassReport",
    "delivery_key",
    "ConfigurationError",
    "DeliveryError",
    "DestinationNotFoundError",
    "VideoSource",
    "Ledger",
    "AnnouncementPublisher",
    "InMemoryLedger",
]
