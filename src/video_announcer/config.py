"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from video_announcer.core import ConfigurationError, FeaturedSource, Topic


@dataclass
class YouTubeConfig:
    """YouTube Data API settings."""
    api_base: str = "https://www.googleapis.com/youtube/v3"
    timeout: float = 30.0
    channel_limit: int = 3
    topic_limit: int = 2
    search_max_results: int = 15
    search_window_days: int = 30
    min_duration_seconds: int = 120


@dataclass
class DeliveryConfig:
    """Discord delivery settings."""
    api_base: str = "https://discord.com/api/v10"
    timeout: float = 30.0
    pacing_interval: float = 2.0


@dataclass
class ScheduleConfig:
    """Pass scheduling settings."""
    interval_hours: float = 6.0
    run_on_startup: bool = True


def _default_featured_channels() -> list[FeaturedSource]:
    return [
        FeaturedSource("UCLMkh2PYXpQh52d3m2bzNNA", Topic.DESIGN, "KeshArt"),
        FeaturedSource("UCHMoHLNzj_INZCrRNMVKSVA", Topic.DESIGN, "CanotStopPainting"),
        FeaturedSource("UCVlbtV-0IzNltDFmSsRxbrQ", Topic.DESIGN, "JoshArt02"),
        FeaturedSource("UCn7_Z4iVjVWvkkByrMnNybQ", Topic.DESIGN, "Kai_Rump"),
        FeaturedSource("UC0vD2yISVyw99FVEJ49OHWA", Topic.DESIGN, "hassaneart"),
        FeaturedSource("UCm5108VByLkHnu4-b-moBLQ", Topic.DESIGN, "Chommang"),
        FeaturedSource("UCXfE-XxquyKfDpOBal4wqWg", Topic.DESIGN, "rosiessketchbook"),
    ]


def _default_search_queries() -> dict[Topic, list[str]]:
    return {
        Topic.DESIGN: [
            "figure drawing tutorial",
            "concept art process",
            "anime drawing tutorial",
            "hand drawing techniques",
            "character design sketch",
            "gesture drawing practice",
            "traditional art illustration",
            "pencil sketching tips",
        ],
        Topic.PHOTOGRAPHY: [
            "cinematic photography breakdown",
            "landscape photography tips",
            "portrait photography lighting",
            "street photography POV",
            "photo editing walkthrough",
        ],
    }


@dataclass
class Settings:
    """Application settings."""

    # Secrets (from environment only)
    discord_bot_token: str = ""
    design_channel_id: str = ""
    photography_channel_id: str = ""
    youtube_api_key: Optional[str] = None

    # Config sections
    youtube: YouTubeConfig = field(default_factory=YouTubeConfig)
    delivery: DeliveryConfig = field(default_factory=DeliveryConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    featured_channels: list[FeaturedSource] = field(default_factory=_default_featured_channels)
    search_queries: dict[Topic, list[str]] = field(default_factory=_default_search_queries)

    @property
    def destination_ids(self) -> dict[Topic, str]:
        return {
            Topic.DESIGN: self.design_channel_id,
            Topic.PHOTOGRAPHY: self.photography_channel_id,
        }

    @property
    def pacing_interval(self) -> float:
        return self.delivery.pacing_interval

    @property
    def interval_seconds(self) -> float:
        return self.schedule.interval_hours * 3600

    def validate(self) -> None:
        """Raise ConfigurationError if a required value is missing."""
        required = {
            "DISCORD_BOT_TOKEN": self.discord_bot_token,
            "DESIGN_CHANNEL_ID": self.design_channel_id,
            "PHOTOGRAPHY_CHANNEL_ID": self.photography_channel_id,
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variable(s): {', '.join(missing)}"
            )

        for topic in Topic:
            if not self.search_queries.get(topic):
                raise ConfigurationError(f"No search queries configured for topic '{topic.value}'")


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _parse_featured_channels(entries: list[dict]) -> list[FeaturedSource]:
    if not isinstance(entries, list):
        raise ConfigurationError(f"featured_channels must be a list, got {entries!r}")
    channels = []
    for entry in entries:
        try:
            channels.append(
                FeaturedSource(
                    channel_id=entry["channel_id"],
                    topic=Topic(entry["topic"]),
                    name=entry.get("name", ""),
                )
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(f"Invalid featured channel entry {entry!r}: {e}") from e
    return channels


def _parse_search_queries(raw: dict) -> dict[Topic, list[str]]:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"search_queries must be a mapping, got {raw!r}")
    try:
        return {Topic(topic): list(queries) for topic, queries in raw.items()}
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Unknown topic in search_queries: {e}") from e


def _section(config: dict, name: str) -> dict:
    """Return a config section, treating an empty section as no overrides."""
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Config section '{name}' must be a mapping, got {section!r}")
    return section


def get_settings(
    config_path: Path = Path("config.yaml"),
    env_path: Path = Path(".env"),
) -> Settings:
    """Get application settings from YAML config and environment.

    Variables from `env_path` are loaded into the environment first; values
    already set in the environment take precedence.
    """
    load_dotenv(env_path)

    # Load YAML config
    config = load_config(config_path)
    if not isinstance(config, dict):
        raise ConfigurationError(f"{config_path} must contain a mapping at top level")

    # Build settings with secrets from environment
    settings = Settings(
        discord_bot_token=os.getenv("DISCORD_BOT_TOKEN", ""),
        design_channel_id=os.getenv("DESIGN_CHANNEL_ID", ""),
        photography_channel_id=os.getenv("PHOTOGRAPHY_CHANNEL_ID", ""),
        youtube_api_key=os.getenv("YOUTUBE_API_KEY") or None,
    )

    # Apply YAML config
    for key, value in _section(config, "youtube").items():
        setattr(settings.youtube, key, value)

    for key, value in _section(config, "delivery").items():
        setattr(settings.delivery, key, value)

    for key, value in _section(config, "schedule").items():
        setattr(settings.schedule, key, value)

    if "featured_channels" in config:
        settings.featured_channels = _parse_featured_channels(config["featured_channels"] or [])

    if "search_queries" in config:
        settings.search_queries = _parse_search_queries(config["search_queries"] or {})

    return settings
