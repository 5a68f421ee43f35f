"""CLI entry point for the video announcer."""

import asyncio
import logging
import signal
from pathlib import Path

import typer

from video_announcer.adapters.notifications import DiscordNotifier
from video_announcer.adapters.sources import YouTubeSource
from video_announcer.config import Settings, get_settings
from video_announcer.core import ConfigurationError, InMemoryLedger
from video_announcer.scheduler import PassScheduler
from video_announcer.use_cases import AnnouncementService

logger = logging.getLogger("video_announcer")


def main(
    config: Path = typer.Option(Path("config.yaml"), "--config", help="Path to YAML config"),
    once: bool = typer.Option(False, "--once", help="Run a single aggregation pass and exit"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Announce new YouTube videos in the design and photography Discord channels."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = get_settings(config)
        settings.validate()
    except ConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)

    asyncio.run(async_run(settings, once))


def app() -> None:
    """CLI entry point."""
    typer.run(main)


def build_service(settings: Settings) -> AnnouncementService:
    """Wire the source, publisher and ledger from settings."""
    source = YouTubeSource(
        api_key=settings.youtube_api_key,
        search_queries=settings.search_queries,
        api_base=settings.youtube.api_base,
        timeout=settings.youtube.timeout,
        search_max_results=settings.youtube.search_max_results,
        search_window_days=settings.youtube.search_window_days,
        min_duration_seconds=settings.youtube.min_duration_seconds,
    )
    publisher = DiscordNotifier(
        bot_token=settings.discord_bot_token,
        api_base=settings.delivery.api_base,
        timeout=settings.delivery.timeout,
    )
    return AnnouncementService(
        source=source,
        publisher=publisher,
        ledger=InMemoryLedger(),
        destination_ids=settings.destination_ids,
        featured_channels=settings.featured_channels,
        channel_limit=settings.youtube.channel_limit,
        topic_limit=settings.youtube.topic_limit,
        pacing_interval=settings.pacing_interval,
    )


def _log_credentials(settings: Settings) -> None:
    logger.info("Discord bot token configured, design=%s photography=%s",
                settings.design_channel_id, settings.photography_channel_id)
    if settings.youtube_api_key:
        logger.info("YouTube API key configured")
    else:
        logger.warning("YOUTUBE_API_KEY not set, no videos will be fetched")
    logger.info(
        "%d featured channel(s), %d topic(s)",
        len(settings.featured_channels),
        len(settings.search_queries),
    )


async def async_run(settings: Settings, once: bool) -> None:
    """Async implementation of run command."""
    _log_credentials(settings)

    service = build_service(settings)
    scheduler = PassScheduler(
        run_pass=service.run_pass,
        interval_seconds=settings.interval_seconds,
        run_on_startup=settings.schedule.run_on_startup,
    )

    if once:
        await scheduler.run_guarded()
        return

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, scheduler.stop)
        except NotImplementedError:
            # Windows event loops do not support signal handlers
            pass

    await scheduler.run_forever()


if __name__ == "__main__":
    app()
