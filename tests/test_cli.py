"""Tests for CLI wiring."""

from pathlib import Path

import pytest
import typer

from video_announcer.adapters.notifications import DiscordNotifier
from video_announcer.adapters.sources import YouTubeSource
from video_announcer.cli import build_service, main
from video_announcer.config import Settings
from video_announcer.core import InMemoryLedger, Topic


def test_build_service_wiring() -> None:
    settings = Settings(
        discord_bot_token="token",
        design_channel_id="1",
        photography_channel_id="2",
        youtube_api_key="yt",
    )

    service = build_service(settings)

    assert isinstance(service.source, YouTubeSource)
    assert service.source.api_key == "yt"
    assert isinstance(service.publisher, DiscordNotifier)
    assert service.publisher.bot_token == "token"
    assert isinstance(service.ledger, InMemoryLedger)
    assert service.destination_ids == {Topic.DESIGN: "1", Topic.PHOTOGRAPHY: "2"}
    assert service.pacing_interval == 2.0
    assert len(service.featured_channels) == 7


def test_main_exits_on_missing_configuration(monkeypatch, tmp_path: Path) -> None:
    """Test that missing secrets stop the process before any pass runs."""
    for name in ("DISCORD_BOT_TOKEN", "DESIGN_CHANNEL_ID", "PHOTOGRAPHY_CHANNEL_ID"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    with pytest.raises(typer.Exit) as exc_info:
        main(config=tmp_path / "missing.yaml", once=True, debug=False)

    assert exc_info.value.exit_code == 1


def test_main_exits_on_malformed_config(monkeypatch, tmp_path: Path) -> None:
    """Test that a broken config file is reported instead of crashing."""
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "token")
    monkeypatch.setenv("DESIGN_CHANNEL_ID", "1")
    monkeypatch.setenv("PHOTOGRAPHY_CHANNEL_ID", "2")
    monkeypatch.chdir(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("featured_channels:\n  - UC_plain_string\n", encoding="utf-8")

    with pytest.raises(typer.Exit) as exc_info:
        main(config=config_path, once=True, debug=False)

    assert exc_info.value.exit_code == 1
