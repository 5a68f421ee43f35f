"""Tests for Discord notifier adapter."""

from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from video_announcer.adapters.notifications import DiscordNotifier, build_embed
from video_announcer.core import DeliveryError, DestinationNotFoundError, Topic


def _ok_response() -> Mock:
    response = Mock()
    response.raise_for_status = Mock()
    return response


def _error_response(message: str) -> Mock:
    response = Mock()
    response.raise_for_status = Mock(side_effect=httpx.HTTPError(message))
    return response


@pytest.mark.asyncio
async def test_send_announcement_success(make_video) -> None:
    """Test successful Discord announcement."""
    notifier = DiscordNotifier("bot-token")
    video = make_video("abc")

    with patch("httpx.AsyncClient") as mock_client:
        mock_post = AsyncMock(return_value=_ok_response())
        mock_client.return_value.__aenter__.return_value.post = mock_post

        await notifier.send_announcement("123", video, Topic.DESIGN)

    call_args = mock_post.call_args
    assert call_args.args[0] == "https://discord.com/api/v10/channels/123/messages"
    assert call_args.kwargs["headers"]["Authorization"] == "Bot bot-token"

    payload = call_args.kwargs["json"]
    assert len(payload["embeds"]) == 1
    assert payload["embeds"][0]["url"] == "https://www.youtube.com/watch?v=abc"


@pytest.mark.asyncio
async def test_send_announcement_api_error(make_video) -> None:
    """Test that Discord errors surface as DeliveryError."""
    notifier = DiscordNotifier("bot-token")

    with patch("httpx.AsyncClient") as mock_client:
        mock_client.return_value.__aenter__.return_value.post = AsyncMock(
            return_value=_error_response("429 Too Many Requests")
        )

        with pytest.raises(DeliveryError):
            await notifier.send_announcement("123", make_video(), Topic.DESIGN)


@pytest.mark.asyncio
async def test_resolve_destination_success() -> None:
    notifier = DiscordNotifier("bot-token")

    with patch("httpx.AsyncClient") as mock_client:
        mock_get = AsyncMock(return_value=_ok_response())
        mock_client.return_value.__aenter__.return_value.get = mock_get

        assert await notifier.resolve_destination("555") == "555"

    assert mock_get.call_args.args[0] == "https://discord.com/api/v10/channels/555"


@pytest.mark.asyncio
async def test_resolve_destination_not_found() -> None:
    notifier = DiscordNotifier("bot-token")

    with patch("httpx.AsyncClient") as mock_client:
        mock_client.return_value.__aenter__.return_value.get = AsyncMock(
            return_value=_error_response("404 Not Found")
        )

        with pytest.raises(DestinationNotFoundError, match="555"):
            await notifier.resolve_destination("555")


def test_build_embed_design(make_video) -> None:
    """Test embed formatting for the design theme."""
    video = make_video(
        "abc",
        title="Drawing Hands",
        channel_title="Kesh Art",
        description="d" * 150,
        view_count=1_234_567,
        like_count=4_500,
        duration="PT1H2M3S",
    )

    embed = build_embed(video, Topic.DESIGN)

    assert embed["color"] == 0x9B59B6
    assert embed["title"] == "Drawing Hands"
    assert embed["url"] == "https://www.youtube.com/watch?v=abc"
    assert embed["author"]["name"].endswith("Kesh Art")
    assert embed["author"]["url"] == "https://www.youtube.com/results?search_query=Kesh%20Art"
    assert embed["image"]["url"] == video.thumbnail
    assert embed["timestamp"] == "2026-10-01T12:00:00Z"
    assert "Art & Design" in embed["footer"]["text"]

    description = embed["description"]
    assert f"> *{'d' * 100}…*" in description
    assert "`1.2M`" in description
    assert "`4.5K`" in description
    assert "`1:02:03`" in description
    assert "https://www.youtube.com/watch?v=abc" in embed["fields"][0]["value"]


def test_build_embed_photography_without_optional_parts(make_video) -> None:
    """Test that empty description and bad duration are left out."""
    video = make_video("p1", description="", duration="garbage", view_count=999)

    embed = build_embed(video, Topic.PHOTOGRAPHY)

    assert embed["color"] == 0xE67E22
    assert "Photography" in embed["footer"]["text"]
    assert not embed["description"].startswith(">")
    assert "`999`" in embed["description"]
    assert "⏱" not in embed["description"]
