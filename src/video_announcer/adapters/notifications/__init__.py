"""Notification adapters for destination feeds."""

from video_announcer.adapters.notifications.discord_notifier import DiscordNotifier, build_embed

__all__ = ["DiscordNotifier", "build_embed"]
