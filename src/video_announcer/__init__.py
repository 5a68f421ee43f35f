"""Announce new YouTube videos in topic-specific Discord channels."""

__version__ = "0.1.0"
