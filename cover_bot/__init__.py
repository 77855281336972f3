"""Telegram bot that turns a photo and a few lines of text into a magazine cover or social post."""

__version__ = "0.1.0"
