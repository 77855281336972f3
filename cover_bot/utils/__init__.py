from . import bot_commands, logging

__all__ = ["bot_commands", "logging"]
