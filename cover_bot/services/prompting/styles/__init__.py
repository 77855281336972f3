from .background import BACKGROUND_KEEP, BACKGROUND_REPLACE
from .editorial import (
    COVER_LINES_FROM_USER,
    COVER_LINES_GENERATED,
    PROMPT_EDITORIAL,
    STOCK_HEADLINES,
)
from .social import PROMPT_SOCIAL

__all__ = [
    "BACKGROUND_KEEP",
    "BACKGROUND_REPLACE",
    "COVER_LINES_FROM_USER",
    "COVER_LINES_GENERATED",
    "PROMPT_EDITORIAL",
    "PROMPT_SOCIAL",
    "STOCK_HEADLINES",
]
