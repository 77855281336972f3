# cover_bot/data/constants.py
from enum import Enum


class TemplateCategory(str, Enum):
    """Template families. Drives brief strategy and field rendering."""
    MAGAZINE = "magazine"
    SOCIAL = "social"
    PRINT = "print"


class FieldType(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    COLOR = "color"
    SELECT = "select"
    DATE = "date"


class SessionStep(str, Enum):
    """Top-level screens of a cover session."""
    HERO = "hero"
    FILL_FORM = "fill_form"
    GENERATING = "generating"
    SHOW_RESULT = "show_result"
    ERROR = "error"


SUPPORTED_IMAGE_MIME_TYPES = frozenset({"image/png", "image/jpeg"})

DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
