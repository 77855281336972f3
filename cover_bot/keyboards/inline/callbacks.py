# cover_bot/keyboards/inline/callbacks.py
from aiogram.filters.callback_data import CallbackData


class HeroCallback(CallbackData, prefix="hero"):
    """Callback for the landing screen."""
    action: str


class FormActionCallback(CallbackData, prefix="form"):
    """Form-level actions: open template list, toggle stylize, generate, back."""
    action: str


class TemplateCallback(CallbackData, prefix="tpl"):
    template_id: str


class FieldCallback(CallbackData, prefix="field"):
    """Callback to start editing one field of the active template."""
    field_id: str


class FieldOptionCallback(CallbackData, prefix="opt"):
    """Callback for picking one option of a select field (by index)."""
    field_id: str
    index: int


class ResultActionCallback(CallbackData, prefix="result"):
    action: str


class ErrorActionCallback(CallbackData, prefix="failed"):
    action: str
