# cover_bot/keyboards/inline/__init__.py
from .form import field_options_kb, form_kb, template_selection_kb
from .menu import hero_kb
from .result import error_kb, result_kb

__all__ = [
    "error_kb",
    "field_options_kb",
    "form_kb",
    "hero_kb",
    "result_kb",
    "template_selection_kb",
]
