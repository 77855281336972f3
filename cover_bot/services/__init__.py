# cover_bot/services/__init__.py
from .form_state import FormStateManager
from .generation_service import GenerationService
from .lifecycle import LifecycleController
from .session_registry import SessionRegistry

__all__ = [
    "FormStateManager",
    "GenerationService",
    "LifecycleController",
    "SessionRegistry",
]
