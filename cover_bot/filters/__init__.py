from .session_step import SessionStepFilter

__all__ = ["SessionStepFilter"]
