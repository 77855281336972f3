from .generation import (
    EncodedImage,
    FormSnapshot,
    GenerationFailure,
    GenerationRequest,
    GenerationResult,
    GenerationSuccess,
)
from .session import EditSession, SessionState
from .template import Template, TemplateField

__all__ = [
    "EditSession",
    "EncodedImage",
    "FormSnapshot",
    "GenerationFailure",
    "GenerationRequest",
    "GenerationResult",
    "GenerationSuccess",
    "SessionState",
    "Template",
    "TemplateField",
]
