# File: cover_bot/dto/session.py
from pydantic import BaseModel

from cover_bot.data.constants import SessionStep

from .generation import EncodedImage, GenerationRequest, GenerationResult
from .template import Template


class EditSession(BaseModel):
    """Local state of the Magic Edit sub-flow on the result screen."""
    instruction: str = ""
    pending: bool = False
    error: str | None = None


class SessionState(BaseModel):
    """
    The single mutable aggregate of a cover session.
    Only LifecycleController mutates it; everyone else gets a copy.
    """
    step: SessionStep = SessionStep.HERO
    selected_template: Template
    last_request: GenerationRequest | None = None
    result: GenerationResult | None = None
    current_image: EncodedImage | None = None
    error_message: str = ""
