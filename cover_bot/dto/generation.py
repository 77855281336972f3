# File: cover_bot/dto/generation.py
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from .template import Template

FormSnapshot = dict[str, str]


class EncodedImage(BaseModel):
    """
    A self-describing image value: a format tag (MIME type) plus the raw payload.
    The core never looks inside `data`; it only forwards `mime_type` to the provider.
    """
    model_config = ConfigDict(frozen=True)

    mime_type: str
    data: bytes

    @property
    def extension(self) -> str:
        subtype = self.mime_type.split("/")[-1]
        return "jpg" if subtype == "jpeg" else subtype


class GenerationRequest(BaseModel):
    """Everything one submission needs. Kept verbatim so a retry sends exactly the same thing."""
    model_config = ConfigDict(frozen=True)

    template: Template
    form_snapshot: FormSnapshot
    source_image: EncodedImage
    stylize: bool


class GenerationSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    image: EncodedImage


class GenerationFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    message: str


GenerationResult = Union[GenerationSuccess, GenerationFailure]
