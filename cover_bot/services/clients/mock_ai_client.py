# cover_bot/services/clients/mock_ai_client.py
from __future__ import annotations
import asyncio
import io
from typing import Any

import structlog
from PIL import Image, ImageOps, UnidentifiedImageError
from pydantic import BaseModel, ConfigDict

from cover_bot.data.settings import GenerationConfig, settings
from cover_bot.dto.generation import EncodedImage

logger = structlog.get_logger(__name__)

_FALLBACK_SIZE = (768, 1024)


class MockAIClientResponse(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    image_bytes: bytes
    content_type: str = "image/png"
    response_payload: dict[str, Any]


def _open(image: EncodedImage, fallback_color: str) -> Image.Image:
    try:
        img = Image.open(io.BytesIO(image.data))
        img = ImageOps.exif_transpose(img)
        return img.convert("RGB")
    except (UnidentifiedImageError, OSError):
        logger.error("MOCK Images: source image could not be decoded, using a flat canvas.")
        return Image.new("RGB", _FALLBACK_SIZE, fallback_color)


def _png_bytes(img: Image.Image) -> bytes:
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def _fit_aspect(img: Image.Image, aspect_ratio: str | None) -> Image.Image:
    if not aspect_ratio:
        return img
    width, height = (int(part) for part in aspect_ratio.replace(":", "/").split("/"))
    target_w = img.width
    target_h = round(target_w * height / width)
    return ImageOps.fit(img, (target_w, target_h))


class _MockImagesNamespace:
    """Deterministic stand-in for the image model; no network."""

    def __init__(self, latency_s: float) -> None:
        self._latency_s = latency_s

    async def generate(
        self,
        prompt: str,
        image: EncodedImage,
        aspect_ratio: str | None = None,
    ) -> MockAIClientResponse:
        logger.info("MOCK Images: Simulating cover generation...", prompt_length=len(prompt))
        await asyncio.sleep(self._latency_s)
        img = _fit_aspect(_open(image, "darkblue"), aspect_ratio)
        framed = ImageOps.expand(img, border=max(img.width // 40, 4), fill="white")
        return MockAIClientResponse(
            image_bytes=_png_bytes(framed),
            response_payload={"mock_data": True, "action": "generate", "aspect_ratio": aspect_ratio},
        )

    async def edit(self, image: EncodedImage, instruction: str) -> MockAIClientResponse:
        logger.info("MOCK Images: Simulating image edit...", instruction=instruction)
        await asyncio.sleep(self._latency_s)
        img = ImageOps.grayscale(_open(image, "gray"))
        return MockAIClientResponse(
            image_bytes=_png_bytes(img),
            response_payload={"mock_data": True, "action": "edit"},
        )


class MockAIClient:
    def __init__(self, generation: GenerationConfig | None = None, **_kwargs: Any) -> None:
        self.images = _MockImagesNamespace((generation or settings.generation).mock_latency_s)
