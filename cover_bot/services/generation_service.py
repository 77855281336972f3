# File: cover_bot/services/generation_service.py
import time
from typing import Any

import structlog

from cover_bot.dto.generation import EncodedImage
from cover_bot.exceptions import EditFailed, GenerationFailed

logger = structlog.get_logger(__name__)


def _to_encoded_image(client_response: Any) -> EncodedImage:
    image_bytes = getattr(client_response, "image_bytes", None)
    if not image_bytes:
        raise ValueError("Client response is missing image data.")
    content_type = getattr(client_response, "content_type", None) or "image/png"
    return EncodedImage(mime_type=content_type, data=image_bytes)


class GenerationService:
    """
    The only door to the image provider.

    Both calls are single-shot: no retry, no backoff, no extra timeout.
    Every provider problem (transport error, timeout, policy refusal, a reply
    without an image) collapses into GenerationFailed / EditFailed.
    """

    def __init__(self, ai_client: Any) -> None:
        self._client = ai_client

    async def generate(
        self,
        brief: str,
        image: EncodedImage,
        *,
        aspect_ratio: str | None = None,
    ) -> EncodedImage:
        log = logger.bind(action="generate", source_mime=image.mime_type, aspect_ratio=aspect_ratio)
        start_time = time.monotonic()
        try:
            log.info("Sending request to Image Generation API", brief_length=len(brief))
            client_response = await self._client.images.generate(
                prompt=brief,
                image=image,
                aspect_ratio=aspect_ratio.replace("/", ":") if aspect_ratio else None,
            )
            result = _to_encoded_image(client_response)
        except Exception as e:
            log.exception(
                "An error occurred during image generation",
                generation_time_ms=int((time.monotonic() - start_time) * 1000),
            )
            raise GenerationFailed(cause=e) from e

        log.info(
            "Image generation successful",
            content_type=result.mime_type,
            generation_time_ms=int((time.monotonic() - start_time) * 1000),
        )
        return result

    async def edit(self, image: EncodedImage, instruction: str) -> EncodedImage:
        log = logger.bind(action="edit", source_mime=image.mime_type)
        start_time = time.monotonic()
        try:
            log.info("Sending request to Image Edit API", instruction=instruction)
            client_response = await self._client.images.edit(image=image, instruction=instruction)
            result = _to_encoded_image(client_response)
        except Exception as e:
            log.exception(
                "An error occurred during image edit",
                generation_time_ms=int((time.monotonic() - start_time) * 1000),
            )
            raise EditFailed(cause=e) from e

        log.info(
            "Image edit successful",
            content_type=result.mime_type,
            generation_time_ms=int((time.monotonic() - start_time) * 1000),
        )
        return result
