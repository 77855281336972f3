# cover_bot/services/clients/google_ai_client.py
from __future__ import annotations
import json
from typing import Any, List

import structlog
from pydantic import BaseModel, ConfigDict

# Google Gen AI SDK (AI Studio or Vertex AI backend)
from google import genai
from google.genai import types
from google.genai.types import Modality

# Service account credentials
from google.oauth2.service_account import Credentials

from cover_bot.data.settings import GenerationConfig, GoogleConfig, settings
from cover_bot.dto.generation import EncodedImage

logger = structlog.get_logger(__name__)


class GoogleGeminiClientResponse(BaseModel):
    """Standardized response from Gemini client."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    image_bytes: bytes
    content_type: str = "image/png"
    response_payload: dict


def _part_kind(part: Any) -> str:
    if getattr(part, "inline_data", None):
        return "inline_data"
    if getattr(part, "text", None):
        return "text"
    return "other"


def _serialize_response(resp: Any) -> dict:
    """Small logging payload; inline image bytes are reduced to their size."""
    if not resp:
        return {}
    out: dict[str, Any] = {"candidates": []}
    for candidate in getattr(resp, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        parts = getattr(content, "parts", None) or []
        out["candidates"].append(
            {
                "finish_reason": str(getattr(candidate, "finish_reason", None)),
                "parts": [
                    {
                        "kind": _part_kind(p),
                        "mime_type": getattr(getattr(p, "inline_data", None), "mime_type", None),
                        "size": len(getattr(getattr(p, "inline_data", None), "data", None) or b""),
                        "text": (getattr(p, "text", None) or "")[:200] or None,
                    }
                    for p in parts
                ],
            }
        )
    feedback = getattr(resp, "prompt_feedback", None)
    if feedback is not None:
        out["prompt_feedback"] = str(feedback)
    return out


def _pick_best_inline_image(parts: List[Any]) -> tuple[bytes, str] | None:
    """Return the largest inline image (bytes, mime) from parts."""
    best: tuple[int, bytes, str] | None = None
    for p in parts or []:
        inline = getattr(p, "inline_data", None)
        if inline and getattr(inline, "data", None):
            data: bytes = inline.data
            mime = getattr(inline, "mime_type", None) or "image/png"
            size = len(data)
            if best is None or size > best[0]:
                best = (size, data, mime)
    if best:
        _, data, mime = best
        return data, mime
    return None


def _to_part(image: EncodedImage) -> types.Part:
    return types.Part.from_bytes(data=image.data, mime_type=image.mime_type)


def _build_genai_client(google: GoogleConfig, timeout_s: int) -> genai.Client:
    http_options = types.HttpOptions(timeout=timeout_s * 1000)

    if google.use_vertex:
        if not all([google.project_id, google.location, google.service_account_creds_json]):
            raise RuntimeError(
                "Missing Google Cloud configuration. "
                "Set GOOGLE__PROJECT_ID, GOOGLE__LOCATION, GOOGLE__SERVICE_ACCOUNT_CREDS_JSON."
            )
        creds_info = json.loads(google.service_account_creds_json.get_secret_value())
        scoped_creds = Credentials.from_service_account_info(creds_info).with_scopes(
            ["https://www.googleapis.com/auth/cloud-platform"]
        )
        return genai.Client(
            vertexai=True,
            project=google.project_id,
            location=google.location,
            credentials=scoped_creds,
            http_options=http_options,
        )

    if not google.api_key:
        raise RuntimeError("Missing Gemini API key. Set GOOGLE__API_KEY or enable GOOGLE__USE_VERTEX.")
    return genai.Client(api_key=google.api_key.get_secret_value(), http_options=http_options)


class _ImagesNamespace:
    """
    Image generation and editing with Gemini via google-genai.

    Notes:
      - Uses model 'gemini-2.5-flash-image' unless configured otherwise.
      - Async calls through client.aio.models.generate_content.
      - Raises on any provider error or on a response without an image;
        callers decide how to report it.
    """

    def __init__(self, google: GoogleConfig, generation: GenerationConfig) -> None:
        self._generation = generation
        try:
            self._client = _build_genai_client(google, generation.request_timeout_s)
            logger.info("GenAI client initialized.", vertex=google.use_vertex)
        except Exception:
            logger.exception("Failed to initialize Google Gen AI client.")
            raise

    def _config(self, aspect_ratio: str | None) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            temperature=self._generation.temperature,
            top_p=self._generation.top_p,
            top_k=self._generation.top_k,
            candidate_count=1,
            response_modalities=[Modality.IMAGE],
            image_config=types.ImageConfig(aspect_ratio=aspect_ratio) if aspect_ratio else None,
        )

    async def _call(self, parts: list[Any], aspect_ratio: str | None, action: str) -> GoogleGeminiClientResponse:
        log = logger.bind(model=self._generation.model, action=action)
        log.info("Calling Gemini.")
        response = await self._client.aio.models.generate_content(
            model=self._generation.model,
            contents=parts,
            config=self._config(aspect_ratio),
        )

        if not response or not getattr(response, "candidates", None):
            log.error("Empty or invalid response from Gemini.", payload=_serialize_response(response))
            raise ValueError("Gemini returned an empty or invalid response.")

        candidate = response.candidates[0]
        content = getattr(candidate, "content", None)
        parts = getattr(content, "parts", None) or []
        picked = _pick_best_inline_image(parts)

        if not picked:
            finish_reason = getattr(candidate, "finish_reason", "UNKNOWN")
            log.error(
                "No inline image in response.",
                reason=str(finish_reason),
                part_kinds=[_part_kind(p) for p in parts],
                payload=_serialize_response(response),
            )
            raise ValueError(f"No inline_data image in response. Finish reason: {finish_reason}")

        image_bytes, content_type = picked
        return GoogleGeminiClientResponse(
            image_bytes=image_bytes,
            content_type=content_type or "image/png",
            response_payload=_serialize_response(response),
        )

    async def generate(
        self,
        prompt: str,
        image: EncodedImage,
        aspect_ratio: str | None = None,
    ) -> GoogleGeminiClientResponse:
        """Brief first, then the source photo."""
        return await self._call([types.Part.from_text(text=prompt), _to_part(image)], aspect_ratio, "generate")

    async def edit(self, image: EncodedImage, instruction: str) -> GoogleGeminiClientResponse:
        """Image first, then the short instruction."""
        return await self._call([_to_part(image), types.Part.from_text(text=instruction)], None, "edit")


class GoogleGeminiClient:
    """Gemini client focused on image generation."""
    def __init__(
        self,
        google: GoogleConfig | None = None,
        generation: GenerationConfig | None = None,
        **_kwargs: Any,
    ) -> None:
        self.images = _ImagesNamespace(google or settings.google, generation or settings.generation)
