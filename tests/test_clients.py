import asyncio
import io
from types import SimpleNamespace

import pytest
from PIL import Image

from cover_bot.data.settings import GenerationConfig, GoogleConfig
from cover_bot.dto.generation import EncodedImage
from cover_bot.services.clients import MockAIClient, get_ai_client
from cover_bot.services.clients.google_ai_client import (
    _build_genai_client,
    _pick_best_inline_image,
    _serialize_response,
)
from tests.conftest import make_image_bytes


def _size(data: bytes) -> tuple[int, int]:
    with Image.open(io.BytesIO(data)) as img:
        return img.size


@pytest.fixture
def mock_client() -> MockAIClient:
    return MockAIClient(generation=GenerationConfig(client="mock", mock_latency_s=0))


def test_mock_generate_fits_aspect_ratio(mock_client):
    source = EncodedImage(mime_type="image/png", data=make_image_bytes(size=(400, 400)))

    response = asyncio.run(mock_client.images.generate(prompt="brief", image=source, aspect_ratio="3:4"))

    width, height = _size(response.image_bytes)
    # 400x533 plus a 10px frame on every side
    assert (width, height) == (420, 553)
    assert response.content_type == "image/png"
    assert response.response_payload["aspect_ratio"] == "3:4"


def test_mock_edit_turns_grayscale(mock_client):
    source = EncodedImage(mime_type="image/png", data=make_image_bytes(color="red"))

    response = asyncio.run(mock_client.images.edit(image=source, instruction="make it black and white"))

    with Image.open(io.BytesIO(response.image_bytes)) as img:
        assert img.mode == "L"


def test_mock_survives_undecodable_source(mock_client):
    source = EncodedImage(mime_type="image/png", data=b"broken")
    response = asyncio.run(mock_client.images.generate(prompt="brief", image=source))
    assert response.image_bytes


def test_factory_rejects_unknown_client():
    with pytest.raises(ValueError):
        get_ai_client("dall-e")


def test_factory_builds_mock():
    assert isinstance(get_ai_client("MOCK"), MockAIClient)


def _part(data=None, mime_type=None, text=None):
    inline = SimpleNamespace(data=data, mime_type=mime_type) if data is not None else None
    return SimpleNamespace(inline_data=inline, text=text)


def test_pick_best_inline_image_prefers_largest():
    parts = [_part(text="here you go"), _part(b"small", "image/png"), _part(b"much larger", "image/jpeg")]
    assert _pick_best_inline_image(parts) == (b"much larger", "image/jpeg")


def test_pick_best_inline_image_without_images():
    assert _pick_best_inline_image([_part(text="I cannot help with that")]) is None


def test_serialize_response_hides_bytes():
    response = SimpleNamespace(
        candidates=[
            SimpleNamespace(finish_reason="STOP", content=SimpleNamespace(parts=[_part(b"12345", "image/png")]))
        ],
        prompt_feedback=None,
    )
    payload = _serialize_response(response)
    assert payload["candidates"][0]["parts"][0] == {
        "kind": "inline_data",
        "mime_type": "image/png",
        "size": 5,
        "text": None,
    }


def test_google_client_requires_credentials():
    with pytest.raises(RuntimeError):
        _build_genai_client(GoogleConfig(), timeout_s=10)
    with pytest.raises(RuntimeError):
        _build_genai_client(GoogleConfig(use_vertex=True, project_id="p"), timeout_s=10)
