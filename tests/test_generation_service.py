import asyncio
from types import SimpleNamespace

import pytest

from cover_bot.exceptions import EditFailed, GenerationFailed
from cover_bot.services.generation_service import GenerationService


class FakeImages:
    def __init__(self, response=None, error=None) -> None:
        self.response = response
        self.error = error
        self.calls = []

    async def generate(self, **kwargs):
        self.calls.append(("generate", kwargs))
        if self.error:
            raise self.error
        return self.response

    async def edit(self, **kwargs):
        self.calls.append(("edit", kwargs))
        if self.error:
            raise self.error
        return self.response


def make_service(**kwargs) -> tuple[GenerationService, FakeImages]:
    images = FakeImages(**kwargs)
    return GenerationService(SimpleNamespace(images=images)), images


def test_generate_returns_encoded_image(photo):
    service, images = make_service(response=SimpleNamespace(image_bytes=b"out", content_type="image/jpeg"))

    result = asyncio.run(service.generate("brief", photo, aspect_ratio="3/4"))

    assert result.data == b"out"
    assert result.mime_type == "image/jpeg"
    assert images.calls == [("generate", {"prompt": "brief", "image": photo, "aspect_ratio": "3:4"})]


def test_generate_defaults_to_png(photo):
    service, _ = make_service(response=SimpleNamespace(image_bytes=b"out", content_type=None))
    result = asyncio.run(service.generate("brief", photo))
    assert result.mime_type == "image/png"


def test_generate_wraps_provider_errors(photo):
    service, _ = make_service(error=TimeoutError("slow"))
    with pytest.raises(GenerationFailed) as exc_info:
        asyncio.run(service.generate("brief", photo))
    assert isinstance(exc_info.value.cause, TimeoutError)
    assert exc_info.value.message == GenerationFailed.default_message


def test_generate_without_image_in_reply_fails(photo):
    service, _ = make_service(response=SimpleNamespace(image_bytes=b""))
    with pytest.raises(GenerationFailed):
        asyncio.run(service.generate("brief", photo))


def test_edit_passes_instruction(photo):
    service, images = make_service(response=SimpleNamespace(image_bytes=b"edited", content_type="image/png"))

    result = asyncio.run(service.edit(photo, "make it black and white"))

    assert result.data == b"edited"
    assert images.calls == [("edit", {"image": photo, "instruction": "make it black and white"})]


def test_edit_wraps_provider_errors(photo):
    service, _ = make_service(error=ValueError("policy"))
    with pytest.raises(EditFailed) as exc_info:
        asyncio.run(service.edit(photo, "add a hat"))
    assert exc_info.value.message == EditFailed.default_message
