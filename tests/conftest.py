import asyncio
import io
from datetime import date

import pytest
from PIL import Image

from cover_bot.dto.generation import EncodedImage
from cover_bot.exceptions import EditFailed, GenerationFailed
from cover_bot.services.prompting import IssueSource, IssueStamp

FIXED_STAMP = IssueStamp(month_year="MAY 2024", issue_number=7)


def make_image_bytes(fmt: str = "PNG", size: tuple[int, int] = (12, 16), color: str = "red") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=fmt)
    return buffer.getvalue()


def make_image(color: str = "red") -> EncodedImage:
    return EncodedImage(mime_type="image/png", data=make_image_bytes(color=color))


class FixedIssueSource(IssueSource):
    """Always stamps the same issue, so briefs compare equal."""

    def __init__(self) -> None:
        super().__init__(clock=lambda: date(2024, 5, 17))

    def stamp(self) -> IssueStamp:
        return FIXED_STAMP


class ScriptedService:
    """
    Stands in for GenerationService. Each call pops the next scripted outcome:
    an EncodedImage is returned, an exception is raised.
    """

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.generate_calls: list[dict] = []
        self.edit_calls: list[dict] = []

    def _next(self):
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def generate(self, brief, image, *, aspect_ratio=None):
        self.generate_calls.append({"brief": brief, "image": image, "aspect_ratio": aspect_ratio})
        return self._next()

    async def edit(self, image, instruction):
        self.edit_calls.append({"image": image, "instruction": instruction})
        return self._next()


class GatedService:
    """
    Every call suspends until the test resolves it by index, which lets a test
    decide the order in which overlapping calls finish.
    """

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self._gates: list[asyncio.Future] = []

    async def _wait(self, call: tuple):
        self.calls.append(call)
        gate = asyncio.get_running_loop().create_future()
        self._gates.append(gate)
        return await gate

    async def generate(self, brief, image, *, aspect_ratio=None):
        return await self._wait(("generate", brief, image, aspect_ratio))

    async def edit(self, image, instruction):
        return await self._wait(("edit", image, instruction))

    def resolve(self, index: int, image: EncodedImage) -> None:
        self._gates[index].set_result(image)

    def fail(self, index: int, error: Exception) -> None:
        self._gates[index].set_exception(error)


@pytest.fixture
def issue_source() -> FixedIssueSource:
    return FixedIssueSource()


@pytest.fixture
def photo() -> EncodedImage:
    return make_image("red")


@pytest.fixture
def generated() -> EncodedImage:
    return make_image("blue")


@pytest.fixture
def generation_failed() -> GenerationFailed:
    return GenerationFailed(cause=RuntimeError("provider exploded"))


@pytest.fixture
def edit_failed() -> EditFailed:
    return EditFailed(cause=RuntimeError("provider exploded"))
