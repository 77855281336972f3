# cover_bot/filters/session_step.py
from aiogram.filters import BaseFilter
from aiogram.types import TelegramObject

from cover_bot.data.constants import SessionStep
from cover_bot.services.lifecycle import LifecycleController


class SessionStepFilter(BaseFilter):
    """Passes only while the chat's session is on one of the given screens."""

    def __init__(self, *steps: SessionStep) -> None:
        self.steps = steps

    async def __call__(
        self,
        event: TelegramObject,
        controller: LifecycleController | None = None,
    ) -> bool:
        return controller is not None and controller.step in self.steps
