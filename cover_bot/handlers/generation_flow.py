# cover_bot/handlers/generation_flow.py
from collections.abc import Awaitable, Callable
from contextlib import suppress

import structlog
from aiogram import Bot
from aiogram.exceptions import TelegramBadRequest

from cover_bot.services.lifecycle import LifecycleController

from .screens import GENERATING_TEXT, show_current_step

logger = structlog.get_logger(__name__)


async def run_generation(
    bot: Bot,
    chat_id: int,
    controller: LifecycleController,
    operation: Callable[[], Awaitable[bool]],
) -> None:
    """
    Shows a status message while `operation` (submit or retry) runs, then
    renders the outcome. A superseded call renders nothing: the newer call
    owns the screen.
    """
    status_msg = await bot.send_message(chat_id, GENERATING_TEXT)
    try:
        applied = await operation()
    finally:
        with suppress(TelegramBadRequest):
            await status_msg.delete()

    if not applied:
        logger.info("Generation outcome superseded, nothing to render", chat_id=chat_id)
        return
    await show_current_step(bot, chat_id, controller)
