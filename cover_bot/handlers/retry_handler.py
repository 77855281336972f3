# cover_bot/handlers/retry_handler.py
from contextlib import suppress

from aiogram import F, Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.types import CallbackQuery

from cover_bot.data.constants import SessionStep
from cover_bot.filters import SessionStepFilter
from cover_bot.keyboards.inline.callbacks import ErrorActionCallback
from cover_bot.services.lifecycle import LifecycleController

from .generation_flow import run_generation
from .screens import show_current_step

router = Router(name="retry-handlers")
router.callback_query.filter(SessionStepFilter(SessionStep.ERROR))


@router.callback_query(ErrorActionCallback.filter(F.action == "retry"))
async def retry_generation(cb: CallbackQuery, controller: LifecycleController) -> None:
    await cb.answer()
    if not cb.message:
        return
    with suppress(TelegramBadRequest):
        await cb.message.edit_reply_markup(reply_markup=None)

    if controller.state.last_request is None:
        # Nothing to resend; retry() falls back to the editor.
        await controller.retry()
        await show_current_step(cb.bot, cb.message.chat.id, controller)
        return
    await run_generation(cb.bot, cb.message.chat.id, controller, controller.retry)


@router.callback_query(ErrorActionCallback.filter(F.action == "back"))
async def back_to_editor(cb: CallbackQuery, controller: LifecycleController) -> None:
    await cb.answer()
    controller.back_to_editor()
    if cb.message:
        with suppress(TelegramBadRequest):
            await cb.message.edit_reply_markup(reply_markup=None)
        await show_current_step(cb.bot, cb.message.chat.id, controller)
