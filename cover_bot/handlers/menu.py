# cover_bot/handlers/menu.py
from contextlib import suppress

import structlog
from aiogram import Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command, StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from cover_bot.data.constants import SessionStep
from cover_bot.filters import SessionStepFilter
from cover_bot.keyboards.inline.callbacks import HeroCallback
from cover_bot.services.lifecycle import LifecycleController
from cover_bot.services.session_registry import SessionRegistry

from .screens import show_current_step

router = Router(name="menu-handlers")


@router.message(Command("start", "menu", "cancel"), StateFilter("*"))
async def start_flow(
    msg: Message,
    state: FSMContext,
    sessions: SessionRegistry,
    business_logger: structlog.typing.FilteringBoundLogger,
) -> None:
    """Handles /start, /menu and /cancel: the old session and its images are released."""
    await state.clear()
    sessions.drop(msg.chat.id)
    controller = sessions.get(msg.chat.id)
    business_logger.info("Session reset by command", chat_id=msg.chat.id, command=msg.text)
    await show_current_step(msg.bot, msg.chat.id, controller)


@router.callback_query(HeroCallback.filter(), SessionStepFilter(SessionStep.HERO))
async def get_started(cb: CallbackQuery, controller: LifecycleController) -> None:
    await cb.answer()
    controller.start()
    if cb.message:
        with suppress(TelegramBadRequest):
            await cb.message.edit_reply_markup(reply_markup=None)
        await show_current_step(cb.bot, cb.message.chat.id, controller)
