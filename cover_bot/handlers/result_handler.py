# cover_bot/handlers/result_handler.py
from contextlib import suppress
from html import escape

import structlog
from aiogram import F, Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import StateFilter
from aiogram.types import CallbackQuery, Message

from cover_bot.data.constants import SessionStep
from cover_bot.exceptions import InvalidTransition
from cover_bot.filters import SessionStepFilter
from cover_bot.keyboards.inline import result_kb
from cover_bot.keyboards.inline.callbacks import ResultActionCallback
from cover_bot.services.lifecycle import LifecycleController

from .screens import EDITING_TEXT, image_file, show_current_step

router = Router(name="result-handlers")
router.message.filter(SessionStepFilter(SessionStep.SHOW_RESULT))
router.callback_query.filter(SessionStepFilter(SessionStep.SHOW_RESULT))


@router.callback_query(ResultActionCallback.filter(F.action == "download"))
async def download_result(cb: CallbackQuery, controller: LifecycleController) -> None:
    image = controller.state.current_image
    if image is None or not cb.message:
        await cb.answer("Nothing to download yet.")
        return
    await cb.answer()
    await cb.bot.send_document(cb.message.chat.id, document=image_file(image))


@router.callback_query(ResultActionCallback.filter(F.action == "edit_details"))
async def edit_details(cb: CallbackQuery, controller: LifecycleController) -> None:
    await cb.answer()
    controller.edit_details()
    if cb.message:
        with suppress(TelegramBadRequest):
            await cb.message.edit_reply_markup(reply_markup=None)
        await show_current_step(cb.bot, cb.message.chat.id, controller)


@router.callback_query(ResultActionCallback.filter(F.action == "start_over"))
async def start_over(
    cb: CallbackQuery,
    controller: LifecycleController,
    business_logger: structlog.typing.FilteringBoundLogger,
) -> None:
    await cb.answer()
    controller.start_over()
    if cb.message:
        business_logger.info("Design discarded", chat_id=cb.message.chat.id)
        with suppress(TelegramBadRequest):
            await cb.message.edit_reply_markup(reply_markup=None)
        await show_current_step(cb.bot, cb.message.chat.id, controller)


@router.message(StateFilter(None), F.text, ~F.text.startswith("/"))
async def apply_magic_edit(
    message: Message,
    controller: LifecycleController,
    business_logger: structlog.typing.FilteringBoundLogger,
) -> None:
    """Any plain text on the result screen is a Magic Edit instruction."""
    instruction = message.text.strip()
    if not instruction:
        return
    if controller.edit_session.pending:
        await message.answer("⏳ Still working on your previous change, please wait.")
        return

    status_msg = await message.answer(EDITING_TEXT)
    try:
        applied = await controller.apply_edit(instruction)
    except InvalidTransition:
        # The session moved on while we were waiting.
        applied = False
    finally:
        with suppress(TelegramBadRequest):
            await status_msg.delete()

    if applied:
        business_logger.info("Magic edit applied", chat_id=message.chat.id, instruction=instruction)
        await message.answer_photo(
            photo=image_file(controller.state.current_image),
            caption="✨ Updated! Send another instruction to keep refining.",
            reply_markup=result_kb(),
        )
        return

    error = controller.edit_session.error
    if error:
        await message.answer(f"⚠️ {escape(error)}")
