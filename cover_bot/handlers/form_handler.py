# cover_bot/handlers/form_handler.py
import re
from contextlib import suppress
from html import escape

import structlog
from aiogram import F, Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from cover_bot.data.constants import FieldType, SessionStep
from cover_bot.exceptions import MissingImage, UnsupportedImageFormat
from cover_bot.filters import SessionStepFilter
from cover_bot.keyboards.inline import field_options_kb, template_selection_kb
from cover_bot.keyboards.inline.callbacks import (
    FieldCallback,
    FieldOptionCallback,
    FormActionCallback,
    TemplateCallback,
)
from cover_bot.services.lifecycle import LifecycleController
from cover_bot.services.photo_processing import download_file, encode_photo
from cover_bot.states.user import CoverForm

from .generation_flow import run_generation
from .screens import refresh_form, show_current_step

router = Router(name="form-handlers")
router.message.filter(SessionStepFilter(SessionStep.FILL_FORM))
router.callback_query.filter(SessionStepFilter(SessionStep.FILL_FORM))

CLEAR_VALUE = "-"
_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


@router.callback_query(FormActionCallback.filter(F.action == "templates"))
async def open_template_list(cb: CallbackQuery, controller: LifecycleController) -> None:
    await cb.answer()
    if cb.message:
        await cb.message.edit_reply_markup(
            reply_markup=template_selection_kb(controller.form.template.id)
        )


@router.callback_query(FormActionCallback.filter(F.action == "back"))
async def back_to_form(cb: CallbackQuery, controller: LifecycleController) -> None:
    await cb.answer()
    if cb.message:
        await refresh_form(cb.message, controller)


@router.callback_query(TemplateCallback.filter())
async def process_template_selection(
    cb: CallbackQuery,
    callback_data: TemplateCallback,
    controller: LifecycleController,
) -> None:
    template = controller.select_template(callback_data.template_id)
    await cb.answer(f"{template.name} selected")
    if cb.message:
        await refresh_form(cb.message, controller)


@router.callback_query(FormActionCallback.filter(F.action == "stylize"))
async def toggle_stylize(cb: CallbackQuery, controller: LifecycleController) -> None:
    controller.form.set_stylize(not controller.form.stylize)
    await cb.answer("AI styling on" if controller.form.stylize else "AI styling off")
    if cb.message:
        await refresh_form(cb.message, controller)


@router.callback_query(FieldCallback.filter())
async def process_field_selection(
    cb: CallbackQuery,
    callback_data: FieldCallback,
    state: FSMContext,
    controller: LifecycleController,
) -> None:
    await cb.answer()
    field = controller.form.template.get_field(callback_data.field_id)
    if field is None or not cb.message:
        return

    if field.type is FieldType.SELECT:
        await cb.message.edit_reply_markup(
            reply_markup=field_options_kb(field, controller.form.get_field(field.id))
        )
        return

    await state.set_state(CoverForm.entering_field)
    await state.update_data(field_id=field.id)
    hint = f" (e.g. <i>{escape(field.placeholder)}</i>)" if field.placeholder else ""
    if field.type is FieldType.COLOR:
        hint = " as a hex color like <i>#0077B5</i>"
    await cb.message.answer(
        f"Send me the <b>{escape(field.label)}</b>{hint}.\n"
        f"Send <code>{CLEAR_VALUE}</code> to leave it empty."
    )


@router.callback_query(FieldOptionCallback.filter())
async def process_field_option(
    cb: CallbackQuery,
    callback_data: FieldOptionCallback,
    controller: LifecycleController,
) -> None:
    field = controller.form.template.get_field(callback_data.field_id)
    if field is None or not field.options or not 0 <= callback_data.index < len(field.options):
        await cb.answer("This option is no longer available.")
        return
    controller.form.set_field(field.id, field.options[callback_data.index])
    await cb.answer()
    if cb.message:
        await refresh_form(cb.message, controller)


@router.message(StateFilter(CoverForm.entering_field), F.text, ~F.text.startswith("/"))
async def process_field_value(
    message: Message,
    state: FSMContext,
    controller: LifecycleController,
) -> None:
    data = await state.get_data()
    field = controller.form.template.get_field(data.get("field_id", ""))
    if field is None:
        # Template switched while we were waiting for the value.
        await state.clear()
        await show_current_step(message.bot, message.chat.id, controller)
        return

    value = message.text.strip()
    if value == CLEAR_VALUE:
        value = ""
    elif field.type is FieldType.COLOR and not _COLOR_RE.match(value):
        await message.answer("Please send a hex color like <i>#0077B5</i>.")
        return
    elif field.type is FieldType.NUMBER and not re.fullmatch(r"[\d.,\s+%kKmM-]+", value):
        await message.answer("Please send a number, for example <i>10,000</i>.")
        return

    controller.form.set_field(field.id, value)
    await state.clear()
    await show_current_step(message.bot, message.chat.id, controller)


@router.message(F.photo | F.document)
async def process_photo(
    message: Message,
    controller: LifecycleController,
    business_logger: structlog.typing.FilteringBoundLogger,
) -> None:
    if message.photo:
        file_id = max(message.photo, key=lambda p: p.width * p.height).file_id
    else:
        file_id = message.document.file_id

    data = await download_file(message.bot, file_id)
    if not data:
        await message.answer("I couldn't download this file. Please try sending it again.")
        return

    try:
        image = encode_photo(data)
    except UnsupportedImageFormat as e:
        await message.answer(e.message)
        return

    controller.form.set_image(image)
    business_logger.info("Photo staged", chat_id=message.chat.id, mime_type=image.mime_type, size=len(image.data))
    await show_current_step(message.bot, message.chat.id, controller)


@router.callback_query(FormActionCallback.filter(F.action == "generate"))
async def process_generate(cb: CallbackQuery, state: FSMContext, controller: LifecycleController) -> None:
    await cb.answer()
    if not cb.message:
        return
    try:
        controller.form.validate()
    except MissingImage:
        await refresh_form(cb.message, controller)
        return

    await state.clear()
    with suppress(TelegramBadRequest):
        await cb.message.edit_reply_markup(reply_markup=None)
    await run_generation(cb.bot, cb.message.chat.id, controller, controller.submit)
