# cover_bot/handlers/screens.py
"""Renders the session's current step as Telegram messages."""
from contextlib import suppress
from html import escape

from aiogram import Bot
from aiogram.exceptions import TelegramBadRequest
from aiogram.types import BufferedInputFile, Message

from cover_bot.data.constants import SessionStep
from cover_bot.dto.generation import EncodedImage
from cover_bot.keyboards.inline import error_kb, form_kb, hero_kb, result_kb
from cover_bot.services.lifecycle import LifecycleController

HERO_TEXT = (
    "👋 <b>Welcome to Cover Studio!</b>\n\n"
    "Send me a photo, add a headline or two, pick a style, and I'll turn it into "
    "a magazine cover or a scroll-stopping social post.\n\n"
    "Afterwards you can refine the result by simply telling me what to change."
)

GENERATING_TEXT = "🎨 Generating your design... This usually takes a few seconds."
EDITING_TEXT = "🪄 Refining your design..."

ERROR_SUGGESTIONS = (
    "• Check that your photo is a JPG or PNG.\n"
    "• The AI service might be experiencing high traffic.\n"
    "• Try simplifying your text inputs."
)


def form_text(controller: LifecycleController) -> str:
    form = controller.form
    template = form.template
    lines = [
        f"<b>{escape(template.name)}</b> · {escape(template.description)} ({template.aspect_ratio})",
        "",
        "📷 Photo: " + ("uploaded ✅" if form.image else "<i>not uploaded yet, send me a photo</i>"),
        f"🪄 AI styling: {'ON (clean background)' if form.stylize else 'OFF (keep background)'}",
        "",
    ]
    values = form.snapshot()
    for field in template.inputs:
        value = values.get(field.id, "")
        if value.strip():
            shown = escape(value)
        elif field.placeholder:
            shown = f"<i>e.g. {escape(field.placeholder)}</i>"
        else:
            shown = "<i>empty</i>"
        lines.append(f"<b>{escape(field.label)}:</b> {shown}")
    if form.error:
        lines += ["", f"⚠️ {escape(form.error)}"]
    return "\n".join(lines)


def image_file(image: EncodedImage, name: str = "generated-design") -> BufferedInputFile:
    return BufferedInputFile(image.data, filename=f"{name}.{image.extension}")


async def show_current_step(bot: Bot, chat_id: int, controller: LifecycleController) -> Message:
    """Sends the screen that matches the session's step."""
    state = controller.state
    step = state.step

    if step is SessionStep.HERO:
        return await bot.send_message(chat_id, HERO_TEXT, reply_markup=hero_kb())

    if step is SessionStep.FILL_FORM:
        return await bot.send_message(
            chat_id,
            form_text(controller),
            reply_markup=form_kb(controller.form.template, controller.form.stylize),
        )

    if step is SessionStep.GENERATING:
        return await bot.send_message(chat_id, GENERATING_TEXT)

    if step is SessionStep.SHOW_RESULT and state.current_image is not None:
        return await bot.send_photo(
            chat_id,
            photo=image_file(state.current_image),
            caption=(
                "✨ <b>Your design is ready!</b>\n"
                "Send me a message like <i>\"make it black and white\"</i> to refine it."
            ),
            reply_markup=result_kb(),
        )

    if step is SessionStep.ERROR:
        return await bot.send_message(
            chat_id,
            "😔 <b>Production halted</b>\n\n"
            f"{escape(state.error_message)}\n\n"
            f"{ERROR_SUGGESTIONS}",
            reply_markup=error_kb(),
        )

    raise RuntimeError(f"No screen for step '{step}'.")


async def refresh_form(message: Message, controller: LifecycleController) -> None:
    """Re-renders the editor in place; falls back to a new message."""
    try:
        await message.edit_text(
            form_text(controller),
            reply_markup=form_kb(controller.form.template, controller.form.stylize),
        )
    except TelegramBadRequest as e:
        if "message is not modified" in str(e).lower():
            return
        with suppress(TelegramBadRequest):
            await message.edit_reply_markup(reply_markup=None)
        await show_current_step(message.bot, message.chat.id, controller)
