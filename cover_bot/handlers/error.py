# cover_bot/handlers/error.py
from contextlib import suppress

import structlog
from aiogram import Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.types import ErrorEvent, Update

from cover_bot.exceptions import CoverBotError, InvalidTransition

logger = structlog.get_logger(__name__)

router = Router(name="error-handler")

GENERIC_ERROR_TEXT = (
    "😔 Oops! Something went wrong on our end.\n\n"
    "Please try again in a few moments, or send /start to begin from scratch."
)


@router.errors()
async def global_error_handler(update: ErrorEvent) -> bool:
    """Handle all uncaught exceptions."""
    exception = update.exception
    actual_update: Update = update.update

    # Immediately acknowledge the callback to prevent timeout errors for the user
    if actual_update.callback_query:
        with suppress(TelegramBadRequest):
            await actual_update.callback_query.answer()

    if isinstance(exception, TelegramBadRequest):
        if "message to delete not found" in str(exception).lower():
            logger.warning("Tried to delete a message that was already deleted.")
            return True
        if "message is not modified" in str(exception).lower():
            logger.warning("Tried to edit a message with the same content.")
            return True

    target_message = actual_update.callback_query.message if actual_update.callback_query else actual_update.message

    if isinstance(exception, InvalidTransition):
        # A button from an older screen was pressed.
        logger.info("Ignored out-of-date action", error=exception.message)
        if target_message:
            with suppress(TelegramBadRequest):
                await target_message.answer("This button is no longer active. Send /start to begin again.")
        return True

    if isinstance(exception, CoverBotError):
        logger.warning("Domain error reached the dispatcher", error=exception.message)
        if target_message:
            with suppress(TelegramBadRequest):
                await target_message.answer(exception.message)
        return True

    update_details = f'{{"update_id": {actual_update.update_id}}}'
    try:
        update_details = actual_update.model_dump_json(exclude_none=True)
    except Exception as e:
        logger.warning("Could not serialize update object for logging.", error=str(e), update_id=actual_update.update_id)

    logger.error("An unhandled exception occurred", exc_info=exception, update=update_details)

    if target_message:
        with suppress(TelegramBadRequest):
            await target_message.answer(GENERIC_ERROR_TEXT)

    return True
