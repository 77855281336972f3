# cover_bot/keyboards/inline/result.py
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from .callbacks import ErrorActionCallback, ResultActionCallback


def result_kb() -> InlineKeyboardMarkup:
    """Actions under a generated design."""
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(
                    text="⬇️ Download",
                    callback_data=ResultActionCallback(action="download").pack(),
                )
            ],
            [
                InlineKeyboardButton(
                    text="✏️ Edit details",
                    callback_data=ResultActionCallback(action="edit_details").pack(),
                ),
                InlineKeyboardButton(
                    text="🔄 Start new design",
                    callback_data=ResultActionCallback(action="start_over").pack(),
                ),
            ],
        ]
    )


def error_kb() -> InlineKeyboardMarkup:
    """A failed generation always offers both ways out."""
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(
                    text="🔁 Try again",
                    callback_data=ErrorActionCallback(action="retry").pack(),
                )
            ],
            [
                InlineKeyboardButton(
                    text="⬅️ Return to editor",
                    callback_data=ErrorActionCallback(action="back").pack(),
                )
            ],
        ]
    )
