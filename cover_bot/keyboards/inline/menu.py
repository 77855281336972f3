# cover_bot/keyboards/inline/menu.py
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from .callbacks import HeroCallback


def hero_kb() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(
                    text="✨ Get started",
                    callback_data=HeroCallback(action="start").pack(),
                )
            ]
        ]
    )
