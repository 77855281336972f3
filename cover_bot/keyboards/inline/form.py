# cover_bot/keyboards/inline/form.py
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from cover_bot.data.constants import TemplateCategory
from cover_bot.data.templates import list_templates
from cover_bot.dto.template import Template, TemplateField

from .callbacks import FieldCallback, FieldOptionCallback, FormActionCallback, TemplateCallback

_CATEGORY_ICONS = {
    TemplateCategory.MAGAZINE: "📰",
    TemplateCategory.SOCIAL: "📱",
    TemplateCategory.PRINT: "🖨️",
}


def form_kb(template: Template, stylize: bool) -> InlineKeyboardMarkup:
    """
    Creates the editor keyboard: template switcher, one button per field,
    the stylize toggle and the generate button.
    """
    buttons = [
        [
            InlineKeyboardButton(
                text=f"🎨 Template: {template.name}",
                callback_data=FormActionCallback(action="templates").pack(),
            )
        ]
    ]
    for field in template.inputs:
        buttons.append(
            [
                InlineKeyboardButton(
                    text=f"✏️ {field.label}",
                    callback_data=FieldCallback(field_id=field.id).pack(),
                )
            ]
        )
    buttons.append(
        [
            InlineKeyboardButton(
                text=f"🪄 AI styling: {'ON' if stylize else 'OFF'}",
                callback_data=FormActionCallback(action="stylize").pack(),
            )
        ]
    )
    buttons.append(
        [
            InlineKeyboardButton(
                text="🚀 Generate",
                callback_data=FormActionCallback(action="generate").pack(),
            )
        ]
    )
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def template_selection_kb(active_template_id: str) -> InlineKeyboardMarkup:
    """Dynamically generates buttons from the template registry."""
    buttons = []
    for template in list_templates():
        marker = "✅ " if template.id == active_template_id else ""
        icon = _CATEGORY_ICONS.get(template.category, "")
        buttons.append(
            [
                InlineKeyboardButton(
                    text=f"{marker}{icon} {template.name} ({template.aspect_ratio})",
                    callback_data=TemplateCallback(template_id=template.id).pack(),
                )
            ]
        )
    buttons.append(
        [
            InlineKeyboardButton(
                text="⬅️ Back",
                callback_data=FormActionCallback(action="back").pack(),
            )
        ]
    )
    return InlineKeyboardMarkup(inline_keyboard=buttons)


def field_options_kb(field: TemplateField, current: str) -> InlineKeyboardMarkup:
    buttons = [
        [
            InlineKeyboardButton(
                text=f"{'✅ ' if option == current else ''}{option}",
                callback_data=FieldOptionCallback(field_id=field.id, index=index).pack(),
            )
        ]
        for index, option in enumerate(field.options or ())
    ]
    buttons.append(
        [
            InlineKeyboardButton(
                text="⬅️ Back",
                callback_data=FormActionCallback(action="back").pack(),
            )
        ]
    )
    return InlineKeyboardMarkup(inline_keyboard=buttons)
