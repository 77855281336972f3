# cover_bot/utils/bot_commands.py
from aiogram import Bot
from aiogram.types import BotCommand, BotCommandScopeDefault


async def set_bot_commands(bot: Bot) -> None:
    commands = [
        BotCommand(command="start", description="Create a new cover"),
        BotCommand(command="help", description="How it works"),
        BotCommand(command="cancel", description="Discard the current design"),
    ]
    await bot.set_my_commands(commands, scope=BotCommandScopeDefault())


async def set_bot_description(bot: Bot) -> None:
    await bot.set_my_description(
        description=(
            "Send a photo, add a headline, pick a style and get a magazine cover "
            "or a social post back. Refine it afterwards by describing what to change."
        )
    )
    await bot.set_my_short_description(short_description="Magazine covers and social posts from your photos.")
