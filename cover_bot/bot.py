# cover_bot/bot.py
import asyncio

import orjson
from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.client.session.aiohttp import AiohttpSession
from aiogram.fsm.storage.base import BaseStorage
from aiogram.fsm.storage.memory import MemoryStorage

from cover_bot import utils
from cover_bot.data.settings import settings
from cover_bot.handlers import (
    error,
    form_handler,
    menu,
    result_handler,
    retry_handler,
    utility,
)
from cover_bot.middlewares import SessionMiddleware, StructLoggingMiddleware
from cover_bot.services.clients import get_ai_client
from cover_bot.services.generation_service import GenerationService
from cover_bot.services.session_registry import SessionRegistry


def setup_handlers(dp: Dispatcher) -> None:
    dp.include_router(error.router)
    dp.include_router(menu.router)
    dp.include_router(form_handler.router)
    dp.include_router(result_handler.router)
    dp.include_router(retry_handler.router)
    # Catch-all, must stay last.
    dp.include_router(utility.router)


def setup_middlewares(dp: Dispatcher) -> None:
    dp.update.outer_middleware(StructLoggingMiddleware(logger=dp["aiogram_logger"]))
    dp.update.outer_middleware(SessionMiddleware(dp["sessions"]))


def setup_logging(dp: Dispatcher) -> None:
    dp["aiogram_logger"] = utils.logging.setup_logger().bind(type="aiogram")
    dp["business_logger"] = utils.logging.setup_logger().bind(type="business")


def default_sessions() -> SessionRegistry:
    return SessionRegistry(
        service_factory=lambda: GenerationService(get_ai_client()),
        default_template_id=settings.default_template_id,
        max_sessions=settings.max_sessions,
    )


def create_dispatcher(sessions: SessionRegistry, storage: BaseStorage | None = None) -> Dispatcher:
    """Builds a fully wired dispatcher around the given session registry."""
    storage = storage or MemoryStorage()
    dp = Dispatcher(storage=storage)
    dp["storage"] = storage
    dp["sessions"] = sessions
    setup_logging(dp)
    setup_handlers(dp)
    setup_middlewares(dp)
    return dp


async def aiogram_on_startup(dispatcher: Dispatcher, bot: Bot) -> None:
    logger = dispatcher["aiogram_logger"]
    logger.debug("Configuring bot commands")
    await utils.bot_commands.set_bot_commands(bot)
    await utils.bot_commands.set_bot_description(bot)
    logger.info(
        "Bot started",
        image_client=settings.generation.client,
        model=settings.generation.model,
        default_template_id=settings.default_template_id,
    )


async def aiogram_on_shutdown(dispatcher: Dispatcher) -> None:
    dispatcher["aiogram_logger"].debug("Stopping polling")
    await dispatcher.storage.close()
    dispatcher["aiogram_logger"].info("Stopped polling")


def main() -> None:
    if settings.bot.token is None:
        raise RuntimeError("Set BOT__TOKEN to run the bot.")

    session = AiohttpSession(json_loads=orjson.loads)
    bot = Bot(
        token=settings.bot.token.get_secret_value(),
        session=session,
        default=DefaultBotProperties(parse_mode="HTML"),
    )
    dp = create_dispatcher(default_sessions())
    dp.startup.register(aiogram_on_startup)
    dp.shutdown.register(aiogram_on_shutdown)
    asyncio.run(dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types()))


if __name__ == "__main__":
    main()
