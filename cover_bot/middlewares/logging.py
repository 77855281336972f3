# cover_bot/middlewares/logging.py
import time
from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from aiogram import BaseMiddleware
from aiogram.types import TelegramObject, Update


class StructLoggingMiddleware(BaseMiddleware):
    """Logs every update with its type, chat and handling time."""

    def __init__(self, logger: structlog.typing.FilteringBoundLogger) -> None:
        self.logger = logger

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        if not isinstance(event, Update):
            return await handler(event, data)

        chat = data.get("event_chat")
        log = self.logger.bind(
            update_id=event.update_id,
            update_type=event.event_type,
            chat_id=chat.id if chat else None,
        )
        log.debug("Received update")
        start_time = time.monotonic()
        result = await handler(event, data)
        log.info("Processed update", process_time_ms=int((time.monotonic() - start_time) * 1000))
        return result
