# cover_bot/middlewares/session.py
from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.types import Chat, TelegramObject

from cover_bot.services.session_registry import SessionRegistry


class SessionMiddleware(BaseMiddleware):
    """Injects the chat's LifecycleController into handler data as `controller`."""

    def __init__(self, registry: SessionRegistry) -> None:
        self.registry = registry

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        chat: Chat | None = data.get("event_chat")
        if chat is not None:
            data["controller"] = self.registry.get(chat.id)
        return await handler(event, data)
