# cover_bot/services/session_registry.py
from collections import OrderedDict
from collections.abc import Callable

import structlog

from cover_bot.data.templates import get_template

from .generation_service import GenerationService
from .lifecycle import LifecycleController
from .prompting import IssueSource

logger = structlog.get_logger(__name__)

DEFAULT_MAX_SESSIONS = 1000


class SessionRegistry:
    """
    In-memory sessions, one per chat. Nothing is persisted: a restart of the
    process forgets every session.

    Sessions hold image bytes, so the registry keeps at most `max_sessions`
    of them and evicts the least recently used chat first.
    """

    def __init__(
        self,
        service_factory: Callable[[], GenerationService],
        default_template_id: str,
        issue_source: IssueSource | None = None,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self._service_factory = service_factory
        self._default_template = get_template(default_template_id)
        self._issue_source = issue_source
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[int, LifecycleController] = OrderedDict()
        self._service: GenerationService | None = None

    def _get_service(self) -> GenerationService:
        # Built lazily so a bot without provider credentials still starts.
        if self._service is None:
            self._service = self._service_factory()
        return self._service

    def get(self, chat_id: int) -> LifecycleController:
        controller = self._sessions.get(chat_id)
        if controller is not None:
            self._sessions.move_to_end(chat_id)
            return controller

        logger.debug("Creating session", chat_id=chat_id)
        controller = LifecycleController(
            self._get_service(),
            initial_template=self._default_template,
            issue_source=self._issue_source,
            log=logger.bind(chat_id=chat_id),
        )
        self._sessions[chat_id] = controller
        while len(self._sessions) > self._max_sessions:
            evicted_chat_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted idle session", chat_id=evicted_chat_id, max_sessions=self._max_sessions)
        return controller

    def drop(self, chat_id: int) -> None:
        """Forgets the chat's session; the next `get` starts a fresh one."""
        if self._sessions.pop(chat_id, None) is not None:
            logger.debug("Dropped session", chat_id=chat_id)

    def __contains__(self, chat_id: int) -> bool:
        return chat_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
