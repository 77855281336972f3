# cover_bot/services/lifecycle.py
"""
Session lifecycle: hero -> fill_form -> generating -> show_result | error.

The controller owns the one mutable SessionState of a session. Views read
copies through `state` / `edit_session` and change things only through the
transition methods below or the FormStateManager setters.

Only `submit`, `retry` and `apply_edit` suspend. Each of them tags its call
with a sequence number; when the call resolves, the outcome is applied only if
no newer request (or a restart / screen change) happened in the meantime.
"""
import structlog

from cover_bot.data.constants import SessionStep
from cover_bot.data.templates import default_template, get_template
from cover_bot.dto.generation import (
    GenerationFailure,
    GenerationRequest,
    GenerationSuccess,
)
from cover_bot.dto.session import EditSession, SessionState
from cover_bot.dto.template import Template
from cover_bot.exceptions import (
    EditFailed,
    GenerationFailed,
    InvalidTransition,
    UnknownTemplateCategory,
)

from .form_state import FormStateManager
from .generation_service import GenerationService
from .prompting import IssueSource, compile_brief


class LifecycleController:
    def __init__(
        self,
        generation_service: GenerationService,
        *,
        initial_template: Template | None = None,
        issue_source: IssueSource | None = None,
        log: structlog.typing.FilteringBoundLogger | None = None,
    ) -> None:
        self._service = generation_service
        self._issue_source = issue_source
        self._initial_template = initial_template or default_template()
        self.log = log or structlog.get_logger(__name__)

        self._state = SessionState(selected_template=self._initial_template)
        self._form = FormStateManager(self._initial_template)
        self._edit = EditSession()
        self._sequence = 0
        self._edit_sequence = 0

    # --- read side ---

    @property
    def state(self) -> SessionState:
        return self._state.model_copy(deep=True)

    @property
    def step(self) -> SessionStep:
        return self._state.step

    @property
    def form(self) -> FormStateManager:
        return self._form

    @property
    def edit_session(self) -> EditSession:
        return self._edit.model_copy()

    # --- helpers ---

    def _require(self, operation: str, *steps: SessionStep) -> None:
        if self._state.step not in steps:
            raise InvalidTransition(operation, self._state.step.value)

    def _reset_edit(self) -> None:
        # Bumping the counter orphans any edit still in flight.
        self._edit_sequence += 1
        self._edit = EditSession()

    def _load_form(self, request: GenerationRequest | None) -> None:
        if request is None:
            self._form.initialize(self._state.selected_template)
            return
        self._state.selected_template = request.template
        self._form.initialize(
            request.template,
            request.form_snapshot,
            image=request.source_image,
            stylize=request.stylize,
        )

    # --- top-level transitions ---

    def start(self) -> None:
        self._require("start", SessionStep.HERO)
        self._form.initialize(self._state.selected_template)
        self._state.step = SessionStep.FILL_FORM
        self.log.info("Session started", template_id=self._state.selected_template.id)

    def select_template(self, template_id: str) -> Template:
        self._require("select_template", SessionStep.FILL_FORM)
        template = get_template(template_id)
        self._state.selected_template = template
        self._form.switch_template(template)
        self.log.info("Template selected", template_id=template.id)
        return template

    async def submit(self) -> bool:
        """
        Validates the form and generates a cover from it.
        Raises MissingImage (and stays on the form) when no photo is staged.
        Returns False if a newer request superseded this one before it resolved.
        """
        self._require("submit", SessionStep.FILL_FORM, SessionStep.GENERATING)
        self._form.validate()
        request = GenerationRequest(
            template=self._form.template,
            form_snapshot=self._form.snapshot(),
            source_image=self._form.image,
            stylize=self._form.stylize,
        )
        self._state.last_request = request
        return await self._run(request)

    async def retry(self) -> bool:
        """Sends the retained request again, unchanged."""
        self._require("retry", SessionStep.ERROR)
        request = self._state.last_request
        if request is None:
            self._load_form(None)
            self._state.step = SessionStep.FILL_FORM
            return False
        self.log.info("Retrying last request", template_id=request.template.id)
        return await self._run(request)

    def edit_details(self) -> None:
        self._require("edit_details", SessionStep.SHOW_RESULT)
        self._reset_edit()
        self._load_form(self._state.last_request)
        self._state.step = SessionStep.FILL_FORM

    def back_to_editor(self) -> None:
        self._require("back_to_editor", SessionStep.ERROR)
        self._load_form(self._state.last_request)
        self._state.error_message = ""
        self._state.step = SessionStep.FILL_FORM

    def start_over(self) -> None:
        self._require("start_over", SessionStep.SHOW_RESULT)
        self._reset_edit()
        self._state.last_request = None
        self._state.result = None
        self._state.current_image = None
        self._state.error_message = ""
        self._load_form(None)
        self._state.step = SessionStep.FILL_FORM
        self.log.info("Session started over")

    def restart(self) -> None:
        """Back to the hero screen from anywhere; anything in flight is ignored."""
        self._sequence += 1
        self._reset_edit()
        self._state = SessionState(selected_template=self._initial_template)
        self._form.initialize(self._initial_template)
        self.log.info("Session restarted")

    async def _run(self, request: GenerationRequest) -> bool:
        self._sequence += 1
        sequence = self._sequence
        log = self.log.bind(sequence=sequence, template_id=request.template.id)

        self._reset_edit()
        self._state.step = SessionStep.GENERATING
        self._state.result = None
        self._state.current_image = None
        self._state.error_message = ""

        try:
            brief = compile_brief(
                request.template,
                request.form_snapshot,
                request.stylize,
                issue_source=self._issue_source,
            )
            image = await self._service.generate(
                brief, request.source_image, aspect_ratio=request.template.aspect_ratio
            )
        except UnknownTemplateCategory as e:
            log.error("Template cannot be compiled", error=e.message)
            return self._resolve_failure(sequence, GenerationFailed.default_message, log)
        except GenerationFailed as e:
            return self._resolve_failure(sequence, e.message, log)

        if sequence != self._sequence:
            log.info("Discarding stale generation result", latest=self._sequence)
            return False

        self._state.result = GenerationSuccess(image=image)
        self._state.current_image = image
        self._state.step = SessionStep.SHOW_RESULT
        log.info("Generation finished")
        return True

    def _resolve_failure(self, sequence: int, message: str, log: structlog.typing.FilteringBoundLogger) -> bool:
        if sequence != self._sequence:
            log.info("Discarding stale generation failure", latest=self._sequence)
            return False
        self._state.result = GenerationFailure(message=message)
        self._state.error_message = f"Failed to generate cover. {message} Please try again."
        self._state.step = SessionStep.ERROR
        log.warning("Generation failed", error=message)
        return True

    # --- edit sub-flow (inside show_result) ---

    def set_edit_instruction(self, instruction: str) -> None:
        self._require("set_edit_instruction", SessionStep.SHOW_RESULT)
        self._edit.instruction = instruction

    async def apply_edit(self, instruction: str | None = None) -> bool:
        """
        Applies an instruction to the image currently on screen.
        Returns True when the displayed image was replaced. On failure the
        displayed image stays and `edit_session.error` carries the message.
        """
        self._require("apply_edit", SessionStep.SHOW_RESULT)
        if self._edit.pending:
            raise InvalidTransition("apply_edit", "edit pending")
        if instruction is not None:
            self._edit.instruction = instruction
        text = self._edit.instruction.strip()
        if not text or self._state.current_image is None:
            return False

        self._edit_sequence += 1
        sequence = self._edit_sequence
        log = self.log.bind(edit_sequence=sequence)
        self._edit.pending = True
        self._edit.error = None

        try:
            image = await self._service.edit(self._state.current_image, text)
        except EditFailed as e:
            if sequence != self._edit_sequence:
                log.info("Discarding stale edit failure")
                return False
            self._edit.error = e.message
            log.warning("Edit failed", error=e.message)
            return False
        finally:
            # Runs on cancellation too.
            if sequence == self._edit_sequence:
                self._edit.pending = False

        if sequence != self._edit_sequence:
            log.info("Discarding stale edit result")
            return False

        self._state.current_image = image
        self._state.result = GenerationSuccess(image=image)
        self._edit = EditSession()
        log.info("Edit applied")
        return True
