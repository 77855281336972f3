# cover_bot/exceptions.py
"""Error taxonomy shared by the core services and the bot handlers."""


class CoverBotError(Exception):
    """Base class for every error the bot knows how to render to a user."""

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingImage(CoverBotError):
    default_message = "Please upload an image to continue."


class UnknownField(CoverBotError):
    def __init__(self, field_id: str, template_id: str) -> None:
        self.field_id = field_id
        self.template_id = template_id
        super().__init__(f"Template '{template_id}' has no field '{field_id}'.")


class TemplateNotFound(CoverBotError):
    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Unknown template '{template_id}'.")


class UnknownTemplateCategory(CoverBotError):
    def __init__(self, category: object = None) -> None:
        self.category = category
        super().__init__(f"No brief strategy is registered for category '{category}'.")


class UnsupportedImageFormat(CoverBotError):
    default_message = "Please send a PNG or JPG image."


class InvalidTransition(CoverBotError):
    def __init__(self, operation: str, step: object) -> None:
        self.operation = operation
        self.step = step
        super().__init__(f"'{operation}' is not allowed while the session is in step '{step}'.")


class GenerationFailed(CoverBotError):
    """The provider could not produce a design (any cause, policy or infrastructure)."""

    default_message = (
        "The AI model failed to generate the design. "
        "This could be due to a policy violation or an internal error."
    )

    def __init__(self, cause: BaseException | None = None, message: str | None = None) -> None:
        self.cause = cause
        super().__init__(message)


class EditFailed(CoverBotError):
    default_message = (
        "The AI model failed to edit the image. "
        "This could be due to a policy violation or an internal error."
    )

    def __init__(self, cause: BaseException | None = None, message: str | None = None) -> None:
        self.cause = cause
        super().__init__(message)
