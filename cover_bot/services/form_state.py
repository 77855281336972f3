# cover_bot/services/form_state.py
import structlog

from cover_bot.data.constants import FieldType
from cover_bot.dto.generation import EncodedImage, FormSnapshot
from cover_bot.dto.template import Template
from cover_bot.exceptions import MissingImage, UnknownField

logger = structlog.get_logger(__name__)


def initial_snapshot(template: Template) -> FormSnapshot:
    """One entry per field: declared default, else first select option, else empty."""
    values: FormSnapshot = {}
    for field in template.inputs:
        if field.default_value:
            values[field.id] = field.default_value
        elif field.type is FieldType.SELECT and field.options:
            values[field.id] = field.options[0]
        else:
            values[field.id] = ""
    return values


class FormStateManager:
    """
    Holds the values the user is editing for the active template, the staged
    photo and the stylize toggle. Knows nothing about submissions.
    """

    def __init__(
        self,
        template: Template,
        prior_snapshot: FormSnapshot | None = None,
        image: EncodedImage | None = None,
        stylize: bool = True,
    ) -> None:
        self.initialize(template, prior_snapshot, image=image, stylize=stylize)

    def initialize(
        self,
        template: Template,
        prior_snapshot: FormSnapshot | None = None,
        *,
        image: EncodedImage | None = None,
        stylize: bool = True,
    ) -> None:
        self._template = template
        if prior_snapshot is not None:
            self._values = dict(prior_snapshot)
        else:
            self._values = initial_snapshot(template)
        self._image = image
        self._stylize = stylize
        self.error: str | None = None

    @property
    def template(self) -> Template:
        return self._template

    @property
    def image(self) -> EncodedImage | None:
        return self._image

    @property
    def stylize(self) -> bool:
        return self._stylize

    def snapshot(self) -> FormSnapshot:
        return dict(self._values)

    def get_field(self, field_id: str) -> str:
        if field_id not in self._values:
            raise UnknownField(field_id, self._template.id)
        return self._values[field_id]

    def set_field(self, field_id: str, value: str) -> None:
        if field_id not in self._template.field_ids:
            raise UnknownField(field_id, self._template.id)
        self._values[field_id] = value

    def set_image(self, image: EncodedImage | None) -> None:
        self._image = image
        self.error = None

    def set_stylize(self, stylize: bool) -> None:
        self._stylize = stylize

    def switch_template(self, template: Template) -> None:
        """Field ids of the old template are dropped; photo and stylize survive."""
        logger.debug("Switching form template", old=self._template.id, new=template.id)
        self._template = template
        self._values = initial_snapshot(template)
        self.error = None

    def validate(self) -> None:
        if self._image is None:
            error = MissingImage()
            self.error = error.message
            raise error
        self.error = None
