# File: cover_bot/dto/template.py
import re

from pydantic import BaseModel, ConfigDict, model_validator

from cover_bot.data.constants import FieldType, TemplateCategory

_ASPECT_RATIO_RE = re.compile(r"^[1-9]\d*/[1-9]\d*$")


class TemplateField(BaseModel):
    """One typed input of a template. Its id doubles as form key and label lookup key."""
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    type: FieldType
    placeholder: str | None = None
    default_value: str | None = None
    options: tuple[str, ...] | None = None
    help_text: str | None = None

    @model_validator(mode="after")
    def _check_options(self) -> "TemplateField":
        if self.type is FieldType.SELECT and not self.options:
            raise ValueError(f"Select field '{self.id}' must declare options.")
        if self.type is not FieldType.SELECT and self.options is not None:
            raise ValueError(f"Only select fields may declare options (field '{self.id}').")
        return self


class Template(BaseModel):
    """
    A declarative visual style: category, target aspect ratio and the
    ordered list of fields the user can fill in.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    category: TemplateCategory
    name: str
    description: str
    aspect_ratio: str
    inputs: tuple[TemplateField, ...]

    @model_validator(mode="after")
    def _check_schema(self) -> "Template":
        if not _ASPECT_RATIO_RE.match(self.aspect_ratio):
            raise ValueError(f"Aspect ratio must look like '<w>/<h>', got '{self.aspect_ratio}'.")
        ids = [field.id for field in self.inputs]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Template '{self.id}' declares duplicate field ids.")
        return self

    @property
    def field_ids(self) -> tuple[str, ...]:
        return tuple(field.id for field in self.inputs)

    def get_field(self, field_id: str) -> TemplateField | None:
        for field in self.inputs:
            if field.id == field_id:
                return field
        return None
