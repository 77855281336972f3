# cover_bot/services/prompting/base_strategy.py
import re
from abc import ABC, abstractmethod

from cover_bot.dto.generation import FormSnapshot
from cover_bot.dto.template import Template

from .issue import IssueStamp
from .styles.background import BACKGROUND_KEEP, BACKGROUND_REPLACE

_PLACEHOLDER_RE = re.compile(r"\{\{([A-Z_]+)\}\}")


class BriefStrategy(ABC):
    """
    Abstract base class for a creative-brief strategy.
    One strategy per template family; the heavy style text is fixed per strategy.
    """

    @abstractmethod
    def build(
        self,
        template: Template,
        snapshot: FormSnapshot,
        stylize: bool,
        issue: IssueStamp,
    ) -> str:
        raise NotImplementedError


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def resolve_label(template: Template, field_id: str) -> str:
    field = template.get_field(field_id)
    return field.label if field else field_id


def project_fields(template: Template, snapshot: FormSnapshot) -> list[str]:
    """`- <label>: "<value>"` for every field the user actually filled in."""
    return [
        f'- {resolve_label(template, field_id)}: "{value}"'
        for field_id, value in snapshot.items()
        if not is_blank(value)
    ]


def background_directive(stylize: bool) -> str:
    return BACKGROUND_REPLACE if stylize else BACKGROUND_KEEP


def orientation(aspect_ratio: str) -> str:
    width, height = (int(part) for part in aspect_ratio.split("/"))
    if width < height:
        return "Vertical"
    if width > height:
        return "Horizontal"
    return "Square"


def fill(text: str, **tokens: str) -> str:
    """
    Substitutes {{TOKEN}} placeholders in one pass, so user text that happens
    to contain a placeholder is never expanded.
    """
    return _PLACEHOLDER_RE.sub(lambda match: tokens[match.group(1)], text)
