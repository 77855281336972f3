# cover_bot/services/prompting/editorial_strategy.py
from cover_bot.dto.generation import FormSnapshot
from cover_bot.dto.template import Template

from .base_strategy import (
    BriefStrategy,
    background_directive,
    fill,
    is_blank,
    orientation,
    project_fields,
)
from .issue import IssueStamp
from .styles.editorial import (
    COVER_LINES_FROM_USER,
    COVER_LINES_GENERATED,
    PROMPT_EDITORIAL,
    STOCK_HEADLINES,
)

MASTHEAD_FIELD_ID = "masthead"
MASTHEAD_FALLBACK = "MAGAZINE"


def resolve_masthead(template: Template, snapshot: FormSnapshot) -> str:
    """User value, then the template's declared default, then a generic title."""
    value = snapshot.get(MASTHEAD_FIELD_ID)
    if not is_blank(value):
        return value
    field = template.get_field(MASTHEAD_FIELD_ID)
    if field is not None and not is_blank(field.default_value):
        return field.default_value
    return MASTHEAD_FALLBACK


class EditorialBriefStrategy(BriefStrategy):
    """Magazine and print covers: masthead, cover lines and newsstand details."""

    def build(
        self,
        template: Template,
        snapshot: FormSnapshot,
        stylize: bool,
        issue: IssueStamp,
    ) -> str:
        field_lines = project_fields(template, snapshot)
        if field_lines:
            cover_lines = fill(COVER_LINES_FROM_USER, FIELD_LINES="\n".join(field_lines))
        else:
            # Never leave the text content under-specified.
            cover_lines = fill(
                COVER_LINES_GENERATED,
                STOCK_HEADLINES=", ".join(f'"{headline}"' for headline in STOCK_HEADLINES),
            )

        return fill(
            PROMPT_EDITORIAL,
            TEMPLATE_NAME=template.name,
            TEMPLATE_DESCRIPTION=template.description,
            ASPECT_RATIO=template.aspect_ratio,
            ORIENTATION=orientation(template.aspect_ratio),
            BACKGROUND_DIRECTIVE=background_directive(stylize),
            MASTHEAD=resolve_masthead(template, snapshot),
            COVER_LINES=cover_lines,
            ISSUE_DATE=issue.month_year,
            ISSUE_NUMBER=issue.issue_label,
        )
