# cover_bot/services/prompting/social_strategy.py
from cover_bot.dto.generation import FormSnapshot
from cover_bot.dto.template import Template

from .base_strategy import BriefStrategy, background_directive, fill, orientation, resolve_label
from .issue import IssueStamp
from .styles.social import PROMPT_SOCIAL


class SocialBriefStrategy(BriefStrategy):
    """
    Social posts and thumbnails. Every field is passed through as context,
    filled or not; the visual direction is the same for all social templates.
    """

    def build(
        self,
        template: Template,
        snapshot: FormSnapshot,
        stylize: bool,
        issue: IssueStamp,
    ) -> str:
        context_fields = "\n".join(
            f'{resolve_label(template, field_id)}: "{value}"'
            for field_id, value in snapshot.items()
        )
        return fill(
            PROMPT_SOCIAL,
            TEMPLATE_NAME=template.name,
            TEMPLATE_DESCRIPTION=template.description,
            ASPECT_RATIO=template.aspect_ratio,
            ORIENTATION=orientation(template.aspect_ratio),
            CONTEXT_FIELDS=context_fields,
            BACKGROUND_DIRECTIVE=background_directive(stylize),
            ISSUE_DATE=issue.month_year,
        )
