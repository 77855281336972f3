# cover_bot/services/prompting/factory.py
import structlog

from cover_bot.data.constants import TemplateCategory
from cover_bot.dto.generation import FormSnapshot
from cover_bot.dto.template import Template
from cover_bot.exceptions import UnknownTemplateCategory

from .base_strategy import BriefStrategy
from .editorial_strategy import EditorialBriefStrategy
from .issue import IssueSource
from .social_strategy import SocialBriefStrategy

logger = structlog.get_logger(__name__)

STRATEGY_MAP: dict[TemplateCategory, type[BriefStrategy]] = {
    TemplateCategory.MAGAZINE: EditorialBriefStrategy,
    TemplateCategory.PRINT: EditorialBriefStrategy,
    TemplateCategory.SOCIAL: SocialBriefStrategy,
}


def get_brief_strategy(category: TemplateCategory | str | None) -> BriefStrategy:
    """
    Returns the strategy for a template category.
    There is no default: an unmapped category is a configuration error.
    """
    try:
        strategy_class = STRATEGY_MAP.get(TemplateCategory(category))
    except ValueError:
        strategy_class = None
    if strategy_class is None:
        raise UnknownTemplateCategory(category)
    return strategy_class()


def compile_brief(
    template: Template | None,
    snapshot: FormSnapshot,
    stylize: bool,
    *,
    issue_source: IssueSource | None = None,
) -> str:
    """Turns a template plus the user's values into the creative brief for the image model."""
    if template is None:
        raise UnknownTemplateCategory(None)
    strategy = get_brief_strategy(template.category)
    issue = (issue_source or IssueSource()).stamp()
    brief = strategy.build(template, snapshot, stylize, issue)
    logger.debug(
        "Compiled creative brief",
        template_id=template.id,
        strategy=type(strategy).__name__,
        stylize=stylize,
        length=len(brief),
    )
    return brief
