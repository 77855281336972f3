from .base_strategy import BriefStrategy
from .editorial_strategy import EditorialBriefStrategy
from .factory import STRATEGY_MAP, compile_brief, get_brief_strategy
from .issue import IssueSource, IssueStamp
from .social_strategy import SocialBriefStrategy

__all__ = [
    "BriefStrategy",
    "EditorialBriefStrategy",
    "IssueSource",
    "IssueStamp",
    "STRATEGY_MAP",
    "SocialBriefStrategy",
    "compile_brief",
    "get_brief_strategy",
]
