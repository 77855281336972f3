# cover_bot/services/prompting/issue.py
import calendar
import random
from collections.abc import Callable
from datetime import date

from pydantic import BaseModel, ConfigDict, Field

ISSUE_NUMBER_MIN = 1
ISSUE_NUMBER_MAX = 20


class IssueStamp(BaseModel):
    """Corner stamp tokens a cover may print: a dateline and an issue number."""
    model_config = ConfigDict(frozen=True)

    month_year: str
    issue_number: int = Field(ge=ISSUE_NUMBER_MIN, le=ISSUE_NUMBER_MAX)

    @property
    def issue_label(self) -> str:
        return f"ISSUE Nº {self.issue_number}"


class IssueSource:
    """
    The only source of non-determinism in brief compilation.
    Inject a seeded RNG and a fixed clock to make briefs reproducible.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._clock = clock or date.today

    def stamp(self) -> IssueStamp:
        today = self._clock()
        month = calendar.month_name[today.month].upper()
        return IssueStamp(
            month_year=f"{month} {today.year}",
            issue_number=self._rng.randint(ISSUE_NUMBER_MIN, ISSUE_NUMBER_MAX),
        )
