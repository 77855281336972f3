import random
from datetime import date

import pytest

from cover_bot.data.constants import FieldType
from cover_bot.data.templates import get_template
from cover_bot.dto.template import Template, TemplateField
from cover_bot.exceptions import UnknownTemplateCategory
from cover_bot.services.prompting import (
    EditorialBriefStrategy,
    IssueSource,
    SocialBriefStrategy,
    compile_brief,
    get_brief_strategy,
)
from cover_bot.services.prompting.base_strategy import fill, orientation
from cover_bot.services.prompting.styles import BACKGROUND_KEEP, BACKGROUND_REPLACE


def test_editorial_brief_projects_only_filled_fields(issue_source):
    snapshot = {"masthead": "VOGUE", "headline": "The Future of Fashion", "tagline": ""}
    brief = compile_brief(get_template("vogue"), snapshot, True, issue_source=issue_source)

    assert '- Headline: "The Future of Fashion"' in brief
    assert '- Masthead: "VOGUE"' in brief
    assert "- Tagline:" not in brief
    assert "USER-SUPPLIED TEXT" in brief
    assert BACKGROUND_REPLACE in brief
    assert BACKGROUND_KEEP not in brief
    assert "3/4 (Vertical Editorial)" in brief
    assert "MAY 2024" in brief
    assert "ISSUE Nº 7" in brief


def test_editorial_brief_without_user_text_asks_for_generated_lines(issue_source):
    snapshot = {"masthead": "", "headline": "  ", "tagline": ""}
    brief = compile_brief(get_template("vogue"), snapshot, False, issue_source=issue_source)

    assert "You must generate all cover lines" in brief
    assert '"FREE SPIRIT"' in brief
    assert "USER-SUPPLIED TEXT" not in brief
    assert BACKGROUND_KEEP in brief
    # Blank masthead falls back to the field's default.
    assert 'Content: "VOGUE"' in brief


def test_masthead_falls_back_to_generic_title(issue_source):
    template = Template(
        id="zine",
        category="print",
        name="Zine",
        description="Photocopied",
        aspect_ratio="1/1",
        inputs=(TemplateField(id="headline", label="Headline", type=FieldType.TEXT),),
    )
    brief = compile_brief(template, {"headline": "Hi"}, True, issue_source=issue_source)
    assert 'Content: "MAGAZINE"' in brief
    assert "(Square Editorial)" in brief


def test_user_masthead_wins_over_default(issue_source):
    snapshot = {"masthead": "MY MAG", "headline": "", "tagline": ""}
    brief = compile_brief(get_template("vogue"), snapshot, True, issue_source=issue_source)
    assert 'Content: "MY MAG"' in brief


def test_social_brief_lists_every_field(issue_source):
    snapshot = {
        "milestone_metric": "Followers",
        "milestone_number": "",
        "highlight_color": "#0077B5",
        "mood": "Bold",
    }
    brief = compile_brief(get_template("linkedin-milestone"), snapshot, True, issue_source=issue_source)

    assert 'Metric (e.g. Followers): "Followers"' in brief
    assert 'Number (e.g. 10,000): ""' in brief
    assert 'Vibe: "Bold"' in brief
    assert "4/5 (Vertical)" in brief
    assert BACKGROUND_REPLACE in brief


def test_same_inputs_and_stamp_give_the_same_brief():
    template = get_template("forbes")
    snapshot = {"masthead": "Forbes", "headline": "Billions", "tagline": ""}

    def source() -> IssueSource:
        return IssueSource(rng=random.Random(42), clock=lambda: date(2025, 1, 3))

    first = compile_brief(template, snapshot, True, issue_source=source())
    second = compile_brief(template, snapshot, True, issue_source=source())
    assert first == second
    assert "JANUARY 2025" in first


def test_user_text_is_not_expanded_as_placeholder(issue_source):
    snapshot = {"masthead": "{{ISSUE_DATE}}", "headline": "", "tagline": ""}
    brief = compile_brief(get_template("vogue"), snapshot, True, issue_source=issue_source)
    assert 'Content: "{{ISSUE_DATE}}"' in brief


def test_strategy_lookup():
    assert isinstance(get_brief_strategy("magazine"), EditorialBriefStrategy)
    assert isinstance(get_brief_strategy("print"), EditorialBriefStrategy)
    assert isinstance(get_brief_strategy("social"), SocialBriefStrategy)


@pytest.mark.parametrize("category", ["poster", None])
def test_unknown_category_fails_closed(category):
    with pytest.raises(UnknownTemplateCategory):
        get_brief_strategy(category)


def test_compile_brief_rejects_unmapped_template(issue_source):
    template = Template.model_construct(
        id="odd", category="poster", name="Odd", description="", aspect_ratio="1/1", inputs=()
    )
    with pytest.raises(UnknownTemplateCategory):
        compile_brief(template, {}, True, issue_source=issue_source)
    with pytest.raises(UnknownTemplateCategory):
        compile_brief(None, {}, True, issue_source=issue_source)


@pytest.mark.parametrize(
    ("aspect_ratio", "expected"),
    [("3/4", "Vertical"), ("16/9", "Horizontal"), ("1/1", "Square")],
)
def test_orientation(aspect_ratio, expected):
    assert orientation(aspect_ratio) == expected


def test_fill_is_single_pass():
    assert fill("{{A}}-{{B}}", A="{{B}}", B="x") == "{{B}}-x"


def test_issue_stamp_range():
    source = IssueSource(rng=random.Random(0), clock=lambda: date(2024, 12, 1))
    for _ in range(50):
        stamp = source.stamp()
        assert 1 <= stamp.issue_number <= 20
        assert stamp.month_year == "DECEMBER 2024"
