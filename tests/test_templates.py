import pytest
from pydantic import ValidationError

from cover_bot.data.constants import FieldType, TemplateCategory
from cover_bot.data.templates import TEMPLATES, default_template, get_template, list_templates
from cover_bot.dto.template import Template, TemplateField
from cover_bot.exceptions import TemplateNotFound


def test_registry_ids_are_unique_and_ordered():
    templates = list_templates()
    assert [t.id for t in templates] == list(TEMPLATES)
    assert default_template() is templates[0]


def test_every_template_has_unique_field_ids():
    for template in list_templates():
        assert len(set(template.field_ids)) == len(template.field_ids)


def test_catalog_covers_magazine_and_social():
    categories = {t.category for t in list_templates()}
    assert {TemplateCategory.MAGAZINE, TemplateCategory.SOCIAL} <= categories


def test_get_template():
    vogue = get_template("vogue")
    assert vogue.aspect_ratio == "3/4"
    assert vogue.get_field("headline").label == "Headline"
    assert vogue.get_field("nope") is None


def test_get_unknown_template_raises():
    with pytest.raises(TemplateNotFound):
        get_template("playboy")


def test_select_field_requires_options():
    with pytest.raises(ValidationError):
        TemplateField(id="mood", label="Mood", type=FieldType.SELECT)


def test_only_select_fields_take_options():
    with pytest.raises(ValidationError):
        TemplateField(id="x", label="X", type=FieldType.TEXT, options=("a",))


@pytest.mark.parametrize("aspect_ratio", ["3:4", "0/4", "abc", "16/"])
def test_bad_aspect_ratio_is_rejected(aspect_ratio):
    with pytest.raises(ValidationError):
        Template(
            id="t", category=TemplateCategory.PRINT, name="T", description="", aspect_ratio=aspect_ratio, inputs=()
        )


def test_duplicate_field_ids_are_rejected():
    field = TemplateField(id="headline", label="Headline", type=FieldType.TEXT)
    with pytest.raises(ValidationError):
        Template(
            id="t", category=TemplateCategory.PRINT, name="T", description="", aspect_ratio="1/1", inputs=(field, field)
        )
