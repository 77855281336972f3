import pytest

from cover_bot.data.templates import get_template
from cover_bot.exceptions import MissingImage, UnknownField
from cover_bot.services.form_state import FormStateManager, initial_snapshot


def test_initial_snapshot_uses_defaults_and_first_option():
    snapshot = initial_snapshot(get_template("linkedin-milestone"))
    assert snapshot == {
        "milestone_metric": "",
        "milestone_number": "",
        "highlight_color": "#0077B5",
        "mood": "Professional",
    }


def test_prior_snapshot_is_copied():
    prior = {"masthead": "VOGUE", "headline": "Hi", "tagline": ""}
    form = FormStateManager(get_template("vogue"), prior)
    prior["headline"] = "changed"
    assert form.get_field("headline") == "Hi"


def test_set_field_and_snapshot_is_a_copy():
    form = FormStateManager(get_template("vogue"))
    form.set_field("headline", "The Future of Fashion")
    snapshot = form.snapshot()
    snapshot["headline"] = "mutated"
    assert form.get_field("headline") == "The Future of Fashion"


def test_set_unknown_field_raises():
    form = FormStateManager(get_template("vogue"))
    with pytest.raises(UnknownField):
        form.set_field("milestone_number", "10")


def test_switch_template_resets_fields_but_keeps_photo_and_stylize(photo):
    form = FormStateManager(get_template("vogue"))
    form.set_field("headline", "Hello")
    form.set_image(photo)
    form.set_stylize(False)

    form.switch_template(get_template("youtube-thumbnail"))

    assert set(form.snapshot()) == set(get_template("youtube-thumbnail").field_ids)
    assert form.image == photo
    assert form.stylize is False


def test_validate_without_image(photo):
    form = FormStateManager(get_template("vogue"))
    with pytest.raises(MissingImage):
        form.validate()
    assert form.error == "Please upload an image to continue."

    form.set_image(photo)
    assert form.error is None
    form.validate()


def test_clearing_the_photo_clears_a_stale_error():
    form = FormStateManager(get_template("vogue"))
    with pytest.raises(MissingImage):
        form.validate()

    form.set_image(None)

    assert form.error is None
    assert form.image is None
