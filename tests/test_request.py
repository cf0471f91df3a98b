import pytest
from pydantic import ValidationError

from models.options import DEFAULT_OPTIONS
from models.request import CleanRequest, OptionsForm, coerce_indent_size, form_values


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (4, 4),
        ("3", 3),
        ("3.7", 3),
        ("0", 0),
        ("-1", 0),
        (-2.5, 0),
        ("abc", 0),
        ("", 0),
        ("inf", 0),
        ("nan", 0),
        (None, 0),
    ],
)
def test_coerce_indent_size(value, expected):
    assert coerce_indent_size(value) == expected


def test_form_sanitizes_selector_strings():
    form = OptionsForm(targetSelectors="p.a, ???, , div > span, div[")
    assert form.target_selectors == ["p.a", "div > span"]


def test_form_sanitizes_selector_lists():
    form = OptionsForm.model_validate({"deleteSelectors": [" script ", "???", ""]})
    assert form.delete_selectors == ["script"]


def test_form_coerces_indent():
    assert OptionsForm(indentSize="-3").indent_size == 0
    assert OptionsForm(indentSize="5.9").indent_size == 5


def test_form_to_options_merges_only_given_fields():
    opts = OptionsForm(deleteSelectors="", absolutePath="https://x.com").to_options()
    assert opts.delete_selectors == ()
    assert opts.absolute_path == "https://x.com"
    assert opts.inline_tags == DEFAULT_OPTIONS.inline_tags
    assert opts.indent_size == 2


def test_empty_form_gives_defaults():
    assert OptionsForm().to_options() == DEFAULT_OPTIONS


def test_form_values_render_lists_as_strings():
    values = form_values(DEFAULT_OPTIONS)
    assert values["targetSelectors"] == ""
    assert values["deleteSelectors"] == "script, noscript, iframe, style"
    assert values["inlineTags"] == "span, strong, b, small, del, s, code, br, wbr"
    assert values["indentSize"] == 2
    assert values["convertXlink"] is True


def test_request_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        CleanRequest.model_validate({"html": "<p></p>", "mode": "fast"})
    with pytest.raises(ValidationError):
        OptionsForm.model_validate({"indent": 2})
