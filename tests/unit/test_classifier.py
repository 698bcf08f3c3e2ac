import pytest
from selector_scout.layers.locate.classifier import (
    Strategy,
    classify,
    implicit_role,
    normalize_text,
)
from selector_scout.layers.sense.dom_snapshot import ElementDescriptor


def el(tag, text="", **attrs):
    """Build a descriptor; underscores in attribute names become dashes."""
    return ElementDescriptor(
        tag=tag,
        attributes={k.replace("_", "-"): v for k, v in attrs.items()},
        text=text,
    )


def test_id_wins_over_test_id():
    record = classify(el("div", id="main", data_testid="header"))
    assert record.strategy == Strategy.ID
    assert record.value == "#main"
    assert record.key_base == "main"


def test_test_id_selector():
    record = classify(el("div", "Header", data_testid="header"))
    assert record.strategy == Strategy.TEST_ID
    assert record.value == '[data-testid="header"]'
    assert record.key_base == "header"


def test_name_selector_uses_lowercase_tag():
    record = classify(el("INPUT", name="search"))
    assert record.strategy == Strategy.NAME
    assert record.value == 'input[name="search"]'
    assert record.key_base == "search"


def test_empty_attributes_fall_through():
    record = classify(el("div", "Hello", id="", data_testid="", name=""))
    assert record.strategy == Strategy.TEXT
    assert record.value == 'div:has-text("Hello")'


def test_id_is_not_escaped():
    record = classify(el("div", id="a:b.c"))
    assert record.value == "#a:b.c"


def test_button_gets_role_before_text():
    record = classify(el("button", "Submit"))
    assert record.strategy == Strategy.ROLE
    assert record.value == 'role=button[name="Submit"]'
    assert record.key_base == "Submit"


def test_aria_label_preferred_over_text():
    record = classify(el("a", "Click here to continue", aria_label="Next page"))
    assert record.value == 'role=link[name="Next page"]'


def test_explicit_role_on_generic_tag():
    record = classify(el("div", "Close", role="button"))
    assert record.value == 'role=button[name="Close"]'


def test_role_without_usable_label():
    record = classify(el("button"))
    assert record.strategy == Strategy.ROLE
    assert record.value == "role=button"
    assert record.key_base == "button"


def test_whitespace_aria_label_gives_bare_role():
    record = classify(el("button", "Submit", aria_label="   "))
    assert record.value == "role=button"


def test_role_label_cutoff():
    assert classify(el("button", "x" * 29)).value == f'role=button[name="{"x" * 29}"]'
    assert classify(el("button", "x" * 30)).value == "role=button"


def test_text_cutoff():
    assert classify(el("span", "y" * 29)).strategy == Strategy.TEXT
    assert classify(el("span", "y" * 30)) is None


def test_text_key_base_uses_first_three_words():
    record = classify(el("p", "Sign up for our newsletter"))
    assert record.value == 'p:has-text("Sign up for our newsletter")'
    assert record.key_base == "Sign up for"


def test_newlines_collapsed_in_text_selector():
    record = classify(el("li", "First\n\n\nSecond\nThird"))
    assert record.value == 'li:has-text("First Second Third")'


def test_whitespace_only_text_produces_nothing():
    assert classify(el("div", "   ")) is None
    assert classify(el("div")) is None


def test_visibility_is_ignored():
    # Descriptors carry no visibility; hidden inputs still classify
    record = classify(el("input", type="hidden"))
    assert record.value == "role=textbox"


@pytest.mark.parametrize("tag, input_type, expected", [
    ("a", "", "link"),
    ("button", "", "button"),
    ("select", "", "combobox"),
    ("option", "", "option"),
    ("input", "checkbox", "checkbox"),
    ("input", "RADIO", "radio"),
    ("input", "submit", "button"),
    ("input", "button", "button"),
    ("input", "email", "textbox"),
    ("input", "", "textbox"),
    ("div", "", None),
    ("textarea", "", None),
])
def test_implicit_roles(tag, input_type, expected):
    assert implicit_role(tag, input_type) == expected


def test_normalize_text_is_idempotent():
    once = normalize_text("  Hello\n\nbig\nworld \n")
    assert once == "Hello big world"
    assert normalize_text(once) == once
