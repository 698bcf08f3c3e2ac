import pytest
from selector_scout.layers.locate.namer import PageObjectBuilder, camel_case


@pytest.mark.parametrize("raw, expected", [
    ("search input", "searchInput"),
    ("Submit", "submit"),
    ("user-name", "userName"),
    ("first_name field", "firstNameField"),
    ("Sign up  --  now", "signUpNow"),
    ("Read more...", "readMore."),
    ("item 2", "item2"),
])
def test_camel_case(raw, expected):
    assert camel_case(raw) == expected


def test_collisions_get_numeric_suffixes():
    builder = PageObjectBuilder()
    assert builder.add('role=button[name="Submit"]', "Submit") == "submit"
    assert builder.add('form >> role=button[name="Submit"]', "Submit") == "submit1"
    assert builder.add("#submit", "submit") == "submit2"
    assert builder.to_dict() == {
        "submit": 'role=button[name="Submit"]',
        "submit1": 'form >> role=button[name="Submit"]',
        "submit2": "#submit",
    }


def test_existing_entries_are_never_overwritten():
    builder = PageObjectBuilder()
    builder.add("#submit1", "submit1")
    builder.add("#a", "submit")
    key = builder.add("#b", "submit")
    assert key == "submit2"
    assert builder.get("submit1") == "#submit1"
    assert len(builder) == 3


def test_empty_key_base_falls_back_to_tag_and_index():
    builder = PageObjectBuilder()
    assert builder.add("role=button", "", tag="BUTTON", index=7) == "button7"


def test_insertion_order_is_preserved():
    builder = PageObjectBuilder()
    for name in ["zeta", "alpha", "mid"]:
        builder.add(f"#{name}", name)
    assert list(builder.to_dict()) == ["zeta", "alpha", "mid"]
