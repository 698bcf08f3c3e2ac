"""
Selector Classifier - One canonical selector per element.

Strategies are tried in a strict order and the first one that yields a
selector wins:

1. ID:      ``#<id>``
2. TEST_ID: ``[data-testid="<value>"]``
3. NAME:    ``<tag>[name="<value>"]``
4. ROLE:    ``role=<role>[name="<label>"]`` or ``role=<role>``
5. TEXT:    ``<tag>:has-text("<text>")``

Attribute values and text are interpolated as-is. Quotes inside them
are not escaped.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import re

from selector_scout.layers.sense.dom_snapshot import ElementDescriptor

# Labels and text must be strictly shorter than this
MAX_LABEL_LENGTH = 30

# Number of words of a label/text used as the page object key
KEY_WORDS = 3

_NEWLINES = re.compile(r"\n+")


class Strategy(Enum):
    """Locating strategies, in priority order."""
    ID = "ids"
    TEST_ID = "testIds"
    NAME = "names"
    ROLE = "roles"
    TEXT = "text"

    @property
    def group(self) -> str:
        """Key of the output group this strategy feeds."""
        return self.value


@dataclass(frozen=True)
class SelectorRecord:
    """A classified element: its winning strategy and selector."""
    strategy: Strategy
    value: str
    key_base: str = ""  # Human-readable candidate for the page object key


def normalize_text(text: str) -> str:
    """Collapse runs of newlines into single spaces and trim."""
    return _NEWLINES.sub(" ", text or "").strip()


def key_words(label: str) -> str:
    """First few space-separated words of a label."""
    return " ".join(label.split(" ")[:KEY_WORDS])


def implicit_role(tag: str, input_type: str = "") -> Optional[str]:
    """
    ARIA role implied by a tag (and input type).

    Returns:
        Role name, or None when the tag has no implicit role we use
    """
    tag = tag.lower()
    if tag == "input":
        input_type = (input_type or "").lower()
        if input_type in ("checkbox", "radio"):
            return input_type
        if input_type in ("submit", "button"):
            return "button"
        return "textbox"
    return {
        "a": "link",
        "button": "button",
        "select": "combobox",
        "option": "option",
    }.get(tag)


def _fits(label: str) -> bool:
    return bool(label) and len(label) < MAX_LABEL_LENGTH


def classify(element: ElementDescriptor) -> Optional[SelectorRecord]:
    """
    Pick the selector for a single element.

    Args:
        element: Snapshot of the element

    Returns:
        SelectorRecord, or None when no strategy applies
    """
    tag = element.tag_name

    element_id = element.attr("id")
    if element_id:
        return SelectorRecord(Strategy.ID, f"#{element_id}", element_id)

    test_id = element.attr("data-testid")
    if test_id:
        return SelectorRecord(Strategy.TEST_ID, f'[data-testid="{test_id}"]', test_id)

    name = element.attr("name")
    if name:
        return SelectorRecord(Strategy.NAME, f'{tag}[name="{name}"]', name)

    role = element.attr("role") or implicit_role(tag, element.attr("type"))
    if role:
        label = normalize_text(element.attr("aria-label") or element.text)
        if _fits(label):
            return SelectorRecord(
                Strategy.ROLE, f'role={role}[name="{label}"]', key_words(label)
            )
        return SelectorRecord(Strategy.ROLE, f"role={role}", role)

    text = normalize_text(element.text)
    if _fits(text):
        return SelectorRecord(Strategy.TEXT, f'{tag}:has-text("{text}")', key_words(text))

    return None
