"""
DOM Snapshot - Serializable element traversal.

Ships a single read-only script into the page that walks every element
of the document (``document.querySelectorAll('*')``) and marshals back
plain JSON. Everything downstream works on ``ElementDescriptor`` records,
so the locating logic never touches a live browser.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from selector_scout.core.driver_factory import BrowserSession

logger = logging.getLogger(__name__)

# Attributes the locator strategies look at
SNAPSHOT_ATTRIBUTES = ["id", "data-testid", "name", "role", "aria-label", "type"]

# Visible text is truncated in-page; anything this long can never become a label
MAX_SNAPSHOT_TEXT = 256


@dataclass(frozen=True)
class ElementDescriptor:
    """
    Read-only snapshot of one DOM element.

    Only carries what the locator strategies need: the tag, a handful
    of attributes and the element's visible text.
    """
    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    text: str = ""

    def attr(self, name: str) -> str:
        """Attribute value, or "" when the attribute is missing."""
        return self.attributes.get(name) or ""

    @property
    def tag_name(self) -> str:
        return self.tag.lower()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ElementDescriptor":
        """Build a descriptor from one entry of the snapshot script's output."""
        attributes = {
            key: str(value)
            for key, value in (data.get("attributes") or {}).items()
            if value is not None
        }
        return cls(
            tag=str(data.get("tag") or ""),
            attributes=attributes,
            text=str(data.get("text") or ""),
        )


class DOMSnapshot:
    """
    Collects element descriptors from a live page.

    Example:
        >>> snapshot = DOMSnapshot(session)
        >>> for element in snapshot.capture():
        ...     print(element.tag_name, element.attr("id"))
    """

    def __init__(self, session: "BrowserSession"):
        self.session = session

    def capture(self) -> List[ElementDescriptor]:
        """
        Run the traversal script against the current document.

        Returns:
            One descriptor per element, in document order
        """
        results = self.session.evaluate(
            self.get_snapshot_script(), SNAPSHOT_ATTRIBUTES, MAX_SNAPSHOT_TEXT
        )
        elements = parse_snapshot(results or [])
        logger.debug(f"[DOMSnapshot] Captured {len(elements)} elements")
        return elements

    @staticmethod
    def get_snapshot_script() -> str:
        """Get the JavaScript that serializes every element of the document."""
        return r"""
        const attributeNames = arguments[0];
        const maxText = arguments[1];

        // innerText is undefined for SVG and other non-HTML elements
        const visibleText = (el) => {
            const raw = typeof el.innerText === 'string' ? el.innerText : '';
            return raw.replace(/\n+/g, ' ').trim().substring(0, maxText);
        };

        return Array.from(document.querySelectorAll('*')).map(el => {
            const attrs = {};
            for (const name of attributeNames) {
                const val = el.getAttribute(name);
                if (val) attrs[name] = val;
            }
            return {
                tag: el.tagName.toLowerCase(),
                attributes: attrs,
                text: visibleText(el)
            };
        });
        """


def parse_snapshot(results: Iterable[Dict[str, Any]]) -> List[ElementDescriptor]:
    """Convert raw snapshot entries into descriptors, keeping their order."""
    return [ElementDescriptor.from_dict(res) for res in results]
