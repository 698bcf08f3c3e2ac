"""
Selector Aggregator - Page-wide grouping and deduplication.

Walks element descriptors in document order, classifies each one,
buckets the selectors by strategy and names them for the page object.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, TypeVar

from selector_scout.layers.locate.classifier import Strategy, classify
from selector_scout.layers.locate.namer import PageObjectBuilder
from selector_scout.layers.sense.dom_snapshot import ElementDescriptor

T = TypeVar("T")


def dedupe(sequence: Iterable[T]) -> List[T]:
    """Drop repeated items, keeping the first occurrence of each."""
    return list(dict.fromkeys(sequence))


@dataclass
class ExtractResult:
    """Selectors grouped by strategy, plus the generated page object."""
    ids: List[str] = field(default_factory=list)
    test_ids: List[str] = field(default_factory=list)
    names: List[str] = field(default_factory=list)
    roles: List[str] = field(default_factory=list)
    text: List[str] = field(default_factory=list)
    all: List[str] = field(default_factory=list)
    page_object: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "ExtractResult":
        """Result returned when nothing could be extracted."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.all and not self.page_object

    def group(self, strategy: Strategy) -> List[str]:
        """Selectors produced by one strategy."""
        return self.groups()[strategy.group]

    def groups(self) -> Dict[str, List[str]]:
        """Per-strategy sequences and the combined one, keyed as in JSON output."""
        return {
            Strategy.ID.group: self.ids,
            Strategy.TEST_ID.group: self.test_ids,
            Strategy.NAME.group: self.names,
            Strategy.ROLE.group: self.roles,
            Strategy.TEXT.group: self.text,
            "all": self.all,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: Dict[str, Any] = {key: list(value) for key, value in self.groups().items()}
        data["pageObject"] = dict(self.page_object)
        return data


def aggregate(elements: Iterable[ElementDescriptor]) -> ExtractResult:
    """
    Classify every element and build the grouped result.

    Args:
        elements: Descriptors in document order

    Returns:
        ExtractResult with deduplicated groups and a page object that
        has one entry per classified element
    """
    buckets: Dict[Strategy, List[str]] = {strategy: [] for strategy in Strategy}
    combined: List[str] = []
    page_object = PageObjectBuilder()

    for index, element in enumerate(elements):
        record = classify(element)
        if record is None:
            continue
        buckets[record.strategy].append(record.value)
        combined.append(record.value)
        page_object.add(record.value, record.key_base, tag=element.tag_name, index=index)

    return ExtractResult(
        ids=dedupe(buckets[Strategy.ID]),
        test_ids=dedupe(buckets[Strategy.TEST_ID]),
        names=dedupe(buckets[Strategy.NAME]),
        roles=dedupe(buckets[Strategy.ROLE]),
        text=dedupe(buckets[Strategy.TEXT]),
        all=dedupe(combined),
        page_object=page_object.to_dict(),
    )
