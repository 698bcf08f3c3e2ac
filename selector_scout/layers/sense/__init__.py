"""Sense Layer - Read-only DOM snapshots."""

from selector_scout.layers.sense.dom_snapshot import DOMSnapshot, ElementDescriptor

__all__ = ["DOMSnapshot", "ElementDescriptor"]
