"""Uniform access to the container under test."""

from collections.abc import Mapping
from typing import Any, Callable, List, Optional

from ..samples import Entry


def _update(target, batch):
    target.update(batch)


class MapAdapter:
    """Drives a mapping through the operations the harness needs.

    The bulk-insert operation defaults to ``target.update(batch)``. Pass
    ``bulk_insert`` to exercise a differently named method.

    Args:
        target: The container instance under test
        bulk_insert: Optional callable ``(target, batch) -> None``
    """

    def __init__(self, target, bulk_insert: Optional[Callable[[Any, Optional[Mapping]], None]] = None):
        self.target = target
        self._bulk_insert = bulk_insert or _update

    def bulk_insert(self, batch: Optional[Mapping]):
        self._bulk_insert(self.target, batch)

    def contains(self, key) -> bool:
        return key in self.target

    def get(self, key, default=None):
        """Return the value stored for ``key``, or ``default`` when absent."""
        if key not in self.target:
            return default
        return self.target[key]

    def size(self) -> int:
        return len(self.target)

    def entries(self) -> List[Entry]:
        """Snapshot of the current contents in iteration order."""
        return [Entry(k, v) for k, v in self.target.items()]

    def __repr__(self) -> str:
        return f"MapAdapter({type(self.target).__name__}, size={self.size()})"
