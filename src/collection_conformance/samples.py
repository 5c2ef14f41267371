"""Sample entries and the generators that build containers from them."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import Any, Iterable, Iterator, List, NamedTuple, Tuple


class Entry(NamedTuple):
    """A single key/value pair."""

    key: Any
    value: Any

    def __str__(self) -> str:
        return f"{self.key!r}={self.value!r}"


class SampleElements:
    """Five distinct sample entries, e0 through e4.

    e0 is present in every non-empty fixture. e3 and e4 are never seeded
    and are used to test additions.
    """

    def __init__(self, e0: Entry, e1: Entry, e2: Entry, e3: Entry, e4: Entry):
        self.e0 = e0
        self.e1 = e1
        self.e2 = e2
        self.e3 = e3
        self.e4 = e4

        keys = [e.key for e in self.as_list()]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Sample keys must be distinct, got {keys!r}")
        if None in keys:
            raise ValueError("Sample keys must not be None")

    def as_list(self) -> List[Entry]:
        return [self.e0, self.e1, self.e2, self.e3, self.e4]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.as_list())

    def __len__(self) -> int:
        return 5


class MinimalCollection(Collection):
    """Read-only view over a fixed sequence of entries.

    Exposes only iteration, length and membership so the operation under
    test cannot rely on any richer interface of its argument.
    """

    def __init__(self, contents: Tuple[Entry, ...]):
        self._contents = contents

    @classmethod
    def of(cls, *entries: Entry) -> "MinimalCollection":
        return cls(tuple(entries))

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def __contains__(self, item) -> bool:
        return item in self._contents

    def __repr__(self) -> str:
        return f"MinimalCollection({', '.join(str(e) for e in self._contents)})"


class SampleMapGenerator(ABC):
    """Supplies sample entries and builds fresh containers seeded with them."""

    @abstractmethod
    def samples(self) -> SampleElements:
        """Return the sample pool."""
        pass

    @abstractmethod
    def create(self, entries: Iterable[Entry]):
        """Return a new container holding exactly ``entries``."""
        pass

    def create_disjoint_collection(self) -> MinimalCollection:
        """Entries guaranteed to be absent from any seeded fixture."""
        samples = self.samples()
        return MinimalCollection.of(samples.e3, samples.e4)

    def create_overlapping_collection(self, *entries: Entry) -> MinimalCollection:
        return MinimalCollection.of(*entries)


class StringMapGenerator(SampleMapGenerator):
    """Generator over string keys and values backed by a container factory.

    Args:
        factory: Callable taking an iterable of (key, value) pairs and
            returning the container, e.g. ``dict``
    """

    SAMPLES = SampleElements(
        Entry("one", "January"),
        Entry("two", "February"),
        Entry("three", "March"),
        Entry("four", "April"),
        Entry("five", "May"),
    )

    def __init__(self, factory):
        self.factory = factory

    def samples(self) -> SampleElements:
        return self.SAMPLES

    def create(self, entries: Iterable[Entry]):
        return self.factory([(e.key, e.value) for e in entries])
