"""Verification of container state and operation outcomes.

``Expectations`` is constructed with a snapshot of the fixture taken before
the operation ran. It only reads the fixture; every mismatch raises
``ExpectationFailure`` naming the scenario, what was expected and what was
observed.
"""

from typing import Dict, List, Optional

from ..errors import ErrorKind, ExpectationFailure
from ..samples import Entry
from .adapter import MapAdapter
from .outcome import ErrorClassifier, Outcome


def _format_entries(entries) -> str:
    return "{" + ", ".join(str(e) for e in entries) + "}"


class Expectations:
    """Checks the fixture against its pre-operation snapshot.

    Args:
        scenario: Name reported with every failure
        adapter: Read access to the fixture
        pre_state: Entries the fixture held before the operation
        classifier: Used to recognise null-hostile query errors
    """

    def __init__(
        self,
        scenario: str,
        adapter: MapAdapter,
        pre_state: List[Entry],
        classifier: Optional[ErrorClassifier] = None,
    ):
        self.scenario = scenario
        self.adapter = adapter
        self.pre_state = list(pre_state)
        self.classifier = classifier or ErrorClassifier()

    def fail(self, expected: str, observed: str):
        raise ExpectationFailure(self.scenario, expected, observed)

    def _observed(self) -> str:
        return f"contents {_format_entries(self.adapter.entries())}"

    def _check_contents(self, expected: Dict):
        actual = self.adapter.entries()
        actual_keys = [e.key for e in actual]

        if len(set(actual_keys)) != len(actual_keys):
            self.fail("no duplicate keys", self._observed())

        if len(actual) != len(expected) or self.adapter.size() != len(expected):
            self.fail(
                f"size {len(expected)} with contents {_format_entries(Entry(k, v) for k, v in expected.items())}",
                f"size {self.adapter.size()} with {self._observed()}",
            )

        for entry in actual:
            if entry.key not in expected:
                self.fail(f"no entry for key {entry.key!r}", self._observed())
            if expected[entry.key] != entry.value:
                self.fail(
                    f"{entry.key!r} mapped to {expected[entry.key]!r}",
                    f"{entry.key!r} mapped to {entry.value!r}",
                )

        for key, value in expected.items():
            if not self.adapter.contains(key):
                self.fail(f"contains({key!r}) to be true", self._observed())
            got = self.adapter.get(key)
            if got != value:
                self.fail(f"get({key!r}) == {value!r}", f"get({key!r}) == {got!r}")

    def expect_unchanged(self):
        """The fixture holds exactly the pre-operation entries."""
        self._check_contents(dict(self.pre_state))

    def expect_added(self, *entries: Entry):
        """The fixture holds the pre-operation entries updated by ``entries``.

        Size grows only by the number of entries whose key was not already
        present; a key that was present takes the new value.
        """
        expected = dict(self.pre_state)
        for entry in entries:
            expected[entry.key] = entry.value
        self._check_contents(expected)

    def expect_missing(self, *entries: Entry):
        """None of the given keys is present at all."""
        for entry in entries:
            if self._contains_key(entry.key):
                self.fail(f"key {entry.key!r} to be absent", self._observed())

    def _contains_key(self, key) -> bool:
        # A container that refuses to be queried for None cannot hold it
        try:
            return self.adapter.contains(key)
        except Exception as e:
            if key is None and self.classifier.classify(e) is ErrorKind.NULL_REJECTED:
                return False
            raise

    def expect_null_key_missing(self, message: str):
        if self._contains_key(None):
            self.fail(message, self._observed())

    def expect_null_value_missing(self, message: str):
        if any(e.value is None for e in self.adapter.entries()):
            self.fail(message, self._observed())

    def expect_succeeded(self, outcome: Outcome):
        if not outcome.succeeded:
            self.fail("no error", outcome.describe())

    def expect_threw(self, outcome: Outcome, kind: ErrorKind):
        """The operation failed with exactly ``kind``."""
        if outcome.error is not kind:
            self.fail(f"{kind.name} error", outcome.describe())

    def expect_tolerated(self, outcome: Outcome, kind: ErrorKind):
        """The operation either failed with ``kind`` or succeeded."""
        if outcome.error is not None and outcome.error is not kind:
            self.fail(f"{kind.name} error or success", outcome.describe())
