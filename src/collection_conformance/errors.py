"""Error kinds and exceptions used by the conformance harness."""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of rejection a container under test may signal."""

    UNSUPPORTED_OPERATION = "unsupported_operation"
    NULL_REJECTED = "null_rejected"


class UnsupportedOperation(Exception):
    """Raised by a container that declines a structurally disallowed mutation."""


class NullRejected(TypeError):
    """Raised by a container that declines to store a None key or value."""


class ExpectationFailure(AssertionError):
    """A scenario observed a state or outcome its rule does not allow."""

    def __init__(self, scenario: str, expected: str, observed: str):
        self.scenario = scenario
        self.expected = expected
        self.observed = observed
        super().__init__(f"[{scenario}] expected {expected}, observed {observed}")


class ConflictingRequirements(ValueError):
    """A requirement names the same feature as both required and absent."""


class FixtureError(RuntimeError):
    """The seeded fixture does not match its declared size class."""
