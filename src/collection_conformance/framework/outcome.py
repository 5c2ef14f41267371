"""Outcome of a single invocation of the operation under test."""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Type

from ..config import default_error_types
from ..errors import ErrorKind


@dataclass(frozen=True)
class Outcome:
    """Either success or one captured, recognised error.

    Attributes:
        error: Kind of the captured error, None on success
        exception: The exception instance that was captured
    """

    error: Optional[ErrorKind] = None
    exception: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def describe(self) -> str:
        if self.succeeded:
            return "success"
        return f"{self.error.name} ({type(self.exception).__name__}: {self.exception})"


class ErrorClassifier:
    """Maps concrete exception types onto error kinds.

    Only the first matching kind applies, checked in ``ErrorKind`` order.
    """

    def __init__(self, error_types: Optional[Dict[ErrorKind, Tuple[Type[BaseException], ...]]] = None):
        self.error_types = error_types or default_error_types()

    def classify(self, exc: BaseException) -> Optional[ErrorKind]:
        for kind in ErrorKind:
            if isinstance(exc, self.error_types.get(kind, ())):
                return kind
        return None

    def invoke(self, operation: Callable[[], None]) -> Outcome:
        """Run ``operation`` once and capture at most one recognised error.

        Exceptions that are not classified propagate unchanged.
        """
        try:
            operation()
        except Exception as e:
            kind = self.classify(e)
            if kind is None:
                raise
            return Outcome(error=kind, exception=e)
        return Outcome()
