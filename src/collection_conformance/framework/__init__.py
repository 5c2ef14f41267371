"""Core conformance framework."""

from .adapter import MapAdapter
from .expectations import Expectations
from .outcome import ErrorClassifier, Outcome

__all__ = [
    "MapAdapter",
    "Expectations",
    "ErrorClassifier",
    "Outcome",
]
