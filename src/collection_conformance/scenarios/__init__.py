"""Conformance scenarios."""

from .base import Scenario, ScenarioContext, ScenarioResult, ScenarioStatus
from .put_all import (
    PUT_ALL_SCENARIOS,
    PutAllScenario,
    SupportedNothingScenario,
    UnsupportedNothingScenario,
    SupportedNonePresentScenario,
    UnsupportedNonePresentScenario,
    SupportedSomePresentScenario,
    UnsupportedSomePresentScenario,
    UnsupportedAllPresentScenario,
    NullKeySupportedScenario,
    NullKeyUnsupportedScenario,
    NullValueSupportedScenario,
    NullValueUnsupportedScenario,
    NullCollectionReferenceScenario,
)

__all__ = [
    "Scenario",
    "ScenarioContext",
    "ScenarioResult",
    "ScenarioStatus",
    "PUT_ALL_SCENARIOS",
    "PutAllScenario",
    "SupportedNothingScenario",
    "UnsupportedNothingScenario",
    "SupportedNonePresentScenario",
    "UnsupportedNonePresentScenario",
    "SupportedSomePresentScenario",
    "UnsupportedSomePresentScenario",
    "UnsupportedAllPresentScenario",
    "NullKeySupportedScenario",
    "NullKeyUnsupportedScenario",
    "NullValueSupportedScenario",
    "NullValueUnsupportedScenario",
    "NullCollectionReferenceScenario",
]
