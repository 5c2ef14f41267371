"""Base classes for conformance scenarios."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..features import CapabilitySet, Require
from ..framework.adapter import MapAdapter
from ..framework.expectations import Expectations
from ..framework.outcome import ErrorClassifier, Outcome
from ..samples import SampleElements, SampleMapGenerator


class ScenarioStatus(Enum):
    """Status of scenario execution."""

    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"
    SKIP = "skip"


@dataclass
class ScenarioResult:
    """Result of scenario execution."""

    status: ScenarioStatus
    duration_ms: float
    error_message: Optional[str] = None

    def __str__(self) -> str:
        status_str = self.status.value.upper()
        duration_str = f"{self.duration_ms:.2f}ms"

        if self.status == ScenarioStatus.PASS:
            return f"✓ {status_str} ({duration_str})"
        elif self.status == ScenarioStatus.SKIP:
            return f"- {status_str}: {self.error_message or 'not eligible'}"
        elif self.error_message:
            return f"✗ {status_str} ({duration_str}): {self.error_message}"
        else:
            return f"✗ {status_str} ({duration_str})"


@dataclass
class ScenarioContext:
    """Everything one scenario run may touch.

    The adapter wraps a freshly seeded fixture owned by this run alone.
    """

    generator: SampleMapGenerator
    adapter: MapAdapter
    capabilities: CapabilitySet
    classifier: ErrorClassifier

    @property
    def samples(self) -> SampleElements:
        return self.generator.samples()

    def expectations(self, scenario: str) -> Expectations:
        return Expectations(scenario, self.adapter, self.adapter.entries(), self.classifier)

    def invoke(self, operation: Callable[[], None]) -> Outcome:
        return self.classifier.invoke(operation)


class Scenario(ABC):
    """Base class for all conformance scenarios."""

    requirement: Require = Require()

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique scenario name."""
        pass

    @property
    def description(self) -> str:
        """Human-readable description."""
        return self.name

    def is_eligible(self, capabilities: CapabilitySet) -> bool:
        return self.requirement.is_satisfied_by(capabilities)

    @abstractmethod
    def run(self, ctx: ScenarioContext):
        """Run the scenario, raising ``ExpectationFailure`` on a violation."""
        pass

    def execute(
        self, capabilities: CapabilitySet, build_context: Callable[[], ScenarioContext]
    ) -> ScenarioResult:
        """Run scenario and return result instead of raising.

        The context is only built for eligible runs, and inside the timed
        path, so a seeding failure is reported as ERROR like any other.
        """
        if not self.is_eligible(capabilities):
            return ScenarioResult(
                status=ScenarioStatus.SKIP,
                duration_ms=0.0,
                error_message=self.requirement.unmet(capabilities),
            )
        return self._timed_execute(lambda: self.run(build_context()))

    def _timed_execute(self, func):
        """Execute function and measure duration."""
        start = time.perf_counter()
        try:
            func()
            duration_ms = (time.perf_counter() - start) * 1000
            return ScenarioResult(status=ScenarioStatus.PASS, duration_ms=duration_ms)
        except AssertionError as e:
            duration_ms = (time.perf_counter() - start) * 1000
            return ScenarioResult(
                status=ScenarioStatus.FAIL,
                duration_ms=duration_ms,
                error_message=str(e),
            )
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            return ScenarioResult(
                status=ScenarioStatus.ERROR,
                duration_ms=duration_ms,
                error_message=f"{type(e).__name__}: {str(e)}",
            )
