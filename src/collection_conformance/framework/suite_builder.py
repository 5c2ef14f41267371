"""Builds conformance suites for one container under test.

Example:
    suite = (MapTestSuiteBuilder.using(StringMapGenerator(dict))
        .named("dict")
        .with_features(MapFeature.SUPPORTS_PUT_ALL,
                       MapFeature.ALLOWS_NULL_KEYS,
                       MapFeature.ALLOWS_NULL_VALUES)
        .with_sizes(CollectionSize.ZERO, CollectionSize.ONE, CollectionSize.SEVERAL)
        .create_test_suite())

    @pytest.mark.parametrize("case", suite.pytest_params())
    def test_dict(case):
        case.run()
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import pytest

from ..config import HarnessConfig
from ..errors import FixtureError
from ..features import CapabilitySet, CollectionSize, MapFeature
from ..samples import SampleMapGenerator
from ..scenarios.base import Scenario, ScenarioContext, ScenarioResult
from ..scenarios.put_all import PUT_ALL_SCENARIOS
from .adapter import MapAdapter
from .outcome import ErrorClassifier


@dataclass
class ConformanceCase:
    """One scenario bound to one container and one size class.

    Attributes:
        suite_name: Name of the container under test
        scenario: Scenario to run
        capabilities: Declared features and the fixture's size class
        generator: Builds and seeds the fixture
        adapter_factory: Wraps the fixture for the harness
        config: Harness settings
    """

    suite_name: str
    scenario: Scenario
    capabilities: CapabilitySet
    generator: SampleMapGenerator
    adapter_factory: Callable[[object], MapAdapter]
    config: HarnessConfig

    @property
    def name(self) -> str:
        return f"{self.suite_name} [{self.capabilities.size.label}] {self.scenario.name}"

    @property
    def id(self) -> str:
        """Identifier safe for pytest node ids and -k expressions."""
        return f"{self.suite_name}-{self.capabilities.size.label}-{self.scenario.name}"

    @property
    def eligible(self) -> bool:
        return self.scenario.is_eligible(self.capabilities)

    def build_context(self) -> ScenarioContext:
        """Seed a fresh fixture and check it holds exactly the seeded samples.

        Raises:
            FixtureError: If the fixture's size or contents disagree with
                its size class
        """
        size = self.capabilities.size
        seeded = self.generator.samples().as_list()[:size.num_elements]
        adapter = self.adapter_factory(self.generator.create(seeded))

        if adapter.size() != size.num_elements:
            raise FixtureError(
                f"{self.suite_name}: fixture for size '{size.label}' holds "
                f"{adapter.size()} entries, expected {size.num_elements}"
            )
        contents = dict(adapter.entries())
        if contents != dict(seeded):
            raise FixtureError(
                f"{self.suite_name}: fixture for size '{size.label}' holds "
                f"{contents}, expected {dict(seeded)}"
            )

        return ScenarioContext(
            generator=self.generator,
            adapter=adapter,
            capabilities=self.capabilities,
            classifier=ErrorClassifier(self.config.error_types),
        )

    def run(self):
        """Run the scenario, raising on any violation."""
        if not self.eligible:
            pytest.skip(self.scenario.requirement.unmet(self.capabilities))
        self.config.log("ConformanceCase", f"Running {self.name}: {self.scenario.description}")
        self.scenario.run(self.build_context())

    def execute(self) -> ScenarioResult:
        """Run the scenario and report the result instead of raising."""
        result = self.scenario.execute(self.capabilities, self.build_context)
        self.config.log("ConformanceCase", f"{self.name}: {result}")
        return result

    def pytest_param(self):
        marks = [pytest.mark.timeout(self.config.timeout)]
        if not self.eligible:
            marks.append(pytest.mark.skip(reason=self.scenario.requirement.unmet(self.capabilities)))
        return pytest.param(self, id=self.id, marks=marks)


class ConformanceSuite:
    """Ordered collection of cases for one container."""

    def __init__(self, name: str, cases: List[ConformanceCase]):
        self.name = name
        self.cases = cases

    def __iter__(self):
        return iter(self.cases)

    def __len__(self) -> int:
        return len(self.cases)

    def eligible_cases(self) -> List[ConformanceCase]:
        return [c for c in self.cases if c.eligible]

    def run_all(self) -> Dict[str, ScenarioResult]:
        """Execute every case; one failure does not stop the rest."""
        return {case.name: case.execute() for case in self.cases}

    def pytest_params(self) -> list:
        return [case.pytest_param() for case in self.cases]


class MapTestSuiteBuilder:
    """Fluent builder for a container's conformance suite.

    Fails hard on incomplete or contradictory configuration.
    """

    def __init__(self, generator: SampleMapGenerator):
        if generator is None:
            raise ValueError("A sample generator is required")
        self._generator = generator
        self._name: Optional[str] = None
        self._features: Optional[frozenset] = None
        self._sizes: List[CollectionSize] = []
        self._scenarios: List[Scenario] = list(PUT_ALL_SCENARIOS)
        self._adapter_factory: Callable[[object], MapAdapter] = MapAdapter
        self._config: Optional[HarnessConfig] = None

    @classmethod
    def using(cls, generator: SampleMapGenerator) -> "MapTestSuiteBuilder":
        return cls(generator)

    def named(self, name: str) -> "MapTestSuiteBuilder":
        if not name:
            raise ValueError("Suite name cannot be empty")
        self._name = name
        return self

    def with_features(self, *features: MapFeature) -> "MapTestSuiteBuilder":
        """Declare supported features. Calling with no arguments declares none."""
        for feature in features:
            if not isinstance(feature, MapFeature):
                raise ValueError(f"Not a MapFeature: {feature!r}")
        self._features = frozenset(features)
        return self

    def with_sizes(self, *sizes: CollectionSize) -> "MapTestSuiteBuilder":
        if not sizes:
            raise ValueError("At least one collection size is required")
        if len(set(sizes)) != len(sizes):
            raise ValueError(f"Duplicate collection sizes: {[s.label for s in sizes]}")
        self._sizes = list(sizes)
        return self

    def with_scenarios(self, *scenarios: Scenario) -> "MapTestSuiteBuilder":
        names = [s.name for s in scenarios]
        if not scenarios:
            raise ValueError("At least one scenario is required")
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate scenario names: {names}")
        self._scenarios = list(scenarios)
        return self

    def with_adapter(self, adapter_factory: Callable[[object], MapAdapter]) -> "MapTestSuiteBuilder":
        self._adapter_factory = adapter_factory
        return self

    def with_config(self, config: HarnessConfig) -> "MapTestSuiteBuilder":
        self._config = config
        return self

    def create_test_suite(self) -> ConformanceSuite:
        """Build one case per (size class, scenario) pair.

        Raises:
            ValueError: If name, features or sizes were not given
        """
        if self._name is None:
            raise ValueError("Suite has no name. Call named() before create_test_suite()")
        if self._features is None:
            raise ValueError(
                f"Suite '{self._name}' declares no features. "
                "Call with_features() (with no arguments for none)"
            )
        if not self._sizes:
            raise ValueError(f"Suite '{self._name}' has no collection sizes. Call with_sizes()")

        config = self._config or HarnessConfig()
        cases = [
            ConformanceCase(
                suite_name=self._name,
                scenario=scenario,
                capabilities=CapabilitySet(self._features, size),
                generator=self._generator,
                adapter_factory=self._adapter_factory,
                config=config,
            )
            for size in self._sizes
            for scenario in self._scenarios
        ]
        config.log(
            "SuiteBuilder",
            f"Built suite '{self._name}': {len(cases)} cases, "
            f"{sum(1 for c in cases if c.eligible)} eligible",
        )
        return ConformanceSuite(self._name, cases)
