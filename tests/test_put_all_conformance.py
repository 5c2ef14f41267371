"""Full put_all conformance runs against the reference containers.

Every (size class, scenario) pair is a separate test; scenarios whose
requirements the container does not meet are collected and skipped.
"""

import pytest

from collection_conformance.containers import NullHostileMap, UnmodifiableMap
from collection_conformance.features import CollectionSize, MapFeature
from collection_conformance.framework.suite_builder import MapTestSuiteBuilder
from collection_conformance.samples import StringMapGenerator

ALL_SIZES = (CollectionSize.ZERO, CollectionSize.ONE, CollectionSize.SEVERAL)

DICT_SUITE = (MapTestSuiteBuilder.using(StringMapGenerator(dict))
    .named("dict")
    .with_features(
        MapFeature.SUPPORTS_PUT_ALL,
        MapFeature.ALLOWS_NULL_KEYS,
        MapFeature.ALLOWS_NULL_VALUES,
    )
    .with_sizes(*ALL_SIZES)
    .create_test_suite())

NULL_HOSTILE_SUITE = (MapTestSuiteBuilder.using(StringMapGenerator(NullHostileMap))
    .named("null_hostile")
    .with_features(MapFeature.SUPPORTS_PUT_ALL)
    .with_sizes(*ALL_SIZES)
    .create_test_suite())

UNMODIFIABLE_SUITE = (MapTestSuiteBuilder.using(StringMapGenerator(UnmodifiableMap))
    .named("unmodifiable")
    .with_features()
    .with_sizes(*ALL_SIZES)
    .create_test_suite())

LENIENT_UNMODIFIABLE_SUITE = (MapTestSuiteBuilder.using(
        StringMapGenerator(lambda pairs: UnmodifiableMap(pairs, lenient=True)))
    .named("unmodifiable_lenient")
    .with_features()
    .with_sizes(*ALL_SIZES)
    .create_test_suite())


@pytest.mark.parametrize("case", DICT_SUITE.pytest_params())
def test_dict(case):
    case.run()


@pytest.mark.parametrize("case", NULL_HOSTILE_SUITE.pytest_params())
def test_null_hostile_map(case):
    case.run()


@pytest.mark.parametrize("case", UNMODIFIABLE_SUITE.pytest_params())
def test_unmodifiable_map(case):
    case.run()


@pytest.mark.parametrize("case", LENIENT_UNMODIFIABLE_SUITE.pytest_params())
def test_lenient_unmodifiable_map(case):
    case.run()


@pytest.mark.parametrize(
    "suite,expected_eligible",
    [
        (DICT_SUITE, 17),
        (NULL_HOSTILE_SUITE, 17),
        (UNMODIFIABLE_SUITE, 10),
        (LENIENT_UNMODIFIABLE_SUITE, 10),
    ],
)
def test_suite_runs_clean(suite, expected_eligible):
    results = suite.run_all()
    assert len(results) == 36
    statuses = [r.status.value for r in results.values()]
    assert statuses.count("pass") == expected_eligible, {
        name: str(r) for name, r in results.items() if r.status.value != "skip"
    }
    assert statuses.count("skip") == 36 - expected_eligible
