"""Pytest fixtures for conformance harness tests."""

from __future__ import annotations

import pytest

from collection_conformance.containers import NullHostileMap
from collection_conformance.features import CapabilitySet, CollectionSize, MapFeature
from collection_conformance.framework.adapter import MapAdapter
from collection_conformance.framework.outcome import ErrorClassifier
from collection_conformance.samples import StringMapGenerator
from collection_conformance.scenarios.base import ScenarioContext

pytest_plugins = ["pytester"]

ALL_FEATURES = (
    MapFeature.SUPPORTS_PUT_ALL,
    MapFeature.ALLOWS_NULL_KEYS,
    MapFeature.ALLOWS_NULL_VALUES,
)


def seeded_context(generator, features=(), size=CollectionSize.ONE, adapter_factory=MapAdapter):
    """Build a scenario context over a fixture seeded for ``size``."""
    seeded = generator.samples().as_list()[:size.num_elements]
    return ScenarioContext(
        generator=generator,
        adapter=adapter_factory(generator.create(seeded)),
        capabilities=CapabilitySet(frozenset(features), size),
        classifier=ErrorClassifier(),
    )


@pytest.fixture(scope="session")
def dict_generator():
    return StringMapGenerator(dict)


@pytest.fixture(scope="session")
def null_hostile_generator():
    return StringMapGenerator(NullHostileMap)


@pytest.fixture(scope="session")
def samples(dict_generator):
    return dict_generator.samples()

