"""Capability sets and requirement predicates."""

import pytest

from collection_conformance.errors import ConflictingRequirements
from collection_conformance.features import CapabilitySet, CollectionSize, MapFeature, Require

K = MapFeature.SUPPORTS_PUT_ALL
NK = MapFeature.ALLOWS_NULL_KEYS
NV = MapFeature.ALLOWS_NULL_VALUES


def test_collection_size_element_counts():
    assert [s.num_elements for s in CollectionSize] == [0, 1, 3]
    assert CollectionSize.from_label("several") is CollectionSize.SEVERAL


def test_collection_size_unknown_label():
    with pytest.raises(ValueError, match="Unknown collection size 'many'"):
        CollectionSize.from_label("many")


def test_capability_set_is_immutable():
    caps = CapabilitySet.of(K, size=CollectionSize.ONE)
    assert caps.has(K)
    assert not caps.has(NK)
    with pytest.raises(AttributeError):
        caps.size = CollectionSize.ZERO


def test_with_size_keeps_features():
    caps = CapabilitySet.of(K, NV).with_size(CollectionSize.SEVERAL)
    assert caps.features == frozenset({K, NV})
    assert caps.size is CollectionSize.SEVERAL


def test_require_accepts_single_feature_or_set():
    assert Require(value=K).value == frozenset({K})
    assert Require(value={K, NK}).value == frozenset({K, NK})


@pytest.mark.parametrize(
    "requirement,caps,expected",
    [
        (Require(value=K), CapabilitySet.of(K), True),
        (Require(value=K), CapabilitySet.of(), False),
        (Require(absent=K), CapabilitySet.of(), True),
        (Require(absent=K), CapabilitySet.of(K, NK), False),
        (Require(value={K, NK}), CapabilitySet.of(K), False),
        (Require(value=K, absent=NK), CapabilitySet.of(K, NV), True),
        (Require(value=K, absent=NK), CapabilitySet.of(K, NK), False),
        (Require(value=K, sizes_absent=CollectionSize.ZERO), CapabilitySet.of(K), False),
        (
            Require(value=K, sizes_absent=CollectionSize.ZERO),
            CapabilitySet.of(K, size=CollectionSize.ONE),
            True,
        ),
    ],
)
def test_require_is_satisfied_by(requirement, caps, expected):
    assert requirement.is_satisfied_by(caps) is expected


def test_require_conflict_fails_hard():
    with pytest.raises(ConflictingRequirements, match="SUPPORTS_PUT_ALL"):
        Require(value=K, absent=K)


def test_require_excluding_every_size_fails_hard():
    with pytest.raises(ConflictingRequirements):
        Require(sizes_absent=set(CollectionSize))


def test_unmet_explains_each_reason():
    requirement = Require(value={K, NK}, absent=NV, sizes_absent=CollectionSize.ZERO)
    reason = requirement.unmet(CapabilitySet.of(NV))
    assert "requires ALLOWS_NULL_KEYS, SUPPORTS_PUT_ALL" in reason
    assert "requires absent ALLOWS_NULL_VALUES" in reason
    assert "not applicable to size zero" in reason


def test_unmet_is_empty_when_satisfied():
    assert Require(value=K).unmet(CapabilitySet.of(K)) == ""
