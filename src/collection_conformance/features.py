"""Capability declarations and requirement predicates.

A container under test declares a set of ``MapFeature`` values it supports.
Each scenario carries a ``Require`` that states which features must be
present, which must be absent, and which size classes it cannot run on.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable

from .errors import ConflictingRequirements


class MapFeature(Enum):
    """Optional map behaviours relevant to bulk insertion."""

    SUPPORTS_PUT_ALL = "supports_put_all"
    ALLOWS_NULL_KEYS = "allows_null_keys"
    ALLOWS_NULL_VALUES = "allows_null_values"


class CollectionSize(Enum):
    """Size class of a seeded fixture.

    ZERO is the empty size class: the fixture holds no entries.
    """

    ZERO = ("zero", 0)
    ONE = ("one", 1)
    SEVERAL = ("several", 3)

    def __init__(self, label: str, num_elements: int):
        self.label = label
        self.num_elements = num_elements

    @classmethod
    def from_label(cls, label: str) -> "CollectionSize":
        for size in cls:
            if size.label == label:
                return size
        raise ValueError(
            f"Unknown collection size '{label}'. "
            f"Expected one of: {', '.join(s.label for s in cls)}"
        )


@dataclass(frozen=True)
class CapabilitySet:
    """Resolved features of one container plus the fixture's size class.

    Attributes:
        features: Features the container declares as supported
        size: Size class the fixture is seeded for
    """

    features: FrozenSet[MapFeature] = frozenset()
    size: CollectionSize = CollectionSize.ZERO

    @classmethod
    def of(cls, *features: MapFeature, size: CollectionSize = CollectionSize.ZERO) -> "CapabilitySet":
        return cls(frozenset(features), size)

    def has(self, feature: MapFeature) -> bool:
        return feature in self.features

    def with_size(self, size: CollectionSize) -> "CapabilitySet":
        return CapabilitySet(self.features, size)

    def __str__(self) -> str:
        names = ",".join(sorted(f.name for f in self.features)) or "-"
        return f"{names} size={self.size.label}"


def _frozen(features: Iterable) -> FrozenSet:
    if isinstance(features, (MapFeature, CollectionSize)):
        return frozenset([features])
    return frozenset(features)


@dataclass(frozen=True)
class Require:
    """Precondition a scenario places on the capability set.

    Attributes:
        value: Features that must be present
        absent: Features that must not be present
        sizes_absent: Size classes the scenario cannot run on

    Raises:
        ConflictingRequirements: If a feature is both required and absent
    """

    value: FrozenSet[MapFeature] = field(default_factory=frozenset)
    absent: FrozenSet[MapFeature] = field(default_factory=frozenset)
    sizes_absent: FrozenSet[CollectionSize] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "value", _frozen(self.value))
        object.__setattr__(self, "absent", _frozen(self.absent))
        object.__setattr__(self, "sizes_absent", _frozen(self.sizes_absent))

        overlap = self.value & self.absent
        if overlap:
            raise ConflictingRequirements(
                f"Features required and absent at the same time: "
                f"{', '.join(sorted(f.name for f in overlap))}"
            )
        if len(self.sizes_absent) == len(CollectionSize):
            raise ConflictingRequirements("Requirement excludes every collection size")

    def is_satisfied_by(self, capabilities: CapabilitySet) -> bool:
        if capabilities.size in self.sizes_absent:
            return False
        if not self.value <= capabilities.features:
            return False
        return not (self.absent & capabilities.features)

    def unmet(self, capabilities: CapabilitySet) -> str:
        """Describe why the requirement is not met, or return an empty string."""
        reasons = []
        missing = self.value - capabilities.features
        if missing:
            reasons.append("requires " + ", ".join(sorted(f.name for f in missing)))
        present = self.absent & capabilities.features
        if present:
            reasons.append("requires absent " + ", ".join(sorted(f.name for f in present)))
        if capabilities.size in self.sizes_absent:
            reasons.append(f"not applicable to size {capabilities.size.label}")
        return "; ".join(reasons)
