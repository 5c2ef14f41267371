"""Bulk insertion (put_all) scenarios.

Each scenario states the features and size classes it needs. When bulk
insertion is unsupported, a batch that would change the map must be
rejected with UNSUPPORTED_OPERATION, while a batch with no net effect may
either be rejected or silently accepted.
"""

from typing import Iterable

from ..errors import ErrorKind
from ..features import CollectionSize, MapFeature, Require
from ..framework.outcome import Outcome
from ..samples import Entry
from .base import Scenario, ScenarioContext

SUPPORTS_PUT_ALL = MapFeature.SUPPORTS_PUT_ALL
ALLOWS_NULL_KEYS = MapFeature.ALLOWS_NULL_KEYS
ALLOWS_NULL_VALUES = MapFeature.ALLOWS_NULL_VALUES
ZERO = CollectionSize.ZERO


class PutAllScenario(Scenario):
    """Shared helpers for put_all scenarios."""

    def put_all(self, ctx: ScenarioContext, entries: Iterable[Entry]) -> Outcome:
        """Submit ``entries`` in one call, later duplicates of a key winning."""
        batch = {}
        for entry in entries:
            batch[entry.key] = entry.value
        return ctx.invoke(lambda: ctx.adapter.bulk_insert(batch))

    def null_key_entry(self, ctx: ScenarioContext) -> Entry:
        return Entry(None, ctx.samples.e3.value)

    def null_value_entry(self, ctx: ScenarioContext) -> Entry:
        return Entry(ctx.samples.e3.key, None)


class SupportedNothingScenario(PutAllScenario):
    requirement = Require(value=SUPPORTS_PUT_ALL)

    @property
    def name(self) -> str:
        return "put_all_supported_nothing"

    @property
    def description(self) -> str:
        return "Empty batch leaves the map unchanged"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        outcome = ctx.invoke(lambda: ctx.adapter.bulk_insert({}))
        expect.expect_succeeded(outcome)
        expect.expect_unchanged()


class UnsupportedNothingScenario(PutAllScenario):
    requirement = Require(absent=SUPPORTS_PUT_ALL)

    @property
    def name(self) -> str:
        return "put_all_unsupported_nothing"

    @property
    def description(self) -> str:
        return "Empty batch on an unsupported map may throw, must not change it"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        outcome = ctx.invoke(lambda: ctx.adapter.bulk_insert({}))
        expect.expect_tolerated(outcome, ErrorKind.UNSUPPORTED_OPERATION)
        expect.expect_unchanged()


class SupportedNonePresentScenario(PutAllScenario):
    requirement = Require(value=SUPPORTS_PUT_ALL)

    @property
    def name(self) -> str:
        return "put_all_supported_none_present"

    @property
    def description(self) -> str:
        return "Batch of absent entries is added"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        outcome = self.put_all(ctx, ctx.generator.create_disjoint_collection())
        expect.expect_succeeded(outcome)
        expect.expect_added(ctx.samples.e3, ctx.samples.e4)


class UnsupportedNonePresentScenario(PutAllScenario):
    requirement = Require(absent=SUPPORTS_PUT_ALL)

    @property
    def name(self) -> str:
        return "put_all_unsupported_none_present"

    @property
    def description(self) -> str:
        return "Batch of absent entries on an unsupported map must throw"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        outcome = self.put_all(ctx, ctx.generator.create_disjoint_collection())
        expect.expect_threw(outcome, ErrorKind.UNSUPPORTED_OPERATION)
        expect.expect_unchanged()
        expect.expect_missing(ctx.samples.e3, ctx.samples.e4)


class SupportedSomePresentScenario(PutAllScenario):
    requirement = Require(value=SUPPORTS_PUT_ALL, sizes_absent=ZERO)

    @property
    def name(self) -> str:
        return "put_all_supported_some_present"

    @property
    def description(self) -> str:
        return "Batch overlapping the map adds only the new entry"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        s = ctx.samples
        outcome = self.put_all(ctx, ctx.generator.create_overlapping_collection(s.e3, s.e0))
        expect.expect_succeeded(outcome)
        expect.expect_added(s.e3)


class UnsupportedSomePresentScenario(PutAllScenario):
    requirement = Require(absent=SUPPORTS_PUT_ALL, sizes_absent=ZERO)

    @property
    def name(self) -> str:
        return "put_all_unsupported_some_present"

    @property
    def description(self) -> str:
        return "Partially overlapping batch on an unsupported map must throw"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        s = ctx.samples
        outcome = self.put_all(ctx, ctx.generator.create_overlapping_collection(s.e3, s.e0))
        expect.expect_threw(outcome, ErrorKind.UNSUPPORTED_OPERATION)
        expect.expect_unchanged()


class UnsupportedAllPresentScenario(PutAllScenario):
    requirement = Require(absent=SUPPORTS_PUT_ALL, sizes_absent=ZERO)

    @property
    def name(self) -> str:
        return "put_all_unsupported_all_present"

    @property
    def description(self) -> str:
        return "Fully present batch on an unsupported map may throw, must not change it"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        outcome = self.put_all(ctx, ctx.generator.create_overlapping_collection(ctx.samples.e0))
        expect.expect_tolerated(outcome, ErrorKind.UNSUPPORTED_OPERATION)
        expect.expect_unchanged()


class NullKeySupportedScenario(PutAllScenario):
    requirement = Require(value={SUPPORTS_PUT_ALL, ALLOWS_NULL_KEYS})

    @property
    def name(self) -> str:
        return "put_all_null_key_supported"

    @property
    def description(self) -> str:
        return "Batch with a None key is added"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        entry = self.null_key_entry(ctx)
        outcome = self.put_all(ctx, [entry])
        expect.expect_succeeded(outcome)
        expect.expect_added(entry)


class NullKeyUnsupportedScenario(PutAllScenario):
    requirement = Require(value=SUPPORTS_PUT_ALL, absent=ALLOWS_NULL_KEYS)

    @property
    def name(self) -> str:
        return "put_all_null_key_unsupported"

    @property
    def description(self) -> str:
        return "Batch with a None key is rejected as a whole"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        outcome = self.put_all(ctx, [self.null_key_entry(ctx)])
        expect.expect_threw(outcome, ErrorKind.NULL_REJECTED)
        expect.expect_unchanged()
        expect.expect_null_key_missing(
            "no None key after unsupported put_all(contains_null_key)"
        )


class NullValueSupportedScenario(PutAllScenario):
    requirement = Require(value={SUPPORTS_PUT_ALL, ALLOWS_NULL_VALUES})

    @property
    def name(self) -> str:
        return "put_all_null_value_supported"

    @property
    def description(self) -> str:
        return "Batch with a None value is added"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        entry = self.null_value_entry(ctx)
        outcome = self.put_all(ctx, [entry])
        expect.expect_succeeded(outcome)
        expect.expect_added(entry)


class NullValueUnsupportedScenario(PutAllScenario):
    requirement = Require(value=SUPPORTS_PUT_ALL, absent=ALLOWS_NULL_VALUES)

    @property
    def name(self) -> str:
        return "put_all_null_value_unsupported"

    @property
    def description(self) -> str:
        return "Batch with a None value is rejected as a whole"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        outcome = self.put_all(ctx, [self.null_value_entry(ctx)])
        expect.expect_threw(outcome, ErrorKind.NULL_REJECTED)
        expect.expect_unchanged()
        expect.expect_null_value_missing(
            "no None value after unsupported put_all(contains_null_value)"
        )


class NullCollectionReferenceScenario(PutAllScenario):
    requirement = Require(value=SUPPORTS_PUT_ALL)

    @property
    def name(self) -> str:
        return "put_all_null_collection_reference"

    @property
    def description(self) -> str:
        return "put_all(None) must throw"

    def run(self, ctx: ScenarioContext):
        expect = ctx.expectations(self.name)
        outcome = ctx.invoke(lambda: ctx.adapter.bulk_insert(None))
        expect.expect_threw(outcome, ErrorKind.NULL_REJECTED)


PUT_ALL_SCENARIOS = [
    SupportedNothingScenario(),
    UnsupportedNothingScenario(),
    SupportedNonePresentScenario(),
    UnsupportedNonePresentScenario(),
    SupportedSomePresentScenario(),
    UnsupportedSomePresentScenario(),
    UnsupportedAllPresentScenario(),
    NullKeySupportedScenario(),
    NullKeyUnsupportedScenario(),
    NullValueSupportedScenario(),
    NullValueUnsupportedScenario(),
    NullCollectionReferenceScenario(),
]
