"""Behavioural properties of bulk insertion, checked through the harness."""

import pytest

from collection_conformance.containers import NullHostileMap, UnmodifiableMap
from collection_conformance.errors import ErrorKind
from collection_conformance.features import CollectionSize, MapFeature
from collection_conformance.framework.adapter import MapAdapter
from collection_conformance.samples import Entry, StringMapGenerator
from collection_conformance.scenarios.put_all import PutAllScenario

from conftest import ALL_FEATURES, seeded_context

SIZES = list(CollectionSize)


class _Helper(PutAllScenario):
    name = "helper"

    def run(self, ctx):
        pass


@pytest.mark.parametrize("size", SIZES, ids=lambda s: s.label)
@pytest.mark.parametrize("factory", [dict, NullHostileMap, UnmodifiableMap], ids=lambda f: f.__name__)
def test_insert_nothing_is_idempotent(factory, size):
    ctx = seeded_context(StringMapGenerator(factory), size=size)
    expect = ctx.expectations("insert_nothing")
    outcome = ctx.invoke(lambda: ctx.adapter.bulk_insert({}))
    expect.expect_tolerated(outcome, ErrorKind.UNSUPPORTED_OPERATION)
    expect.expect_unchanged()


@pytest.mark.parametrize("size", SIZES, ids=lambda s: s.label)
def test_disjoint_insert_is_union(dict_generator, samples, size):
    ctx = seeded_context(dict_generator, ALL_FEATURES, size)
    before = dict(ctx.adapter.entries())
    ctx.adapter.bulk_insert({samples.e3.key: samples.e3.value, samples.e4.key: samples.e4.value})
    assert dict(ctx.adapter.entries()) == {**before, samples.e3.key: samples.e3.value, samples.e4.key: samples.e4.value}


def test_overlap_grows_size_by_one(dict_generator, samples):
    ctx = seeded_context(dict_generator, ALL_FEATURES, CollectionSize.SEVERAL)
    _Helper().put_all(ctx, [samples.e3, samples.e0])
    assert ctx.adapter.size() == 4


@pytest.mark.parametrize("lenient", [False, True])
def test_rejection_is_all_or_nothing(samples, lenient):
    generator = StringMapGenerator(lambda pairs: UnmodifiableMap(pairs, lenient=lenient))
    ctx = seeded_context(generator, size=CollectionSize.ONE)
    expect = ctx.expectations("rejected_batch")
    outcome = _Helper().put_all(ctx, [samples.e3, samples.e0])
    expect.expect_threw(outcome, ErrorKind.UNSUPPORTED_OPERATION)
    expect.expect_unchanged()


def test_null_key_rejected_even_beside_valid_entries(null_hostile_generator, samples):
    ctx = seeded_context(null_hostile_generator, [MapFeature.SUPPORTS_PUT_ALL])
    expect = ctx.expectations("null_key_with_valid_entry")
    outcome = _Helper().put_all(ctx, [samples.e3, Entry(None, samples.e4.value)])
    expect.expect_threw(outcome, ErrorKind.NULL_REJECTED)
    expect.expect_unchanged()
    expect.expect_null_key_missing("no None key")
    expect.expect_missing(samples.e3)


def test_null_key_rejected_on_single_entry_fixture(null_hostile_generator, samples):
    ctx = seeded_context(null_hostile_generator, [MapFeature.SUPPORTS_PUT_ALL], CollectionSize.ONE)
    outcome = ctx.invoke(lambda: ctx.adapter.bulk_insert({None: samples.e3.value}))
    assert outcome.error is ErrorKind.NULL_REJECTED
    assert ctx.adapter.size() == 1
    assert None not in dict(ctx.adapter.entries())


def test_overlapping_key_takes_batch_value(dict_generator, samples):
    ctx = seeded_context(dict_generator, [MapFeature.SUPPORTS_PUT_ALL], CollectionSize.ONE)
    expect = ctx.expectations("overwrite")
    replaced = Entry(samples.e0.key, "Janvier")
    outcome = _Helper().put_all(ctx, [samples.e3, replaced])
    expect.expect_succeeded(outcome)
    expect.expect_added(samples.e3, replaced)
    assert ctx.adapter.size() == 2
    assert ctx.adapter.get(samples.e3.key) == samples.e3.value
    assert ctx.adapter.get(samples.e0.key) == "Janvier"


def test_batch_resolves_duplicate_keys_last_write_wins(samples):
    batches = []

    def record(target, batch):
        batches.append(dict(batch))
        target.update(batch)

    ctx = seeded_context(
        StringMapGenerator(dict),
        [MapFeature.SUPPORTS_PUT_ALL],
        CollectionSize.ZERO,
        adapter_factory=lambda target: MapAdapter(target, bulk_insert=record),
    )
    _Helper().put_all(ctx, [Entry(samples.e3.key, "first"), samples.e4, samples.e3])
    assert batches == [{samples.e3.key: samples.e3.value, samples.e4.key: samples.e4.value}]
    assert list(batches[0]) == [samples.e3.key, samples.e4.key]
