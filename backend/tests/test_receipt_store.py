from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from receipt_points.services.identifiers import IdentifierAllocator, new_receipt_id
from receipt_points.services.receipt_store import ReceiptNotFoundError, ReceiptStore

UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}")


def test_new_receipt_id_is_uuid4():
    assert UUID_RE.fullmatch(new_receipt_id())


def test_allocator_retries_until_unused():
    candidates = iter(["taken-1", "taken-2", "fresh"])
    allocator = IdentifierAllocator(factory=lambda: next(candidates))
    assert allocator.allocate(lambda c: c.startswith("taken")) == "fresh"


def test_put_then_get(store):
    store.put("abc", 28)
    assert store.get("abc") == 28
    assert store.contains("abc")
    assert len(store) == 1


def test_get_unknown_raises(store):
    with pytest.raises(ReceiptNotFoundError) as excinfo:
        store.get("missing")
    assert excinfo.value.receipt_id == "missing"
    assert not store.contains("missing")


def test_add_skips_identifiers_already_in_use():
    candidates = iter(["dup", "dup", "other"])
    store = ReceiptStore(allocator=IdentifierAllocator(factory=lambda: next(candidates)))
    assert store.add(10) == "dup"
    assert store.add(20) == "other"
    assert store.get("dup") == 10
    assert store.get("other") == 20


def test_clear(store):
    store.add(5)
    store.clear()
    assert len(store) == 0


def test_concurrent_adds_get_distinct_ids(store):
    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(store.add, range(500)))
    assert len(set(ids)) == 500
    assert len(store) == 500
    for points, receipt_id in enumerate(ids):
        assert store.get(receipt_id) == points


def test_concurrent_adds_with_colliding_factory():
    # Every thread draws from a tiny candidate space, so only the lock keeps ids unique
    counter = iter(range(10_000))
    store = ReceiptStore(allocator=IdentifierAllocator(factory=lambda: f"id-{next(counter) % 64}"))
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(store.add, range(64)))
    assert sorted(ids) == sorted(f"id-{n}" for n in range(64))
