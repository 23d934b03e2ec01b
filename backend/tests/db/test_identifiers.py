"""Identifiers - verifies ULID shape and strict monotonic ordering."""

from ulid import ULID

from billing.db.identifiers import new_ulid


def test_ulid_shape():
    value = new_ulid()
    assert len(value) == 26
    assert str(ULID.from_str(value)) == value


def test_successive_ids_strictly_ascending():
    ids = [new_ulid() for _ in range(2000)]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)
