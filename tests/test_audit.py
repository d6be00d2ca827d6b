"""Tests for the audit log."""

import pytest

from sharesolve.demo.run_demo import TEST_VECTOR_1, TEST_VECTOR_2
from sharesolve.errors import InconsistentShares
from sharesolve.loader.shareset import load_shareset
from sharesolve.service.audit import GENESIS_HASH, AuditLog


def test_record_and_verify():
    log = AuditLog()
    shareset = load_shareset(TEST_VECTOR_1)
    log.record_solve(shareset, [s.x for s in shareset.select()])
    log.record_reject("/solve", InconsistentShares("bad", numerator=48, denominator=5))
    assert len(log.entries()) == 2
    assert log.verify_chain()


def test_solve_entry_fields():
    log = AuditLog()
    shareset = load_shareset(TEST_VECTOR_2)
    entry = log.record_solve(shareset, [1, 2, 3, 4, 5, 6, 7])
    assert entry.data == {
        "digest": shareset.digest(),
        "k": 7,
        "n": 10,
        "used": ["1", "2", "3", "4", "5", "6", "7"],
    }


def test_reject_keeps_only_error_kind():
    log = AuditLog()
    entry = log.record_reject("/decode", InconsistentShares("bad", numerator=48, denominator=5))
    assert entry.data == {"path": "/decode", "error": "InconsistentShares"}


def test_reconstruct_entry_omits_y_values():
    log = AuditLog()
    entry = log.record_reconstruct([(1, 4), (2, 7), (3, 12)])
    assert entry.data == {"k": 3, "used": ["1", "2", "3"]}


def test_secret_cannot_be_logged():
    log = AuditLog()
    with pytest.raises(ValueError):
        log.append("solve", {"digest": "abc", "k": 3, "n": 4, "used": [], "secret": "3"})
    with pytest.raises(ValueError):
        log.append("reconstruct", {"k": 1})
    with pytest.raises(ValueError):
        log.append("install", {})
    assert len(log) == 0


def test_history_by_digest():
    log = AuditLog()
    s1 = load_shareset(TEST_VECTOR_1)
    s2 = load_shareset(TEST_VECTOR_2)
    assert not log.was_solved(s1)
    log.record_solve(s1, [1, 2, 3])
    log.record_solve(s2, [1, 2, 3, 4, 5, 6, 7])
    log.record_solve(s1, [1, 2, 3])
    assert log.was_solved(s1)
    assert len(log.history(s1.digest())) == 2
    assert log.history("0" * 64) == []


def test_empty_chain():
    log = AuditLog()
    assert len(log) == 0
    assert log.verify_chain()


def test_chain_links():
    log = AuditLog()
    e1 = log.record_reconstruct([(1, 1)])
    e2 = log.record_reconstruct([(2, 2)])
    assert e1.prev_hash == GENESIS_HASH
    assert e2.prev_hash == e1.entry_hash


def test_tampering_detected():
    log = AuditLog()
    log.record_reconstruct([(1, 4), (2, 7)])
    log.record_reconstruct([(1, 4), (2, 7), (3, 12)])
    log._entries[0].data["k"] = 5
    assert not log.verify_chain()
