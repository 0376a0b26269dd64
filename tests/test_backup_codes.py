"""Tests for single-use backup code verification."""

from __future__ import annotations

import re

from twofactor.backup_codes import generate_new_backup_codes, verify_backup_code


def test_valid_code_is_removed():
    known = ["AAAA-1111", "BBBB-2222"]
    result = verify_backup_code(known, "AAAA-1111")
    assert result.is_valid
    assert result.remaining_codes == ["BBBB-2222"]


def test_verification_does_not_mutate_input():
    known = ["AAAA-1111", "BBBB-2222"]
    verify_backup_code(known, "AAAA-1111")
    assert known == ["AAAA-1111", "BBBB-2222"]
    # the caller's stored list is what spends a code, not this call
    assert verify_backup_code(known, "AAAA-1111").is_valid


def test_unknown_code_leaves_list_unchanged():
    known = ["AAAA-1111", "BBBB-2222"]
    result = verify_backup_code(known, "CCCC-3333")
    assert not result.is_valid
    assert result.remaining_codes == known


def test_match_is_exact():
    known = ["AAAA-1111"]
    assert not verify_backup_code(known, "aaaa-1111").is_valid
    assert not verify_backup_code(known, "AAAA1111").is_valid
    assert not verify_backup_code(known, " AAAA-1111").is_valid


def test_only_first_duplicate_removed_and_order_kept():
    known = ["CCCC-3333", "AAAA-1111", "BBBB-2222", "AAAA-1111"]
    result = verify_backup_code(known, "AAAA-1111")
    assert result.remaining_codes == ["CCCC-3333", "BBBB-2222", "AAAA-1111"]


def test_spend_all_codes():
    codes = ["AAAA-1111", "BBBB-2222", "CCCC-3333"]
    for code in list(codes):
        result = verify_backup_code(codes, code)
        assert result.is_valid
        codes = result.remaining_codes
    assert codes == []
    assert not verify_backup_code(codes, "AAAA-1111").is_valid


def test_accepts_tuple():
    result = verify_backup_code(("AAAA-1111", "BBBB-2222"), "BBBB-2222")
    assert result.remaining_codes == ["AAAA-1111"]


def test_generate_new_backup_codes():
    codes = generate_new_backup_codes()
    assert len(codes) == 10
    assert all(re.fullmatch(r"[0-9A-F]{4}-[0-9A-F]{4}", c) for c in codes)
    assert generate_new_backup_codes() != codes
