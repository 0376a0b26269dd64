"""Tests for Pydantic data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from twofactor.models import (
    Algorithm,
    BackupCodeVerification,
    TotpConfig,
    TotpConfigOverride,
    TotpSecret,
    TotpVerification,
)


def test_algorithm_enum():
    assert Algorithm.SHA1 == "SHA1"
    assert Algorithm.SHA512.hashlib_name == "sha512"
    assert len(Algorithm) == 3


def test_totp_config_defaults():
    c = TotpConfig(issuer="Acme")
    assert c.algorithm == Algorithm.SHA1
    assert c.digits == 6
    assert c.period == 30
    assert c.label == ""


@pytest.mark.parametrize("fields", [{"digits": 7}, {"period": 0}, {"period": -30}, {"algorithm": "MD5"}])
def test_totp_config_invariants(fields):
    with pytest.raises(ValidationError):
        TotpConfig(issuer="Acme", **fields)


def test_totp_config_is_frozen():
    c = TotpConfig(issuer="Acme")
    with pytest.raises(ValidationError):
        c.digits = 8


def test_override_all_optional():
    o = TotpConfigOverride()
    assert o.model_dump(exclude_none=True) == {}


def test_override_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        TotpConfigOverride(secret="nope")


def test_manual_entry_key_in_dump():
    s = TotpSecret(
        secret="JBSWY3DPEHPK3PXP",
        provisioning_uri="otpauth://totp/A:b?secret=JBSWY3DPEHPK3PXP",
        config=TotpConfig(issuer="A", label="b"),
    )
    assert s.manual_entry_key == "JBSW Y3DP EHPK 3PXP"
    assert s.model_dump()["manual_entry_key"] == "JBSW Y3DP EHPK 3PXP"


def test_verification_defaults():
    v = TotpVerification(submitted_code="123456", is_valid=False)
    assert v.seconds_remaining == 0
    assert v.matched_step is None


def test_backup_code_verification():
    v = BackupCodeVerification(is_valid=True, remaining_codes=["AAAA-1111"])
    assert v.remaining_codes == ["AAAA-1111"]
