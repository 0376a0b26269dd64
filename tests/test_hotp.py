"""Tests for HOTP code generation."""

from __future__ import annotations

import hashlib

import pyotp
import pytest

from twofactor import base32
from twofactor.hotp import hotp
from twofactor.models import Algorithm

RFC_SECRET = b"12345678901234567890"

# RFC 4226 Appendix D
RFC4226_CODES = [
    "755224", "287082", "359152", "969429", "338314",
    "254676", "287922", "162583", "399871", "520489",
]


@pytest.mark.parametrize("counter,expected", list(enumerate(RFC4226_CODES)))
def test_rfc4226_vectors(counter, expected):
    assert hotp(RFC_SECRET, counter) == expected


def test_rfc4226_counter_zero_eight_digits():
    assert hotp(RFC_SECRET, 0, Algorithm.SHA1, 8) == "84755224"


# RFC 6238 Appendix B, T = 59 s and T = 1111111109 s with a 30 s step
@pytest.mark.parametrize(
    "algorithm,key,step,expected",
    [
        (Algorithm.SHA1, RFC_SECRET, 1, "94287082"),
        (Algorithm.SHA256, b"12345678901234567890123456789012", 1, "46119246"),
        (Algorithm.SHA512, b"1234567890" * 6 + b"1234", 1, "90693936"),
        (Algorithm.SHA1, RFC_SECRET, 37037036, "07081804"),
        (Algorithm.SHA256, b"12345678901234567890123456789012", 37037036, "68084774"),
        (Algorithm.SHA512, b"1234567890" * 6 + b"1234", 37037036, "25091201"),
    ],
)
def test_rfc6238_vectors(algorithm, key, step, expected):
    assert hotp(key, step, algorithm, 8) == expected


def test_deterministic():
    first = hotp(b"secret-key", 123456, Algorithm.SHA256, 8)
    assert hotp(b"secret-key", 123456, Algorithm.SHA256, 8) == first


def test_codes_zero_padded():
    codes = [hotp(RFC_SECRET, c, Algorithm.SHA1, 6) for c in range(200)]
    assert all(len(c) == 6 and c.isdigit() for c in codes)
    assert any(c.startswith("0") for c in codes)
    assert hotp(RFC_SECRET, 37037036, Algorithm.SHA1, 8) == "07081804"


@pytest.mark.parametrize("algorithm", list(Algorithm))
@pytest.mark.parametrize("digits", [6, 8])
@pytest.mark.parametrize("key", [RFC_SECRET, bytes(range(32)), b"\xff" * 64])
def test_matches_pyotp_hotp(algorithm, digits, key):
    digest = getattr(hashlib, algorithm.lower())
    reference = pyotp.HOTP(base32.encode(key), digits=digits, digest=digest)
    for counter in (0, 1, 37037036, 2**40):
        assert hotp(key, counter, algorithm, digits) == reference.at(counter)


def test_algorithm_given_as_string():
    assert hotp(RFC_SECRET, 0, "SHA1", 6) == "755224"


def test_counter_out_of_range():
    with pytest.raises(ValueError):
        hotp(RFC_SECRET, -1)
    with pytest.raises(ValueError):
        hotp(RFC_SECRET, 2**64)
