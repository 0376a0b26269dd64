"""HMAC-based one-time passwords (RFC 4226).

TOTP is HOTP with the time-step index as the counter, so this module is the
only place codes are computed. pyotp does the HMAC and dynamic truncation;
keys arrive as raw bytes because secrets are decoded leniently upstream.
"""

from __future__ import annotations

import hashlib

import pyotp

from twofactor import base32
from twofactor.models import Algorithm

_MAX_COUNTER = 0xFFFFFFFFFFFFFFFF


def hotp(key: bytes, counter: int, algorithm: Algorithm = Algorithm.SHA1, digits: int = 6) -> str:
    """Compute the zero-padded HOTP code for raw key bytes and a 64-bit counter."""
    if not 0 <= counter <= _MAX_COUNTER:
        raise ValueError(f"Counter out of range for 8 bytes: {counter}")
    digest = getattr(hashlib, Algorithm(algorithm).hashlib_name)
    return pyotp.HOTP(base32.encode(key), digits=digits, digest=digest).at(counter)
