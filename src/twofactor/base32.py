"""Unpadded RFC 4648 Base32, the encoding authenticator apps expect for secrets.

``decode`` is lenient: it upper-cases its input and silently drops any
character outside the alphabet, so secrets typed with spaces or dashes
still work. Use ``decode_strict`` where silently losing characters is not
acceptable.
"""

from __future__ import annotations

from twofactor.errors import MalformedSecretError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}

# A Base32 encoder never leaves 1, 3 or 6 characters in a final 8-char block.
_IMPOSSIBLE_REMAINDERS = frozenset({1, 3, 6})

# RFC 4226 asks for 128-bit keys; 80-bit keys are still common in the wild.
MIN_SECRET_BYTES = 10


def encode(data: bytes) -> str:
    """Encode bytes as uppercase Base32 without ``=`` padding."""
    out: list[str] = []
    buffer = 0
    bits = 0
    for byte in data:
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            out.append(ALPHABET[(buffer >> bits) & 0x1F])
    if bits:
        out.append(ALPHABET[(buffer << (5 - bits)) & 0x1F])
    return "".join(out)


def _unpack(values: list[int]) -> bytes:
    out = bytearray()
    buffer = 0
    bits = 0
    for value in values:
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
    # trailing bits < 8 are encoder fill and are discarded
    return bytes(out)


def decode(text: str) -> bytes:
    """Decode Base32 text, ignoring case and any non-alphabet characters.

    Never raises; empty or wholly invalid input decodes to ``b""``.
    """
    return _unpack([_INDEX[ch] for ch in text.upper() if ch in _INDEX])


def decode_strict(text: str) -> bytes:
    """Decode Base32 text, rejecting anything a Base32 encoder could not produce.

    Case-insensitive and tolerant of trailing ``=`` padding only.
    """
    body = text.upper().rstrip("=")
    values: list[int] = []
    for pos, ch in enumerate(body):
        if ch not in _INDEX:
            raise MalformedSecretError(f"Invalid Base32 character {ch!r} at position {pos}")
        values.append(_INDEX[ch])
    if len(body) % 8 in _IMPOSSIBLE_REMAINDERS:
        raise MalformedSecretError(f"Invalid Base32 length: {len(body)} characters")
    return _unpack(values)


def is_valid_secret(text: str, min_bytes: int = MIN_SECRET_BYTES) -> bool:
    """True if ``text`` strictly decodes to a key of at least ``min_bytes`` bytes."""
    try:
        return len(decode_strict(text)) >= min_bytes
    except MalformedSecretError:
        return False
