"""Exception types raised by the engine.

A code that simply does not match is never an exception; verification
returns ``is_valid=False`` for that case.
"""

from __future__ import annotations


class TwoFactorError(Exception):
    """Base class for all engine errors."""


class SecretGenerationError(TwoFactorError, RuntimeError):
    """The operating system's secure random source is unavailable."""


class MalformedSecretError(TwoFactorError, ValueError):
    """A stored secret cannot be decoded into usable key material."""
