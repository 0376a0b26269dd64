"""Stateless facade over the engine's operations, for callers that inject dependencies."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from twofactor import backup_codes, provisioning, verifier
from twofactor.config import ConfigOverride, override_fields
from twofactor.models import BackupCodeVerification, TotpSecret, TotpToken, TotpVerification


@dataclass(frozen=True)
class TotpEngine:
    """Bundles the TOTP operations with an optional default config override.

    Holds no per-secret state; one instance can be shared across threads.
    A per-call override is merged onto ``config_override``, its fields winning.
    """

    config_override: ConfigOverride | None = None

    def generate_secret(
        self, label: str, config_override: ConfigOverride | None = None
    ) -> TotpSecret:
        return provisioning.generate_secret(label, self._override(config_override))

    def generate_token(
        self,
        secret: str,
        config_override: ConfigOverride | None = None,
        now: float | None = None,
    ) -> TotpToken:
        return verifier.generate_token(secret, self._override(config_override), now)

    def verify(
        self,
        secret: str,
        submitted_code: str,
        config_override: ConfigOverride | None = None,
        now: float | None = None,
    ) -> TotpVerification:
        return verifier.verify(secret, submitted_code, self._override(config_override), now)

    def verify_backup_code(
        self, known_codes: Sequence[str], submitted_code: str
    ) -> BackupCodeVerification:
        return backup_codes.verify_backup_code(known_codes, submitted_code)

    def generate_new_backup_codes(self) -> list[str]:
        return backup_codes.generate_new_backup_codes()

    def _override(self, config_override: ConfigOverride | None) -> ConfigOverride | None:
        if config_override is None:
            return self.config_override
        if self.config_override is None:
            return config_override
        return {**override_fields(self.config_override), **override_fields(config_override)}
