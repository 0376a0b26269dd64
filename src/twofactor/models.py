"""Pydantic models for configuration and results passed across the engine boundary."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, computed_field


class Algorithm(StrEnum):
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def hashlib_name(self) -> str:
        return self.value.lower()


# === Configuration ===


class TotpConfig(BaseModel):
    """Immutable parameters of one TOTP credential."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    algorithm: Algorithm = Algorithm.SHA1
    digits: Literal[6, 8] = 6
    period: PositiveInt = 30
    issuer: str
    label: str = ""


class TotpConfigOverride(BaseModel):
    """Partial TotpConfig merged onto the defaults for a single call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    algorithm: Algorithm | None = None
    digits: Literal[6, 8] | None = None
    period: PositiveInt | None = None
    issuer: str | None = None
    label: str | None = None


# === Results ===


class TotpSecret(BaseModel):
    """Enrollment material handed to the caller for storage."""

    model_config = ConfigDict(frozen=True)

    secret: str
    provisioning_uri: str
    backup_codes: list[str] = Field(default_factory=list)
    config: TotpConfig

    @computed_field  # type: ignore[prop-decorator]
    @property
    def manual_entry_key(self) -> str:
        """The secret in space-separated groups of four, for typing by hand."""
        return " ".join(self.secret[i : i + 4] for i in range(0, len(self.secret), 4))


class TotpToken(BaseModel):
    """The code an authenticator app would display at a given moment."""

    model_config = ConfigDict(frozen=True)

    code: str
    step: int
    seconds_remaining: int


class TotpVerification(BaseModel):
    """Outcome of checking one submitted TOTP code."""

    model_config = ConfigDict(frozen=True)

    submitted_code: str
    is_valid: bool
    seconds_remaining: int = 0
    matched_step: int | None = None  # counter that matched; callers use it to refuse replays


class BackupCodeVerification(BaseModel):
    """Outcome of checking a backup code; remaining_codes is the new list to persist."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    remaining_codes: list[str] = Field(default_factory=list)
