"""Central configuration loaded from environment variables and YAML profiles."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from twofactor.models import Algorithm, TotpConfig, TotpConfigOverride

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
PROFILES_DIR = CONFIG_DIR / "profiles"

ConfigOverride = TotpConfigOverride | TotpConfig | Mapping[str, Any]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TWOFACTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Provisioning URI display
    default_issuer: str = "TwoFactor"

    # Code parameters (RFC 6238 defaults, understood by every authenticator app)
    default_algorithm: Algorithm = Algorithm.SHA1
    default_digits: int = 6
    default_period: PositiveInt = 30

    # Logging
    log_level: str = "INFO"

    @field_validator("default_digits")
    @classmethod
    def _six_or_eight(cls, v: int) -> int:
        if v not in (6, 8):
            raise ValueError("default_digits must be 6 or 8")
        return v


def default_totp_config(label: str = "") -> TotpConfig:
    """Build the documented default config from current settings."""
    return TotpConfig(
        algorithm=settings.default_algorithm,
        digits=settings.default_digits,
        period=settings.default_period,
        issuer=settings.default_issuer,
        label=label,
    )


def override_fields(override: ConfigOverride | None) -> dict[str, Any]:
    if override is None:
        return {}
    if isinstance(override, TotpConfig):
        return override.model_dump()
    if not isinstance(override, TotpConfigOverride):
        override = TotpConfigOverride.model_validate(dict(override))
    return override.model_dump(exclude_none=True)


def resolve_config(
    override: ConfigOverride | None = None, *, label: str | None = None
) -> TotpConfig:
    """Merge a partial override onto the defaults.

    ``label``, when given, wins over any label in the override. Raises
    pydantic.ValidationError when the merged values are invalid.
    """
    merged = default_totp_config().model_dump()
    merged.update(override_fields(override))
    if label is not None:
        merged["label"] = label
    return TotpConfig.model_validate(merged)


def load_profile(slug: str) -> TotpConfigOverride:
    """Load a named config profile from the profiles directory."""
    path = PROFILES_DIR / f"{slug}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Profile not found: {path}")
    with open(path) as f:
        return TotpConfigOverride.model_validate(yaml.safe_load(f) or {})


def load_all_profiles() -> dict[str, TotpConfigOverride]:
    """Load every profile in the profiles directory, keyed by slug."""
    profiles: dict[str, TotpConfigOverride] = {}
    if not PROFILES_DIR.exists():
        return profiles
    for path in sorted(PROFILES_DIR.glob("*.yaml")):
        with open(path) as f:
            profiles[path.stem] = TotpConfigOverride.model_validate(yaml.safe_load(f) or {})
    return profiles


settings = Settings()
