"""Single-use backup codes.

Verification is pure: it returns the list the caller must persist in place
of the one it passed in. Two concurrent checks against the same stored list
can both succeed, so the caller's read -> verify -> write has to be atomic
at the storage layer (a transaction, or a compare-and-swap on the list).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from twofactor.models import BackupCodeVerification
from twofactor.provisioning import BACKUP_CODE_COUNT, generate_backup_codes

logger = logging.getLogger(__name__)


def verify_backup_code(known_codes: Sequence[str], submitted_code: str) -> BackupCodeVerification:
    """Match ``submitted_code`` exactly against ``known_codes``.

    On a match, ``remaining_codes`` is ``known_codes`` minus the first
    matching entry, order preserved. Otherwise it is ``known_codes`` unchanged.
    """
    codes = list(known_codes)
    try:
        idx = codes.index(submitted_code)
    except ValueError:
        logger.debug("Backup code did not match (%d codes on file)", len(codes))
        return BackupCodeVerification(is_valid=False, remaining_codes=codes)

    del codes[idx]
    logger.debug("Backup code accepted, %d remaining", len(codes))
    return BackupCodeVerification(is_valid=True, remaining_codes=codes)


def generate_new_backup_codes() -> list[str]:
    """A fresh set to replace an exhausted or compromised one."""
    return generate_backup_codes(BACKUP_CODE_COUNT)
