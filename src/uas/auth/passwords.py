# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import os
from typing import Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


def make_hasher(
    *,
    time_cost: Optional[int] = None,
    memory_cost: Optional[int] = None,
    parallelism: Optional[int] = None,
) -> PasswordHasher:
    """Build an argon2id hasher; unset parameters fall back to env, then library defaults.

    Every hash gets its own random salt, and the encoded result carries the
    parameters, so hashes made with different costs still verify.
    """
    params = {
        "time_cost": time_cost if time_cost is not None else _env_int("UAS_ARGON2_TIME_COST"),
        "memory_cost": memory_cost if memory_cost is not None else _env_int("UAS_ARGON2_MEMORY_COST"),
        "parallelism": parallelism if parallelism is not None else _env_int("UAS_ARGON2_PARALLELISM"),
    }
    return PasswordHasher(**{k: v for k, v in params.items() if v is not None})


_PH = make_hasher()


def hash_password(plain: str, *, hasher: Optional[PasswordHasher] = None) -> str:
    if not plain:
        raise ValueError("Empty password")
    return (hasher or _PH).hash(plain)


def verify_password(hash_value: str, plain: str, *, hasher: Optional[PasswordHasher] = None) -> bool:
    if not hash_value or not plain:
        return False
    try:
        return (hasher or _PH).verify(hash_value, plain)
    except VerifyMismatchError:
        return False
    except (InvalidHashError, VerificationError):
        # Malformed or foreign hash string.
        return False
