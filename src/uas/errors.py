# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from typing import Optional


class AccountServiceError(Exception):
    """Base for every per-request failure; carries the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AccountServiceError):
    # The original service answers blank input with 500, not 400.
    status_code = 500


class ConflictError(AccountServiceError):
    status_code = 409


class AuthenticationError(AccountServiceError):
    """Unknown username or wrong password. Callers never learn which."""

    status_code = 500


class NotFoundError(AccountServiceError):
    status_code = 404


class AuthorizationError(AccountServiceError):
    status_code = 401
