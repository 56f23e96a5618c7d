# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from itsdangerous import BadSignature, BadTimeSignature, URLSafeTimedSerializer

COOKIE_NAME = os.getenv("UAS_COOKIE_NAME", "uas_session")
DEFAULT_MAX_AGE_SECONDS = int(os.getenv("UAS_SESSION_MAX_AGE", "28800"))  # 8 hours


def _serializer() -> URLSafeTimedSerializer:
    secret = os.getenv("UAS_SECRET_KEY") or os.getenv("SECRET_KEY")
    if not secret:
        raise RuntimeError("Missing UAS_SECRET_KEY (or SECRET_KEY) in environment")
    salt = os.getenv("UAS_SESSION_SALT", "uas.session.v1")
    return URLSafeTimedSerializer(secret_key=secret, salt=salt)


@dataclass(frozen=True)
class SessionState:
    """Per-client session value. Handlers receive one and return the next one."""

    is_logged_in: bool = False
    username: Optional[str] = None

    @classmethod
    def logged_in_as(cls, username: str) -> "SessionState":
        return cls(is_logged_in=True, username=username)

    @property
    def authenticated(self) -> bool:
        return self.is_logged_in and bool((self.username or "").strip())


def sign_session(state: SessionState) -> str:
    s = _serializer()
    return s.dumps({"in": bool(state.is_logged_in), "u": state.username or ""})


def verify_session(token: str, *, max_age: int = DEFAULT_MAX_AGE_SECONDS) -> SessionState:
    """Decode a cookie value. Anything unusable yields a blank session."""
    if not token:
        return SessionState()
    s = _serializer()
    try:
        data = s.loads(token, max_age=max_age)
    except (BadSignature, BadTimeSignature):
        return SessionState()
    if not isinstance(data, dict):
        return SessionState()
    u = str(data.get("u") or "")
    if not data.get("in") or not u:
        return SessionState()
    return SessionState.logged_in_as(u)
