# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import os

from fastapi import Request

from uas.auth.session import COOKIE_NAME, SessionState, verify_session
from uas.errors import AuthorizationError


def session_from_request(request: Request) -> SessionState:
    token = request.cookies.get(COOKIE_NAME, "")
    return verify_session(token)


def current_session(request: Request) -> SessionState:
    s = getattr(request.state, "session", None)
    if s is not None:
        return s
    return session_from_request(request)


def require_logged_in(session: SessionState) -> str:
    """Return the session's username, or refuse the request."""
    if not session.authenticated:
        raise AuthorizationError("Only logged-in users can access this page!", status_code=401)
    return session.username or ""


def require_logged_out(session: SessionState) -> None:
    if session.authenticated:
        raise AuthorizationError("You are already logged in!", status_code=403)


def cookie_settings() -> dict:
    secure = os.getenv("UAS_COOKIE_SECURE", "false").lower() in {"1", "true", "yes", "y"}
    return {"httponly": True, "samesite": "lax", "secure": secure}
