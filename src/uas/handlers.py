# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request handlers, independent of the HTTP transport.

Each handler takes the caller's current SessionState and the submitted
fields, and returns a Reply holding the status code, the JSON body and the
session the client should carry from now on. Failures from the
AccountServiceError taxonomy never escape a handler; they become a Reply with
the error's status and message, and the session is left untouched.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from uas.auth.accounts import AccountStore
from uas.auth.session import SessionState
from uas.errors import AccountServiceError, NotFoundError, ValidationError
from uas.permissions import require_logged_in, require_logged_out

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reply:
    status_code: int
    body: Dict[str, Any]
    session: SessionState


def _message(status_code: int, message: str, session: SessionState) -> Reply:
    return Reply(status_code=status_code, body={"message": message}, session=session)


def _blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


def _translate_errors(fn):
    @functools.wraps(fn)
    def wrapper(*args, session: SessionState, **kwargs) -> Reply:
        try:
            return fn(*args, session=session, **kwargs)
        except AccountServiceError as err:
            logger.warning("%s rejected (%s): %s", fn.__name__, err.status_code, err.message)
            return _message(err.status_code, err.message, session)

    return wrapper


@_translate_errors
def sign_up(
    store: AccountStore,
    *,
    session: SessionState,
    username: Optional[str],
    password: Optional[str],
    firstname: Optional[str],
    lastname: Optional[str],
) -> Reply:
    require_logged_out(session)
    if any(_blank(v) for v in (username, password, firstname, lastname)):
        raise ValidationError("Missing your info!")

    store.register(
        username=username or "",
        password=password or "",
        firstname=firstname or "",
        lastname=lastname or "",
    )
    return _message(201, "User successfully added!", session)


@_translate_errors
def login(
    store: AccountStore,
    *,
    session: SessionState,
    username: Optional[str],
    password: Optional[str],
) -> Reply:
    require_logged_out(session)
    if _blank(username) or _blank(password):
        raise ValidationError("Username or password is empty!")

    account = store.authenticate(username=username or "", password=password or "")
    logger.info("Login for %s", account.username)
    return _message(200, "Login Successful", SessionState.logged_in_as(account.username))


@_translate_errors
def profile(store: AccountStore, *, session: SessionState) -> Reply:
    username = require_logged_in(session)
    account = store.find_by_username(username)
    if account is None:
        raise NotFoundError("User does not exist")
    return Reply(status_code=200, body=account.profile(), session=session)


@_translate_errors
def logout(*, session: SessionState) -> Reply:
    username = require_logged_in(session)
    logger.info("Logout for %s", username)
    return _message(200, "Logout successful", SessionState())
