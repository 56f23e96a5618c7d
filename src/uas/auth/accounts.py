# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Dict, Optional

from argon2 import PasswordHasher

from uas.auth.passwords import hash_password, verify_password
from uas.errors import AuthenticationError, ConflictError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Account:
    id: str
    username: str
    password_hash: str
    firstname: str
    lastname: str

    def profile(self) -> Dict[str, str]:
        return {
            "username": self.username,
            "firstname": self.firstname,
            "lastname": self.lastname,
        }


class AccountStore:
    """In-memory account store.

    Usernames are unique case-insensitively, but authenticate() and
    find_by_username() match the exact spelling that was registered.
    Registration is the only mutator; nothing is ever updated or removed.
    """

    def __init__(self, *, hasher: Optional[PasswordHasher] = None, lock=None):
        self._hasher = hasher
        self._lock = lock if lock is not None else threading.Lock()
        self._accounts: Dict[str, Account] = {}
        # lower(username) -> username as registered
        self._folded: Dict[str, str] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, username: object) -> bool:
        with self._lock:
            return username in self._accounts

    def _taken(self, username: str) -> bool:
        return username.lower() in self._folded

    def register(self, *, username: str, password: str, firstname: str, lastname: str) -> Account:
        with self._lock:
            if self._taken(username):
                raise ConflictError("username is taken")

        # Hashing is slow; keep it outside the lock and re-check before inserting.
        ph = hash_password(password, hasher=self._hasher)
        account = Account(
            id=str(uuid.uuid4()),
            username=username,
            password_hash=ph,
            firstname=firstname,
            lastname=lastname,
        )

        with self._lock:
            if self._taken(username):
                raise ConflictError("username is taken")
            self._accounts[username] = account
            self._folded[username.lower()] = username

        logger.info("Registered account %s (%s)", account.username, account.id)
        return account

    def authenticate(self, *, username: str, password: str) -> Account:
        # Unknown usernames are rejected before any hash work.
        account = self.find_by_username(username)
        if account is None:
            raise AuthenticationError("Incorrect username or password")
        if not verify_password(account.password_hash, password, hasher=self._hasher):
            raise AuthenticationError("Incorrect username or password")
        return account

    def find_by_username(self, username: str) -> Optional[Account]:
        with self._lock:
            return self._accounts.get(username)
