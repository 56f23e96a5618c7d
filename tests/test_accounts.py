import threading

import pytest

from uas.auth.accounts import AccountStore
from uas.errors import AuthenticationError, ConflictError


def _register(store, username="alice", password="secret1"):
    return store.register(username=username, password=password, firstname="Alice", lastname="A")


def test_register_then_authenticate(store):
    acct = _register(store)
    assert acct.id
    assert acct.password_hash != "secret1"
    assert store.authenticate(username="alice", password="secret1") == acct
    assert len(store) == 1


def test_ids_are_unique(store):
    a = _register(store, "alice")
    b = _register(store, "bob")
    assert a.id != b.id


def test_username_taken_ignores_case(store):
    _register(store, "alice")
    with pytest.raises(ConflictError):
        _register(store, "Alice", "other")
    assert len(store) == 1
    assert "Alice" not in store
    assert store.find_by_username("alice").firstname == "Alice"


def test_wrong_password_is_rejected(store):
    _register(store)
    with pytest.raises(AuthenticationError):
        store.authenticate(username="alice", password="wrong")


def test_unknown_user_skips_hashing(fast_hasher):
    calls = []

    class CountingHasher(type(fast_hasher)):
        def verify(self, hash, password):
            calls.append(password)
            return super().verify(hash, password)

    store = AccountStore(hasher=CountingHasher(time_cost=1, memory_cost=8, parallelism=1))
    with pytest.raises(AuthenticationError):
        store.authenticate(username="ghost", password="x")
    assert calls == []


def test_lookup_is_case_sensitive(store):
    _register(store, "alice")
    assert store.find_by_username("alice") is not None
    assert store.find_by_username("ALICE") is None
    with pytest.raises(AuthenticationError):
        store.authenticate(username="ALICE", password="secret1")


def test_profile_never_exposes_hash(store):
    acct = _register(store)
    assert acct.profile() == {"username": "alice", "firstname": "Alice", "lastname": "A"}


def test_concurrent_registration_keeps_usernames_unique(store):
    results = []
    barrier = threading.Barrier(8)

    def worker(i):
        barrier.wait()
        try:
            _register(store, "Alice" if i % 2 else "alice", "pw%d" % i)
            results.append("ok")
        except ConflictError:
            results.append("taken")

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count("ok") == 1
    assert results.count("taken") == 7
    assert len(store) == 1
