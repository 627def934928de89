"""
Unit tests for services.credentials module.
"""
import threading

import pytest

from app.core.errors import Conflict
from app.schemas.user import UserOut
from app.services.credentials import CredentialStore
from app.services.store import CollectionStore


@pytest.fixture
def store():
    return CollectionStore()


@pytest.fixture
def credentials(store):
    return CredentialStore(store.users)


def test_create_hashes_password(credentials):
    user = credentials.create("Jane Roe", "jane@x.io", "supersecret1")
    assert user.id == "1"
    assert user.status == "active"
    assert user.role == "user"
    assert user.password_hash != "supersecret1"
    assert credentials.verify("supersecret1", user.password_hash) is True


def test_lookups(credentials):
    user = credentials.create("Jane Roe", "jane@x.io", "supersecret1", role="admin")
    assert credentials.find_by_email("jane@x.io") == user
    assert credentials.find_by_id(user.id) == user
    assert credentials.find_by_email("nobody@x.io") is None
    assert credentials.find_by_id("42") is None


def test_duplicate_email_keeps_single_record(store, credentials):
    credentials.create("Jane Roe", "jane@x.io", "supersecret1")
    with pytest.raises(Conflict) as excinfo:
        credentials.create("Jane Again", "jane@x.io", "supersecret2")
    assert excinfo.value.error == "User already exists"
    assert len(store.users.filter(lambda u: u.email == "jane@x.io")) == 1


def test_concurrent_registration_same_email(store, credentials):
    """Only one of several simultaneous registrations may win."""
    barrier = threading.Barrier(4)
    outcomes = []

    def register():
        barrier.wait()
        try:
            credentials.create("Jane Roe", "race@x.io", "supersecret1")
            outcomes.append("ok")
        except Conflict:
            outcomes.append("conflict")

    threads = [threading.Thread(target=register) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert outcomes.count("ok") == 1
    assert len(store.users) == 1


def test_authenticate(credentials):
    credentials.create("Jane Roe", "jane@x.io", "supersecret1")
    assert credentials.authenticate("jane@x.io", "supersecret1").email == "jane@x.io"
    assert credentials.authenticate("jane@x.io", "wrong-password") is None
    assert credentials.authenticate("nobody@x.io", "supersecret1") is None


def test_public_projection_has_no_secret(credentials):
    user = credentials.create("Jane Roe", "jane@x.io", "supersecret1")
    out = UserOut.from_user(user).model_dump(mode="json")
    assert set(out) == {"id", "name", "email", "role", "status", "createdAt"}
    assert user.password_hash not in out.values()
