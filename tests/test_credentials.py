"""
Tests for password hashing and the single-slot credential manager.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from services.credentials import (
    SALT_BYTES,
    CredentialManager,
    UserRecord,
    UserStore,
    create_password_hash,
    verify_password_hash,
)
from services.errors import InvalidCredentials, UserNotFound


class FakeIssuer:
    def create_token(self, user):
        return f"token-for-{user.username}"


class TestPasswordHash:
    def test_hash_and_salt_sizes(self):
        digest, salt = create_password_hash("hunter2")
        assert len(salt) == SALT_BYTES
        assert len(digest) == 64

    def test_fresh_salt_per_call(self):
        h1, s1 = create_password_hash("same")
        h2, s2 = create_password_hash("same")
        assert s1 != s2
        assert h1 != h2

    @pytest.mark.parametrize("password", ["hunter2", "", "pässwörd", "x" * 500])
    def test_verify_accepts_original_password(self, password):
        digest, salt = create_password_hash(password)
        assert verify_password_hash(password, digest, salt) is True

    def test_verify_rejects_other_password(self):
        digest, salt = create_password_hash("hunter2")
        assert verify_password_hash("hunter3", digest, salt) is False
        assert verify_password_hash("Hunter2", digest, salt) is False

    def test_verify_rejects_wrong_salt(self):
        digest, _ = create_password_hash("hunter2")
        _, other_salt = create_password_hash("hunter2")
        assert verify_password_hash("hunter2", digest, other_salt) is False

    def test_verify_rejects_empty_stored_values(self):
        assert verify_password_hash("", b"", b"") is False


class TestUserRecord:
    def test_to_dict_hides_secrets_by_default(self):
        rec = UserRecord("alice", b"\x01\x02", b"\x03")
        assert rec.to_dict() == {"username": "alice"}

    def test_to_dict_includes_base64_secrets(self):
        rec = UserRecord("alice", b"\x01\x02", b"\x03")
        assert rec.to_dict(include_secrets=True) == {
            "username": "alice",
            "passwordHash": "AQI=",
            "passwordSalt": "Aw==",
        }


class TestCredentialManager:
    def setup_method(self):
        self.manager = CredentialManager(FakeIssuer())

    def test_register_returns_stored_record(self):
        rec = self.manager.register("alice", "pw")
        assert rec.username == "alice"
        assert self.manager.store.snapshot() is rec

    def test_login_success_delegates_to_issuer(self):
        self.manager.register("alice", "pw")
        assert self.manager.login("alice", "pw") == "token-for-alice"

    def test_login_before_register(self):
        with pytest.raises(UserNotFound):
            self.manager.login("", "")

    def test_login_unknown_user_regardless_of_password(self):
        self.manager.register("alice", "pw")
        with pytest.raises(UserNotFound):
            self.manager.login("bob", "pw")
        with pytest.raises(UserNotFound):
            self.manager.login("bob", "other")

    def test_login_wrong_password(self):
        self.manager.register("alice", "pw")
        with pytest.raises(InvalidCredentials) as exc:
            self.manager.login("alice", "nope")
        assert exc.value.message == "Wrong Password"

    def test_last_registration_wins(self):
        self.manager.register("alice", "pw-a")
        self.manager.register("bob", "pw-b")
        with pytest.raises(UserNotFound):
            self.manager.login("alice", "pw-a")
        assert self.manager.login("bob", "pw-b") == "token-for-bob"

    def test_same_username_reregistered_replaces_password(self):
        self.manager.register("alice", "old")
        self.manager.register("alice", "new")
        with pytest.raises(InvalidCredentials):
            self.manager.login("alice", "old")
        assert self.manager.login("alice", "new") == "token-for-alice"

    def test_verify_password_matches_module_function(self):
        digest, salt = create_password_hash("pw")
        assert self.manager.verify_password("pw", digest, salt)
        assert not self.manager.verify_password("px", digest, salt)


def test_concurrent_registrations_leave_consistent_record():
    store = UserStore()
    manager = CredentialManager(FakeIssuer(), store)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: manager.register(f"user{i}", f"pw{i}"), range(50)))

    rec = store.snapshot()
    idx = rec.username[len("user"):]
    assert verify_password_hash(f"pw{idx}", rec.password_hash, rec.password_salt)
    assert manager.login(rec.username, f"pw{idx}") == f"token-for-{rec.username}"
