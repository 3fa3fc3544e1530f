# backend/services/credentials.py
"""
Credential manager: salted HMAC-SHA512 password hashes and a single user slot.

The store holds exactly one record. Every registration replaces it, so only
the most recently registered user can log in.
"""
import hashlib
import hmac
import secrets
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from services.errors import InvalidCredentials, UserNotFound
from utils.helper import b64
from utils.logger import logger

# default key size of an HMAC-SHA512 primitive (the SHA-512 block size)
SALT_BYTES = 128


@dataclass(frozen=True)
class UserRecord:
    username: str
    password_hash: bytes
    password_salt: bytes

    def to_dict(self, include_secrets: bool = False) -> Dict[str, Any]:
        data = {"username": self.username}
        if include_secrets:
            data["passwordHash"] = b64(self.password_hash)
            data["passwordSalt"] = b64(self.password_salt)
        return data


def create_password_hash(password: str) -> Tuple[bytes, bytes]:
    """Return (hash, salt) for a password using a fresh random salt."""
    salt = secrets.token_bytes(SALT_BYTES)
    digest = hmac.new(salt, password.encode("utf-8"), hashlib.sha512).digest()
    return digest, salt


def verify_password_hash(password: str, stored_hash: bytes, stored_salt: bytes) -> bool:
    """Recompute the keyed hash with the stored salt and compare in constant time."""
    if not stored_hash or not stored_salt:
        return False
    computed = hmac.new(stored_salt, password.encode("utf-8"), hashlib.sha512).digest()
    return hmac.compare_digest(computed, stored_hash)


class UserStore:
    """Lock-guarded single-entry store."""

    def __init__(self):
        self._lock = threading.Lock()
        self._record: Optional[UserRecord] = None

    def put(self, record: UserRecord) -> UserRecord:
        with self._lock:
            self._record = record
        return record

    def snapshot(self) -> Optional[UserRecord]:
        with self._lock:
            return self._record


class CredentialManager:
    def __init__(self, issuer, store: Optional[UserStore] = None):
        self.issuer = issuer
        self.store = store if store is not None else UserStore()

    def register(self, username: str, password: str) -> UserRecord:
        password_hash, password_salt = create_password_hash(password)
        record = self.store.put(UserRecord(username, password_hash, password_salt))
        logger.info("registered user %s", username)
        return record

    def verify_password(self, password: str, stored_hash: bytes, stored_salt: bytes) -> bool:
        return verify_password_hash(password, stored_hash, stored_salt)

    def login(self, username: str, password: str) -> str:
        """
        Check the credentials against the stored record and return a signed token.
        Raises UserNotFound or InvalidCredentials.
        """
        record = self.store.snapshot()
        if record is None or record.username != username:
            logger.warning("login rejected for %s: user not found", username)
            raise UserNotFound()
        if not self.verify_password(password, record.password_hash, record.password_salt):
            logger.warning("login rejected for %s: wrong password", username)
            raise InvalidCredentials()
        return self.issuer.create_token(record)
