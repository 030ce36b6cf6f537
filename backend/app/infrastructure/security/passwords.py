"""PBKDF2-HMAC-SHA256 password hashing.

Hashes are stored as ``pbkdf2_sha256$<iterations>$<salt_hex>$<hash_hex>`` so
the iteration count can be raised later without invalidating old hashes.
"""

import hashlib
import hmac
import secrets

_ALGORITHM = "pbkdf2_sha256"
_SALT_BYTES = 16


class PasswordHasher:
    """Hashes and verifies passwords with a per-password random salt."""

    def __init__(self, iterations: int = 260_000):
        self._iterations = iterations

    def hash(self, password: str) -> str:
        salt = secrets.token_bytes(_SALT_BYTES)
        digest = _derive(password, salt, self._iterations)
        return f"{_ALGORITHM}${self._iterations}${salt.hex()}${digest.hex()}"

    def verify(self, password: str, stored: str) -> bool:
        """Constant-time comparison; malformed hashes never verify."""
        try:
            algorithm, iterations, salt_hex, hash_hex = stored.split("$")
            salt = bytes.fromhex(salt_hex)
            expected = bytes.fromhex(hash_hex)
            rounds = int(iterations)
        except ValueError:
            return False
        if algorithm != _ALGORITHM:
            return False
        return hmac.compare_digest(_derive(password, salt, rounds), expected)


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
