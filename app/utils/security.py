# app/utils/security.py
import base64
import os

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from app.utils.settings import PASSWORD_HASH_ITERATIONS

_ALGORITHM = "pbkdf2_sha256"


def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
    return PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=iterations,
    )


def hash_password(password: str, iterations: int | None = None) -> str:
    """Zwraca 'pbkdf2_sha256$<iterations>$<salt>$<hash>' (base64)."""
    iterations = iterations or PASSWORD_HASH_ITERATIONS
    salt = os.urandom(16)
    derived = _kdf(salt, iterations).derive(password.encode())
    return "$".join(
        [
            _ALGORITHM,
            str(iterations),
            base64.b64encode(salt).decode(),
            base64.b64encode(derived).decode(),
        ]
    )


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt_b64, hash_b64 = encoded.split("$")
    except ValueError:
        return False
    if algorithm != _ALGORITHM:
        return False

    kdf = _kdf(base64.b64decode(salt_b64), int(iterations))
    try:
        kdf.verify(password.encode(), base64.b64decode(hash_b64))
    except InvalidKey:
        return False
    return True
