"""
Password hashing with bcrypt.

bcrypt only reads the first 72 bytes of its input, and current releases raise
on anything longer, so longer passwords are rejected at sign-up and never
match at login.
"""
import bcrypt

from src.config import BCRYPT_ROUNDS

MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt. Blocking; run it off the event loop."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash.

    A malformed stored hash or an over-long password counts as a mismatch.
    """
    if password_too_long(password):
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
