"""
Password hashing and session token helpers.

- bcrypt with a per-password salt for hashing
- bcrypt's own check for verification (no comparison of raw hashes)
- UUID4 strings as opaque session tokens
"""

import uuid

import bcrypt

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72
DEFAULT_BCRYPT_ROUNDS = 10


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain text password against a hashed password."""
    pwd_bytes = plain_password.encode("utf-8")
    if len(pwd_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(pwd_bytes, hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def get_password_hash(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Hash a plain text password using bcrypt."""
    pwd_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt(rounds=rounds)
    hashed_password = bcrypt.hashpw(password=pwd_bytes, salt=salt)
    return hashed_password.decode("utf-8")


def new_session_token() -> str:
    """Return a fresh opaque bearer token (122 random bits)."""
    return str(uuid.uuid4())
