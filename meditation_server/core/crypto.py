"""Account password hashing.

bcrypt only reads the first 72 bytes of its input and recent releases refuse
anything longer, so the limit is enforced on the encoded password rather than
on its character count.
"""

from __future__ import annotations

import bcrypt

MAX_PASSWORD_BYTES = 72


class PasswordTooLongError(ValueError):
    """Raised when a password does not fit in bcrypt's input."""


def password_fits(password: str) -> bool:
    return len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    if not password_fits(password):
        raise PasswordTooLongError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    # Nothing longer than the limit was ever hashed, so it cannot match
    if not password_fits(plain_password):
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


__all__ = ["MAX_PASSWORD_BYTES", "PasswordTooLongError", "password_fits", "hash_password", "verify_password"]
