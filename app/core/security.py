# app/core/security.py
from functools import lru_cache

import bcrypt

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """Salted bcrypt hash, stored as text."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Constant-time check of a password against a stored bcrypt hash.
    Accepts $2a$/$2b$ hashes; a malformed hash simply fails.
    """
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        return False


@lru_cache(maxsize=8)
def _dummy_hash(rounds: int) -> str:
    return hash_password("not-a-real-password", rounds=rounds)


def burn_password_check(password: str, rounds: int = 10) -> None:
    """
    Spend the same work as a real check when there is no account to check against.
    `rounds` should be the cost stored accounts are hashed with.
    """
    verify_password(password, _dummy_hash(rounds))


if __name__ == "__main__":
    import getpass

    raw = getpass.getpass("Password to hash: ")
    print(f"Your hashed password is: {hash_password(raw)}")
