"""
Password hashing helpers.

Passwords are hashed with bcrypt using a fixed cost factor.  Each call
to ``hash_password`` draws a fresh random salt, so hashing the same
password twice yields two different strings; both verify.
"""

import bcrypt


BCRYPT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of its input.
_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return (password or "").encode("utf-8")[:_MAX_PASSWORD_BYTES]


def hash_password(password: str) -> str:
    """Hash a plain text password.

    Parameters
    ----------
    password : str
        The plain text password to hash.

    Returns
    -------
    str
        The bcrypt hash (``$2b$10$...``) including its salt.
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash.

    Returns ``False`` for an empty or unparsable hash; an empty password
    is checked like any other.  This function never raises.
    """
    password = _encode(plain_password)
    hashed = (hashed_password or "").encode("utf-8")
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False
