"""
Password hashing helpers.

Members keep their password as an already-hashed string; these
helpers produce and check that string with bcrypt.
"""

import bcrypt

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def _encode_password(password: str) -> bytes:
    """
    Encode a plain-text password for bcrypt.

    Raises:
        ValueError: If the password is empty or longer than 72 bytes in UTF-8
    """
    if not password:
        raise ValueError("Password cannot be empty")
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(
            f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes "
            f"in UTF-8, got {len(encoded)}"
        )
    return encoded


def hash_password(password: str) -> str:
    """
    Hash a plain-text password.

    Returns:
        The bcrypt hash, decoded to a str so it fits a string column

    Raises:
        ValueError: If the password is empty or longer than 72 bytes in UTF-8
    """
    return bcrypt.hashpw(_encode_password(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Check a plain-text password against a stored bcrypt hash.

    Returns False when the stored value is not a bcrypt hash.

    Raises:
        ValueError: If the password is empty or longer than 72 bytes in UTF-8
    """
    encoded = _encode_password(password)
    try:
        return bcrypt.checkpw(encoded, hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
