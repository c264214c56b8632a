"""Password hashing utilities.

Hashes are encoded as ``pbkdf2_sha256$<iterations>$<salt>$<digest>`` where the
digest is URL-safe base64 without padding.
"""

import base64
import hashlib
import hmac
import secrets

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 600_000


def generate_secure_token(length: int = 32) -> str:
    """Generate a cryptographically secure random token.

    Args:
        length: Number of random bytes to generate (default 32)

    Returns:
        URL-safe base64 encoded token
    """
    return (
        base64.urlsafe_b64encode(secrets.token_bytes(length))
        .decode("utf-8")
        .rstrip("=")
    )


def _pbkdf2(password: str, salt: str, iterations: int) -> str:
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations
    )
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")


def hash_password(
    password: str, *, iterations: int = DEFAULT_ITERATIONS, salt: str | None = None
) -> str:
    """Hash a password for storage.

    Args:
        password: Plain-text password
        iterations: PBKDF2 iteration count
        salt: Optional salt; a random one is generated when omitted

    Returns:
        Encoded hash string
    """
    if not password:
        raise ValueError("Password must not be empty")
    salt = salt or generate_secure_token(16)
    if "$" in salt:
        raise ValueError("Salt must not contain '$'")
    return f"{ALGORITHM}${iterations}${salt}${_pbkdf2(password, salt, iterations)}"


def verify_password(password: str, encoded: str) -> bool:
    """Check a plain-text password against an encoded hash.

    Malformed hashes never verify.
    """
    try:
        algorithm, iterations, salt, expected = encoded.split("$", 3)
        rounds = int(iterations)
    except ValueError:
        return False

    if algorithm != ALGORITHM or rounds <= 0:
        return False

    candidate = _pbkdf2(password, salt, rounds)
    return hmac.compare_digest(candidate, expected)
