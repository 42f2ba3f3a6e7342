"""
Numeric one-time codes for password recovery.

Codes are short-lived and random, so a fast SHA-256 digest is enough for
storage.
"""

import hashlib
import secrets

RESET_CODE_LENGTH = 6


def generate_numeric_code(length: int) -> str:
    return "".join(str(secrets.randbelow(10)) for _ in range(length))


def generate_reset_code(length: int = RESET_CODE_LENGTH) -> str:
    """length digits, no leading zero"""
    lowest = 10 ** (length - 1)
    return str(lowest + secrets.randbelow(9 * lowest))


def hash_code(code: str) -> str:
    return hashlib.sha256(code.encode()).hexdigest()
