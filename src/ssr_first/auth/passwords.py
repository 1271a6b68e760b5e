"""
ssr_first.auth.passwords

Password hashing for the credential store.

Responsibilities:
- Hash demo/seed passwords.
- Verify a plaintext password against a stored hash.
"""

from __future__ import annotations

from passlib.context import CryptContext

pwd_context: CryptContext = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# --- Module Notes -----------------------------------------------------------
# pbkdf2_sha256 needs no native backend; `deprecated="auto"` lets a stronger
# scheme be listed first later while old hashes keep verifying.
