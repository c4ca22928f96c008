"""Secret hashing and JWT handling."""

from datetime import UTC, datetime, timedelta
from functools import lru_cache

from jose import JWTError, jwt
from passlib.context import CryptContext

from decaf.config import Settings
from decaf.models.user import User


@lru_cache
def _crypt_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_secret(secret: str, rounds: int) -> str:
    """Hash a password or PIN."""
    return _crypt_context(rounds).hash(secret)


def verify_secret(plain_secret: str, hashed_secret: str, rounds: int) -> bool:
    """Verify a password or PIN against its hash."""
    return _crypt_context(rounds).verify(plain_secret, hashed_secret)


def create_access_token(settings: Settings, user: User) -> str:
    """Create a JWT access token carrying identity and role claims."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": user.id,
        "id": user.id,
        "username": user.username,
        "role": user.role,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(settings: Settings, token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
