"""Authentication service: registration and password-or-PIN login."""

import re

from sqlalchemy.exc import IntegrityError

from decaf.config import Settings
from decaf.context import RequestContext
from decaf.errors import AuthError, ConflictError, ValidationError, is_unique_violation
from decaf.models.user import User
from decaf.schemas.auth import UserLogin, UserRegister
from decaf.services.security import create_access_token, hash_secret, verify_secret

PIN_PATTERN = re.compile(r"^[0-9]{8}$")

INVALID_CREDENTIALS = "Invalid username or credentials"
USERNAME_TAKEN = "Username already exists"


def validate_pin(pin: str) -> str:
    """Return the PIN if it is exactly eight decimal digits."""
    if not PIN_PATTERN.fullmatch(pin):
        raise ValidationError("PIN must be exactly 8 digits")
    return pin


class AuthService:
    """Registers users and authenticates them by password or PIN."""

    def __init__(self, ctx: RequestContext, settings: Settings):
        self.ctx = ctx
        self.db = ctx.db
        self.settings = settings

    def get_user_by_username(self, username: str) -> User | None:
        """Get a user by exact username."""
        return self.db.query(User).filter(User.username == username).first()

    def get_user(self, user_id: str) -> User | None:
        return self.db.get(User, user_id)

    def register(self, data: UserRegister) -> User:
        """Create a user with independently hashed password and PIN."""
        pin = validate_pin(data.pin)

        if self.get_user_by_username(data.username):
            raise ConflictError(USERNAME_TAKEN)

        user = User(
            username=data.username,
            password_hash=hash_secret(data.password, self.settings.bcrypt_rounds),
            pin_hash=hash_secret(pin, self.settings.bcrypt_rounds),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                # Lost a race against a concurrent registration
                raise ConflictError(USERNAME_TAKEN) from None
            raise
        self.db.refresh(user)

        self.ctx.logger.info(f"Registered user '{user.username}'")
        return user

    def login(self, data: UserLogin) -> tuple[User, str]:
        """Authenticate with exactly one of password or PIN and issue a token."""
        if data.password is not None and data.pin is not None:
            raise ValidationError("Provide either password or PIN, not both")
        if data.password is None and data.pin is None:
            raise ValidationError("Either password or PIN is required")

        if data.pin is not None:
            secret = validate_pin(data.pin)
        else:
            secret = data.password

        user = self.get_user_by_username(data.username)
        if not user:
            raise AuthError(INVALID_CREDENTIALS)

        stored_hash = user.pin_hash if data.pin is not None else user.password_hash
        if not stored_hash or not verify_secret(secret, stored_hash, self.settings.bcrypt_rounds):
            self.ctx.logger.info(f"Failed login for '{data.username}'")
            raise AuthError(INVALID_CREDENTIALS)

        return user, create_access_token(self.settings, user)
