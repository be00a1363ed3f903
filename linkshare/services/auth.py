"""Credential store: signup and login against users_auth."""

import logging

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from linkshare.config import get_settings
from linkshare.models.user import UserAccount
from linkshare.services.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    from_database_error,
    require_fields,
)

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.password_hash_rounds,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


class CredentialService:
    """Service for account registration and authentication."""

    def __init__(self, db: Session):
        self.db = db

    def get_user_by_email(self, email: str) -> UserAccount | None:
        """Get a user by email (exact, case-sensitive match)."""
        try:
            return self.db.query(UserAccount).filter(UserAccount.email == email).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Failed to look up user by email")
            raise from_database_error(e) from e

    def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        role: str | None,
    ) -> UserAccount:
        """Create a new account.

        Raises:
            ValidationError: a field is missing or blank.
            DuplicateEmailError: the email is already registered.
            InternalError: the database failed.
            QueryTimeoutError: the database timed out; nothing was written.
        """
        require_fields("All fields are required", name, email, password, role)

        if self.get_user_by_email(email) is not None:
            raise DuplicateEmailError("Email already exists")

        user = UserAccount(
            name=name,
            email=email,
            password_hash=get_password_hash(password),
            role=role,
        )
        try:
            self.db.add(user)
            self.db.flush()
            user_id = user.id
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email
            self.db.rollback()
            raise DuplicateEmailError("Email already exists") from None
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Signup insert failed")
            raise from_database_error(e) from e

        logger.info(f"Registered user {user_id} with role '{role}'")
        return user

    def authenticate(self, email: str | None, password: str | None) -> UserAccount:
        """Return the account matching email and password.

        Raises:
            ValidationError: email or password is missing or blank.
            NotFoundError: no account has this email.
            InvalidCredentialsError: the password does not match.
            InternalError: the database failed.
            QueryTimeoutError: the database timed out; nothing was written.
        """
        require_fields("Email and password are required", email, password)

        user = self.get_user_by_email(email)
        if user is None:
            raise NotFoundError("User does not exist.")
        if not verify_password(password, user.password_hash):
            logger.warning(f"Incorrect password for user {user.id}")
            raise InvalidCredentialsError("Incorrect password.")
        return user
