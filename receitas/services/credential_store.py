"""
Credential store: user sign-up and password authentication.

Passwords are hashed with bcrypt at the configured cost and verified with
bcrypt's own check. Email uniqueness comes from the unique index on
``users.email``; a violation surfaces as ``Conflict``.
"""

import asyncio
import re
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from receitas.config import settings
from receitas.db_handlers import UserDBHandler
from receitas.exceptions import Conflict, Unauthorized, ValidationFailed
from receitas.models.user import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH
from receitas.utils.auth import (
    BCRYPT_MAX_PASSWORD_BYTES,
    get_password_hash,
    verify_password,
)
from receitas.utils.logger import setup_logger

logger = setup_logger("services.credential_store")


def validate_new_account(
    name: str | None, email: str | None, password: str | None
) -> list[str]:
    """Return one message per violated rule; an empty list means the input is valid."""
    errors = []

    if not name or not name.strip():
        errors.append('"nome" is not allowed to be empty')
    elif len(name) > NAME_MAX_LENGTH:
        errors.append(
            f'"nome" length must be less than or equal to {NAME_MAX_LENGTH} characters long'
        )

    if not email:
        errors.append('"email" is not allowed to be empty')
    elif len(email) > EMAIL_MAX_LENGTH:
        errors.append(
            f'"email" length must be less than or equal to {EMAIL_MAX_LENGTH} characters long'
        )
    elif not re.match(settings.email_pattern, email):
        errors.append('"email" must be a valid email')

    if not password:
        errors.append('"senha" is not allowed to be empty')
    elif len(password) < settings.password_min_length:
        errors.append(
            f'"senha" length must be at least {settings.password_min_length} characters long'
        )
    elif len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        errors.append(
            f'"senha" must not be longer than {BCRYPT_MAX_PASSWORD_BYTES} bytes'
        )

    return errors


class CredentialStore:
    def __init__(self, user_db_handler: UserDBHandler | None = None):
        self.users = user_db_handler or UserDBHandler()

    async def register(
        self, name: str | None, email: str | None, password: str | None
    ) -> UUID:
        """Create a user account and return its id."""
        errors = validate_new_account(name, email, password)
        if errors:
            raise ValidationFailed(errors)

        # bcrypt is CPU bound; keep it off the event loop
        hashed_password = await asyncio.to_thread(
            get_password_hash, password, settings.bcrypt_rounds
        )
        try:
            user = await self.users.create(
                {"name": name, "email": email, "hashed_password": hashed_password}
            )
        except IntegrityError as e:
            logger.info(f"Sign-up rejected, email already registered: {email}")
            raise Conflict("Email already registered") from e

        logger.info(f"Registered user {user.id}")
        return user.id

    async def authenticate(self, email: str | None, password: str | None) -> UUID:
        """Return the id of the user owning ``email`` if ``password`` matches."""
        if not email or not password:
            raise Unauthorized("Incorrect email or password")

        user = await self.users.get_user_by_email(email)
        if user is None:
            raise Unauthorized("Incorrect email or password")

        if not await asyncio.to_thread(
            verify_password, password, user.hashed_password
        ):
            raise Unauthorized("Incorrect email or password")

        return user.id
