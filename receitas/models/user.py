"""
User model for sign-up / sign-in and recipe ownership.

Users are created by sign-up and never mutated or deleted by the API.
Email uniqueness is enforced by a unique index so that concurrent sign-ups
with the same address cannot both succeed.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from receitas.models.base import Base, TimestampMixin, UUIDMixin

NAME_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 320


class User(Base, UUIDMixin, TimestampMixin):
    """A registered account that can sign in and own recipes."""

    __tablename__ = "users"

    name = Column(
        "nome",
        String(NAME_MAX_LENGTH),
        nullable=False,
        comment="Display name given at sign-up",
    )

    email = Column(
        String(EMAIL_MAX_LENGTH),
        nullable=False,
        unique=True,
        comment="Unique email used to sign in",
    )

    hashed_password = Column(
        "senha",
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    sessions = relationship(
        "Session",
        back_populates="user",
        doc="Sessions issued to this user",
    )

    recipes = relationship(
        "Recipe",
        back_populates="owner",
        doc="Recipes created by this user",
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
