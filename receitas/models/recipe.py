"""
Recipe model.

Titles are unique across the table (unique index). ``owner_id`` is set from
the authenticated session when the recipe is created and is nullable for
rows created before ownership existed.
"""

from sqlalchemy import Column, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from receitas.models.base import Base, TimestampMixin, UUIDMixin

TITLE_MAX_LENGTH = 255


class Recipe(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "receitas"

    title = Column(
        "titulo",
        String(TITLE_MAX_LENGTH),
        nullable=False,
        unique=True,
        comment="Unique recipe title",
    )

    ingredients = Column(
        "ingredientes",
        Text,
        nullable=False,
        comment="Free-text ingredient list",
    )

    preparation = Column(
        "preparo",
        Text,
        nullable=False,
        comment="Free-text preparation instructions",
    )

    owner_id = Column(
        "id_usuario",
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=True,
        index=True,
        comment="User who created the recipe",
    )

    owner = relationship("User", back_populates="recipes")

    def __repr__(self):
        return f"<Recipe(id={self.id}, title='{self.title}')>"
