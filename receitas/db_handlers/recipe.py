from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from receitas.config import settings
from receitas.db import SQLITE_UNICODE_LOWER
from receitas.db_handlers.base import BaseDBHandler, check_local_db
from receitas.models.recipe import Recipe
from receitas.utils.logger import setup_logger

logger = setup_logger("db_handlers.recipe")


def ingredients_contain(pattern: str) -> ColumnElement[bool]:
    """Case-insensitive substring match on ingredients, with LIKE wildcards escaped."""
    if not settings.is_sqlite:
        return Recipe.ingredients.icontains(pattern, autoescape=True)

    escaped = (
        pattern.lower().replace("/", "//").replace("%", "/%").replace("_", "/_")
    )
    return getattr(func, SQLITE_UNICODE_LOWER)(Recipe.ingredients).like(
        f"%{escaped}%", escape="/"
    )


def ingredients_equal(value: str) -> ColumnElement[bool]:
    return Recipe.ingredients == value


def owned_by(user_id: UUID) -> ColumnElement[bool]:
    return Recipe.owner_id == user_id


class RecipeDBHandler(BaseDBHandler[Recipe]):
    def __init__(self):
        super().__init__(Recipe)

    @check_local_db
    async def list_recipes(
        self, ingredient: str | None = None, *, db: AsyncSession = None
    ) -> list[Recipe]:
        """All recipes in storage order, optionally filtered by ingredient substring."""
        stmt = select(Recipe)
        if ingredient:
            stmt = stmt.where(ingredients_contain(ingredient))
        result = await db.execute(stmt)
        return list(result.scalars().all())

    @check_local_db
    async def update_matching(
        self, where: list, update_data: dict[str, Any], *, db: AsyncSession = None
    ) -> int:
        """Partially update every recipe matching ``where`` in one statement."""
        if not update_data:
            return len(await self.get_multi(where=where, db=db))
        return await self.update_where(where, update_data, db=db)
