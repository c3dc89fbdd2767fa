"""
Recipe repository: reads and writes on ``receitas`` with domain outcomes.

Ids arriving from the URL are parsed here; anything that is not a UUID is
treated exactly like an unknown id. Title uniqueness comes from the unique
index on ``receitas.titulo``.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from receitas.db_handlers import RecipeDBHandler
from receitas.db_handlers.recipe import (
    ingredients_contain,
    ingredients_equal,
    owned_by,
)
from receitas.exceptions import Conflict, NotFound, ValidationFailed
from receitas.models import Recipe
from receitas.models.recipe import TITLE_MAX_LENGTH
from receitas.utils.logger import setup_logger

logger = setup_logger("services.recipe_repository")

REQUIRED_RECIPE_FIELDS = (
    ("titulo", "title"),
    ("ingredientes", "ingredients"),
    ("preparo", "preparation"),
)


def parse_recipe_id(raw: str | UUID) -> UUID | None:
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(raw)
    except (TypeError, ValueError):
        return None


def _field_errors(label: str, value: str | None) -> list[str]:
    if not value or not value.strip():
        return [f'"{label}" is not allowed to be empty']
    if label == "titulo" and len(value) > TITLE_MAX_LENGTH:
        return [
            f'"titulo" length must be less than or equal to {TITLE_MAX_LENGTH} characters long'
        ]
    return []


def validate_new_recipe(
    title: str | None, ingredients: str | None, preparation: str | None
) -> list[str]:
    """Return one message per missing, empty or over-long required field."""
    values = {"title": title, "ingredients": ingredients, "preparation": preparation}
    errors = []
    for label, attr in REQUIRED_RECIPE_FIELDS:
        errors.extend(_field_errors(label, values[attr]))
    return errors


def validate_recipe_changes(update_data: dict[str, Any]) -> list[str]:
    """Same rules as ``validate_new_recipe``, applied only to the fields being changed."""
    errors = []
    for label, attr in REQUIRED_RECIPE_FIELDS:
        if attr in update_data:
            errors.extend(_field_errors(label, update_data[attr]))
    return errors


class RecipeRepository:
    def __init__(self, recipe_db_handler: RecipeDBHandler | None = None):
        self.recipes = recipe_db_handler or RecipeDBHandler()

    async def list_recipes(self, ingredient: str | None = None) -> list[Recipe]:
        return await self.recipes.list_recipes(ingredient)

    async def get(self, recipe_id: str | UUID) -> Recipe:
        parsed_id = parse_recipe_id(recipe_id)
        if parsed_id is None:
            raise NotFound("Recipe not found")
        recipe = await self.recipes.get(parsed_id)
        if recipe is None:
            raise NotFound("Recipe not found")
        return recipe

    async def create(
        self,
        title: str | None,
        ingredients: str | None,
        preparation: str | None,
        owner_user_id: UUID | None = None,
    ) -> UUID:
        errors = validate_new_recipe(title, ingredients, preparation)
        if errors:
            raise ValidationFailed(errors)

        try:
            recipe = await self.recipes.create(
                {
                    "title": title,
                    "ingredients": ingredients,
                    "preparation": preparation,
                    "owner_id": owner_user_id,
                }
            )
        except IntegrityError as e:
            raise Conflict(f"A recipe titled '{title}' already exists") from e

        logger.info(f"Created recipe {recipe.id} owned by {owner_user_id}")
        return recipe.id

    async def update(
        self,
        recipe_id: str | UUID,
        update_data: dict[str, Any],
        *,
        owner_id: UUID | None = None,
    ) -> None:
        """Apply the present fields of ``update_data``; ``owner_id`` restricts the match."""
        errors = validate_recipe_changes(update_data)
        if errors:
            raise ValidationFailed(errors)

        parsed_id = parse_recipe_id(recipe_id)
        if parsed_id is None:
            raise NotFound("Recipe not found")

        where = [Recipe.id == parsed_id]
        if owner_id is not None:
            where.append(owned_by(owner_id))

        matched = await self._update(where, update_data)
        if matched == 0:
            raise NotFound("Recipe not found")

    async def update_many(
        self,
        pattern: str,
        update_data: dict[str, Any],
        *,
        owner_id: UUID | None = None,
    ) -> int:
        """Update every recipe whose ingredients contain ``pattern`` (case-insensitive)."""
        errors = validate_recipe_changes(update_data)
        if errors:
            raise ValidationFailed(errors)

        where = [ingredients_contain(pattern)]
        if owner_id is not None:
            where.append(owned_by(owner_id))

        count = await self._update(where, update_data)
        if count == 0:
            raise NotFound(f"No recipe has ingredients matching '{pattern}'")
        logger.info(f"Updated {count} recipe(s) matching '{pattern}'")
        return count

    async def delete(
        self, recipe_id: str | UUID, *, owner_id: UUID | None = None
    ) -> None:
        parsed_id = parse_recipe_id(recipe_id)
        if parsed_id is None:
            raise NotFound("Recipe not found")

        where = [Recipe.id == parsed_id]
        if owner_id is not None:
            where.append(owned_by(owner_id))

        if await self.recipes.remove_where(where) == 0:
            raise NotFound("Recipe not found")
        logger.info(f"Deleted recipe {parsed_id}")

    async def delete_many(
        self, ingredients: str, *, owner_id: UUID | None = None
    ) -> int:
        """Delete every recipe whose ingredients are exactly ``ingredients``."""
        where = [ingredients_equal(ingredients)]
        if owner_id is not None:
            where.append(owned_by(owner_id))

        count = await self.recipes.remove_where(where)
        if count == 0:
            raise NotFound(f"No recipe has ingredients equal to '{ingredients}'")
        logger.info(f"Deleted {count} recipe(s) with ingredients '{ingredients}'")
        return count

    async def _update(self, where: list, update_data: dict[str, Any]) -> int:
        try:
            return await self.recipes.update_matching(where, update_data)
        except IntegrityError as e:
            raise Conflict(
                f"A recipe titled '{update_data.get('title')}' already exists"
            ) from e
