"""
Access-controlled mutation gateway.

Wraps recipe writes that need a signed-in user: the bearer token is resolved
through the session issuer and the recipe owner is checked before the
repository is touched.
"""

from typing import Any
from uuid import UUID

from receitas.exceptions import Unauthorized, ValidationFailed
from receitas.services.recipe_repository import (
    RecipeRepository,
    validate_new_recipe,
    validate_recipe_changes,
)
from receitas.services.session_issuer import SessionIssuer
from receitas.utils.logger import setup_logger

logger = setup_logger("services.mutation_gateway")


class MutationGateway:
    def __init__(
        self,
        session_issuer: SessionIssuer | None = None,
        recipe_repository: RecipeRepository | None = None,
    ):
        self.sessions = session_issuer or SessionIssuer()
        self.recipes = recipe_repository or RecipeRepository()

    async def create_authorized(
        self,
        token: str | None,
        title: str | None,
        ingredients: str | None,
        preparation: str | None,
    ) -> UUID:
        # Shape first (no side effects), then auth, then the uniqueness check
        errors = validate_new_recipe(title, ingredients, preparation)
        if errors:
            raise ValidationFailed(errors)

        user_id = await self.sessions.resolve(token)
        return await self.recipes.create(
            title, ingredients, preparation, owner_user_id=user_id
        )

    async def update_authorized(
        self, token: str | None, recipe_id: str, update_data: dict[str, Any]
    ) -> None:
        errors = validate_recipe_changes(update_data)
        if errors:
            raise ValidationFailed(errors)

        user_id = await self.sessions.resolve(token)
        await self._ensure_owner(user_id, recipe_id)
        await self.recipes.update(recipe_id, update_data, owner_id=user_id)

    async def delete_authorized(self, token: str | None, recipe_id: str) -> None:
        user_id = await self.sessions.resolve(token)
        await self._ensure_owner(user_id, recipe_id)
        await self.recipes.delete(recipe_id, owner_id=user_id)

    async def update_many_authorized(
        self, token: str | None, pattern: str, update_data: dict[str, Any]
    ) -> int:
        """Bulk update restricted to the caller's own recipes."""
        errors = validate_recipe_changes(update_data)
        if errors:
            raise ValidationFailed(errors)

        user_id = await self.sessions.resolve(token)
        return await self.recipes.update_many(pattern, update_data, owner_id=user_id)

    async def delete_many_authorized(self, token: str | None, ingredients: str) -> int:
        """Bulk delete restricted to the caller's own recipes."""
        user_id = await self.sessions.resolve(token)
        return await self.recipes.delete_many(ingredients, owner_id=user_id)

    async def _ensure_owner(self, user_id: UUID, recipe_id: str) -> None:
        recipe = await self.recipes.get(recipe_id)
        if recipe.owner_id != user_id:
            logger.info(f"User {user_id} denied write on recipe {recipe.id}")
            raise Unauthorized("Only the recipe owner can change it")
