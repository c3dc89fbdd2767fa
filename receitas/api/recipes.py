"""
Recipe routes: public reads, authenticated create/update, and the bulk
endpoints keyed by an ingredient filter.

Delete and the bulk endpoints are open unless
ENFORCE_OWNERSHIP_ON_ALL_MUTATIONS is enabled, in which case they go
through the mutation gateway like create and update.
"""

from fastapi import APIRouter, Depends, Query, status

from receitas.config import settings
from receitas.dependencies import (
    get_bearer_token,
    get_mutation_gateway,
    get_recipe_repository,
)
from receitas.schemas import (
    BulkResultResponse,
    CreatedResponse,
    MessageResponse,
    RecipeCreateRequest,
    RecipeResponse,
    RecipeUpdateRequest,
)
from receitas.services import MutationGateway, RecipeRepository
from receitas.utils.logger import setup_logger

logger = setup_logger("api.recipes")

router = APIRouter(prefix="/receitas", tags=["Recipes"])


@router.get("", response_model=list[RecipeResponse])
async def list_recipes(
    ingrediente: str | None = Query(
        None, description="Only recipes whose ingredients contain this text"
    ),
    repository: RecipeRepository = Depends(get_recipe_repository),
):
    recipes = await repository.list_recipes(ingrediente)
    return [RecipeResponse.from_model(recipe) for recipe in recipes]


@router.post(
    "", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
async def create_recipe(
    recipe_data: RecipeCreateRequest,
    token: str | None = Depends(get_bearer_token),
    gateway: MutationGateway = Depends(get_mutation_gateway),
):
    """Create a recipe owned by the signed-in user."""
    recipe_id = await gateway.create_authorized(
        token, recipe_data.titulo, recipe_data.ingredientes, recipe_data.preparo
    )
    return CreatedResponse(message="Recipe created", id=recipe_id)


@router.put("/muitas/{filtro}", response_model=BulkResultResponse)
async def update_many_recipes(
    filtro: str,
    recipe_data: RecipeUpdateRequest,
    token: str | None = Depends(get_bearer_token),
    repository: RecipeRepository = Depends(get_recipe_repository),
    gateway: MutationGateway = Depends(get_mutation_gateway),
):
    """Update every recipe whose ingredients contain ``filtro``, ignoring case."""
    update_data = recipe_data.to_update_data()
    if settings.enforce_ownership_on_all_mutations:
        count = await gateway.update_many_authorized(token, filtro, update_data)
    else:
        count = await repository.update_many(filtro, update_data)
    return BulkResultResponse(message="Recipes updated", count=count)


@router.delete("/muitas/{filtro}", response_model=BulkResultResponse)
async def delete_many_recipes(
    filtro: str,
    token: str | None = Depends(get_bearer_token),
    repository: RecipeRepository = Depends(get_recipe_repository),
    gateway: MutationGateway = Depends(get_mutation_gateway),
):
    """Delete every recipe whose ingredients are exactly ``filtro``."""
    if settings.enforce_ownership_on_all_mutations:
        count = await gateway.delete_many_authorized(token, filtro)
    else:
        count = await repository.delete_many(filtro)
    return BulkResultResponse(message="Recipes deleted", count=count)


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: str,
    repository: RecipeRepository = Depends(get_recipe_repository),
):
    recipe = await repository.get(recipe_id)
    return RecipeResponse.from_model(recipe)


@router.put("/{recipe_id}", response_model=MessageResponse)
async def update_recipe(
    recipe_id: str,
    recipe_data: RecipeUpdateRequest,
    token: str | None = Depends(get_bearer_token),
    gateway: MutationGateway = Depends(get_mutation_gateway),
):
    """Partially update a recipe. Only its owner may do this."""
    await gateway.update_authorized(token, recipe_id, recipe_data.to_update_data())
    return MessageResponse(message="Recipe updated")


@router.delete("/{recipe_id}", response_model=MessageResponse)
async def delete_recipe(
    recipe_id: str,
    token: str | None = Depends(get_bearer_token),
    repository: RecipeRepository = Depends(get_recipe_repository),
    gateway: MutationGateway = Depends(get_mutation_gateway),
):
    if settings.enforce_ownership_on_all_mutations:
        await gateway.delete_authorized(token, recipe_id)
    else:
        await repository.delete(recipe_id)
    return MessageResponse(message="Recipe deleted")
