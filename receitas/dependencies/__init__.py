from receitas.dependencies.auth import get_bearer_token
from receitas.dependencies.services import (
    get_credential_store,
    get_mutation_gateway,
    get_recipe_repository,
    get_session_issuer,
)

__all__ = [
    "get_bearer_token",
    "get_credential_store",
    "get_session_issuer",
    "get_recipe_repository",
    "get_mutation_gateway",
]
