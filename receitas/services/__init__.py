from receitas.services.credential_store import CredentialStore
from receitas.services.mutation_gateway import MutationGateway
from receitas.services.recipe_repository import RecipeRepository
from receitas.services.session_issuer import SessionIssuer, token_from_header

__all__ = [
    "CredentialStore",
    "SessionIssuer",
    "RecipeRepository",
    "MutationGateway",
    "token_from_header",
]
