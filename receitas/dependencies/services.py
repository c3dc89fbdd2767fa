from receitas.services import (
    CredentialStore,
    MutationGateway,
    RecipeRepository,
    SessionIssuer,
)


def get_credential_store() -> CredentialStore:
    return CredentialStore()


def get_session_issuer() -> SessionIssuer:
    return SessionIssuer()


def get_recipe_repository() -> RecipeRepository:
    return RecipeRepository()


def get_mutation_gateway() -> MutationGateway:
    return MutationGateway()
