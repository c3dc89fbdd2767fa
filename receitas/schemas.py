from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from receitas.models import Recipe

# Request field name -> Recipe attribute
RECIPE_FIELD_MAP = {
    "titulo": "title",
    "ingredientes": "ingredients",
    "preparo": "preparation",
}


class SignUpRequest(BaseModel):
    # Everything optional here: the credential store reports every problem at once
    nome: str | None = Field(None, description="Display name")
    email: str | None = Field(None, description="Email used to sign in")
    senha: str | None = Field(None, description="Password")


class SignInRequest(BaseModel):
    email: str | None = Field(None, description="Email used at sign-up")
    senha: str | None = Field(None, description="Password")


class RecipeCreateRequest(BaseModel):
    titulo: str | None = Field(None, description="Unique recipe title")
    ingredientes: str | None = Field(None, description="Ingredient list")
    preparo: str | None = Field(None, description="Preparation instructions")


class RecipeUpdateRequest(BaseModel):
    """Partial update: only the fields present in the body are applied."""

    titulo: str | None = None
    ingredientes: str | None = None
    preparo: str | None = None

    def to_update_data(self) -> dict[str, Any]:
        """Present, non-null fields keyed by Recipe attribute name."""
        return {
            RECIPE_FIELD_MAP[field]: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class RecipeResponse(BaseModel):
    id: UUID = Field(..., alias="_id")
    titulo: str
    ingredientes: str
    preparo: str
    id_usuario: UUID | None = Field(None, alias="idUsuario")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_model(cls, recipe: Recipe) -> "RecipeResponse":
        return cls(
            id=recipe.id,
            titulo=recipe.title,
            ingredientes=recipe.ingredients,
            preparo=recipe.preparation,
            id_usuario=recipe.owner_id,
        )


class MessageResponse(BaseModel):
    message: str = Field(..., description="Response message")


class CreatedResponse(MessageResponse):
    id: UUID = Field(..., description="Identifier of the created record")


class BulkResultResponse(MessageResponse):
    count: int = Field(..., description="Number of records affected")
