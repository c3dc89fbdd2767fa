from receitas.db_handlers.base import BaseDBHandler, check_local_db
from receitas.db_handlers.recipe import RecipeDBHandler
from receitas.db_handlers.session import SessionDBHandler
from receitas.db_handlers.user import UserDBHandler

__all__ = [
    "BaseDBHandler",
    "check_local_db",
    "UserDBHandler",
    "SessionDBHandler",
    "RecipeDBHandler",
]
