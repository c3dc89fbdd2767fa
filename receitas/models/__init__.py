"""
Database models for the recipes API.

Architecture: User → Session (bearer tokens) and User → Recipe (ownership).
"""

from receitas.models.recipe import Recipe
from receitas.models.session import Session
from receitas.models.user import User

__all__ = [
    "User",
    "Session",
    "Recipe",
]
