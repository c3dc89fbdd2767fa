from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from receitas.db_handlers.base import BaseDBHandler, check_local_db
from receitas.models.user import User
from receitas.utils.logger import setup_logger

logger = setup_logger("db_handlers.user")


class UserDBHandler(BaseDBHandler[User]):
    def __init__(self):
        super().__init__(User)

    @check_local_db
    async def get_user_by_email(
        self, email: str, *, db: AsyncSession = None
    ) -> User | None:
        """Get a user by email."""
        stmt = select(User).filter(User.email == email)
        result = await db.execute(stmt)
        return result.scalar_one_or_none()
