from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from receitas.db_handlers.base import BaseDBHandler, check_local_db
from receitas.models.session import Session
from receitas.utils.logger import setup_logger

logger = setup_logger("db_handlers.session")


class SessionDBHandler(BaseDBHandler[Session]):
    def __init__(self):
        super().__init__(Session)

    @check_local_db
    async def get_by_token(
        self, token: str, *, db: AsyncSession = None
    ) -> Session | None:
        """Look up a session by its bearer token."""
        stmt = select(Session).where(Session.token == token)
        result = await db.execute(stmt)
        return result.scalar_one_or_none()
