from __future__ import annotations

from functools import wraps
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from receitas.db import AppAsyncSessionLocal
from receitas.exceptions import StoreFault
from receitas.models.base import Base
from receitas.utils.logger import setup_logger

logger = setup_logger("db_handlers")


ModelType = TypeVar("ModelType", bound=Base)


def check_local_db(func):
    """Database session decorator with transaction management.

    Integrity violations are re-raised untouched so callers can map them to
    a conflict; any other SQLAlchemy error becomes a ``StoreFault``.
    Nothing is retried.
    """

    @wraps(func)
    async def wrapper(*args, **kwargs):
        # If 'db' is already provided, we're in a nested call.
        # The outermost caller who created the session is responsible for the transaction.
        if kwargs.get("db"):
            return await func(*args, **kwargs)

        async with AppAsyncSessionLocal() as db:
            kwargs["db"] = db
            try:
                result = await func(*args, **kwargs)
                await db.commit()
                return result
            except IntegrityError as e:
                await db.rollback()
                logger.warning(f"IntegrityError in {func.__name__}: {e.orig}")
                raise
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error(
                    f"Transaction failed in {func.__name__}: {e}", exc_info=True
                )
                raise StoreFault(str(e)) from e
            except Exception:
                await db.rollback()
                raise

    return wrapper


class BaseDBHandler(Generic[ModelType]):
    """Generic handler for database operations with basic CRUD methods."""

    def __init__(self, model: type[ModelType]):
        self.model = model

    @check_local_db
    async def create(
        self, obj_dict: dict[str, Any], *, db: AsyncSession = None
    ) -> ModelType:
        """Create a new record in the database."""
        db_obj = self.model(**obj_dict)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    @check_local_db
    async def get(self, id: Any, *, db: AsyncSession = None) -> ModelType | None:
        """Get a single record by its primary key."""
        stmt = select(self.model).where(self.model.id == id)
        result = await db.execute(stmt)
        return result.scalars().first()

    @check_local_db
    async def get_multi(
        self, *, db: AsyncSession = None, where: list | None = None
    ) -> list[ModelType]:
        """Get every record, optionally restricted by SQL expressions."""
        stmt = select(self.model)
        if where:
            stmt = stmt.where(*where)
        result = await db.execute(stmt)
        return list(result.scalars().all())

    @check_local_db
    async def update_where(
        self, where: list, update_data: dict[str, Any], *, db: AsyncSession = None
    ) -> int:
        """Apply ``update_data`` to every row matching ``where``. Returns the row count."""
        stmt = (
            update(self.model)
            .where(*where)
            .values(
                {getattr(self.model, key): value for key, value in update_data.items()}
            )
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount

    @check_local_db
    async def remove_where(self, where: list, *, db: AsyncSession = None) -> int:
        """Delete every row matching ``where``. Returns the row count."""
        stmt = (
            delete(self.model)
            .where(*where)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        return result.rowcount
