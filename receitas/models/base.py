"""
Base configurations and mixins for database models.

Provides the declarative base plus the timestamp and UUID primary key
mixins shared by the users and recipes tables.
"""

import uuid

from sqlalchemy import Column, DateTime, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql.functions import now as db_now


Base = declarative_base()


class TimestampMixin:
    """
    Adds database-managed ``created_at`` / ``updated_at`` columns.
    """

    created_at = Column(
        DateTime(timezone=True),
        server_default=db_now(),
        nullable=False,
        comment="Timestamp when the record was created",
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=db_now(),
        onupdate=db_now(),
        nullable=False,
        comment="Timestamp when the record was last updated",
    )


class UUIDMixin:
    """
    Adds a UUID4 primary key generated on insert.
    """

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Primary key using UUID4 format",
    )


__all__ = ["Base", "TimestampMixin", "UUIDMixin"]
