"""
Session model: an opaque bearer token mapped to the user it was issued to.

Possession of the token is the only credential. A user may hold any number
of sessions at once.
"""

from sqlalchemy import Column, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql.functions import now as db_now

from receitas.models.base import Base


class Session(Base):
    __tablename__ = "sessoes"

    token = Column(
        String(64),
        primary_key=True,
        comment="Opaque bearer token (UUID4 string)",
    )

    user_id = Column(
        "id_usuario",
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
        comment="User the session was issued to",
    )

    created_at = Column(
        DateTime(timezone=True),
        server_default=db_now(),
        nullable=False,
        comment="Issue time, used for the optional session TTL",
    )

    user = relationship("User", back_populates="sessions")

    def __repr__(self):
        return f"<Session(user_id={self.user_id})>"
