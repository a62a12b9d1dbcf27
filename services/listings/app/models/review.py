from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from app.core.database import Base


class Review(Base):
    """Star rating a guest left for a listing of any category."""

    __tablename__ = "reviews"
    __table_args__ = {"schema": "public"}

    id = Column(UUID(as_uuid=False), primary_key=True)
    item_id = Column(UUID(as_uuid=False), nullable=False, index=True)
    item_type = Column(String(30), nullable=True)
    user_id = Column(UUID(as_uuid=False), nullable=True)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


__all__ = ["Review"]
