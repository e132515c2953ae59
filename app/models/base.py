"""Base Models and column helpers"""

import enum
import uuid
from typing import Type

from sqlalchemy import Column, DateTime, Enum, Uuid

from app.database import Base
from app.utils.time import get_utc_now


def enum_column(enum_cls: Type[enum.Enum], name: str) -> Enum:
    """Column type storing the enum's *values* ("Bank Transfer"), not member names."""
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )


class BaseModel(Base):
    """
    Base model class with common fields for all models.

    Provides:
    - UUID primary key
    - created_at timestamp
    - updated_at timestamp
    """
    __abstract__ = True

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    created_at = Column(DateTime, default=get_utc_now, nullable=False, index=True)
    updated_at = Column(DateTime, default=get_utc_now, onupdate=get_utc_now, nullable=False)
