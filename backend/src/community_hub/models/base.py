"""
Base model class for the Community Hub backend.

This module provides the base model class with common functionality
for all database models.
"""

from sqlalchemy import Column, Integer

# Import Base from the database module to avoid duplicate declarations
from ..core.database import Base


class BaseModel(Base):
    """Base model with a system-assigned integer primary key."""

    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"
