"""
Database models for the Community Hub backend.

This package contains SQLAlchemy models for all database tables
used by the application.
"""

from .base import Base, BaseModel
from .faq import FAQ
from .issue import Issue
from .plugin import Plugin, PluginTag, Tag

__all__ = [
    "Base",
    "BaseModel",
    "FAQ",
    "Issue",
    "Plugin",
    "PluginTag",
    "Tag",
]
