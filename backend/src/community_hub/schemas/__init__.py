"""
Pydantic schemas for request validation and response shaping.
"""

from .faq import FAQCreate, FAQResponse
from .issue import IssueCreate, IssueQueryParams, IssueResponse
from .plugin import PluginCreate, PluginCreated, PluginResponse, TagResponse

__all__ = [
    "FAQCreate",
    "FAQResponse",
    "IssueCreate",
    "IssueQueryParams",
    "IssueResponse",
    "PluginCreate",
    "PluginCreated",
    "PluginResponse",
    "TagResponse",
]
