"""
Service layer: query construction and write orchestration for each resource.
"""

from .faq_service import FAQService
from .issue_service import IssueService
from .plugin_service import PluginService
from .tag_service import TagService

__all__ = ["FAQService", "IssueService", "PluginService", "TagService"]
