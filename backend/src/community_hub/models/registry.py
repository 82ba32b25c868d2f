"""
Model registry for the Community Hub backend.

Ensures all SQLAlchemy models are imported and registered on
``Base.metadata`` before tables are created or relationships resolved.
"""


def register_all_models():
    """Import all SQLAlchemy models so they're registered with SQLAlchemy."""
    from . import FAQ, Base, Issue, Plugin, PluginTag, Tag

    return {
        "Base": Base,
        "Plugin": Plugin,
        "Tag": Tag,
        "PluginTag": PluginTag,
        "Issue": Issue,
        "FAQ": FAQ,
    }
