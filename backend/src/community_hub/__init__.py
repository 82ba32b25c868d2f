"""Community Hub backend: plugins with tags, issues and FAQs over HTTP."""

__version__ = "0.1.0"
