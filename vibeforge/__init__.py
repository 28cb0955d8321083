"""VibeForge: edit HTML pages with natural-language requests."""

__version__ = "1.0.0"
