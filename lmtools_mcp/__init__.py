"""Model Context Protocol bridge for host language-model tools."""

__version__ = "1.0.0"
