"""Utility modules: logging, HTTP client."""

from lmtools_mcp.utils.logging import setup_logging, get_logger
from lmtools_mcp.utils.http import create_http_client

__all__ = [
    "setup_logging",
    "get_logger",
    "create_http_client",
]
