"""Tool providers for the in-process capability provider."""
