"""Configuration loading from environment and YAML files."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TOOLS_CONFIG: dict[str, Any] = {"enabled_providers": ["example"]}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server info (reported by initialize)
    server_name: str = "vscode-lm-tools-mcp-server"
    server_version: str = "1.0.0"
    protocol_version: str = "2024-11-05"

    # Host and port
    host: str = "0.0.0.0"
    port: int = 22333

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # Capability provider
    provider_backend: Literal["local", "remote"] = "local"
    host_bridge_url: str = "http://127.0.0.1:22334"
    host_bridge_timeout: int = 30  # applies to tool listing only
    tools_config_path: str | None = None

    # Surface provider listing failures as internal errors instead of an empty list
    strict_tool_listing: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def uses_remote_provider(self) -> bool:
        """Check if tools come from a host bridge over HTTP."""
        return self.provider_backend == "remote"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_tools_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load tool provider configuration from YAML file.

    Args:
        config_path: Path to the config file. If None, uses default location.

    Returns:
        Dictionary with configuration data.
    """
    if config_path is None:
        possible_paths = [
            Path("config/tools.yaml"),
            Path(__file__).parent.parent.parent / "config" / "tools.yaml",
        ]
        for path in possible_paths:
            if path.exists():
                config_path = path
                break
        else:
            return dict(DEFAULT_TOOLS_CONFIG)

    config_path = Path(config_path)
    if not config_path.exists():
        return dict(DEFAULT_TOOLS_CONFIG)

    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    return config


def get_enabled_providers(config: dict[str, Any] | None = None) -> list[str]:
    """Get list of enabled tool provider names."""
    if config is None:
        config = load_tools_config()
    return config.get("enabled_providers", ["example"])
