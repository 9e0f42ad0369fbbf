"""
Server configuration, read once from the environment at startup.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from yt_mcp_server.youtube_api import DEFAULT_BASE_URL

DEFAULT_LOG_LEVEL = "INFO"


class ConfigurationError(ValueError):
    """Raised when the environment does not describe a usable server."""


@dataclass(frozen=True)
class ServerConfig:
    """Settings shared by the upstream client and the dispatcher."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None
    verify_ssl: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        load_env_file: bool = True,
    ) -> "ServerConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.
            load_env_file: Load a .env file into os.environ first.

        Raises:
            ConfigurationError: If YOUTUBE_API_KEY is missing or a value is malformed.
        """
        if load_env_file:
            load_dotenv()
        if environ is None:
            environ = os.environ

        api_key = environ.get("YOUTUBE_API_KEY", "").strip()
        if not api_key:
            raise ConfigurationError("YOUTUBE_API_KEY environment variable is required")

        timeout = None
        raw_timeout = environ.get("YOUTUBE_MCP_TIMEOUT", "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"YOUTUBE_MCP_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                ) from None
            if timeout <= 0:
                raise ConfigurationError("YOUTUBE_MCP_TIMEOUT must be positive")

        verify_ssl = _parse_bool(
            "YOUTUBE_MCP_VERIFY_SSL", environ.get("YOUTUBE_MCP_VERIFY_SSL", "true")
        )

        return cls(
            api_key=api_key,
            base_url=environ.get("YOUTUBE_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=timeout,
            verify_ssl=verify_ssl,
            log_level=environ.get("YOUTUBE_MCP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")
