#!/usr/bin/env python3
"""
circapi Configuration Management

Sources, in order of preference:
- explicit keyword arguments: APIConfig(token_key=..., ...)
- YAML file:                  APIConfig.from_file("circapi.yaml")
- environment / .env file:    APIConfig.from_env()

The API token is the only required setting. The URL defaults to the public
v2 endpoint and is normalized (scheme added, /v2 path added when empty).
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.circonus.com/v2"
DEFAULT_APP_NAME = "circapi"

# Environment variable names used by from_env()
ENV_TOKEN_KEY = "CIRCONUS_API_TOKEN"
ENV_TOKEN_APP = "CIRCONUS_API_APP"
ENV_ACCOUNT_ID = "CIRCONUS_ACCOUNT_ID"
ENV_API_URL = "CIRCONUS_API_URL"
ENV_LOG_LEVEL = "CIRCONUS_LOG_LEVEL"


class APIConfig(BaseModel):
    token_key: str = ""
    token_app: str = DEFAULT_APP_NAME
    token_account_id: Optional[str] = None
    url: str = DEFAULT_API_URL
    timeout: int = 10               # Request timeout in seconds
    insecure_tls: bool = False      # Skip certificate verification (dev only)
    log_level: str = "INFO"

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "APIConfig":
        """Load API configuration from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        logger.debug("loaded API config from %s (keys: %s)", path, sorted(data))
        return cls(**data)

    @classmethod
    def from_env(cls, dotenv_path: Optional[Union[str, Path]] = None) -> "APIConfig":
        """
        Build configuration from environment variables.

        A .env file is loaded first (without overriding variables that are
        already set), matching how the rest of the tooling reads API keys.

        Args:
            dotenv_path: Optional explicit .env location

        Returns:
            APIConfig populated from the environment
        """
        load_dotenv(dotenv_path)
        data = {"token_key": os.getenv(ENV_TOKEN_KEY, "")}
        if os.getenv(ENV_TOKEN_APP):
            data["token_app"] = os.getenv(ENV_TOKEN_APP)
        if os.getenv(ENV_ACCOUNT_ID):
            data["token_account_id"] = os.getenv(ENV_ACCOUNT_ID)
        if os.getenv(ENV_API_URL):
            data["url"] = os.getenv(ENV_API_URL)
        if os.getenv(ENV_LOG_LEVEL):
            data["log_level"] = os.getenv(ENV_LOG_LEVEL)
        return cls(**data)

    def check(self) -> None:
        """Raise ConfigError if the configuration cannot be used for requests."""
        if not self.token_key:
            raise ConfigError("API Token is required")
        self.api_url()

    def api_url(self) -> str:
        """
        Return the normalized API base URL.

        "api.example.com"          -> "https://api.example.com/v2"
        "https://api.example.com/" -> "https://api.example.com/v2"
        "http://host:8080/v2/"     -> "http://host:8080/v2"
        """
        raw = (self.url or DEFAULT_API_URL).strip()
        if "://" not in raw:
            raw = f"https://{raw}"

        parsed = urlparse(raw)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"Invalid API URL [{self.url}]")

        path = parsed.path.rstrip("/")
        if not path:
            path = "/v2"
        return f"{parsed.scheme}://{parsed.netloc}{path}"

    def configure_logging(self) -> None:
        """Apply log_level to the root logger. Meant for scripts, not library code."""
        configure_logging(self.log_level)


def configure_logging(level: str = "INFO") -> None:
    """Basic logging setup for scripts using the library."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))
