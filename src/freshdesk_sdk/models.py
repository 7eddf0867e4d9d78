from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from .exceptions import InvalidConfigurationError

BASE_URL_TEMPLATE = "https://{domain}.freshdesk.com/api/v2"


def _load_env_config():
    """Load environment variables from .env file if available."""
    load_dotenv()


def _parse_timeout(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(f"Invalid timeout: {value!r}")


@dataclass(frozen=True)
class ApiConfig:
    """Connection settings for a Freshdesk account."""

    api_key: str
    domain: str
    # When False, ``domain`` is the full base URL and is used as-is
    is_subdomain: bool = True
    # Seconds; None keeps the requests default
    timeout: Optional[float] = None

    def __post_init__(self):
        if not self.api_key or not str(self.api_key).strip():
            raise InvalidConfigurationError("API key is empty.")
        if not self.domain or not str(self.domain).strip():
            raise InvalidConfigurationError("Domain is empty.")

    @property
    def base_url(self) -> str:
        if self.is_subdomain:
            return BASE_URL_TEMPLATE.format(domain=self.domain)
        return self.domain

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> "ApiConfig":
        """Build a config from ``api_key``/``domain``/``base_url``/``timeout`` keys.

        A ``base_url`` entry takes precedence over ``domain`` and switches the
        config to full-URL mode.
        """
        base_url = values.get("base_url")
        return cls(
            api_key=values.get("api_key"),
            domain=base_url or values.get("domain"),
            is_subdomain=not base_url,
            timeout=_parse_timeout(values.get("timeout")),
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "ApiConfig":
        """Load configuration from environment variables (and ``.env``).

        Keyword overrides that are not None win over the environment.
        """
        _load_env_config()
        values = {
            "api_key": os.getenv("FRESHDESK_API_KEY"),
            "domain": os.getenv("FRESHDESK_DOMAIN"),
            "base_url": os.getenv("FRESHDESK_BASE_URL"),
            "timeout": os.getenv("FRESHDESK_TIMEOUT"),
        }
        if overrides.get("domain"):
            # an explicit domain should not be shadowed by FRESHDESK_BASE_URL
            values["base_url"] = None
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_mapping(values)

    @classmethod
    def from_yaml(cls, path: Path, **overrides: Any) -> "ApiConfig":
        data: dict[str, Any] = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise InvalidConfigurationError(f"Config file {path} must contain a mapping")
        if overrides.get("domain"):
            data.pop("base_url", None)
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_mapping(data)
