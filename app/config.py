"""Configuration settings for the aerodex backend."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from functools import lru_cache
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger("aerodex.config")

# Secret fields and the name each one is stored under in SSM.
SECRET_PARAMETERS: dict[str, str] = {
    "aviationstack_api_key": "aviationstack/api_key",
    "flightlabs_api_key": "flightlabs/api_key",
    "fr24_api_key": "fr24/api_key",
    "serpapi_api_key": "serpapi/api_key",
    "openai_api_key": "openai/api_key",
}


def _get_secret_env(env_var: str) -> str | None:
    """Read an optional secret, treating blank values as unset."""

    value = os.getenv(env_var)
    if value is None or not value.strip():
        return None
    return value.strip()


def _get_list(env_var: str, default: str) -> list[str]:
    raw = os.getenv(env_var, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@lru_cache(maxsize=1)
def _get_ssm_client() -> Any:
    return boto3.client(
        "ssm",
        region_name=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "us-east-1",
    )


def get_ssm_secret(prefix: str, name: str) -> str | None:
    """Fetch a secret from AWS SSM Parameter Store.

    Unlike the environment lookup this talks to AWS, so it only runs when an
    SSM prefix is configured. A missing parameter or an AWS failure leaves the
    secret unset; the collaborator that needs it is simply disabled.
    """

    parameter = f"{prefix.rstrip('/')}/{name}"
    try:
        response = _get_ssm_client().get_parameter(Name=parameter, WithDecryption=True)
        value = response.get("Parameter", {}).get("Value")
    except (ClientError, BotoCoreError) as exc:  # pragma: no cover - AWS error passthrough
        logger.warning("Failed to load %s from SSM: %s", parameter, exc)
        return None

    if not value or not value.strip():
        logger.warning("Received empty value for %s from SSM", parameter)
        return None
    return value.strip()


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    aerodex_env: str = field(default_factory=lambda: os.getenv("AERODEX_ENV", "local"))
    log_level: str = field(default_factory=lambda: os.getenv("AERODEX_LOG_LEVEL", "INFO"))
    cors_origins: list[str] = field(
        default_factory=lambda: _get_list("AERODEX_CORS_ORIGINS", "*")
    )

    # Upstream call limits
    provider_timeout: float = field(
        default_factory=lambda: float(os.getenv("PROVIDER_TIMEOUT", "10.0"))
    )
    provider_deadline: float = field(
        default_factory=lambda: float(os.getenv("PROVIDER_DEADLINE", "15.0"))
    )

    # Position feed (unauthenticated)
    opensky_base_url: str = field(
        default_factory=lambda: os.getenv(
            "OPENSKY_BASE_URL", "https://opensky-network.org/api/states/all"
        )
    )

    # Schedule feed
    aviationstack_base_url: str = field(
        default_factory=lambda: os.getenv(
            "AVIATIONSTACK_BASE_URL", "http://api.aviationstack.com/v1/flights"
        )
    )
    aviationstack_api_key: str | None = field(
        default_factory=lambda: _get_secret_env("AVIATIONSTACK_API_KEY")
    )

    # Detail feeds
    flightlabs_base_url: str = field(
        default_factory=lambda: os.getenv(
            "FLIGHTLABS_BASE_URL", "https://app.goflightlabs.com/flights"
        )
    )
    flightlabs_api_key: str | None = field(
        default_factory=lambda: _get_secret_env("FLIGHTLABS_API_KEY")
    )
    fr24_base_url: str = field(
        default_factory=lambda: os.getenv(
            "FR24_BASE_URL",
            "https://fr24api.flightradar24.com/api/live/flight-positions/full",
        )
    )
    fr24_api_key: str | None = field(default_factory=lambda: _get_secret_env("FR24_API_KEY"))

    # Search feed
    serpapi_base_url: str = field(
        default_factory=lambda: os.getenv("SERPAPI_BASE_URL", "https://serpapi.com/search.json")
    )
    serpapi_api_key: str | None = field(
        default_factory=lambda: _get_secret_env("SERPAPI_API_KEY")
    )
    search_fallback_url: str = field(
        default_factory=lambda: os.getenv("SEARCH_FALLBACK_URL", "https://www.google.com/search")
    )

    # OpenAI / LLM settings
    openai_model: str = field(default_factory=lambda: os.getenv("OPENAI_MODEL", "gpt-4o-mini"))
    openai_timeout: float = field(
        default_factory=lambda: float(os.getenv("OPENAI_TIMEOUT", "30.0"))
    )
    openai_api_key: str | None = field(
        default_factory=lambda: _get_secret_env("OPENAI_API_KEY")
    )

    ssm_prefix: str | None = field(default_factory=lambda: _get_secret_env("AERODEX_SSM_PREFIX"))

    def __post_init__(self) -> None:
        for item in fields(self):
            if item.name in SECRET_PARAMETERS:
                value = getattr(self, item.name)
                if isinstance(value, str) and not value.strip():
                    setattr(self, item.name, None)

    def enabled_secrets(self) -> list[str]:
        return [name for name in SECRET_PARAMETERS if getattr(self, name)]


def load_settings(**overrides: Any) -> Settings:
    """Build settings from the environment, filling missing secrets from SSM."""

    loaded = Settings(**overrides)
    if loaded.ssm_prefix:
        for attr, parameter in SECRET_PARAMETERS.items():
            if attr in overrides or getattr(loaded, attr):
                continue
            setattr(loaded, attr, get_ssm_secret(loaded.ssm_prefix, parameter))
    logger.debug("Configured secrets: %s", loaded.enabled_secrets())
    return loaded


settings = load_settings()

__all__ = ["settings", "Settings", "SECRET_PARAMETERS", "get_ssm_secret", "load_settings"]
