from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .client import API_VERSION, DEFAULT_BASE_URL, WitClient

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class WitConfig:
    access_token: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = API_VERSION
    debug: bool = False


def load_env_config(*, use_dotenv: bool = True) -> WitConfig:
    """Load wit.ai settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    access_token = os.getenv("WIT_ACCESS_TOKEN", "").strip()
    base_url = os.getenv("WIT_BASE_URL", "").strip() or DEFAULT_BASE_URL
    api_version = os.getenv("WIT_API_VERSION", "").strip() or API_VERSION
    debug = os.getenv("WIT_DEBUG", "").strip().lower() in TRUTHY
    return WitConfig(
        access_token=access_token,
        base_url=base_url,
        api_version=api_version,
        debug=debug,
    )


def require_env_config(*, use_dotenv: bool = True) -> WitConfig:
    """Like load_env_config, but a missing WIT_ACCESS_TOKEN is a ValueError."""
    cfg = load_env_config(use_dotenv=use_dotenv)
    if not cfg.access_token:
        raise ValueError("Missing WIT_ACCESS_TOKEN in environment.")
    return cfg


def create_client_from_env(
    *, use_dotenv: bool = True, timeout_seconds: Optional[float] = None, **kwargs
) -> WitClient:
    """Create a WitClient from environment variables."""
    cfg = require_env_config(use_dotenv=use_dotenv)
    return WitClient(
        access_token=cfg.access_token,
        base_url=cfg.base_url,
        api_version=cfg.api_version,
        debug=kwargs.pop("debug", cfg.debug),
        timeout_seconds=timeout_seconds,
        **kwargs,
    )


__all__ = [
    "WitConfig",
    "load_env_config",
    "require_env_config",
    "create_client_from_env",
]
