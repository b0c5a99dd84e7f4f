"""
Configuration loading for mediafinder.

Defaults are overridden by an optional JSON config file, then by the
environment (a .env file in the working directory is honoured), then by
explicit command line values.
"""

import json
import os
from typing import Dict, Any, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

from .errors import ConfigurationError

TOKEN_ENV = "TMDB_TOKEN"
BASE_URL_ENV = "TMDB_BASE_URL"


class Settings(BaseModel):
    token: str
    base_url: str = "https://api.themoviedb.org/3"
    site_url: str = "https://www.themoviedb.org"
    language: str = "en-US"
    timeout: float = 30
    proxy: Optional[Dict[str, str]] = None


def create_default_config() -> Dict[str, Any]:
    """Create default configuration."""
    return {
        "proxy": None,
        "tmdb": {
            "base_url": "https://api.themoviedb.org/3",
            "site_url": "https://www.themoviedb.org",
            "language": "en-US",
            "timeout": 30,
            "token": None
        }
    }


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from a JSON file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a JSON object")
    return data


def load_settings(config_path: Optional[str] = None, language: Optional[str] = None) -> Settings:
    """Resolve the settings for one run, failing fast when no token is available."""
    config = create_default_config()
    if config_path:
        file_config = load_config(config_path)
        config["tmdb"].update(file_config.get("tmdb") or {})
        if "proxy" in file_config:
            config["proxy"] = file_config["proxy"]

    load_dotenv(find_dotenv(usecwd=True))
    tmdb_config = config["tmdb"]
    tmdb_config["token"] = os.getenv(TOKEN_ENV) or tmdb_config.get("token")
    if os.getenv(BASE_URL_ENV):
        tmdb_config["base_url"] = os.getenv(BASE_URL_ENV)
    if language:
        tmdb_config["language"] = language

    if not tmdb_config["token"]:
        raise ConfigurationError(f"{TOKEN_ENV} must be set.")

    return Settings(
        token=tmdb_config["token"],
        base_url=tmdb_config["base_url"].rstrip("/"),
        site_url=tmdb_config["site_url"].rstrip("/"),
        language=tmdb_config["language"],
        timeout=tmdb_config["timeout"],
        proxy=config.get("proxy")
    )
