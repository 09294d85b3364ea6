"""
Configuration Loader

Loads Storefront API settings from an optional YAML file, a .env file and
environment variables (environment wins).
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ValidationError

from ..exceptions import SchemaValidationError
from ..models.schema import validation_issues
from .constants import DEFAULT_API_VERSION

# Environment variable -> config key
ENV_VARS = {
    "SHOPIFY_SHOP": "shop",
    "PUBLIC_SHOPIFY_ACCESS_TOKEN": "public_access_token",
    "PRIVATE_SHOPIFY_ACCESS_TOKEN": "private_access_token",
    "SHOPIFY_API_VERSION": "api_version",
}


class StorefrontConfig(BaseModel):
    """Storefront API connection settings."""
    shop: str
    public_access_token: str = ""
    private_access_token: str = ""
    api_version: str = DEFAULT_API_VERSION


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Absolute path, or name of a file in the config directory
            (e.g., 'storefront.yaml')

    Returns:
        Parsed YAML content as dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = Path(filename)
    if not config_path.is_absolute():
        config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_settings(
    config_path: Optional[Union[str, Path]] = None,
    env_file: Optional[Union[str, Path]] = None,
) -> StorefrontConfig:
    """
    Build the Storefront settings.

    Args:
        config_path: Optional YAML file with keys shop, api_version,
            public_access_token, private_access_token
        env_file: .env file to load (default: search from the working directory)

    Returns:
        Validated StorefrontConfig

    Raises:
        SchemaValidationError: required settings are missing or invalid
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    values: Dict[str, Any] = {}
    if config_path:
        values.update(load_config(Path(config_path).resolve()))

    for env_var, key in ENV_VARS.items():
        value = os.environ.get(env_var)
        if value:
            values[key] = value

    try:
        return StorefrontConfig.model_validate(values)
    except ValidationError as e:
        raise SchemaValidationError("StorefrontConfig", validation_issues(e)) from e
