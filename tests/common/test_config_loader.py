"""Tests for storefront/common/config_loader.py"""

import pytest

from storefront.common.config_loader import load_config, load_settings
from storefront.common.constants import DEFAULT_API_VERSION
from storefront.exceptions import SchemaValidationError


@pytest.fixture
def yaml_config(tmp_path):
    path = tmp_path / "storefront.yaml"
    path.write_text(
        "shop: yaml-store\n"
        "api_version: '2025-01'\n"
        "private_access_token: yaml_private\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def empty_env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text("", encoding="utf-8")
    return path


class TestLoadConfig:
    def test_loads_absolute_path(self, yaml_config):
        assert load_config(yaml_config)["shop"] == "yaml-store"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")


class TestLoadSettings:
    def test_from_yaml(self, clean_env, yaml_config, empty_env_file):
        settings = load_settings(config_path=yaml_config, env_file=empty_env_file)
        assert settings.shop == "yaml-store"
        assert settings.api_version == "2025-01"
        assert settings.private_access_token == "yaml_private"
        assert settings.public_access_token == ""

    def test_environment_overrides_yaml(self, clean_env, yaml_config, empty_env_file):
        clean_env.setenv("SHOPIFY_SHOP", "env-store")
        clean_env.setenv("PRIVATE_SHOPIFY_ACCESS_TOKEN", "env_private")

        settings = load_settings(config_path=yaml_config, env_file=empty_env_file)

        assert settings.shop == "env-store"
        assert settings.private_access_token == "env_private"
        assert settings.api_version == "2025-01"

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / "creds.env"
        env_file.write_text(
            "SHOPIFY_SHOP=dotenv-store\nPUBLIC_SHOPIFY_ACCESS_TOKEN=dotenv_public\n",
            encoding="utf-8",
        )

        settings = load_settings(env_file=env_file)

        assert settings.shop == "dotenv-store"
        assert settings.public_access_token == "dotenv_public"

    def test_default_api_version(self, clean_env, empty_env_file):
        clean_env.setenv("SHOPIFY_SHOP", "env-store")
        assert load_settings(env_file=empty_env_file).api_version == DEFAULT_API_VERSION

    def test_missing_shop(self, clean_env, empty_env_file):
        with pytest.raises(SchemaValidationError) as excinfo:
            load_settings(env_file=empty_env_file)
        assert "shop" in excinfo.value.fields
