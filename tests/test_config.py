"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

import coingecko.config as config_module
from coingecko.client import CoinGeckoClient
from coingecko.config import get_config_path, load_config
from coingecko.models.config import DEFAULT_HOST, ClientConfig


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config loader at a temporary directory."""
    monkeypatch.setattr(config_module, "CONFIG_DIR", tmp_path)
    return tmp_path


class TestLoadConfig:
    """Test YAML config loading."""

    def test_loads_yaml(self, config_dir: Path):
        (config_dir / "coingecko.yaml").write_text(
            "host: https://pro-api.coingecko.com/api/v3\napi_key: abc\n", encoding="utf-8"
        )

        data = load_config("coingecko")

        assert data == {"host": "https://pro-api.coingecko.com/api/v3", "api_key": "abc"}

    def test_empty_file(self, config_dir: Path):
        (config_dir / "coingecko.yaml").write_text("", encoding="utf-8")

        assert load_config("coingecko") == {}

    def test_missing_file_points_to_sample(self, config_dir: Path):
        with pytest.raises(FileNotFoundError, match="coingecko.sample.yaml"):
            load_config("coingecko")

    def test_config_path(self, config_dir: Path):
        assert get_config_path("coingecko") == config_dir / "coingecko.yaml"

    def test_sample_ships_with_package(self):
        sample = Path(config_module.__file__).parent / "coingecko.sample.yaml"

        assert sample.exists()


class TestClientConfig:
    """Test ClientConfig model."""

    def test_defaults(self):
        config = ClientConfig()

        assert config.host == DEFAULT_HOST
        assert config.api_key is None
        assert config.timeout == 30.0
        assert config.headers == {}

    def test_from_yaml_skips_nulls(self):
        config = ClientConfig.from_yaml({"host": None, "api_key": "abc", "timeout": 5})

        assert config.host == DEFAULT_HOST
        assert config.api_key == "abc"
        assert config.timeout == 5.0

    def test_from_yaml_headers(self):
        config = ClientConfig.from_yaml({"headers": {"Accept": "application/json"}})

        assert config.headers == {"Accept": "application/json"}

    def test_timeout_validated(self):
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0)

    def test_sub_second_timeout(self):
        assert ClientConfig(timeout=0.5).timeout == 0.5

    def test_frozen(self):
        config = ClientConfig()

        with pytest.raises(ValidationError):
            config.host = "https://other"  # type: ignore[misc]

    def test_with_overrides(self):
        base = ClientConfig(api_key="from-file")

        overridden = base.with_overrides(host="https://h", api_key=None)

        assert overridden.host == "https://h"
        assert overridden.api_key == "from-file"
        assert base.host == DEFAULT_HOST

    def test_safe_headers(self):
        config = ClientConfig(headers={"Accept": "application/json", "Cookie": "session=1"})

        assert config.get_safe_headers() == {"Accept": "application/json"}


class TestClientFromYaml:
    def test_from_yaml(self, config_dir: Path):
        (config_dir / "coingecko.yaml").write_text("api_key: abc\n", encoding="utf-8")

        client = CoinGeckoClient.from_yaml()

        assert client.config.api_key == "abc"
        assert client.get_url("/ping") == f"{DEFAULT_HOST}/ping?x_cg_pro_api_key=abc"
