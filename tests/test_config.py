"""Tests for CatalogConfig."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from neutree_catalog.config import CatalogConfig, LogLevel, TransportMode


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate from the caller's environment and any .env file."""
    for name in (
        "NEUTREE_CATALOG_HUB_ENDPOINT",
        "NEUTREE_CATALOG_HUB_TOKEN",
        "NEUTREE_CATALOG_CATALOG_DIR",
        "NEUTREE_CATALOG_PORT",
        "NEUTREE_CATALOG_TRANSPORT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestCatalogConfig:
    """Test configuration defaults and overrides."""

    def test_defaults(self) -> None:
        config = CatalogConfig()

        assert config.hub_endpoint == "https://huggingface.co"
        assert config.hub_host == "huggingface.co"
        assert config.hub_token is None
        assert config.request_timeout == 30.0
        assert config.catalog_dir == Path("catalog")
        assert config.transport is TransportMode.STDIO
        assert config.port == 8000
        assert config.log_level is LogLevel.INFO

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """NEUTREE_CATALOG_ variables override defaults."""
        monkeypatch.setenv("NEUTREE_CATALOG_HUB_ENDPOINT", "https://hf-mirror.com/")
        monkeypatch.setenv("NEUTREE_CATALOG_CATALOG_DIR", "/srv/catalog")
        monkeypatch.setenv("NEUTREE_CATALOG_TRANSPORT", "streamable-http")

        config = CatalogConfig()

        assert config.hub_endpoint == "https://hf-mirror.com"
        assert config.hub_host == "hf-mirror.com"
        assert config.catalog_dir == Path("/srv/catalog")
        assert config.transport is TransportMode.STREAMABLE_HTTP

    def test_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("NEUTREE_CATALOG_PORT=9000\n")

        assert CatalogConfig().port == 9000

    def test_auth_headers(self) -> None:
        """A token becomes a bearer header and is hidden in repr."""
        config = CatalogConfig(hub_token="hf_secret")

        assert config.auth_headers() == {"Authorization": "Bearer hf_secret"}
        assert "hf_secret" not in repr(config)

    def test_no_token_no_headers(self) -> None:
        assert CatalogConfig().auth_headers() == {}

    @pytest.mark.parametrize("field", [{"port": 0}, {"request_timeout": 0}])
    def test_invalid_values(self, field: dict) -> None:
        with pytest.raises(ValidationError):
            CatalogConfig(**field)
