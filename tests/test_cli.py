"""Tests for the hf2catalog command line."""

import json

import httpx
import pytest
import yaml

from neutree_catalog import cli
from neutree_catalog.config import CatalogConfig, get_config
from neutree_catalog.domains.huggingface.client import HubClient

LLAMA_PATH = "/api/models/meta-llama/Llama-3-8B"
LLAMA_URL = "https://huggingface.co/meta-llama/Llama-3-8B"

LLAMA_METADATA = {
    "pipeline_tag": "text-generation",
    "siblings": [
        {"rfilename": "model-00001-of-00002.safetensors", "size": 1},
        {"rfilename": "README.md", "size": 2},
    ],
}


@pytest.fixture
def hub(monkeypatch: pytest.MonkeyPatch) -> dict[str, tuple[int, dict]]:
    """Route table for a mocked hub; the CLI's HubClient talks to it."""
    routes: dict[str, tuple[int, dict]] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        status, body = routes.get(request.url.path, (404, {"error": "Repository not found"}))
        return httpx.Response(status, json=body)

    def make_client(config: CatalogConfig) -> HubClient:
        return HubClient(config, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli, "HubClient", make_client)
    return routes


@pytest.fixture
def config() -> CatalogConfig:
    return CatalogConfig()


def run(
    argv: list[str], config: CatalogConfig, capsys: pytest.CaptureFixture
) -> tuple[int, str, str]:
    code = cli.main(argv, config=config)
    out, err = capsys.readouterr()
    return code, out, err


class TestMain:
    """Test cli.main."""

    def test_yaml_output(self, hub: dict, config: CatalogConfig, capsys) -> None:
        """Success writes only the YAML document to stdout."""
        hub[LLAMA_PATH] = (200, LLAMA_METADATA)

        code, out, err = run([LLAMA_URL], config, capsys)

        assert code == 0
        assert err == ""
        document = yaml.safe_load(out)
        assert document["metadata"]["name"] == "llama-3-8b"
        assert document["spec"]["model"]["task"] == "text-generation"
        assert document["spec"]["engine"]["engine"] == "vllm"
        assert document["spec"]["model"]["file"] == "model-00001-of-00002.safetensors"
        assert document["spec"]["variables"]["engine_args"]["served_model_name"] == (
            "meta-llama/Llama-3-8B"
        )

    @pytest.mark.parametrize("flag", ["--json", "-j"])
    def test_json_output(self, hub: dict, config: CatalogConfig, capsys, flag: str) -> None:
        """--json and -j switch the output to JSON."""
        hub[LLAMA_PATH] = (
            200,
            {"pipeline_tag": "text-generation", "siblings": [{"rfilename": "weights.gguf"}]},
        )

        code, out, _err = run([LLAMA_URL, flag], config, capsys)

        assert code == 0
        document = json.loads(out)
        assert document["spec"]["engine"]["engine"] == "llama-cpp"
        assert document["spec"]["model"]["file"] == "weights.gguf"
        assert "engine_args" not in document["spec"]["variables"]

    def test_missing_pipeline_tag(self, hub: dict, config: CatalogConfig, capsys) -> None:
        """Missing pipeline_tag exits 1 with an Error line on stderr."""
        hub[LLAMA_PATH] = (200, {"siblings": LLAMA_METADATA["siblings"]})

        code, out, err = run([LLAMA_URL], config, capsys)

        assert code == 1
        assert out == ""
        assert err.startswith("Error: ")
        assert "pipeline_tag is missing" in err

    def test_unsupported_pipeline_tag(self, hub: dict, config: CatalogConfig, capsys) -> None:
        """Unsupported tags list every supported tag."""
        hub[LLAMA_PATH] = (200, dict(LLAMA_METADATA, pipeline_tag="object-detection"))

        code, out, err = run([LLAMA_URL], config, capsys)

        assert code == 1
        assert out == ""
        assert (
            "text-generation, feature-extraction, text-embedding, "
            "sentence-similarity, text-rerank" in err
        )

    def test_fetch_failure(self, hub: dict, config: CatalogConfig, capsys) -> None:
        """A hub 404 exits 1 with the status in the message."""
        code, out, err = run(["https://huggingface.co/nobody/nothing"], config, capsys)

        assert code == 1
        assert out == ""
        assert "Error: HF API request failed: 404" in err

    def test_invalid_url(self, hub: dict, config: CatalogConfig, capsys) -> None:
        """Non-hub URLs are rejected before any request."""
        code, out, err = run(["https://example.com/a/b"], config, capsys)

        assert code == 1
        assert out == ""
        assert "Error: Not a huggingface.co URL" in err

    def test_no_supported_artifact(self, hub: dict, config: CatalogConfig, capsys) -> None:
        hub[LLAMA_PATH] = (
            200,
            {"pipeline_tag": "text-generation", "siblings": [{"rfilename": "pytorch_model.bin"}]},
        )

        code, _out, err = run([LLAMA_URL], config, capsys)

        assert code == 1
        assert "No .gguf or .safetensors file found in repo" in err

    def test_missing_argument_is_usage_error(self, config: CatalogConfig) -> None:
        """argparse rejects a missing repo URL with exit status 2."""
        with pytest.raises(SystemExit) as exc_info:
            cli.main([], config=config)

        assert exc_info.value.code == 2

    def test_invalid_environment_config(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """A bad NEUTREE_CATALOG_ setting is reported like any other failure."""
        monkeypatch.setenv("NEUTREE_CATALOG_REQUEST_TIMEOUT", "abc")
        get_config.cache_clear()
        try:
            code = cli.main([LLAMA_URL])
        finally:
            get_config.cache_clear()
        out, err = capsys.readouterr()

        assert code == 1
        assert out == ""
        assert err.startswith("Error: ")
        assert "request_timeout" in err
