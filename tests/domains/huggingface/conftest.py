"""Pytest fixtures for huggingface domain tests."""

from collections.abc import Callable

import httpx
import pytest

from neutree_catalog.config import CatalogConfig


@pytest.fixture
def llama_metadata() -> dict:
    """Hub response for a sharded safetensors text-generation repo."""
    return {
        "id": "meta-llama/Llama-3-8B",
        "pipeline_tag": "text-generation",
        "siblings": [
            {"rfilename": "model-00001-of-00002.safetensors", "size": 1},
            {"rfilename": "README.md", "size": 2},
        ],
    }


@pytest.fixture
def gguf_metadata() -> dict:
    """Hub response for a repo holding only a GGUF file."""
    return {
        "pipeline_tag": "text-generation",
        "siblings": [{"rfilename": "weights.gguf", "size": 4096}],
    }


@pytest.fixture
def config() -> CatalogConfig:
    """Config pointing at the default hub, with no token."""
    return CatalogConfig(hub_endpoint="https://huggingface.co", hub_token=None)


@pytest.fixture
def hub_handler() -> Callable[[dict[str, tuple[int, object]]], Callable]:
    """Build an httpx MockTransport handler from a path -> (status, body) table.

    Requests are recorded on the handler's ``requests`` list.
    """

    def make(routes: dict[str, tuple[int, object]]) -> Callable:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            status, body = routes.get(request.url.path, (404, {"error": "Repository not found"}))
            if isinstance(body, str):
                return httpx.Response(status, text=body)
            return httpx.Response(status, json=body)

        handler.requests = requests  # type: ignore[attr-defined]
        return handler

    return make
