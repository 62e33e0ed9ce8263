"""Pytest fixtures for catalog domain tests."""

from pathlib import Path

import pytest
import yaml


@pytest.fixture
def qwen_document() -> dict:
    """A hand-written vllm catalog entry with labels."""
    return {
        "apiVersion": "v1",
        "kind": "ModelCatalog",
        "metadata": {
            "name": "qwen2-5-7b-instruct",
            "display_name": "Qwen2.5 7B Instruct",
            "labels": {
                "icon_url": "https://example.com/qwen.png",
                "hf_repo_url": "https://huggingface.co/Qwen/Qwen2.5-7B-Instruct",
            },
        },
        "spec": {
            "model": {
                "registry": "",
                "name": "Qwen/Qwen2.5-7B-Instruct",
                "file": "model-00001-of-00004.safetensors",
                "version": "latest",
                "task": "text-generation",
            },
            "engine": {"engine": "vllm", "version": "v1"},
        },
    }


@pytest.fixture
def bge_document() -> dict:
    """An embedding entry without display name or labels."""
    return {
        "apiVersion": "v1",
        "kind": "ModelCatalog",
        "metadata": {"name": "bge-m3"},
        "spec": {
            "model": {"name": "BAAI/bge-m3", "version": "latest", "task": "text-embedding"},
            "engine": {"engine": "vllm", "version": "v1"},
        },
    }


@pytest.fixture
def reranker_document() -> dict:
    """A llama-cpp rerank entry."""
    return {
        "apiVersion": "v1",
        "kind": "ModelCatalog",
        "metadata": {"name": "bge-reranker-v2-m3", "display_name": "BGE Reranker v2 M3"},
        "spec": {
            "model": {
                "name": "gpustack/bge-reranker-v2-m3-GGUF",
                "version": "v2",
                "task": "text-rerank",
            },
            "engine": {"engine": "llama-cpp", "version": "v1"},
        },
    }


@pytest.fixture
def catalog_dir(
    tmp_path: Path, qwen_document: dict, bge_document: dict, reranker_document: dict
) -> Path:
    """A catalog directory with nested files, noise and a broken file."""
    root = tmp_path / "catalog"
    (root / "embedding").mkdir(parents=True)
    (root / "a-qwen.yaml").write_text(yaml.safe_dump(qwen_document, sort_keys=False))
    (root / "embedding" / "bge.yml").write_text(yaml.safe_dump(bge_document, sort_keys=False))
    (root / "z-rerank.yaml").write_text(yaml.safe_dump(reranker_document, sort_keys=False))
    (root / "other-kind.yaml").write_text(yaml.safe_dump({"kind": "Cluster", "metadata": {}}))
    (root / "broken.yaml").write_text("kind: ModelCatalog\nmetadata: [unclosed\n")
    (root / "notes.txt").write_text("not a catalog")
    return root
