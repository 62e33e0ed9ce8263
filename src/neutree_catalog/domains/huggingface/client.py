"""Hugging Face hub client operations."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlparse

import httpx
from pydantic import ValidationError

from neutree_catalog.config import CatalogConfig, get_config
from neutree_catalog.domains.catalog.models import CatalogDocument
from neutree_catalog.domains.huggingface.converter import convert_metadata
from neutree_catalog.domains.huggingface.models import (
    RemoteModelMetadata,
    RepositoryReference,
)
from neutree_catalog.utils.errors import CatalogError, FetchFailedError, InvalidReferenceError

logger = logging.getLogger(__name__)

DEFAULT_HUB_HOST = "huggingface.co"


def parse_repo_url(url: str | None, hub_host: str = DEFAULT_HUB_HOST) -> RepositoryReference:
    """Parse a hub model URL into an owner/repo reference.

    One trailing slash is tolerated, and path segments after owner/repo
    (``/tree/main``, ``/blob/...``) are ignored.

    Args:
        url: URL such as https://huggingface.co/meta-llama/Llama-3-8B.
        hub_host: Hostname the URL must point at.

    Raises:
        InvalidReferenceError: If the URL is empty, on another host, or
            does not name both an owner and a repo.
    """
    if not url:
        raise InvalidReferenceError("Please provide a Hugging Face repo URL.")

    stripped = url[:-1] if url.endswith("/") else url
    try:
        parsed = urlparse(stripped)
    except ValueError as e:
        raise InvalidReferenceError(f"Invalid URL '{url}': {e}") from e

    if parsed.hostname != hub_host:
        raise InvalidReferenceError(f"Not a {hub_host} URL: {url}")

    segments = parsed.path.lstrip("/").split("/")
    if len(segments) < 2 or not segments[0] or not segments[1]:
        raise InvalidReferenceError(f"URL missing owner or repo: {url}")

    return RepositoryReference(owner=segments[0], repo=segments[1])


class HubClient:
    """Client for the hub model-info API.

    Makes exactly one request per lookup: no retries, fail fast.
    """

    def __init__(
        self,
        config: CatalogConfig | None = None,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or get_config()
        self._transport = transport
        self._async_transport = async_transport

    @property
    def config(self) -> CatalogConfig:
        return self._config

    def _client_kwargs(self) -> dict[str, Any]:
        return {
            "base_url": self._config.hub_endpoint,
            "timeout": self._config.request_timeout,
            "headers": {"Accept": "application/json", **self._config.auth_headers()},
        }

    @staticmethod
    def _metadata_path(ref: RepositoryReference) -> str:
        return f"/api/models/{ref.owner}/{ref.repo}"

    def parse_url(self, url: str | None) -> RepositoryReference:
        """Parse a repository URL against the configured hub host."""
        return parse_repo_url(url, hub_host=self._config.hub_host)

    def get_model_metadata(self, ref: RepositoryReference) -> RemoteModelMetadata:
        """Fetch repository metadata.

        Raises:
            FetchFailedError: On a non-success status or transport failure.
            CatalogError: If the response body is not valid metadata.
        """
        path = self._metadata_path(ref)
        logger.debug(f"GET {self._config.hub_endpoint}{path}")
        try:
            with httpx.Client(transport=self._transport, **self._client_kwargs()) as client:
                response = client.get(path)
        except httpx.HTTPError as e:
            raise FetchFailedError(0, f"{type(e).__name__}: {e}") from e
        return self._parse_response(ref, response)

    async def get_model_metadata_async(self, ref: RepositoryReference) -> RemoteModelMetadata:
        """Async variant of get_model_metadata."""
        path = self._metadata_path(ref)
        logger.debug(f"GET {self._config.hub_endpoint}{path}")
        try:
            async with httpx.AsyncClient(
                transport=self._async_transport, **self._client_kwargs()
            ) as client:
                response = await client.get(path)
        except httpx.HTTPError as e:
            raise FetchFailedError(0, f"{type(e).__name__}: {e}") from e
        return self._parse_response(ref, response)

    @staticmethod
    def _parse_response(ref: RepositoryReference, response: httpx.Response) -> RemoteModelMetadata:
        if not response.is_success:
            raise FetchFailedError(response.status_code, response.reason_phrase)
        try:
            return RemoteModelMetadata.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise CatalogError(f"Invalid metadata returned for {ref}: {e}") from e

    def convert(self, url: str | None) -> CatalogDocument:
        """Run the full pipeline: parse, fetch, select, classify, synthesize."""
        ref = self.parse_url(url)
        meta = self.get_model_metadata(ref)
        return convert_metadata(ref, meta)

    async def convert_async(self, url: str | None) -> CatalogDocument:
        """Async variant of convert."""
        ref = self.parse_url(url)
        meta = await self.get_model_metadata_async(ref)
        return convert_metadata(ref, meta)
