"""Exception hierarchy for neutree-catalog.

Every failure in the conversion pipeline is fatal. Domain code raises one of
these exceptions and only the entry points decide how to report it.
"""

from __future__ import annotations

from collections.abc import Sequence


class CatalogError(Exception):
    """Base exception for all neutree-catalog errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidReferenceError(CatalogError):
    """The repository URL is missing, on the wrong host, or lacks owner/repo."""


class FetchFailedError(CatalogError):
    """The hub metadata request did not succeed."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HF API request failed: {status_code} {reason}".rstrip())


class NoSupportedArtifactError(CatalogError):
    """The repository has no .gguf or .safetensors weights."""

    def __init__(self) -> None:
        super().__init__("No .gguf or .safetensors file found in repo")


class MissingPipelineTagError(CatalogError):
    """The repository metadata carries no pipeline_tag."""

    def __init__(self) -> None:
        super().__init__("Model pipeline_tag is missing. Cannot determine task type.")


class UnsupportedPipelineTagError(CatalogError):
    """The pipeline_tag does not map to a supported task."""

    def __init__(
        self,
        pipeline_tag: str,
        supported_tags: Sequence[str],
        supported_tasks: Sequence[str],
    ) -> None:
        self.pipeline_tag = pipeline_tag
        self.supported_tags = list(supported_tags)
        self.supported_tasks = list(supported_tasks)
        super().__init__(
            f'Unsupported pipeline tag: "{pipeline_tag}". '
            f"Supported pipeline tags: {', '.join(self.supported_tags)}. "
            f"Only tasks [{', '.join(self.supported_tasks)}] are supported."
        )


class CatalogLoadError(CatalogError):
    """A catalog directory could not be read."""


class NotFoundError(CatalogError):
    """A catalog entry was not found."""

    def __init__(self, resource_type: str, name: str) -> None:
        self.resource_type = resource_type
        self.name = name
        super().__init__(f"{resource_type} '{name}' not found")
