"""Pydantic models for Hugging Face hub entities."""

from pydantic import BaseModel, ConfigDict, Field


class RepositoryReference(BaseModel):
    """An owner/repo pair parsed from a hub URL. Casing is preserved."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="Repository owner (user or org)")
    repo: str = Field(..., min_length=1, description="Repository name")

    @property
    def repo_id(self) -> str:
        """The hub repository id, owner/repo."""
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return self.repo_id


class SiblingFile(BaseModel):
    """An entry in a repository file listing."""

    model_config = ConfigDict(extra="ignore")

    rfilename: str = Field(..., description="Full relative filename in the repo")
    size: int | None = Field(None, description="Size in bytes, when the hub reports it")


class RemoteModelMetadata(BaseModel):
    """The subset of the hub /api/models response used for conversion."""

    model_config = ConfigDict(extra="ignore")

    pipeline_tag: str | None = Field(None, description="Hub task classification")
    siblings: list[SiblingFile] = Field(default_factory=list, description="Repository files")
