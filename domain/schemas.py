"""Pydantic models for taxonomy terms and resolved content references."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Term(BaseModel):
    """A single node of the category taxonomy."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, description="Numeric term identifier, unique within the taxonomy.")
    slug: str = Field(..., min_length=1, description="URL-safe term identifier.")
    parent: int = Field(
        default=0,
        ge=0,
        description="Identifier of the parent term; 0 means the term is a root.",
    )
    name: str | None = Field(default=None, description="Optional human-readable label.")


class ContentRef(BaseModel):
    """Content type + id pair an incoming URL resolves to."""

    content_type: Literal["section"] = "section"
    id: int = Field(..., gt=0)
