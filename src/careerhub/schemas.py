"""Pydantic schemas for the moderation API."""

from typing import Any

from pydantic import BaseModel, Field

from careerhub.models import BatchDeleteItem, BatchDeleteResult, DuplicateCandidate


class DuplicateCheckRequest(BaseModel):
    """Request schema for a duplicate lookup."""

    item: dict[str, Any] = Field(
        ...,
        description="The content item to compare against existing records",
        json_schema_extra={"example": {"title": "Portfolio Website", "description": "A personal site"}},
    )
    exclude_id: int | str | None = Field(
        None, description="Record id to leave out of the comparison, e.g. the item being edited"
    )


class DuplicateCheckResponse(BaseModel):
    """Response schema for a duplicate lookup."""

    duplicates: list[DuplicateCandidate] = Field(default_factory=list)


class BatchDeleteRequest(BaseModel):
    """Request schema for batch deletion."""

    items: list[BatchDeleteItem] = Field(..., description="Records to delete, processed in order")


class BatchDeleteResponse(BaseModel):
    """Response schema for batch deletion."""

    results: list[BatchDeleteResult]
