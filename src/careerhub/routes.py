"""API routes for content moderation."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request

from careerhub.classifier import SafetyClassifier
from careerhub.models import SafetyReport, ValidationResult
from careerhub.schemas import (
    BatchDeleteRequest,
    BatchDeleteResponse,
    DuplicateCheckRequest,
    DuplicateCheckResponse,
)
from careerhub.store import SafetyStore
from careerhub.validation import validate_item


router = APIRouter(prefix="/api/safety", tags=["safety"])

classifier = SafetyClassifier()


def _get_store(request: Request) -> SafetyStore:
    store: SafetyStore | None = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Store not configured")
    return store


@router.post("/check", response_model=SafetyReport)
async def check_content(item: dict[str, Any] = Body(...)) -> SafetyReport:
    """
    Classify a content item as safe, warning or flagged.

    Args:
        item: Content item fields

    Returns:
        Safety report with the verdict and the signals behind it
    """
    return classifier.analyze(item)


@router.post("/validate/{table_name}", response_model=ValidationResult)
async def validate_content(table_name: str, item: dict[str, Any] = Body(...)) -> ValidationResult:
    """Validate a content item against the rules of its table."""
    return validate_item(item, table_name)


@router.post("/duplicates/{table_name}", response_model=DuplicateCheckResponse)
async def check_duplicates(
    table_name: str, request_data: DuplicateCheckRequest, request: Request
) -> DuplicateCheckResponse:
    """
    Find existing records that duplicate the posted item.

    Lookup failures yield an empty list rather than an error.

    Raises:
        HTTPException: If no store is configured
    """
    store = _get_store(request)
    duplicates = await store.find_duplicates(
        request_data.item, table_name, exclude_id=request_data.exclude_id
    )
    return DuplicateCheckResponse(duplicates=duplicates)


@router.post("/batch-delete", response_model=BatchDeleteResponse)
async def batch_delete(request_data: BatchDeleteRequest, request: Request) -> BatchDeleteResponse:
    """
    Delete the listed records one after another.

    Raises:
        HTTPException: If no store is configured or the batch cannot be processed
    """
    store = _get_store(request)

    try:
        results = await store.batch_delete(request_data.items)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return BatchDeleteResponse(results=results)
