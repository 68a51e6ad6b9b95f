"""Domain models for content moderation and career path records."""

from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SafetyVerdict(str, Enum):
    """Tri-state result of a content safety check."""

    SAFE = "safe"
    WARNING = "warning"
    FLAGGED = "flagged"


class SafetyKeywords(BaseModel):
    """Keyword vocabularies used by the safety classifier."""

    model_config = ConfigDict(frozen=True)

    inappropriate: tuple[str, ...] = ()
    suspicious: tuple[str, ...] = ()
    professional: tuple[str, ...] = ()


DEFAULT_KEYWORDS = SafetyKeywords(
    inappropriate=(
        "hate", "violence", "discrimination", "harassment", "abuse",
        "offensive", "inappropriate", "explicit", "harmful",
    ),
    suspicious=(
        "fake", "scam", "fraud", "misleading", "spam", "phishing",
        "malicious", "virus", "hack", "illegal",
    ),
    professional=("unprofessional", "inappropriate", "vulgar", "offensive"),
)


class TableRules(BaseModel):
    """Required and optional fields for one content table."""

    model_config = ConfigDict(frozen=True)

    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()


class SafetyReport(BaseModel):
    """Signals collected while classifying a content item."""

    verdict: SafetyVerdict
    inappropriate: list[str] = Field(default_factory=list)
    suspicious: list[str] = Field(default_factory=list)
    unprofessional: list[str] = Field(default_factory=list)
    excessive_capitals: bool = False
    excessive_punctuation: bool = False
    is_empty: bool = False


class ValidationResult(BaseModel):
    """Outcome of validating an item against its table rules."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)


class DuplicateCandidate(BaseModel):
    """Projection of an existing record compared against a new item."""

    id: int | UUID | str | None = None
    title: str | None = None
    name: str | None = None
    description: str | None = None


class SafetyLogEntry(BaseModel):
    """Audit trail row written to the safety log table."""

    action: str
    item_id: int | UUID | str | None
    table_name: str
    details: str = ""
    timestamp: str
    admin_id: str


class BatchDeleteItem(BaseModel):
    """Reference to a record scheduled for deletion."""

    id: int | UUID | str
    table_name: str


class BatchDeleteResult(BaseModel):
    """Per-item outcome of a batch deletion."""

    success: bool
    item: BatchDeleteItem | dict[str, Any]
    error: str | None = None


class CareerPathData(BaseModel):
    """Career path payload sent to the career path API."""

    user_id: str
    field: str | None = None
    desired_skills: str | None = None
    confident_skills: str | None = None
    suggestion: str | None = None
