"""Field validation rules for content tables."""

import re

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlparse

from careerhub.models import TableRules, ValidationResult


TABLE_RULES: dict[str, TableRules] = {
    "project_of": TableRules(
        required=("title", "description"),
        optional=("technologies", "skills", "user_id"),
    ),
    "organizations": TableRules(
        required=("name", "description"),
        optional=("website", "email", "location"),
    ),
    "profiles": TableRules(
        required=("name", "email"),
        optional=("bio", "skills", "location"),
    ),
    "creative_skills": TableRules(
        required=("skill_name", "description"),
        optional=("category", "level"),
    ),
    "interview_questions": TableRules(
        required=("question",),
        optional=("answer", "category", "difficulty"),
    ),
    "feedback": TableRules(
        required=("message",),
        optional=("rating", "category", "user_id"),
    ),
    "user_activities": TableRules(
        required=("activity_type",),
        optional=("description", "timestamp"),
    ),
    "user_selection": TableRules(
        required=("selection_type",),
        optional=("details", "preferences"),
    ),
}

_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")


def get_table_rules(table_name: str) -> TableRules:
    """Rules for a table; unknown tables have no required fields."""
    return TABLE_RULES.get(table_name, TableRules())


def validate_email(email: str) -> bool:
    return _EMAIL.fullmatch(email) is not None


def validate_url(url: str) -> bool:
    """Check that a string is an absolute URL with a scheme."""
    url = (url or "").strip()
    if not url or any(char.isspace() for char in url):
        return False
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    if not _SCHEME.fullmatch(parsed.scheme):
        return False
    return bool(parsed.netloc or parsed.path)


def validate_content_length(content: str | None, min_length: int = 10, max_length: int = 5000) -> bool:
    if not content:
        return False
    length = len(content.strip())
    return min_length <= length <= max_length


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_item(item: Mapping[str, Any], table_name: str) -> ValidationResult:
    """
    Validate an item against the rules of its table.

    Required fields are checked in rule order, followed by the email and
    website format checks which apply to every table.

    Args:
        item: Mapping of field name to value
        table_name: Table the item belongs to

    Returns:
        ValidationResult with errors in the order the checks ran
    """
    rules = get_table_rules(table_name)
    errors: list[str] = []

    for field in rules.required:
        if _is_missing(item.get(field)):
            errors.append(f"Missing required field: {field}")

    email = item.get("email")
    if email and not validate_email(str(email)):
        errors.append("Invalid email format")

    website = item.get("website")
    if website and not validate_url(str(website)):
        errors.append("Invalid website URL")

    return ValidationResult(is_valid=not errors, errors=errors)
