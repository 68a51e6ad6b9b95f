"""Tests for Pydantic schemas and domain models."""

import pytest

from pydantic import ValidationError

from careerhub.models import (
    DEFAULT_KEYWORDS,
    BatchDeleteItem,
    BatchDeleteResult,
    CareerPathData,
    SafetyKeywords,
    SafetyVerdict,
    ValidationResult,
)
from careerhub.schemas import BatchDeleteRequest, DuplicateCheckRequest


class TestSafetyVerdict:
    """Tests for SafetyVerdict enum."""

    def test_values(self):
        """Test the three verdict values."""
        assert [v.value for v in SafetyVerdict] == ["safe", "warning", "flagged"]

    def test_compares_to_string(self):
        """Test that verdicts compare equal to their string values."""
        assert SafetyVerdict.FLAGGED == "flagged"


class TestSafetyKeywords:
    """Tests for SafetyKeywords configuration."""

    def test_default_vocabulary(self):
        """Test that the default vocabulary covers all three lists."""
        assert "hate" in DEFAULT_KEYWORDS.inappropriate
        assert "phishing" in DEFAULT_KEYWORDS.suspicious
        assert "vulgar" in DEFAULT_KEYWORDS.professional

    def test_keywords_are_immutable(self):
        """Test that keyword configuration cannot be reassigned."""
        with pytest.raises(ValidationError):
            DEFAULT_KEYWORDS.inappropriate = ("changed",)

    def test_lists_are_coerced_to_tuples(self):
        """Test that list input is stored as tuples."""
        keywords = SafetyKeywords(suspicious=["spam"])
        assert keywords.suspicious == ("spam",)
        assert keywords.inappropriate == ()


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_model_dump(self):
        """Test dumping a result to a dictionary."""
        result = ValidationResult(is_valid=False, errors=["Invalid email format"])
        assert result.model_dump() == {"is_valid": False, "errors": ["Invalid email format"]}


class TestBatchDeleteModels:
    """Tests for batch deletion models."""

    def test_item_requires_table_name(self):
        """Test that table_name is required."""
        with pytest.raises(ValidationError) as exc_info:
            BatchDeleteItem(id=1)

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("table_name",) for error in errors)

    def test_item_keeps_id_type(self):
        """Test that integer and string ids are preserved."""
        assert BatchDeleteItem(id=5, table_name="feedback").id == 5
        assert BatchDeleteItem(id="5b1c", table_name="feedback").id == "5b1c"

    def test_result_error_optional(self):
        """Test that successful results carry no error."""
        item = BatchDeleteItem(id=1, table_name="feedback")
        assert BatchDeleteResult(success=True, item=item).error is None

    def test_request_from_dict(self):
        """Test creating a batch request from dictionaries."""
        request = BatchDeleteRequest(items=[{"id": 1, "table_name": "profiles"}])
        assert request.items == [BatchDeleteItem(id=1, table_name="profiles")]


class TestDuplicateCheckRequest:
    """Tests for DuplicateCheckRequest."""

    def test_exclude_id_optional(self):
        """Test that exclude_id defaults to None."""
        request = DuplicateCheckRequest(item={"title": "Portfolio"})
        assert request.exclude_id is None

    def test_missing_item_fails(self):
        """Test that the item field is required."""
        with pytest.raises(ValidationError) as exc_info:
            DuplicateCheckRequest()

        errors = exc_info.value.errors()
        assert any(error["loc"] == ("item",) for error in errors)


class TestCareerPathData:
    """Tests for CareerPathData."""

    def test_user_id_required(self):
        """Test that user_id is required."""
        with pytest.raises(ValidationError):
            CareerPathData(field="Design")

    def test_model_dump_excludes_unset(self):
        """Test dumping only the provided fields."""
        data = CareerPathData(user_id="u1", suggestion="Learn Figma")
        assert data.model_dump(exclude_none=True) == {"user_id": "u1", "suggestion": "Learn Figma"}
