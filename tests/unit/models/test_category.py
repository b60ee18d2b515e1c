"""Tests for Category model."""

import re

import pytest
from pydantic import ValidationError

from result_views.models.category import Category


def test_compiles_patterns_with_dotall() -> None:
    """Patterns are compiled so '.' also matches newlines."""
    category = Category(name="Errors", message_regex="error.*", trace_regex="at .*")

    assert category.message_regex is not None
    assert category.message_regex.flags & re.DOTALL
    assert category.trace_regex is not None
    assert category.trace_regex.flags & re.DOTALL


def test_accepts_camel_case_keys() -> None:
    """Allure style keys populate the snake_case fields."""
    category = Category.model_validate(
        {
            "name": "Infra",
            "matchedStatuses": ["broken"],
            "messageRegex": ".*",
            "traceRegex": ".*",
        }
    )

    assert category.matched_statuses == {"broken"}
    assert category.message_regex is not None
    assert category.trace_regex is not None


def test_defaults() -> None:
    """Rule with only a name matches any status and ignores flakiness."""
    category = Category(name="Any")

    assert category.matched_statuses == frozenset()
    assert category.message_regex is None
    assert category.trace_regex is None
    assert category.flaky is None


def test_invalid_pattern_raises() -> None:
    """Pattern that does not compile fails validation."""
    with pytest.raises(ValidationError, match="Invalid pattern"):
        Category(name="Bad", message_regex="(unclosed")


def test_is_frozen() -> None:
    """Rules cannot be changed after loading."""
    category = Category(name="Any")

    with pytest.raises(ValidationError):
        category.name = "Other"  # type: ignore[misc]


def test_serializes_patterns_as_strings() -> None:
    """Dumped rules keep the pattern text and camelCase keys."""
    category = Category(name="Nulls", message_regex="NPE.*", flaky=False)

    data = category.model_dump(mode="json", by_alias=True)

    assert data["messageRegex"] == "NPE.*"
    assert data["traceRegex"] is None
    assert data["flaky"] is False
