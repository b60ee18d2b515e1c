"""Models for classification rules loaded from categories files."""

import re
from typing import Any

from pydantic import Field, field_validator

from result_views.models.base import Model
from result_views.models.status import Status


class Category(Model):
    """A user-declared rule that labels results with a root cause.

    ``message_regex`` and ``trace_regex`` are compiled with DOTALL and must
    match the whole text. ``flaky`` left unset means the rule does not look
    at flakiness at all.
    """

    name: str = Field(..., description="Category name shown in the report")
    description: str | None = None
    matched_statuses: frozenset[Status] = Field(
        default_factory=frozenset,
        description="Statuses to match (empty means any status)",
    )
    message_regex: re.Pattern[str] | None = None
    trace_regex: re.Pattern[str] | None = None
    flaky: bool | None = None

    @field_validator("message_regex", "trace_regex", mode="before")
    @classmethod
    def compile_pattern(cls, value: Any) -> Any:
        """Compile string patterns with DOTALL so '.' also matches newlines."""
        if isinstance(value, str):
            try:
                return re.compile(value, re.DOTALL)
            except re.error as e:
                raise ValueError(f"Invalid pattern {value!r}: {e}") from e
        return value
