"""Flat export rows of the categories view."""

from pydantic import Field

from result_views.models.base import Model


class CsvExportCategory(Model):
    """One top-level category with its result counts."""

    name: str = Field(..., alias="Category")
    failed: int = Field(default=0, alias="FAILED")
    broken: int = Field(default=0, alias="BROKEN")
    passed: int = Field(default=0, alias="PASSED")
    skipped: int = Field(default=0, alias="SKIPPED")
    unknown: int = Field(default=0, alias="UNKNOWN")
