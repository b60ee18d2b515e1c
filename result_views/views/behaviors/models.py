"""Flat export rows of the behaviors view."""

from pydantic import Field

from result_views.models.base import Model


class CsvExportBehavior(Model):
    """Counts of the results sharing one (epic, feature, story) combination."""

    epic: str | None = Field(default=None, alias="Epic")
    feature: str | None = Field(default=None, alias="Feature")
    story: str | None = Field(default=None, alias="Story")
    failed: int = Field(default=0, alias="FAILED")
    broken: int = Field(default=0, alias="BROKEN")
    passed: int = Field(default=0, alias="PASSED")
    skipped: int = Field(default=0, alias="SKIPPED")
    unknown: int = Field(default=0, alias="UNKNOWN")
