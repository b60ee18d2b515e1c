"""Configuration for a report generation run."""

from collections.abc import Sequence

from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """Configuration for report generation."""

    views: Sequence[str] = ("categories", "behaviors")
    widget_limit: int = Field(default=10, ge=1)
    categories_file_name: str = "categories.json"
    result_file_suffix: str = "-result.json"
