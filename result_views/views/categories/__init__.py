"""Categories view module."""

from result_views.views.categories.manifest import categories_manifest
from result_views.views.categories.models import CsvExportCategory
from result_views.views.categories.view import CategoriesView

__all__ = ["CategoriesView", "CsvExportCategory", "categories_manifest"]
