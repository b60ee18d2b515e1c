"""Categories view manifest."""

from result_views.views.categories.view import CategoriesView
from result_views.views.manifest import ViewManifest

categories_manifest = ViewManifest(
    description="Failed and broken results grouped by root cause",
    view_factory=CategoriesView,
)
