"""Behaviors view manifest."""

from result_views.views.behaviors.view import BehaviorsView
from result_views.views.manifest import ViewManifest

behaviors_manifest = ViewManifest(
    description="Results grouped by epic, feature and story",
    view_factory=BehaviorsView,
)
