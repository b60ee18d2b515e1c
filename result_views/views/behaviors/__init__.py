"""Behaviors view module."""

from result_views.views.behaviors.manifest import behaviors_manifest
from result_views.views.behaviors.models import CsvExportBehavior
from result_views.views.behaviors.view import BehaviorsView

__all__ = ["BehaviorsView", "CsvExportBehavior", "behaviors_manifest"]
