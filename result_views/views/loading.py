"""Discovery of report views registered as entry points."""

from collections.abc import Mapping
from importlib.metadata import entry_points
from typing import Any

from result_views.views.manifest import ViewManifest

ENTRY_POINT_GROUP = "result_views.views"


class ViewNotFoundError(Exception):
    """Raised when no view is registered under the requested key."""


def available_views() -> Mapping[str, ViewManifest[Any]]:
    """Manifests of every installed view, keyed by view key."""
    return {
        entry.name: entry.load() for entry in entry_points(group=ENTRY_POINT_GROUP)
    }


def load_view_manifest(key: str) -> ViewManifest[Any]:
    """Load the manifest of the view registered under ``key``.

    The error for an unknown key lists every installed view with its
    description, so a mistyped ``--view`` shows what can be rendered.

    Raises:
        ViewNotFoundError: If no view is registered under ``key``

    """
    views = available_views()
    if (manifest := views.get(key)) is not None:
        return manifest

    listing = "; ".join(
        f"{name} ({manifest.description})" for name, manifest in views.items()
    )
    raise ViewNotFoundError(f"View '{key}' not found. Available views: {listing}")
