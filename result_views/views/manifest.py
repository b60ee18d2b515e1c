"""View manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass

from result_views.models.base import Model
from result_views.views.base import ReportView


@dataclass(frozen=True, kw_only=True)
class ViewManifest[RowT: Model]:
    """Manifest describing a view plugin.

    The manifest references the view factory so views are only created for
    the keys a run asks for.
    """

    description: str
    view_factory: Callable[[], ReportView[RowT]]
