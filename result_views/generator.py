"""Report generator rendering every configured view over a set of launches."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from result_views.models.result import LaunchResults
from result_views.views.base import ReportView, ViewOutput

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ReportGenerator:
    """Renders views over the launches of one report run."""

    views: Sequence[ReportView[Any]]
    widget_limit: int = 10

    def generate(
        self, launches: Sequence[LaunchResults]
    ) -> Sequence[ViewOutput[Any]]:
        """Render every view over the given launches.

        Args:
            launches: Launches of this run, each with its own rules

        Returns:
            One output per view, in view order

        """
        if not launches:
            log.info("No launches provided")

        result_count = sum(len(launch.results) for launch in launches)
        log.info(
            "Rendering %d view(s) over %d result(s) from %d launch(es)...",
            len(self.views),
            result_count,
            len(launches),
        )

        outputs = [view.render(launches, self.widget_limit) for view in self.views]
        for output in outputs:
            log.info(
                "View rendered: view=%s groups=%d rows=%d",
                output.name,
                output.widget.total,
                len(output.rows),
            )
        return outputs
