"""Categories view: failures grouped by root cause, then by message."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from result_views.classifier import CategoryIndex, classify, index_key
from result_views.models.result import LaunchResults, TestResult
from result_views.render import sorted_widget_items
from result_views.statistic import Statistic, calculate_statistic_by_leafs
from result_views.tree import Grouping, TreeGroup, TreeLayer, build_tree
from result_views.views.base import ReportView, all_results
from result_views.views.categories.models import CsvExportCategory

log = logging.getLogger(__name__)

CATEGORIES = "categories"
WITHOUT_MESSAGE = "Without message"


def group_by_categories(index: CategoryIndex) -> Grouping:
    """Group results by their category names, then by status message.

    Results without categories, passed ones included, stay out of the tree.
    """

    def grouping(result: TestResult) -> Sequence[TreeLayer]:
        names = [category.name for category in index.get(index_key(result), ())]
        message = result.status_message
        return [
            TreeLayer(names=names),
            TreeLayer(
                names=[message] if message is not None else [],
                fallback=WITHOUT_MESSAGE,
            ),
        ]

    return grouping


@dataclass(frozen=True, kw_only=True)
class CategoriesView(ReportView[CsvExportCategory]):
    """Results classified by the categories declared for their launch."""

    name: str = CATEGORIES
    row_cls: type[CsvExportCategory] = CsvExportCategory

    def build_tree(self, launches: Sequence[LaunchResults]) -> TreeGroup:
        """Classify every result and group it by category and message."""
        index = classify(launches)
        tree = build_tree(self.name, all_results(launches), group_by_categories(index))
        log.info("Built categories tree with %d categories", len(tree.groups))
        return tree

    def statistic(self, group: TreeGroup) -> Statistic:
        """Count every leaf below ``group``, through its message groups."""
        return calculate_statistic_by_leafs(group)

    def csv_rows(
        self, launches: Sequence[LaunchResults], tree: TreeGroup
    ) -> Sequence[CsvExportCategory]:
        """One row per top-level category, most severe first."""
        return [
            CsvExportCategory(
                name=item.name,
                failed=item.statistic.failed,
                broken=item.statistic.broken,
                passed=item.statistic.passed,
                skipped=item.statistic.skipped,
                unknown=item.statistic.unknown,
            )
            for item in sorted_widget_items(tree, self.statistic)
        ]
