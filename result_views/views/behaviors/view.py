"""Behaviors view: results grouped by epic, feature and story labels."""

import itertools
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from result_views.models.result import LaunchResults, TestResult
from result_views.statistic import Statistic, calculate_statistic_by_children
from result_views.tree import TreeGroup, TreeLayer, build_tree
from result_views.views.base import ReportView, all_results
from result_views.views.behaviors.models import CsvExportBehavior

log = logging.getLogger(__name__)

BEHAVIORS = "behaviors"

EPIC = "epic"
FEATURE = "feature"
STORY = "story"

LABEL_NAMES: Sequence[str] = (EPIC, FEATURE, STORY)

FALLBACKS = {
    EPIC: "Without epic",
    FEATURE: "Without feature",
    STORY: "Without story",
}

type BehaviorKey = tuple[str | None, str | None, str | None]


def group_by_behaviors(result: TestResult) -> Sequence[TreeLayer]:
    """One layer per label, fanning out over every value of the label."""
    return [
        TreeLayer(names=result.find_all_labels(label), fallback=FALLBACKS[label])
        for label in LABEL_NAMES
    ]


def behavior_keys(result: TestResult) -> Sequence[BehaviorKey]:
    """Every (epic, feature, story) combination of a result's labels.

    A missing label contributes ``None`` at its position.
    """
    epics, features, stories = (
        list(result.find_all_labels(label)) or [None] for label in LABEL_NAMES
    )
    return list(itertools.product(epics, features, stories))


@dataclass(frozen=True, kw_only=True)
class BehaviorsView(ReportView[CsvExportBehavior]):
    """Results grouped by the business behavior they cover."""

    name: str = BEHAVIORS
    row_cls: type[CsvExportBehavior] = CsvExportBehavior

    def build_tree(self, launches: Sequence[LaunchResults]) -> TreeGroup:
        """Group results by epic, feature and story."""
        tree = build_tree(self.name, all_results(launches), group_by_behaviors)
        log.info("Built behaviors tree with %d epic(s)", len(tree.groups))
        return tree

    def statistic(self, group: TreeGroup) -> Statistic:
        """Count every leaf below ``group``."""
        return calculate_statistic_by_children(group)

    def csv_rows(
        self, launches: Sequence[LaunchResults], tree: TreeGroup
    ) -> Sequence[CsvExportBehavior]:
        """One row per distinct (epic, feature, story), in first-seen order."""
        statistics: dict[BehaviorKey, Statistic] = {}
        for result in all_results(launches):
            for key in behavior_keys(result):
                statistics.setdefault(key, Statistic()).update(result.status)

        return [
            CsvExportBehavior(
                epic=epic,
                feature=feature,
                story=story,
                failed=statistic.failed,
                broken=statistic.broken,
                passed=statistic.passed,
                skipped=statistic.skipped,
                unknown=statistic.unknown,
            )
            for (epic, feature, story), statistic in statistics.items()
        ]
