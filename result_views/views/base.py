"""Abstract base class for report views."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from result_views.models.base import Model
from result_views.models.result import LaunchResults, TestResult
from result_views.render import TreeWidgetData, build_widget, tree_to_dict
from result_views.statistic import Statistic
from result_views.tree import TreeGroup


@dataclass(frozen=True, kw_only=True)
class ViewOutput[RowT: Model]:
    """Everything a view renders for one report run."""

    name: str
    tree: dict[str, Any]
    columns: Sequence[str]
    rows: Sequence[RowT]
    widget: TreeWidgetData


@dataclass(frozen=True, kw_only=True)
class ReportView[RowT: Model](ABC):
    """Abstract base for report views.

    Generic type RowT is the flat row model the view exports as CSV.
    A view builds one tree per run and derives every output shape from it.
    """

    name: str
    row_cls: type[RowT]

    @abstractmethod
    def build_tree(self, launches: Sequence[LaunchResults]) -> TreeGroup:
        """Group the results of all launches into this view's tree."""

    @abstractmethod
    def statistic(self, group: TreeGroup) -> Statistic:
        """Compute the statistic shown for a group of this view."""

    @abstractmethod
    def csv_rows(
        self, launches: Sequence[LaunchResults], tree: TreeGroup
    ) -> Sequence[RowT]:
        """Flatten the view into rows.

        Args:
            launches: Launches the tree was built from
            tree: Tree returned by build_tree for the same launches

        Returns:
            Rows in export order

        """

    def widget(self, tree: TreeGroup, limit: int = 10) -> TreeWidgetData:
        """Summarize the most severe top-level groups of ``tree``."""
        return build_widget(tree, self.statistic, limit)

    def render(
        self, launches: Sequence[LaunchResults], widget_limit: int = 10
    ) -> ViewOutput[RowT]:
        """Build the tree once and render all output shapes from it."""
        tree = self.build_tree(launches)
        return ViewOutput(
            name=self.name,
            tree=tree_to_dict(tree, self.statistic),
            columns=csv_columns(self.row_cls),
            rows=self.csv_rows(launches, tree),
            widget=self.widget(tree, widget_limit),
        )


def all_results(launches: Sequence[LaunchResults]) -> Sequence[TestResult]:
    """Results of every launch, launch by launch."""
    return [result for launch in launches for result in launch.results]


def csv_columns(row_cls: type[Model]) -> Sequence[str]:
    """CSV header of a row model, taken from its field aliases."""
    return [field.alias or name for name, field in row_cls.model_fields.items()]
