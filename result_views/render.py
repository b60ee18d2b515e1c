"""Projection of result trees into full tree and widget output shapes."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from result_views.statistic import Statistic
from result_views.tree import TreeGroup, TreeLeaf

type StatisticFunction = Callable[[TreeGroup], Statistic]


def tree_to_dict(group: TreeGroup, statistic: StatisticFunction) -> dict[str, Any]:
    """Serialize a group and its whole subtree, each group with its statistic."""
    return {
        "uid": group.uid,
        "name": group.name,
        "statistic": statistic(group).to_dict(),
        "children": [
            tree_to_dict(child, statistic)
            if isinstance(child, TreeGroup)
            else leaf_to_dict(child)
            for child in group.children
        ],
    }


def leaf_to_dict(leaf: TreeLeaf) -> dict[str, Any]:
    """Serialize a leaf with the result fields shown in the tree."""
    return {
        "uid": leaf.uid,
        "parentUid": leaf.parent_uid,
        "name": leaf.name,
        "status": leaf.status,
        "time": leaf.time.model_dump(mode="json", by_alias=True),
        "flaky": leaf.flaky,
        "parameters": [
            parameter.model_dump(mode="json", by_alias=True)
            for parameter in leaf.parameters
        ],
    }


@dataclass(frozen=True, kw_only=True)
class TreeWidgetItem:
    """One top-level group in a widget."""

    uid: str
    name: str
    statistic: Statistic

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the widget file."""
        return {
            "uid": self.uid,
            "name": self.name,
            "statistic": self.statistic.to_dict(),
        }


@dataclass(frozen=True, kw_only=True)
class TreeWidgetData:
    """The most severe top-level groups and the count of all of them."""

    items: Sequence[TreeWidgetItem]
    total: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the widget file."""
        return {"total": self.total, "items": [item.to_dict() for item in self.items]}


def sorted_widget_items(
    tree: TreeGroup, statistic: StatisticFunction
) -> Sequence[TreeWidgetItem]:
    """Top-level groups of ``tree``, most severe first.

    Groups with equal statistics keep their order in the tree.
    """
    items = [
        TreeWidgetItem(uid=group.uid, name=group.name, statistic=statistic(group))
        for group in tree.groups
    ]
    return sorted(items, key=lambda item: item.statistic.severity_key(), reverse=True)


def build_widget(
    tree: TreeGroup, statistic: StatisticFunction, limit: int = 10
) -> TreeWidgetData:
    """Summarize the ``limit`` most severe top-level groups of ``tree``."""
    items = sorted_widget_items(tree, statistic)
    return TreeWidgetData(items=items[:limit], total=len(tree.groups))
