"""Grouping of results into a tree of named groups with one leaf per placement."""

import hashlib
import itertools
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from result_views.models.result import Parameter, TestResult, Time, by_start_time
from result_views.models.status import Status


@dataclass(frozen=True, kw_only=True)
class TreeLayer:
    """Group keys of one result at one depth of the tree.

    When ``names`` is empty the result goes under ``fallback``; without a
    fallback the result is left out of the tree.
    """

    names: Sequence[str]
    fallback: str | None = None

    def group_names(self) -> Sequence[str]:
        """Distinct names in first-seen order, or the fallback."""
        names = list(dict.fromkeys(self.names))
        if not names and self.fallback is not None:
            return [self.fallback]
        return names


type Grouping = Callable[[TestResult], Sequence[TreeLayer]]


def make_uid(*parts: str) -> str:
    """Stable identifier derived from a node's position in the tree."""
    return hashlib.md5("".join(parts).encode("utf-8")).hexdigest()


@dataclass(frozen=True, kw_only=True)
class TreeLeaf:
    """A result placed under one group."""

    uid: str
    parent_uid: str
    name: str
    status: Status | None
    time: Time
    flaky: bool
    parameters: Sequence[Parameter]

    @classmethod
    def from_result(cls, result: TestResult, parent_uid: str) -> "TreeLeaf":
        """Create the leaf for ``result`` under the group ``parent_uid``."""
        return cls(
            uid=result.uid,
            parent_uid=parent_uid,
            name=result.name,
            status=result.status,
            time=result.time,
            flaky=result.flaky,
            parameters=result.parameters,
        )


@dataclass(kw_only=True)
class TreeGroup:
    """A named group; its uid is a hash of the names on the path from the root."""

    uid: str
    name: str
    children: list["TreeGroup | TreeLeaf"] = field(default_factory=list)
    _groups: dict[str, "TreeGroup"] = field(
        default_factory=dict, repr=False, compare=False
    )

    @classmethod
    def root(cls, name: str) -> "TreeGroup":
        """Create an empty root group."""
        return cls(uid=make_uid(name), name=name)

    def child_group(self, name: str) -> "TreeGroup":
        """Return the child group called ``name``, creating it if needed."""
        if (group := self._groups.get(name)) is None:
            group = TreeGroup(uid=make_uid(self.uid, name), name=name)
            self._groups[name] = group
            self.children.append(group)
        return group

    @property
    def groups(self) -> Sequence["TreeGroup"]:
        """Child groups, skipping leaves."""
        return [child for child in self.children if isinstance(child, TreeGroup)]

    def leaves(self) -> Iterable[TreeLeaf]:
        """Every leaf of the subtree in depth-first order."""
        for child in self.children:
            if isinstance(child, TreeLeaf):
                yield child
            else:
                yield from child.leaves()


def expand_paths(layers: Sequence[TreeLayer]) -> Sequence[tuple[str, ...]]:
    """Expand layers into every path a result should be placed under.

    A result with several names at a layer fans out into one path per name.
    """
    return list(itertools.product(*(layer.group_names() for layer in layers)))


def build_tree(
    name: str, results: Iterable[TestResult], grouping: Grouping
) -> TreeGroup:
    """Group results into a tree rooted at a group called ``name``.

    Results are inserted in ascending start time order, so leaves under
    every group keep that order.
    """
    root = TreeGroup.root(name)
    for result in sorted(results, key=by_start_time):
        for path in expand_paths(grouping(result)):
            node = root
            for group_name in path:
                node = node.child_group(group_name)
            node.children.append(TreeLeaf.from_result(result, node.uid))
    return root
