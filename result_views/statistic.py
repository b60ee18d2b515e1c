"""Per-status counts over the leaves of a result tree."""

from dataclasses import asdict, dataclass

from result_views.models.status import Status
from result_views.tree import TreeGroup, TreeLeaf


@dataclass(kw_only=True)
class Statistic:
    """Leaf counts per status.

    Results without a status are counted as unknown so that ``total``
    always equals the number of leaves counted.
    """

    failed: int = 0
    broken: int = 0
    passed: int = 0
    skipped: int = 0
    unknown: int = 0

    @property
    def total(self) -> int:
        """Number of leaves counted."""
        return self.failed + self.broken + self.passed + self.skipped + self.unknown

    def update(self, status: Status | None) -> None:
        """Count one more result with the given status."""
        match status:
            case "failed":
                self.failed += 1
            case "broken":
                self.broken += 1
            case "passed":
                self.passed += 1
            case "skipped":
                self.skipped += 1
            case _:
                self.unknown += 1

    def merge(self, other: "Statistic") -> None:
        """Add the counts of another statistic."""
        self.failed += other.failed
        self.broken += other.broken
        self.passed += other.passed
        self.skipped += other.skipped
        self.unknown += other.unknown

    def severity_key(self) -> tuple[int, int, int, int, int]:
        """Sort key where broken outranks failed, then passed, skipped, unknown."""
        return (self.broken, self.failed, self.passed, self.skipped, self.unknown)

    def to_dict(self) -> dict[str, int]:
        """Serialize counts with the total."""
        return {**asdict(self), "total": self.total}


def calculate_statistic_by_leafs(group: TreeGroup) -> Statistic:
    """Count the leaves of ``group``, flattening its child groups.

    Every placement of a result counts, so a result under two child groups
    is counted twice.
    """
    statistic = Statistic()
    for leaf in group.leaves():
        statistic.update(leaf.status)
    return statistic


def calculate_statistic_by_children(group: TreeGroup) -> Statistic:
    """Merge the statistics of every child, computed bottom-up."""
    statistic = Statistic()
    for child in group.children:
        if isinstance(child, TreeLeaf):
            statistic.update(child.status)
        else:
            statistic.merge(calculate_statistic_by_children(child))
    return statistic
