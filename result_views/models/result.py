"""Models for parsed test results and the launches they belong to."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import Field

from result_views.models.base import Model
from result_views.models.category import Category
from result_views.models.status import Status


class StatusDetails(Model):
    """Failure details attached to a result."""

    message: str | None = None
    trace: str | None = None
    flaky: bool = False


class Label(Model):
    """A single label; a name may repeat with several values."""

    name: str
    value: str


class Parameter(Model):
    """A test parameter shown next to the result."""

    name: str
    value: str | None = None


class Time(Model):
    """Execution timing in epoch milliseconds."""

    start: int | None = None
    stop: int | None = None
    duration: int | None = None


class TestResult(Model):
    """A single test execution, as read from a result file."""

    __test__ = False

    uid: str = Field(..., description="Unique result identifier")
    name: str = Field(..., description="Display name of the test")
    full_name: str | None = None
    status: Status | None = None
    status_message: str | None = None
    status_details: StatusDetails | None = None
    time: Time = Field(default_factory=Time)
    labels: Sequence[Label] = Field(default_factory=list)
    parameters: Sequence[Parameter] = Field(default_factory=list)

    @property
    def flaky(self) -> bool:
        """Whether the result was marked flaky."""
        return self.status_details is not None and self.status_details.flaky

    def find_all_labels(self, name: str) -> Sequence[str]:
        """Return every value of the named label in declaration order."""
        return [label.value for label in self.labels if label.name == name]


def by_start_time(result: TestResult) -> tuple[bool, int]:
    """Sort key ordering results by ascending start time, unknown first."""
    start = result.time.start
    return (start is not None, start or 0)


@dataclass(frozen=True, kw_only=True)
class LaunchResults:
    """Results of one launch together with the rules declared for it."""

    results: Sequence[TestResult]
    categories: Sequence[Category] = field(default_factory=list)
    directory: Path | None = None
