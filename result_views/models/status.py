"""Test status values shared by results, rules and statistics."""

from collections.abc import Sequence
from typing import Literal

type Status = Literal["failed", "broken", "passed", "skipped", "unknown"]

STATUSES: Sequence[Status] = ("failed", "broken", "passed", "skipped", "unknown")
