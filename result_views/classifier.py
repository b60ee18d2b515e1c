"""Classification of results into categories by user-declared rules."""

import logging
import re
from collections.abc import Mapping, Sequence

from result_views.models.category import Category
from result_views.models.result import LaunchResults, TestResult

log = logging.getLogger(__name__)

PRODUCT_DEFECTS = Category(name="Product defects")
TEST_DEFECTS = Category(name="Test defects")

type CategoryIndex = Mapping[int, Sequence[Category]]


def index_key(result: TestResult) -> int:
    """Key of a result in a CategoryIndex.

    Results are keyed by identity, not uid, since two launches may hold
    results with the same uid that their own rules classify differently.
    """
    return id(result)


def matches(result: TestResult, category: Category) -> bool:
    """Check whether every clause of ``category`` holds for ``result``."""
    details = result.status_details

    matches_status = not category.matched_statuses or (
        result.status is not None and result.status in category.matched_statuses
    )
    matches_message = category.message_regex is None or (
        details is not None
        and _full_match(category.message_regex, details.message)
    )
    matches_trace = category.trace_regex is None or (
        details is not None and _full_match(category.trace_regex, details.trace)
    )
    matches_flaky = category.flaky is None or result.flaky == category.flaky

    return matches_status and matches_message and matches_trace and matches_flaky


def _full_match(pattern: re.Pattern[str], text: str | None) -> bool:
    return text is not None and pattern.fullmatch(text) is not None


def categorize(
    result: TestResult, categories: Sequence[Category]
) -> Sequence[Category]:
    """Return every category matching ``result`` in declaration order.

    Failed and broken results that match nothing fall back to the built-in
    product and test defect categories.
    """
    matched = [category for category in categories if matches(result, category)]
    if matched:
        return matched
    if result.status == "failed":
        return [PRODUCT_DEFECTS]
    if result.status == "broken":
        return [TEST_DEFECTS]
    return []


def classify(launches: Sequence[LaunchResults]) -> CategoryIndex:
    """Categorize every result of every launch with that launch's rules."""
    index: dict[int, Sequence[Category]] = {}
    for launch in launches:
        log.debug(
            "Classifying %d result(s) with %d rule(s)",
            len(launch.results),
            len(launch.categories),
        )
        for result in launch.results:
            index[index_key(result)] = categorize(result, launch.categories)
    return index
