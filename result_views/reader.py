"""Reading of launch directories into results and their rules."""

import logging
from collections.abc import Sequence
from pathlib import Path

from result_views.categories_loader import read_categories
from result_views.config import GeneratorConfig
from result_views.errors import ErrorCollector
from result_views.models.result import LaunchResults, TestResult

log = logging.getLogger(__name__)


def read_launch(
    directory: Path, errors: ErrorCollector, config: GeneratorConfig
) -> LaunchResults:
    """Read every result file and the categories file of one launch.

    Result files that cannot be read or parsed are reported on ``errors``
    and skipped.
    """
    if not directory.is_dir():
        raise FileNotFoundError(f"Results directory not found: {directory}")

    results: list[TestResult] = []
    for path in sorted(directory.glob(f"*{config.result_file_suffix}")):
        try:
            results.append(TestResult.model_validate_json(path.read_bytes()))
        except (OSError, ValueError) as e:
            errors.error(f"Could not read result file {path}", e)

    categories = read_categories(directory, errors, config.categories_file_name)

    log.info(
        "Read %d result(s) and %d category rule(s) from %s",
        len(results),
        len(categories),
        directory,
    )
    return LaunchResults(results=results, categories=categories, directory=directory)


def read_launches(
    directories: Sequence[Path], errors: ErrorCollector, config: GeneratorConfig
) -> Sequence[LaunchResults]:
    """Read one launch per results directory."""
    return [read_launch(directory, errors, config) for directory in directories]
