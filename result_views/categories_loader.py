"""Loading of classification rules from categories files."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from result_views.errors import ErrorCollector
from result_views.models.category import Category

log = logging.getLogger(__name__)


def load_categories(
    path: Path, errors: ErrorCollector | None = None
) -> Sequence[Category]:
    """Load the list of category rules declared in a file.

    ``.json`` files are parsed as JSON, anything else as YAML. A rule that
    fails validation, such as one whose regex does not compile, is skipped
    and reported on ``errors`` while the remaining rules still load.

    Args:
        path: Path to the categories file
        errors: Channel for rules that had to be skipped

    Returns:
        Valid rules in declaration order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty, cannot be parsed, or is not a list

    """
    if not path.exists():
        raise FileNotFoundError(f"Categories file not found: {path}")

    data = _parse(path, path.read_text())

    if data is None:
        raise ValueError(f"Empty categories file: {path}")
    if not isinstance(data, list):
        raise ValueError(
            f"Invalid categories file {path}: expected a list of rules, "
            f"got {type(data).__name__}"
        )

    categories: list[Category] = []
    for position, raw in enumerate(data):
        try:
            categories.append(Category.model_validate(raw))
        except ValidationError as e:
            name = raw.get("name") if isinstance(raw, dict) else None
            log.warning(
                "Skipping category %r (rule #%d) in %s: %s", name, position, path, e
            )
            if errors is not None:
                errors.error(f"Invalid category {name!r} in {path}", e)

    log.info("Loaded %d category rule(s) from %s", len(categories), path)
    return categories


def _parse(path: Path, text: str) -> Any:
    if path.suffix == ".json":
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def read_categories(
    directory: Path, errors: ErrorCollector, file_name: str
) -> Sequence[Category]:
    """Read the rules of a launch directory, never failing the run.

    A missing file means no rules. An unreadable or malformed file is
    reported on ``errors`` and also yields no rules, so only the built-in
    defect categories apply to that launch.
    """
    path = directory / file_name
    if not path.exists():
        log.debug("No categories file in %s", directory)
        return []

    try:
        return load_categories(path, errors)
    except (OSError, ValueError) as e:
        errors.error(f"Could not read categories file {path}", e)
        return []
