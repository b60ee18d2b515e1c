"""Writing of rendered views into a report directory."""

import csv
import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from result_views.views.base import ViewOutput

log = logging.getLogger(__name__)

DATA_DIR = "data"
WIDGETS_DIR = "widgets"


def write_view_output(output: ViewOutput[Any], output_dir: Path) -> Sequence[Path]:
    """Write the tree, rows and widget of one view.

    Files land in ``data/<view>.json``, ``data/<view>.csv`` and
    ``widgets/<view>.json`` under ``output_dir``.

    Returns:
        Paths of the written files

    """
    data_dir = output_dir / DATA_DIR
    widgets_dir = output_dir / WIDGETS_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    widgets_dir.mkdir(parents=True, exist_ok=True)

    tree_path = data_dir / f"{output.name}.json"
    csv_path = data_dir / f"{output.name}.csv"
    widget_path = widgets_dir / f"{output.name}.json"

    _write_json(tree_path, output.tree)
    _write_json(widget_path, output.widget.to_dict())

    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(output.columns))
        writer.writeheader()
        for row in output.rows:
            writer.writerow(row.model_dump(mode="json", by_alias=True))

    log.info("Wrote %s view to %s", output.name, output_dir)
    return [tree_path, csv_path, widget_path]


def write_outputs(
    outputs: Sequence[ViewOutput[Any]], output_dir: Path
) -> Sequence[Path]:
    """Write every rendered view into ``output_dir``."""
    return [
        path for output in outputs for path in write_view_output(output, output_dir)
    ]


def _write_json(path: Path, data: Any) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")
