"""CLI entry point for rendering report views."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from result_views.config import GeneratorConfig
from result_views.errors import ErrorCollector
from result_views.generator import ReportGenerator
from result_views.reader import read_launches
from result_views.views.base import ViewOutput
from result_views.views.loading import load_view_manifest
from result_views.writer import write_outputs


def log_views_summary(log: logging.Logger, outputs: Sequence[ViewOutput[Any]]) -> None:
    """Log the widget items of every rendered view."""
    log.info("=" * 80)
    log.info("Report Views Summary:")
    log.info("=" * 80)

    for output in outputs:
        log.info("%s: %d group(s)", output.name, output.widget.total)
        for item in output.widget.items:
            statistic = item.statistic
            log.info(
                "  %s: broken=%d failed=%d passed=%d skipped=%d unknown=%d",
                item.name,
                statistic.broken,
                statistic.failed,
                statistic.passed,
                statistic.skipped,
                statistic.unknown,
            )


def format_output(
    outputs: Sequence[ViewOutput[Any]], errors: ErrorCollector
) -> dict[str, Any]:
    """Format widgets and recorded errors for JSON output."""
    return {
        "views": {output.name: output.widget.to_dict() for output in outputs},
        "errors": [
            {
                "message": error.message,
                "cause": str(error.cause) if error.cause is not None else None,
            }
            for error in errors.errors
        ],
    }


def run(
    results_dirs: Sequence[Path],
    output_dir: Path | None,
    config: GeneratorConfig,
) -> int:
    """Render the configured views and return exit code."""
    log = logging.getLogger("result_views")
    errors = ErrorCollector()

    log.info("Loading views: %s", ", ".join(config.views))
    manifests = [load_view_manifest(key) for key in config.views]

    log.info("Reading %d launch(es)...", len(results_dirs))
    launches = read_launches(results_dirs, errors, config)

    generator = ReportGenerator(
        views=[manifest.view_factory() for manifest in manifests],
        widget_limit=config.widget_limit,
    )
    outputs = generator.generate(launches)

    log_views_summary(log, outputs)

    if output_dir is not None:
        write_outputs(outputs, output_dir)
        log.info("Report data written to %s", output_dir)

    print(json.dumps(format_output(outputs, errors), indent=2))

    if errors.errors:
        log.warning("Completed with %d error(s)", len(errors.errors))
        return 1
    return 0


def parse_config(config_json: str, views: Sequence[str] | None) -> GeneratorConfig:
    """Build the run configuration, letting ``--view`` override its views."""
    config = GeneratorConfig(**json.loads(config_json))
    if views:
        config = config.model_copy(update={"views": list(views)})
    return config


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Render categories and behaviors views of test results"
    )
    parser.add_argument(
        "--results-dir",
        type=Path,
        action="append",
        required=True,
        help="Directory with the result files of one launch (repeatable)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory to write data/ and widgets/ files into",
    )
    parser.add_argument(
        "--view",
        action="append",
        default=None,
        help="View key to render (repeatable, defaults to all configured views)",
    )
    parser.add_argument(
        "--config",
        default="{}",
        help="JSON configuration for the run",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = run(
        results_dirs=args.results_dir,
        output_dir=args.output_dir,
        config=parse_config(args.config, args.view),
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
