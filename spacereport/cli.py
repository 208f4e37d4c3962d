"""Command-line entry point: ``spacereport model.ifc``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import datetime

from spacereport import __version__
from spacereport.config import (
    DEFAULT_FORMAT,
    DEFAULT_LANGUAGE,
    DEFAULT_OUTPUT_DIR,
    ENV_LANGUAGE,
    ENV_LOG_LEVEL,
    ENV_OUTPUT_DIR,
    env_default,
    resolve_log_level,
)
from spacereport.errors import ConfigError
from spacereport.extraction.pipeline import generate_space_reports, open_model
from spacereport.extraction.properties import describe_first_space
from spacereport.models.mapping import DEFAULT_MAPPING, FieldMapping
from spacereport.report import RENDERERS
from spacereport.report.labels import LABELS, get_labels

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MODEL_ERROR = 1
# argparse exits with 2 on a missing IFC argument
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spacereport",
        description="Generate one report per IfcSpace of an IFC model.",
    )
    parser.add_argument("ifc_file", help="Path to the IFC model")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the property sets of the first space and exit without writing reports",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=env_default(ENV_OUTPUT_DIR, str(DEFAULT_OUTPUT_DIR)),
        help=f"Directory for the reports (default: {DEFAULT_OUTPUT_DIR}, env {ENV_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--format",
        dest="fmt",
        choices=sorted(RENDERERS),
        default=DEFAULT_FORMAT,
        help="Report format",
    )
    parser.add_argument(
        "--lang",
        choices=sorted(LABELS),
        default=env_default(ENV_LANGUAGE, DEFAULT_LANGUAGE),
        help=f"Report language (env {ENV_LANGUAGE})",
    )
    parser.add_argument(
        "--mapping",
        help="JSON file overriding property-set, property and quantity names",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_progress(done: int, total: int) -> None:
    print(f"\rGenerated report {done}/{total}", end="", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = logging.DEBUG if args.verbose else resolve_log_level(
            env_default(ENV_LOG_LEVEL, "WARNING")
        )
        labels = get_labels(args.lang)
        mapping = FieldMapping.from_json(args.mapping) if args.mapping else DEFAULT_MAPPING
    except ConfigError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        print("Opening IFC file...")
        model = open_model(args.ifc_file)

        if args.debug:
            for line in describe_first_space(model):
                print(line)
            return EXIT_OK

        print("Processing spaces...")
        result = generate_space_reports(
            model,
            args.output_dir,
            fmt=args.fmt,
            labels=labels,
            mapping=mapping,
            generated_at=datetime.now(),
            progress=_print_progress,
        )
    except Exception as exc:
        logger.debug("Report run failed", exc_info=True)
        print(f"\nError while processing IFC file: {exc}", file=sys.stderr)
        return EXIT_MODEL_ERROR

    print("\nFinished.")
    for name in result.duplicates:
        print(f"Warning: several spaces are named {name!r}; only the last report was kept")
    return EXIT_OK
