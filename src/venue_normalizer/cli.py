#!/usr/bin/env python3
"""
Batch normalizer CLI.

Reads a manifest and a CSV of (section, row) ticket inputs and writes each
input with its resolved section_id, row_id and a "true"/"false" valid flag.

Usage:
    venue-normalizer --manifest manifest.csv --input tickets.csv --output out.csv
"""
import argparse
import csv
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from .config import NormalizerConfig
from .config_loader import load_config_from_env
from .config_validator import validate_log_level, validate_path
from .data_loader import SeatInputLoader
from .exceptions import VenueNormalizerError
from .models import SeatInput
from .resolution import ResolutionResult, create_seat_resolver

logger = logging.getLogger(__name__)

# Downstream consumers expect string booleans
TRUE_STRING = "true"
FALSE_STRING = "false"

OUTPUT_COLUMNS = ["section", "row", "section_id", "row_id", "valid"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve ticket section/row text to venue manifest ids"
    )
    parser.add_argument("--manifest", help="Manifest CSV (default: VENUE_MANIFEST_PATH)")
    parser.add_argument("--input", required=True, help="CSV with section and row columns")
    parser.add_argument("--output", help="Output CSV path (default: stdout)")
    parser.add_argument("--tables", help="Lookup tables JSON (default: VENUE_LOOKUP_TABLES_PATH or built-in)")
    parser.add_argument("--log-level", help="Logging level (default: LOG_LEVEL or INFO)")
    return parser


def write_results(
    out: TextIO,
    inputs: Iterable[SeatInput],
    results: Iterable[ResolutionResult],
) -> None:
    writer = csv.writer(out)
    writer.writerow(OUTPUT_COLUMNS)
    for seat, result in zip(inputs, results):
        writer.writerow([
            seat.section,
            seat.row,
            result.section_id or "",
            result.row_id or "",
            TRUE_STRING if result.valid else FALSE_STRING,
        ])


def _merge_config(args: argparse.Namespace, config: NormalizerConfig) -> NormalizerConfig:
    if args.manifest:
        config.manifest_path = validate_path(args.manifest, "--manifest", must_exist=True)
    if args.tables:
        config.lookup_tables_path = validate_path(args.tables, "--tables", must_exist=True)
    if args.log_level:
        config.log_level = validate_log_level(args.log_level)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = _merge_config(args, load_config_from_env())

        logging.basicConfig(
            level=config.log_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[logging.StreamHandler()]
        )

        validate_path(args.input, "--input", must_exist=True)
        resolver = create_seat_resolver(config)
        inputs = SeatInputLoader(args.input).load_inputs()
    except VenueNormalizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    results = resolver.resolve_multiple(inputs)
    valid_count = sum(1 for r in results if r.valid)
    logger.info(f"Resolved {valid_count}/{len(results)} inputs")

    if args.output:
        with open(args.output, "w", newline="", encoding="utf-8") as f:
            write_results(f, inputs, results)
    else:
        write_results(sys.stdout, inputs, results)

    return 0


if __name__ == "__main__":
    sys.exit(main())
