"""
Calculate Fares for a Journey Batch
===================================

Loads a batch of journeys from JSON or CSV, calculates capped fares and
prints the fare listing. Optionally writes the full fare DataFrame to CSV.

Usage:
    python -m transit_fares.scripts.calculate_batch journeys.json
    python -m transit_fares.scripts.calculate_batch journeys.csv --output fares.csv
    python -m transit_fares.scripts.calculate_batch journeys.json --reference-dir ./region_b
"""

import argparse
import logging
from pathlib import Path
from typing import Sequence

from transit_fares.calculate_fares import calculate_fares, fares_to_frame
from transit_fares.data import load_journeys, load_rate_tables
from transit_fares.logging_config import setup_logging
from transit_fares.models import FareRecord
from transit_fares.validation import InvalidInput
from transit_fares.version import VERSION


def print_fares(fares: list[FareRecord]) -> None:
    """Print one line per fare plus the batch total."""
    print("\n" + "=" * 60)
    print(f"FARES (calculator {VERSION})")
    print("=" * 60)

    current_week = None
    for record in fares:
        if record.week != current_week:
            current_week = record.week
            print(f"\n{current_week} (farthest zone {record.max_zone})")
        journey = record.journey
        print(
            f"  {record.date}  {journey.from_zone}->{journey.to_zone}"
            f"  base {record.base_fare:>4}  charged {record.fare:>4}"
        )

    print("-" * 60)
    print(f"Journeys: {len(fares)}")
    print(f"Total:    {sum(r.fare for r in fares)}")


def run(input_path: Path, output_path: Path | None = None, reference_dir: Path | None = None) -> list[FareRecord]:
    journeys = load_journeys(input_path)
    logging.info("Loaded %d journey record(s) from %s", len(journeys), input_path)

    tables = load_rate_tables(reference_dir)
    fares = calculate_fares(journeys, tables)

    if output_path is not None:
        fares_to_frame(fares).write_csv(output_path)
        logging.info("Fares written to %s", output_path)

    return fares


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Calculate capped transit fares for a journey batch")
    p.add_argument("input", type=Path, help="Journey batch (.json or .csv)")
    p.add_argument("--output", type=Path, default=None, help="Write fare DataFrame to this CSV file")
    p.add_argument("--reference-dir", type=Path, default=None, help="Directory with alternative fare and cap tables")
    p.add_argument("--log-level", default="INFO")
    return p


def main_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        fares = run(args.input, args.output, args.reference_dir)
    except InvalidInput as e:
        logging.error("Batch rejected: %s", e)
        return 1
    except (OSError, ValueError) as e:
        logging.error("Could not calculate fares: %s", e)
        return 1

    print_fares(fares)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main_cli())
