"""
Transit Fare Calculator
=======================

Interactive CLI tool to calculate capped fares for a handful of journeys.

Usage:
    python -m transit_fares.scripts.calculator
"""

from datetime import datetime

from transit_fares.calculate_fares import calculate_fares
from transit_fares.models import FareRecord
from transit_fares.validation import InvalidInput
from transit_fares.version import VERSION


def get_user_input() -> list[dict]:
    """Prompt for journeys until an empty line is entered."""
    print("\n=== Transit Fare Calculator ===")
    print(f"Version: {VERSION}\n")
    print("Enter one journey per line as: YYYY-MM-DD HH:MM:SS FROM TO")
    print(f"(e.g. {datetime.now():%Y-%m-%d} 08:15:00 1 2). Empty line to finish.\n")

    journeys = []
    while True:
        line = input(f"Journey {len(journeys) + 1}: ").strip()
        if not line:
            break
        parts = line.split()
        if len(parts) != 4:
            print("  Expected 4 values: date, time, from zone, to zone")
            continue
        day, clock, from_zone, to_zone = parts
        journeys.append({
            "date_time": f"{day} {clock}",
            "from_zone": from_zone,
            "to_zone": to_zone,
        })

    return journeys


def print_results(fares: list[FareRecord]) -> None:
    """Print calculation results."""
    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    for record in fares:
        capped = " (capped)" if record.fare < record.base_fare else ""
        print(f"{record.date}  zones {record.journey.zone_pair}:  {record.fare:>4}{capped}")

    print("-" * 50)
    print(f"Total charged:      {sum(r.fare for r in fares):>6}")
    print(f"Total before caps:  {sum(r.base_fare for r in fares):>6}")


def main():
    journeys = get_user_input()
    if not journeys:
        print("No journeys entered.")
        return

    try:
        fares = calculate_fares(journeys)
    except InvalidInput as e:
        print(f"\nError: {e}")
        return

    print_results(fares)


if __name__ == "__main__":
    main()
