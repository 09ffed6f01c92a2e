"""Command line: plot radiochemical yields against LET or time."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from radioyield.let_yields import read_species_file
from radioyield.plotting import plot_let_series, plot_time_series
from radioyield.time_yields import aggregate_records, read_records_csv


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radioyield", description="Plot radiochemical yields (G values)."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    let = commands.add_parser("let", help="G value against LET from a species summary")
    let.add_argument("--input", default="Species.txt", help="species summary file")
    let.add_argument("--output", default="G_LET.png", help="image file to write")

    time = commands.add_parser("time", help="G value against time from species records")
    time.add_argument("--input", default="Species0.csv", help="species record CSV file")
    time.add_argument("--output", default="G_time.png", help="image file to write")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        if args.command == "let":
            series = read_species_file(args.input)
            if not series:
                raise ValueError(f"no species found in {args.input}")
            plot_let_series(series, args.output)
        else:
            try:
                records = read_records_csv(args.input)
                time_series = aggregate_records(records)
            except ValueError as error:
                raise ValueError(f"{error} in {args.input}") from None
            plot_time_series(time_series, args.output)
    except (OSError, ValueError) as error:
        print(f"radioyield: {error}", file=sys.stderr)
        return 1
    print(f"wrote {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())