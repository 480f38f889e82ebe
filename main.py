"""
Temperature calendar matrix.
Aggregates daily temperature records into a year x month heatmap grid.
"""

import os
import sys
import json
import argparse

from dotenv import load_dotenv

from heatmap import Heatmap, FAILURE_MESSAGE

load_dotenv(verbose=True, dotenv_path=".env")


def get_args(argv=None):
    """
    Parse command line arguments for the heatmap builder.
        :return: Parsed arguments.
        :rtype: argparse.Namespace
    """
    parser = argparse.ArgumentParser(description="Temperature Calendar Heatmap")
    parser.add_argument(
        "--data",
        type=str,
        default=os.getenv("HEATMAP_DATA_PATH", "temperature_daily.csv"),
        help="CSV file with date, max_temperature and min_temperature columns",
    )
    parser.add_argument(
        "--start-year",
        type=int,
        default=int(os.getenv("HEATMAP_START_YEAR", "2008")),
        help="First year of the matrix.",
    )
    parser.add_argument(
        "--end-year",
        type=int,
        default=int(os.getenv("HEATMAP_END_YEAR", "2017")),
        help="Last year of the matrix.",
    )
    parser.add_argument(
        "--view",
        choices=["max", "min"],
        default="max",
        help="Statistic used to color the cells",
    )
    parser.add_argument("--output", type=str, help="Write the JSON grid to this file")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")

    args = parser.parse_args(argv)

    if args.start_year > args.end_year:
        raise ValueError("--start-year cannot be after --end-year")

    return args


def main(argv=None) -> int:
    """Main function to build the heatmap grid."""

    args = get_args(argv)

    heatmap = Heatmap(
        data_path=args.data,
        start_year=args.start_year,
        end_year=args.end_year,
        view_mode=args.view,
        debug=args.debug,
    )
    state = heatmap.run()

    if state is None:
        print(FAILURE_MESSAGE, file=sys.stderr)
        return 1

    if args.output:
        heatmap.export(state, args.output)
    else:
        json.dump(heatmap.to_dict(state), sys.stdout, indent=2, allow_nan=False)
        sys.stdout.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
