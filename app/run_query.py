"""CLI entrypoint for cumulative-return queries.

Usage:
    python -m app.run_query --demo
    python -m app.run_query returns.csv --base 2015-02-01 --as-of 2015-04-30
    python -m app.run_query returns.csv --base 2015-02-01 --as-of 2015-02-28 --as-of 2015-06-30 --no-data nan
"""
from __future__ import annotations

import argparse
import sys
from datetime import date

from app.config import QueryConfig
from retindex import IndexConfig, ReturnIndex, ReturnIndexValidationError
from retindex.data import read_returns_csv

DEMO_RETURNS = {
    date(2015, 1, 10): 0.10,
    date(2015, 2, 10): 0.05,
    date(2015, 4, 10): 0.15,
    date(2015, 4, 15): -0.10,
    date(2015, 6, 10): -0.12,
}
DEMO_BASE = "2015-02-01"
DEMO_AS_OF = (
    "2015-01-31", "2015-02-28", "2015-03-13",
    "2015-04-30", "2015-05-08", "2015-06-30",
)


def parse_args(argv: list[str] | None = None) -> QueryConfig:
    parser = argparse.ArgumentParser(description="retindex cumulative return query")
    parser.add_argument("csv", nargs="?", help="CSV file with one periodic return per row")
    parser.add_argument("--date-column", default="date")
    parser.add_argument("--return-column", default="return")
    parser.add_argument("--base", default=None, help="Base date (start of window)")
    parser.add_argument("--as-of", action="append", default=[], help="As-of date; repeatable")
    parser.add_argument("--no-data", default="zero", choices=["zero", "nan"])
    parser.add_argument("--demo", action="store_true", help="Run against the built-in sample history")
    args = parser.parse_args(argv)

    if args.demo:
        return QueryConfig(
            base=args.base or DEMO_BASE,
            as_of=tuple(args.as_of) or DEMO_AS_OF,
            no_data=args.no_data,
            demo=True,
        )
    if args.csv is None:
        parser.error("a CSV file is required unless --demo is given")
    if args.base is None or not args.as_of:
        parser.error("--base and at least one --as-of are required")
    return QueryConfig(
        csv_path=args.csv,
        date_column=args.date_column,
        return_column=args.return_column,
        base=args.base,
        as_of=tuple(args.as_of),
        no_data=args.no_data,
    )


def run(config: QueryConfig) -> None:
    if config.demo:
        returns = DEMO_RETURNS
    else:
        returns = read_returns_csv(
            config.csv_path,
            date_column=config.date_column,
            return_column=config.return_column,
        )
    index = ReturnIndex.build(returns, IndexConfig(no_data=config.no_data))

    print("=" * 60)
    print(f"  History:   {index!r}")
    print(f"  Base date: {config.base}")
    print("=" * 60)
    for as_of in config.as_of:
        window = index.resolve_window(as_of, config.base)
        value = index.cumulative_return(as_of, config.base)
        if window is None:
            span = "no data in range"
        else:
            span = f"{window[0].date()} .. {window[1].date()}"
        print(f"  {as_of}  {value:>+10.4%}   [{span}]")
    print("-" * 60)


def main(argv: list[str] | None = None) -> int:
    config = parse_args(argv)
    try:
        run(config)
    except ReturnIndexValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
