"""
chaintable Command-Line Interface (CLI)

Small driver around :class:`chaintable.HashTable`:
- demo: the sample program (insert eight names, print, bump one value)
- describe: build a table from key=value pairs or a CSV file and show its buckets
- bench: time table operations and write a CSV report

Usage examples:
    python -m chaintable.cli demo
    python -m chaintable.cli describe Alice=25 Bob=10 --floor-capacity 4
    python -m chaintable.cli describe --csv pairs.csv
    python -m chaintable.cli bench --path report.csv --rounds 6
"""

import argparse
import csv
import logging
import sys

from .benchmark import run_benchmarks
from .config import DEFAULT_FLOOR_CAPACITY, LOG_LEVEL
from .datastructures.hash_table import HashTable

# Entries inserted by the demo command, in insertion order.
DEMO_ENTRIES = [
    ("Alice", 25),
    ("Bob", 10),
    ("Charlie", 50),
    ("Dennis", 45),
    ("Eve", 30),
    ("Fiona", 40),
    ("Ginny", 20),
    ("Henry", 35),
]


# -------------------------------------------------------------------
# Argument helpers
# -------------------------------------------------------------------
def parse_pair(text):
    """Parse ``key=value`` into (str, int) for argparse."""
    key, sep, value = text.rpartition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected key=value, got {text!r}")
    try:
        return key, int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"value must be an integer in {text!r}") from None


def read_pairs_csv(path):
    """Read (key, value) rows from a two-column CSV file; blank rows are skipped."""
    pairs = []
    with open(path, newline="", encoding="utf-8") as f:
        for lineno, row in enumerate(csv.reader(f), start=1):
            if not row:
                continue
            if len(row) != 2:
                raise ValueError(f"{path}:{lineno}: expected 2 columns, got {len(row)}")
            try:
                pairs.append((row[0], int(row[1])))
            except ValueError:
                raise ValueError(f"{path}:{lineno}: value {row[1]!r} is not an integer") from None
    return pairs


def positive_int(text):
    n = int(text)
    if n < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return n


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_demo(args):
    """Insert the sample entries, print them, then bump Bob's value repeatedly."""
    table = HashTable(args.floor_capacity)
    for key, value in DEMO_ENTRIES:
        table.put(key, value)

    table.dump()
    for _ in range(args.increments):
        table.put("Bob", table.get("Bob", 0) + 1)
    table.dump()
    table.destroy()


def cmd_describe(args):
    """Build a table from the given pairs and print its bucket layout."""
    pairs = list(args.pairs)
    if args.csv:
        pairs.extend(read_pairs_csv(args.csv))

    table = HashTable(args.floor_capacity)
    for key, value in pairs:
        table.put(key, value)

    table.describe()
    table.dump()
    print(f"entries={len(table)} capacity={table.capacity} floor={table.floor_capacity}")
    table.destroy()


def cmd_bench(args):
    """Run the benchmark suite and write results to CSV."""
    run_benchmarks(
        args.path,
        base_input=args.base_input,
        rounds=args.rounds,
        iterations=args.iterations,
        seed=args.seed,
    )


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m chaintable.cli", description="chaintable hash table driver")
    p.add_argument("--log-level", default=LOG_LEVEL,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                   type=str.upper)
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("demo", help="Run the sample program")
    s.add_argument("--floor-capacity", type=positive_int, default=DEFAULT_FLOOR_CAPACITY)
    s.add_argument("--increments", type=int, default=17)
    s.set_defaults(func=cmd_demo)

    s = sub.add_parser("describe", help="Show the bucket layout for a set of pairs")
    s.add_argument("pairs", nargs="*", type=parse_pair, metavar="KEY=VALUE")
    s.add_argument("--csv", help="Two-column CSV file of key,value rows")
    s.add_argument("--floor-capacity", type=positive_int, default=DEFAULT_FLOOR_CAPACITY)
    s.set_defaults(func=cmd_describe)

    s = sub.add_parser("bench", help="Benchmark table operations")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=positive_int, default=100)
    s.add_argument("--rounds", type=positive_int, default=8)
    s.add_argument("--iterations", type=positive_int, default=5)
    s.add_argument("--seed", type=int, default=0)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m chaintable.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except (OSError, ValueError) as exc:
        parser.exit(1, f"error: {exc}\n")


if __name__ == "__main__":
    main()
