"""
Relation Command-Line Interface (CLI)

Loads (x, y) pairs from a CSV file into an in-memory HashRelation and
answers queries against it. Nothing is ever written back to the file;
the `drop-*` commands only show what the relation would look like.

Usage examples:
    python -m hashrelation.cli --pairs pairs.csv render
    python -m hashrelation.cli --pairs pairs.csv --buckets 4 contains --x 1 --y a
    python -m hashrelation.cli --pairs pairs.csv y-values --x 1
    python -m hashrelation.cli --pairs pairs.csv x-values --y a
    python -m hashrelation.cli --pairs pairs.csv stats
    python -m hashrelation.cli --pairs pairs.csv drop-y --y a
"""

import argparse
import logging
import sys

from .datastructures import DEFAULT_BUCKETS
from .loader import load_relation

logger = logging.getLogger(__name__)

# Exit code for unreadable or malformed input files
EXIT_BAD_INPUT = 2


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------

def cmd_render(rel, args):
    """Print one line per bucket."""
    sys.stdout.write(rel.render())


def cmd_contains(rel, args):
    print("true" if rel.contains_pair(args.x, args.y) else "false")


def cmd_y_values(rel, args):
    """Print every y paired with --x, ascending."""
    for y in rel.y_values_given_x(args.x):
        print(y)


def cmd_x_values(rel, args):
    """Print every x paired with --y, ascending."""
    for x in rel.x_values_given_y(args.y):
        print(x)


def cmd_stats(rel, args):
    """Print table occupancy figures."""
    lengths = rel.chain_lengths()
    print(f"pairs:          {len(rel)}")
    print(f"buckets:        {rel.bucket_count}")
    print(f"load factor:    {rel.load_factor():.3f}")
    print(f"longest chain:  {max(lengths)}")
    print(f"empty buckets:  {sum(1 for n in lengths if n == 0)}")


def cmd_drop_x(rel, args):
    removed = rel.remove_all_pairs_given_x(args.x)
    logger.debug("Removed %d pairs with x=%r", removed, args.x)
    sys.stdout.write(rel.render())


def cmd_drop_y(rel, args):
    removed = rel.remove_all_pairs_given_y(args.y)
    logger.debug("Removed %d pairs with y=%r", removed, args.y)
    sys.stdout.write(rel.render())


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m hashrelation.cli", description="Hash relation query CLI")
    p.add_argument("--pairs", required=True, help="CSV file with two columns: x,y")
    p.add_argument("--buckets", type=int, default=DEFAULT_BUCKETS, help="Number of hash buckets")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("render", help="Dump the table, one line per bucket")
    s.set_defaults(func=cmd_render)

    s = sub.add_parser("contains", help="Test whether a pair is present")
    s.add_argument("--x", required=True)
    s.add_argument("--y", required=True)
    s.set_defaults(func=cmd_contains)

    s = sub.add_parser("y-values", help="List the y values paired with x")
    s.add_argument("--x", required=True)
    s.set_defaults(func=cmd_y_values)

    s = sub.add_parser("x-values", help="List the x values paired with y")
    s.add_argument("--y", required=True)
    s.set_defaults(func=cmd_x_values)

    s = sub.add_parser("stats", help="Show load factor and chain lengths")
    s.set_defaults(func=cmd_stats)

    s = sub.add_parser("drop-x", help="Remove all pairs with x and render the result")
    s.add_argument("--x", required=True)
    s.set_defaults(func=cmd_drop_x)

    s = sub.add_parser("drop-y", help="Remove all pairs with y and render the result")
    s.add_argument("--y", required=True)
    s.set_defaults(func=cmd_drop_y)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m hashrelation.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        rel = load_relation(args.pairs, buckets=args.buckets)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    args.func(rel, args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
