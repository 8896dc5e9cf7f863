"""cli.py

Command-line demo for the instrumented HashTable.

Program flow when you run `chainmap-demo` (or `python cli.py`):
  1) Load key/value pairs from a CSV, or generate integer keys.
  2) Bulk-load them into a HashTable (counters reflect the real load activity).
  3) Print a report: size, allocated buckets, longest chain, collisions, probes.
  4) Provide a small menu to look up, insert, remove, inspect buckets, and clear.

Note:
- The CLI is intentionally small; the hashing logic lives in hash_table.py.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from hash_table import CAPACITY, HashTable
from data_loader import generate_int_pairs, load_pairs_csv
from util import bucket_index, parse_key, summarize

DEFAULT_BUCKETS_SHOWN = 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='chainmap-demo',
        description='Load keys into a fixed-capacity chained hash table and inspect its collision/probe counters.',
    )
    parser.add_argument('csv', nargs='?', help='CSV file with key,value columns')
    parser.add_argument('--generate', type=int, metavar='N',
                        help='generate N integer keys instead of reading a CSV')
    parser.add_argument('--start', type=int, default=0, help='first generated key (default: 0)')
    parser.add_argument('--step', type=int, default=1,
                        help='distance between generated keys; use the capacity to force one chain (default: 1)')
    parser.add_argument('--capacity', type=int, default=CAPACITY,
                        help=f'number of bucket slots (default: {CAPACITY})')
    parser.add_argument('--buckets', type=int, default=DEFAULT_BUCKETS_SHOWN, metavar='N',
                        help=f'buckets shown by the menu (default: {DEFAULT_BUCKETS_SHOWN})')
    parser.add_argument('--no-menu', action='store_true', help='print the report and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='log bucket allocations and collisions')
    return parser


def print_report(table: HashTable) -> None:
    """Print the table summary (shape and counters)."""
    r = summarize(table)
    print("\n=== Hash table report ===")
    print(f"Entries:                 {r.size}")
    print(f"Capacity:                {r.capacity}")
    print(f"Load factor:             {r.load_factor:.3f}")
    print(f"Allocated buckets:       {r.allocated_buckets} ({r.empty_allocated_buckets} empty)")
    print(f"Longest chain:           {r.longest_chain}")
    print(f"Collisions (put into an existing bucket): {r.collisions}")
    print(f"Probes (key comparisons during put):      {r.probes}\n")


def print_buckets(table: HashTable, n: int) -> None:
    print(f"\nFirst {n} buckets:\n")
    for idx, bucket in enumerate(table.first_n_buckets(n)):
        if bucket is None:
            print(f"Bucket {idx}: -")
        else:
            chain = ' -> '.join(f'{e.key!r}={e.value!r}' for e in bucket)
            print(f"Bucket {idx}: [{chain}]")
    print()


def run_menu(table: HashTable, buckets_shown: int) -> None:
    while True:
        print("Choose an option:")
        print(" 1) Lookup key")
        print(" 2) Insert/update key")
        print(" 3) Remove key")
        print(f" 4) Show first {buckets_shown} buckets")
        print(" 5) Show report")
        print(" 6) Clear table")
        print(" 7) Exit")
        choice = input("> ").strip()

        if choice == '1':
            key = parse_key(input("Key: "))
            value = table.get(key)
            where = bucket_index(key, table.capacity)
            if value is None:
                print(f"Not found (bucket {where}).\n")
            else:
                print(f"{key!r} = {value!r} (bucket {where})\n")

        elif choice == '2':
            key = parse_key(input("Key: "))
            value = input("Value: ").strip()
            collisions, probes = table.get_number_of_collisions(), table.get_number_of_probes()
            old = table.put(key, value)
            action = 'added' if old is None else f'updated (was {old!r})'
            print(
                f"{key!r} {action}; "
                f"+{table.get_number_of_collisions() - collisions} collisions, "
                f"+{table.get_number_of_probes() - probes} probes\n"
            )

        elif choice == '3':
            key = parse_key(input("Key: "))
            old = table.remove(key)
            print("Not found.\n" if old is None else f"Removed {key!r} (was {old!r})\n")

        elif choice == '4':
            print_buckets(table, buckets_shown)

        elif choice == '5':
            print_report(table)

        elif choice == '6':
            # Counters and bucket allocation survive a clear.
            table.clear()
            print("Cleared.\n")

        else:
            break


def run_cli(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.buckets < 0:
        parser.error(f"--buckets must be >= 0, got {args.buckets}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        if args.generate is not None:
            pairs = generate_int_pairs(args.generate, start=args.start, step=args.step)
        elif args.csv:
            pairs = load_pairs_csv(args.csv)
        else:
            pairs = []
        table = HashTable(pairs, capacity=args.capacity)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print_report(table)
    if not args.no_menu:
        run_menu(table, args.buckets)
    return 0


if __name__ == '__main__':
    sys.exit(run_cli())
