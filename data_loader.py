"""data_loader.py

Input sources for bulk-loading a HashTable:
- a CSV of key/value rows
- a generated run of integer keys (no file needed)

The CSV is commonly hand-edited or exported from a spreadsheet, so header names
are matched loosely and blank rows are skipped. Keys are normalized with
util.parse_key, which means integer-looking keys hash deterministically.
"""

from __future__ import annotations

import csv
from typing import Any, List, Optional, Tuple

from util import parse_key

_KEY_HEADERS = ('key', 'id', 'name')
_VALUE_HEADERS = ('value', 'val', 'data')


def _find_column(fieldnames: List[str], wanted) -> Optional[str]:
    """Return the first header whose normalized form is in `wanted`."""
    for name in fieldnames:
        if (name or '').strip().lower() in wanted:
            return name
    return None


def load_pairs_csv(path: str) -> List[Tuple[Any, str]]:
    """Load (key, value) pairs from a CSV, in file order.

    Duplicate keys are kept; loading them into a table exercises the update path.
    """
    pairs: List[Tuple[Any, str]] = []
    with open(path, newline='', encoding='utf-8-sig') as f:
        r = csv.DictReader(f)
        if not r.fieldnames:
            raise ValueError(f'{path}: CSV is empty.')

        key_col = _find_column(r.fieldnames, _KEY_HEADERS)
        if key_col is None:
            raise ValueError(f'{path}: no key column found (expected one of {", ".join(_KEY_HEADERS)}).')
        value_col = _find_column(r.fieldnames, _VALUE_HEADERS)

        for row in r:
            key = parse_key(row.get(key_col))
            if key == '':
                continue
            value = (row.get(value_col) or '').strip() if value_col else ''
            pairs.append((key, value))
    return pairs


def generate_int_pairs(count: int, start: int = 0, step: int = 1) -> List[Tuple[int, str]]:
    """Generate `count` integer keys: start, start+step, ...; each value is str(key).

    A step equal to the table capacity sends every key to the same bucket.
    """
    if count < 0:
        raise ValueError(f'count must be >= 0, got {count}')
    keys = [start + i * step for i in range(count)]
    return [(k, str(k)) for k in keys]
