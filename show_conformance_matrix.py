#!/usr/bin/env python3
"""Display conformance matrix from test results.

Reads artifacts/conformance_matrix.json and displays one table per
container showing each scenario's status for every size class.

Usage:
    python show_conformance_matrix.py
    python show_conformance_matrix.py artifacts/conformance_matrix.json
"""

import sys
from pathlib import Path

from collection_conformance.report import format_matrix, load


def print_conformance_matrix(json_file):
    """Print formatted conformance matrix."""
    if not Path(json_file).exists():
        print(f"No conformance matrix found at: {json_file}")
        print("Run: pytest --conformance-report artifacts/conformance_matrix.json")
        return 1

    results = load(Path(json_file))
    for line in format_matrix(results):
        print(line)

    failing = [
        f"{suite} [{size}] {scenario}"
        for suite, by_size in sorted(results.items())
        for size, cells in by_size.items()
        for scenario, status in sorted(cells.items())
        if status in ("fail", "error")
    ]
    for label in failing:
        print(f"  ✗ {label}")
    return 1 if failing else 0


if __name__ == "__main__":
    json_file = sys.argv[1] if len(sys.argv) > 1 else "artifacts/conformance_matrix.json"
    sys.exit(print_conformance_matrix(json_file))
