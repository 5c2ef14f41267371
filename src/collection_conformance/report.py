"""Conformance matrix collection and display."""

import json
from pathlib import Path
from typing import Dict, List

from . import SUPPORTED_SIZES

# suite -> size label -> scenario -> status
Results = Dict[str, Dict[str, Dict[str, str]]]

_CELLS = {"pass": "ok", "fail": "FAIL", "error": "ERR", "skip": "--"}


class ConformanceCollector:
    """Accumulates per-case statuses over a test session."""

    def __init__(self):
        self.results: Results = {}

    def record(self, suite: str, size: str, scenario: str, status: str):
        self.results.setdefault(suite, {}).setdefault(size, {})[scenario] = status

    def __bool__(self) -> bool:
        return bool(self.results)

    def write(self, path: Path):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.results, f, indent=2, sort_keys=True)


def load(path: Path) -> Results:
    with open(path) as f:
        return json.load(f)


def format_matrix(results: Results) -> List[str]:
    """Render one table per suite: scenarios down, size classes across."""
    lines = []
    for suite in sorted(results):
        by_size = results[suite]
        sizes = [s for s in SUPPORTED_SIZES if s in by_size]
        scenarios = sorted({name for cells in by_size.values() for name in cells})
        width = max([len("scenario")] + [len(s) for s in scenarios])

        lines.append("")
        lines.append(f"━━━ CONFORMANCE: {suite}")
        lines.append("")
        lines.append(f"  {'scenario':<{width}}" + "".join(f"  {s:>8}" for s in sizes))
        lines.append(f"  {'─' * width}" + "".join(f"  {'─' * 8}" for _ in sizes))
        for name in scenarios:
            cells = "".join(
                f"  {_CELLS.get(by_size[s].get(name, ''), '  '):>8}" for s in sizes
            )
            lines.append(f"  {name:<{width}}{cells}")

        failed = sum(
            1 for cells in by_size.values() for st in cells.values() if st in ("fail", "error")
        )
        lines.append("")
        lines.append(f"  {failed} failing case(s)" if failed else "  all eligible cases pass")
    lines.append("")
    return lines
