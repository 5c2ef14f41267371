"""Harness configuration."""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple, Type

from .errors import ErrorKind, NullRejected, UnsupportedOperation


def default_error_types() -> Dict[ErrorKind, Tuple[Type[BaseException], ...]]:
    # dict.update(None) and most None-hostile containers raise TypeError
    return {
        ErrorKind.UNSUPPORTED_OPERATION: (UnsupportedOperation, NotImplementedError),
        ErrorKind.NULL_REJECTED: (NullRejected, TypeError),
    }


@dataclass
class HarnessConfig:
    """Settings shared by every case of a conformance run.

    Attributes:
        error_types: Exception types recognised as each error kind
        timeout: Per-case timeout in seconds applied through pytest-timeout
        report_path: Where the JSON conformance matrix is written, if anywhere
        verbose: Print per-case diagnostics to stderr

    The default mapping counts any ``TypeError`` as NULL_REJECTED, since
    that is what ``dict.update(None)`` and most None-hostile containers
    raise. The price is that an unrelated ``TypeError``, such as one from a
    wrong ``update`` signature, reads as a None rejection. Containers that
    raise ``NullRejected`` can pass a narrower mapping so such bugs surface
    as errors instead.
    """

    error_types: Dict[ErrorKind, Tuple[Type[BaseException], ...]] = field(default_factory=default_error_types)
    timeout: float = 30.0
    report_path: Optional[Path] = None
    verbose: bool = False

    def __post_init__(self):
        missing = set(ErrorKind) - set(self.error_types)
        if missing:
            raise ValueError(
                f"error_types has no entry for: {', '.join(sorted(k.name for k in missing))}"
            )
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_pytest_config(cls, config) -> "HarnessConfig":
        """Build settings from the options registered by the pytest plugin."""
        report = config.getoption("--conformance-report")
        kwargs = {
            "report_path": Path(report) if report else None,
            "verbose": config.getoption("--conformance-verbose"),
        }
        timeout = config.getoption("--conformance-timeout")
        if timeout is not None:
            kwargs["timeout"] = timeout
        return cls(**kwargs)

    def log(self, component: str, message: str):
        if self.verbose:
            print(f"[{component}] {message}", file=sys.stderr)
