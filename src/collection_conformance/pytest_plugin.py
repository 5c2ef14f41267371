"""pytest integration for conformance suites.

Registered through the ``pytest11`` entry point. Adds command-line options,
applies the per-case timeout and collects a conformance matrix that is
printed at the end of the session and optionally written as JSON.
"""

from dataclasses import replace

import pytest

from .config import HarnessConfig
from .framework.suite_builder import ConformanceCase
from .report import ConformanceCollector, format_matrix

HARNESS_CONFIG_KEY = pytest.StashKey[HarnessConfig]()
COLLECTOR_KEY = pytest.StashKey[ConformanceCollector]()


def pytest_addoption(parser):
    """Add custom command-line options."""
    group = parser.getgroup("conformance")
    group.addoption(
        "--conformance-report",
        action="store",
        default=None,
        help="Write the conformance matrix as JSON to this path",
    )
    group.addoption(
        "--conformance-timeout",
        action="store",
        type=float,
        default=None,
        help="Per-case timeout in seconds for conformance cases (default 30)",
    )
    group.addoption(
        "--conformance-verbose",
        action="store_true",
        default=False,
        help="Print per-case diagnostics to stderr",
    )


def pytest_configure(config):
    """Resolve harness settings once per session."""
    config.stash[HARNESS_CONFIG_KEY] = HarnessConfig.from_pytest_config(config)
    config.stash[COLLECTOR_KEY] = ConformanceCollector()


def _case_of(item):
    callspec = getattr(item, "callspec", None)
    if callspec is None:
        return None
    for value in callspec.params.values():
        if isinstance(value, ConformanceCase):
            return value
    return None


def pytest_collection_modifyitems(config, items):
    """Bind session settings to conformance cases.

    Cases keep their own error-type mapping. Verbosity and the report path
    come from the command line, and so does the timeout when given.
    """
    harness = config.stash[HARNESS_CONFIG_KEY]
    override_timeout = config.getoption("--conformance-timeout") is not None
    for item in items:
        case = _case_of(item)
        if case is None:
            continue
        case.config = replace(
            case.config,
            verbose=case.config.verbose or harness.verbose,
            report_path=harness.report_path or case.config.report_path,
            timeout=harness.timeout if override_timeout else case.config.timeout,
        )
        if override_timeout:
            # The timeout marker set at suite-build time takes precedence over
            # global config, so replace it
            item.own_markers = [m for m in item.own_markers if m.name != "timeout"]
            item.add_marker(pytest.mark.timeout(harness.timeout))


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    case = _case_of(item)
    if case is None:
        return
    if report.when == "call" or (report.when == "setup" and not report.passed):
        if report.passed:
            status = "pass"
        elif report.skipped:
            status = "skip"
        elif call.excinfo is not None and call.excinfo.errisinstance(AssertionError):
            status = "fail"
        else:
            status = "error"
        item.config.stash[COLLECTOR_KEY].record(
            case.suite_name, case.capabilities.size.label, case.scenario.name, status
        )


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    collector = config.stash.get(COLLECTOR_KEY, None)
    if not collector:
        return
    harness = config.stash[HARNESS_CONFIG_KEY]
    if harness.report_path is not None:
        collector.write(harness.report_path)
        terminalreporter.write_line(f"Conformance matrix written to {harness.report_path}")
    if harness.verbose:
        for line in format_matrix(collector.results):
            terminalreporter.write_line(line)


@pytest.fixture(scope="session")
def harness_config(pytestconfig) -> HarnessConfig:
    """Harness settings resolved from the command line."""
    return pytestconfig.stash[HARNESS_CONFIG_KEY]
