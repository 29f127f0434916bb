"""Shared pytest configuration, fixtures and a rich failure report for extraction tests."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Allow running the suite from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent.resolve() / "src"))

from twextract import Extractor, ExtractorConfig  # noqa: E402

# Extraction modules only log at debug level; keep test output quiet
logging.getLogger("twextract.extraction").setLevel(logging.CRITICAL)
logging.getLogger("twextract.core").setLevel(logging.CRITICAL)

console = Console()


class ExtractionTestReporter:
    """Collects failed extraction comparisons and prints them as one table."""

    def __init__(self):
        self.failures: list[tuple[str, str, str, str]] = []
        self.passes = 0
        self.total = 0

    def record_result(self, test_name: str, input_text: str, expected: str, actual: str, passed: bool):
        self.total += 1
        if passed:
            self.passes += 1
        else:
            self.failures.append((test_name, input_text, expected, actual))

    def print_summary(self):
        if not self.failures:
            console.print(
                Panel.fit(
                    f"[bold green]All {self.total} extraction checks passed[/bold green]",
                    title="Extraction Results",
                    border_style="green",
                )
            )
            return

        table = Table(title="Extraction Failures", show_header=True, header_style="bold magenta")
        table.add_column("Test", style="cyan", no_wrap=False)
        table.add_column("Input", style="yellow")
        table.add_column("Expected", style="green")
        table.add_column("Actual", style="red")
        for test_name, input_text, expected, actual in self.failures:
            table.add_row(test_name.split("::")[-1], input_text, expected, actual)
        console.print(table)


reporter = ExtractionTestReporter()


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Feed structured results from ``assert_extracts`` into the reporter."""
    outcome = yield
    report = outcome.get_result()

    if report.when != "call":
        return
    for prop_name, prop_value in item.user_properties:
        if prop_name == "extraction_check":
            reporter.record_result(
                item.nodeid,
                prop_value["input"],
                prop_value["expected"],
                prop_value["actual"],
                report.outcome == "passed",
            )


def pytest_sessionfinish(session, exitstatus):
    if reporter.total > 0:
        console.print("\n")
        reporter.print_summary()


@pytest.fixture
def assert_extracts(request):
    """Compare extraction output and attach the comparison to the test report."""

    def _assert(input_text: str, expected, actual):
        request.node.user_properties.append(
            ("extraction_check", {"input": input_text, "expected": repr(expected), "actual": repr(actual)})
        )
        assert expected == actual, f"Input {input_text!r} should extract {expected!r}, got {actual!r}"

    return _assert


@pytest.fixture(autouse=True)
def clean_twextract_env(monkeypatch):
    """Keep developer environment variables out of config resolution."""
    for name in (
        "TWEXTRACT_CONFIG",
        "TWEXTRACT_ALLOW_URL_WITHOUT_PROTOCOL",
        "TWEXTRACT_INDEX_UNIT",
        "LOG_LEVEL",
        "LOG_OUTPUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def extract():
    """Factory returning an ``Extractor`` for the given text and settings."""

    def _extract(text, **settings):
        return Extractor(text, ExtractorConfig(**settings))

    return _extract


@pytest.fixture
def strict_extract():
    """Factory for extractors that only accept URLs with a protocol."""

    def _extract(text):
        return Extractor(text, ExtractorConfig(allow_url_without_protocol=False))

    return _extract


class _UnusedPattern:
    """Stands in for a compiled pattern that a pre-filtered scan must not touch."""

    def _fail(self, *args, **kwargs):
        raise AssertionError("pattern should not run")

    finditer = match = search = _fail


@pytest.fixture
def unused_pattern():
    return _UnusedPattern()
