"""
Pytest configuration for badge tests.
Adds visual pass/fail summary at the end of test runs.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def _debug_logging(caplog):
    """Capture badge debug logs so cache hits and misses show up in failures."""
    caplog.set_level(logging.DEBUG, logger='badges')


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """Print visual summary at the end of test run."""
    stats = terminalreporter.stats

    outcomes = {
        'passed': stats.get('passed', []),
        'failed': stats.get('failed', []),
        'skipped': stats.get('skipped', []),
    }

    if not any(outcomes.values()):
        return

    # Group by test class
    results_by_class = {}
    for outcome, reports in outcomes.items():
        for report in reports:
            counts = results_by_class.setdefault(
                _get_class_name(report),
                {"passed": 0, "failed": 0, "skipped": 0, "failures": []},
            )
            counts[outcome] += 1
            if outcome == 'failed':
                counts["failures"].append(report.head_line.split("::")[-1])

    terminalreporter.write_line("")
    terminalreporter.write_line("=" * 60)
    terminalreporter.write_line("  BADGE TEST SUMMARY")
    terminalreporter.write_line("=" * 60)

    for class_name, counts in sorted(results_by_class.items()):
        total_in_class = counts["passed"] + counts["failed"] + counts["skipped"]

        if counts["failed"] > 0:
            indicator = "\033[91m✗\033[0m"  # Red X
        elif counts["skipped"] == total_in_class:
            indicator = "\033[93m○\033[0m"  # Yellow circle (all skipped)
        else:
            indicator = "\033[92m✓\033[0m"  # Green checkmark

        terminalreporter.write_line(f"  {indicator} {class_name}: {counts['passed']}/{total_in_class} passed")

        for failure in counts["failures"]:
            terminalreporter.write_line(f"      \033[91m✗\033[0m {failure}")

    terminalreporter.write_line("-" * 60)

    total_passed = len(outcomes['passed'])
    total_failed = len(outcomes['failed'])
    total_skipped = len(outcomes['skipped'])
    if total_failed == 0:
        status = "\033[92m✓ ALL TESTS PASSED\033[0m"
    else:
        status = f"\033[91m✗ {total_failed} FAILED\033[0m"

    terminalreporter.write_line(f"  {status}  ({total_passed} passed, {total_failed} failed, {total_skipped} skipped)")
    terminalreporter.write_line("=" * 60)
    terminalreporter.write_line("")


def _get_class_name(report):
    """Extract class name from test report."""
    # nodeid format: tests/test_file.py::TestClass::test_method
    parts = report.nodeid.split("::")
    if len(parts) >= 2 and parts[1].startswith("Test"):
        return parts[1]
    return "Other"
