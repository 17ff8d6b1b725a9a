"""aoc.constants
=================

Names and limits the runner is configured with: where inputs are looked up,
the process exit statuses, the almanac scan cap and the failure log file.
"""

from __future__ import annotations

INPUT_ROOT_ENV = "ADVENT_INPUT_ROOT"
INPUT_SUFFIX = ".txt"

EXIT_OK = 0
EXIT_ENVIRONMENT = 1
EXIT_USAGE = 2

# Upper bound on locations tried by the almanac reverse scan.
REVERSE_SCAN_LIMIT = 10_000_000

FAIL_LOG = "failed_runs.jsonl"

__all__ = [
    "INPUT_ROOT_ENV",
    "INPUT_SUFFIX",
    "EXIT_OK",
    "EXIT_ENVIRONMENT",
    "EXIT_USAGE",
    "REVERSE_SCAN_LIMIT",
    "FAIL_LOG",
]
