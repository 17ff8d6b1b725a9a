"""aoc.logging_utils
=====================

Opt-in record of failed puzzle runs, one JSON object per line, written when
the command line is given ``--fail-log``.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from .constants import FAIL_LOG
from .types import PuzzleRun


def log_failure(run: PuzzleRun, path: str | Path = FAIL_LOG) -> None:
    """Append a JSON line describing the failed ``run`` to ``path``."""

    entry = {
        "year": run.year,
        "day": run.day,
        "error_kind": run.error_kind,
        "message": run.error,
        "answers": run.answers,
        "elapsed": run.elapsed,
        "timestamp": datetime.now(timezone.utc).replace(microsecond=0).isoformat(),
    }
    with Path(path).open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["log_failure"]
