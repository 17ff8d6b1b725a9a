"""aoc.inputs
==============

Locating and reading the per-day input files. Inputs live under a root
directory taken from the environment, one sub-directory per year and one
``<DD>.txt`` file per day.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Mapping, Optional

from .constants import INPUT_ROOT_ENV, INPUT_SUFFIX
from .errors import IOFailure, MissingConfiguration


def resolve_input_root(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the configured input root directory.

    Raises :class:`~aoc.errors.MissingConfiguration` when
    :data:`~aoc.constants.INPUT_ROOT_ENV` is unset or blank.
    """

    env = os.environ if environ is None else environ
    raw = env.get(INPUT_ROOT_ENV, "").strip()
    if not raw:
        raise MissingConfiguration(f"Environment variable {INPUT_ROOT_ENV} not set")
    return Path(raw)


def input_directory(year: str, root: Path) -> Path:
    return Path(root) / year


def input_path(input_dir: Path, day: str) -> Path:
    return Path(input_dir) / f"{day}{INPUT_SUFFIX}"


def read_text(path: Path) -> str:
    """Read ``path`` as UTF-8, wrapping any failure in :class:`IOFailure`.

    A leading byte order mark is dropped.
    """

    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise IOFailure(f"Could not read input file {path}: {exc}") from exc


def split_lines(text: str) -> List[str]:
    """Split ``text`` into lines, dropping trailing whitespace and blank lines."""

    lines = (line.rstrip() for line in text.splitlines())
    return [line for line in lines if line]


def read_lines(path: Path) -> List[str]:
    return split_lines(read_text(path))


__all__ = [
    "resolve_input_root",
    "input_directory",
    "input_path",
    "read_text",
    "split_lines",
    "read_lines",
]
