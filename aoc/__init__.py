"""Public package interface for the advent puzzle runner."""

from .cli import main
from .registry import PUZZLE_REGISTRY, get_puzzle
from .runner import run_puzzle

__all__ = ["main", "PUZZLE_REGISTRY", "get_puzzle", "run_puzzle"]
