"""One module per puzzle, named ``y<year>_day<DD>``."""

from .y2022_day01 import CalorieCounting
from .y2022_day02 import RockPaperScissors
from .y2023_day01 import Trebuchet
from .y2023_day02 import CubeConundrum
from .y2023_day03 import GearRatios
from .y2023_day04 import Scratchcards
from .y2023_day05 import SeedAlmanac

ALL_PUZZLES = (
    CalorieCounting,
    RockPaperScissors,
    Trebuchet,
    CubeConundrum,
    GearRatios,
    Scratchcards,
    SeedAlmanac,
)

__all__ = [
    "ALL_PUZZLES",
    "CalorieCounting",
    "RockPaperScissors",
    "Trebuchet",
    "CubeConundrum",
    "GearRatios",
    "Scratchcards",
    "SeedAlmanac",
]
