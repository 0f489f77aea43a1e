from decimal import Decimal
from enum import IntEnum
from typing import Any, Literal, TypeAlias

from bignumber_utils.engine import get_canonical, round_decimal_places
from bignumber_utils.errors import InvalidRoundingModeError
from bignumber_utils.validations import validate_decimal_places

ROUNDING_POLICY_VERSION = "1.0.0"
DEFAULT_DECIMAL_PLACES = 2
DEFAULT_ROUNDING_MODE = "ROUND_HALF_UP"

RoundingModeName: TypeAlias = Literal[
    "ROUND_UP",
    "ROUND_DOWN",
    "ROUND_CEIL",
    "ROUND_FLOOR",
    "ROUND_HALF_UP",
    "ROUND_HALF_DOWN",
    "ROUND_HALF_EVEN",
    "ROUND_HALF_CEIL",
    "ROUND_HALF_FLOOR",
]


class RoundingMode(IntEnum):
    ROUND_UP = 0
    ROUND_DOWN = 1
    ROUND_CEIL = 2
    ROUND_FLOOR = 3
    ROUND_HALF_UP = 4
    ROUND_HALF_DOWN = 5
    ROUND_HALF_EVEN = 6
    ROUND_HALF_CEIL = 7
    ROUND_HALF_FLOOR = 8


ROUNDING_MODE_NAMES: tuple[str, ...] = tuple(mode.name for mode in RoundingMode)

# Any name mentioning a directed mode rounds to whole units, known or not.
_INTEGER_ONLY_MARKERS = ("CEIL", "FLOOR")


def forces_integer_rounding(rounding_mode: str) -> bool:
    return any(marker in rounding_mode for marker in _INTEGER_ONLY_MARKERS)


def get_rounding_mode(name: Any) -> RoundingMode:
    if not isinstance(name, str) or name not in RoundingMode.__members__:
        raise InvalidRoundingModeError(
            f"The rounding mode '{name}' is invalid.",
            detail={"supported": list(ROUNDING_MODE_NAMES)},
        )
    return RoundingMode[name]


def round_big_number(value: Any, decimal_places: int, rounding_mode: str) -> Decimal:
    validate_decimal_places(decimal_places)
    mode = get_rounding_mode(rounding_mode)
    return round_decimal_places(get_canonical(value), int(decimal_places), int(mode))
