from decimal import Decimal
from typing import Any

from bignumber_utils.errors import (
    InvalidDecimalPlacesError,
    InvalidValuesArrayError,
    NegativeValueNotAllowedError,
)

MIN_DECIMAL_PLACES = 0
MAX_DECIMAL_PLACES = 100


def validate_decimal_places(decimal_places: Any) -> None:
    is_numeric = isinstance(decimal_places, (int, float)) and not isinstance(decimal_places, bool)
    if (
        not is_numeric
        or not MIN_DECIMAL_PLACES <= decimal_places <= MAX_DECIMAL_PLACES
        or not float(decimal_places).is_integer()
    ):
        raise InvalidDecimalPlacesError(
            f"The decimalPlaces '{decimal_places}' must be an integer ranging "
            f"{MIN_DECIMAL_PLACES} - {MAX_DECIMAL_PLACES}.",
            detail={"decimal_places": repr(decimal_places)},
        )


def validate_values_array(values: Any, operation_name: str) -> None:
    # Only concrete sequences; str, sets, mappings and iterators are rejected.
    if not isinstance(values, (list, tuple)):
        raise InvalidValuesArrayError(
            f"Cannot calculate the {operation_name} on an invalid sequence of BigNumber Values. "
            f"Received: {type(values).__name__}",
            detail={"operation": operation_name},
        )


def validate_trade(trade: Any, operation_name: str) -> None:
    if not isinstance(trade, (list, tuple)) or len(trade) != 2:
        raise InvalidValuesArrayError(
            f"Cannot calculate the {operation_name} on a trade that is not a (price, amount) pair. "
            f"Received: {type(trade).__name__}",
            detail={"operation": operation_name},
        )


def validate_positive_value(value: Decimal, allow_zero: bool = False) -> None:
    if value < 0 or (not allow_zero and value == 0):
        bound = "greater than or equal to 0" if allow_zero else "greater than 0"
        raise NegativeValueNotAllowedError(
            f"The value '{value}' must be {bound}.",
            detail={"value": str(value), "allow_zero": allow_zero},
        )
