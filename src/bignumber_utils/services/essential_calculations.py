from decimal import Decimal
from functools import reduce
from typing import Any

from bignumber_utils.engine import add, divide, get_canonical
from bignumber_utils.observability import track_operation
from bignumber_utils.services.config_builder import ProcessingConfigInput
from bignumber_utils.services.processing import ProcessedValue, process_value
from bignumber_utils.validations import validate_values_array

_ZERO = Decimal(0)
_TWO = Decimal(2)


def _canonical_values(values: Any, operation_name: str) -> list[Decimal]:
    validate_values_array(values, operation_name)
    return [get_canonical(value) for value in values]


def _total(values: list[Decimal]) -> Decimal:
    return reduce(add, values, _ZERO)


def sort_big_numbers(values: Any, descending: bool = False) -> list[Decimal]:
    return sorted(_canonical_values(values, "sort"), reverse=descending)


def calculate_sum(values: Any, config: ProcessingConfigInput = None) -> ProcessedValue:
    with track_operation("sum"):
        return process_value(_total(_canonical_values(values, "sum")), config)


def calculate_min(values: Any, config: ProcessingConfigInput = None) -> ProcessedValue:
    with track_operation("min"):
        canonical = _canonical_values(values, "min")
        return process_value(min(canonical) if canonical else _ZERO, config)


def calculate_max(values: Any, config: ProcessingConfigInput = None) -> ProcessedValue:
    with track_operation("max"):
        canonical = _canonical_values(values, "max")
        return process_value(max(canonical) if canonical else _ZERO, config)


def calculate_mean(values: Any, config: ProcessingConfigInput = None) -> ProcessedValue:
    with track_operation("mean"):
        canonical = _canonical_values(values, "mean")
        if not canonical:
            return process_value(_ZERO, config)
        return process_value(divide(_total(canonical), Decimal(len(canonical))), config)


def calculate_median(values: Any, config: ProcessingConfigInput = None) -> ProcessedValue:
    with track_operation("median"):
        ordered = sorted(_canonical_values(values, "median"))
        if not ordered:
            return process_value(_ZERO, config)
        middle = len(ordered) // 2
        if len(ordered) % 2:
            return process_value(ordered[middle], config)
        return process_value(divide(add(ordered[middle - 1], ordered[middle]), _TWO), config)
