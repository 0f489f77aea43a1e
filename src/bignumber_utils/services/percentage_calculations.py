from decimal import Decimal
from typing import Any

from bignumber_utils.engine import add, divide, get_canonical, multiply, subtract
from bignumber_utils.observability import track_operation
from bignumber_utils.services.config_builder import ProcessingConfigInput
from bignumber_utils.services.processing import ProcessedValue, process_value
from bignumber_utils.validations import validate_positive_value

_ZERO = Decimal(0)
_HUNDRED = Decimal(100)
_FULL_DECREASE = Decimal(-100)


def _percentage_of(value: Decimal, percentage: Decimal) -> Decimal:
    return divide(multiply(value, percentage), _HUNDRED)


def calculate_percentage_change(
    old_value: Any, new_value: Any, config: ProcessingConfigInput = None
) -> ProcessedValue:
    with track_operation("percentage_change"):
        old = get_canonical(old_value)
        new = get_canonical(new_value)
        validate_positive_value(old)

        if new > old:
            change = multiply(divide(subtract(new, old), old), _HUNDRED)
        elif old > new:
            # A drop to zero or below is a full loss.
            if new <= 0:
                change = _FULL_DECREASE
            else:
                change = multiply(divide(subtract(old, new), old), _HUNDRED).copy_negate()
        else:
            change = _ZERO
        return process_value(change, config)


def adjust_by_percentage(
    value: Any, percentage: Any, config: ProcessingConfigInput = None
) -> ProcessedValue:
    with track_operation("adjust_by_percentage"):
        base = get_canonical(value)
        pct = get_canonical(percentage)
        validate_positive_value(base)

        if pct > 0:
            adjusted = divide(multiply(base, add(_HUNDRED, pct)), _HUNDRED)
        elif pct == 0:
            adjusted = base
        elif pct > _FULL_DECREASE:
            adjusted = subtract(base, _percentage_of(base, pct.copy_abs()))
        else:
            adjusted = _ZERO
        return process_value(adjusted, config)


def calculate_percentage_representation(
    value: Any, total: Any, config: ProcessingConfigInput = None
) -> ProcessedValue:
    with track_operation("percentage_representation"):
        part = get_canonical(value)
        whole = get_canonical(total)
        validate_positive_value(part)
        validate_positive_value(whole)
        return process_value(divide(multiply(part, _HUNDRED), whole), config)
