from decimal import Decimal
from typing import Any

from bignumber_utils.engine import add, divide, get_canonical, multiply
from bignumber_utils.observability import track_operation
from bignumber_utils.services.config_builder import ProcessingConfigInput
from bignumber_utils.services.processing import ProcessedValue, process_value
from bignumber_utils.validations import (
    validate_positive_value,
    validate_trade,
    validate_values_array,
)

_ZERO = Decimal(0)
_HUNDRED = Decimal(100)


def calculate_exchange(value: Any, rate: Any, config: ProcessingConfigInput = None) -> ProcessedValue:
    with track_operation("exchange"):
        amount = get_canonical(value)
        exchange_rate = get_canonical(rate)
        validate_positive_value(amount)
        validate_positive_value(exchange_rate)
        return process_value(divide(amount, exchange_rate), config)


def calculate_exchange_fee(
    value: Any, fee_percentage: Any, config: ProcessingConfigInput = None
) -> ProcessedValue:
    with track_operation("exchange_fee"):
        amount = get_canonical(value)
        fee = get_canonical(fee_percentage)
        validate_positive_value(amount)
        validate_positive_value(fee, allow_zero=True)
        return process_value(divide(multiply(fee, amount), _HUNDRED), config)


def calculate_weighted_entry(trades: Any, config: ProcessingConfigInput = None) -> ProcessedValue:
    """Volume-weighted average price of a sequence of ``(price, amount)`` trades."""
    with track_operation("weighted_entry"):
        validate_values_array(trades, "weighted entry")
        if not trades:
            return process_value(_ZERO, config)

        total_cost = _ZERO
        total_amount = _ZERO
        for trade in trades:
            validate_trade(trade, "weighted entry")
            price, amount = get_canonical(trade[0]), get_canonical(trade[1])
            total_cost = add(total_cost, multiply(price, amount))
            total_amount = add(total_amount, amount)
        return process_value(divide(total_cost, total_amount), config)
