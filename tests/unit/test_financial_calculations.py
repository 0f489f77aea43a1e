from decimal import Decimal

import pytest

from bignumber_utils.errors import (
    InvalidValueError,
    InvalidValuesArrayError,
    NegativeValueNotAllowedError,
)
from bignumber_utils.services.financial_calculations import (
    calculate_exchange,
    calculate_exchange_fee,
    calculate_weighted_entry,
)


def test_calculate_exchange() -> None:
    assert calculate_exchange(100, 65000, {"decimalPlaces": 5}) == 0.00154
    assert calculate_exchange("0.5", "0.25") == 2
    assert calculate_exchange(1, 3, {"decimalPlaces": 20, "outputType": "string"}) == "0.33333333333333333333"


def test_calculate_exchange_requires_positive_inputs() -> None:
    with pytest.raises(NegativeValueNotAllowedError):
        calculate_exchange(0, 65000)
    with pytest.raises(NegativeValueNotAllowedError):
        calculate_exchange(100, 0)
    with pytest.raises(NegativeValueNotAllowedError):
        calculate_exchange(100, -1)


def test_calculate_exchange_fee() -> None:
    assert calculate_exchange_fee(1000, 0.1) == 1
    assert calculate_exchange_fee(1000, 0) == 0
    assert calculate_exchange_fee("0.00015", 0.1, {"decimalPlaces": 8}) == 0.00000015
    assert calculate_exchange_fee(250.5, 1.5, {"outputType": "bignumber"}) == Decimal("3.76")


def test_calculate_exchange_fee_rejects_negative_inputs() -> None:
    with pytest.raises(NegativeValueNotAllowedError):
        calculate_exchange_fee(1000, -0.1)
    with pytest.raises(NegativeValueNotAllowedError):
        calculate_exchange_fee(0, 0.1)


def test_calculate_weighted_entry() -> None:
    assert calculate_weighted_entry([(100, 1), (200, 3)]) == 175
    assert calculate_weighted_entry([["41500.55", "0.25"]]) == 41500.55
    trades = [(1, 1), (2, 1), (2, 1)]
    assert calculate_weighted_entry(trades, {"decimalPlaces": 4, "outputType": "string"}) == "1.6667"


def test_calculate_weighted_entry_empty_is_zero() -> None:
    assert calculate_weighted_entry([]) == 0


def test_calculate_weighted_entry_rejects_invalid_trades() -> None:
    with pytest.raises(InvalidValuesArrayError):
        calculate_weighted_entry(None)
    with pytest.raises(InvalidValuesArrayError):
        calculate_weighted_entry([(100, 1), (200,)])
    with pytest.raises(InvalidValueError):
        calculate_weighted_entry([(100, "one")])


def test_calculate_weighted_entry_requires_nonzero_total_amount() -> None:
    with pytest.raises(InvalidValueError, match="by zero"):
        calculate_weighted_entry([(10, 0), (20, 0)])
