import decimal
from concurrent.futures import ThreadPoolExecutor

from bignumber_utils import (
    adjust_by_percentage,
    calculate_exchange,
    calculate_exchange_fee,
    calculate_mean,
    calculate_percentage_change,
    calculate_percentage_representation,
    calculate_sum,
    calculate_weighted_entry,
    prettify_value,
    sort_big_numbers,
)

USD = {"prefix": "$"}
BTC = {"decimalPlaces": 8}


def test_e2e_position_lifecycle():
    trades = [(41000, "0.5"), ("43000", 0.5)]
    entry = calculate_weighted_entry(trades)
    assert entry == 42000

    bought = calculate_exchange(1000, entry, BTC)
    assert bought == 0.02380952

    change = calculate_percentage_change(entry, 46200)
    assert change == 10

    exit_fee = calculate_exchange_fee(46200, 0.1)
    assert exit_fee == 46.2
    net_exit = adjust_by_percentage(46200, -0.1, {"outputType": "bignumber"})
    assert prettify_value(net_exit, format_config=USD) == "$46,153.8"


def test_e2e_portfolio_summary():
    balances = {"BTC": "61250.75", "ETH": "24500.30", "USDT": "14249.95"}
    total = calculate_sum(list(balances.values()), {"outputType": "bignumber"})
    assert prettify_value(total, format_config=USD) == "$100,001"

    weights = {
        asset: calculate_percentage_representation(value, total, {"decimalPlaces": 1})
        for asset, value in balances.items()
    }
    assert weights == {"BTC": 61.3, "ETH": 24.5, "USDT": 14.2}
    assert sort_big_numbers(list(weights.values()), descending=True)[0] == decimal.Decimal("61.3")


def test_e2e_concurrent_calculations_leave_caller_context_untouched():
    values = ["0.286304850273819327", "0.00290532", "0.00251940040614675", "0.03506759540691015"]
    config = {"decimalPlaces": 18, "outputType": "string"}
    prec_before = decimal.getcontext().prec

    with ThreadPoolExecutor(max_workers=8) as pool:
        sums = list(pool.map(lambda _: calculate_sum(values, config), range(32)))
        means = list(pool.map(lambda _: calculate_mean(values, config), range(32)))

    assert set(sums) == {"0.326797166086876227"}
    assert set(means) == {"0.081699291521719057"}
    assert decimal.getcontext().prec == prec_before
