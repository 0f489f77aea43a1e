from decimal import Decimal
from typing import Any

from bignumber_utils import engine
from bignumber_utils.errors import BigNumberUtilsError


def _canonical_or_none(value: Any) -> Decimal | None:
    try:
        return engine.get_canonical(value)
    except BigNumberUtilsError:
        return None


def is_big_number(value: Any) -> bool:
    return isinstance(value, Decimal)


def is_number(value: Any) -> bool:
    return _canonical_or_none(value) is not None


def is_integer(value: Any) -> bool:
    canonical = _canonical_or_none(value)
    return canonical is not None and engine.is_integer(canonical)


def is_float(value: Any) -> bool:
    canonical = _canonical_or_none(value)
    return canonical is not None and engine.is_finite(canonical) and not engine.is_integer(canonical)
