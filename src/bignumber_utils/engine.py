"""Adapter over the ``decimal`` module.

Every other module builds, compares and combines canonical decimals through
the functions below. The engine configuration is created once, when this
module is imported, and is never mutated afterwards. Arithmetic runs in
private copies of the engine context, widened per operation so that sums,
differences and products stay exact. The caller's thread-local context is
neither read nor modified.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Any, TypeAlias

from bignumber_utils.config import Settings, settings
from bignumber_utils.errors import (
    InvalidRoundingModeError,
    InvalidValueError,
    build_invalid_value_message,
)

logger = logging.getLogger(__name__)

BigNumberValue: TypeAlias = Decimal | int | float | str

HALF_UP_CODE = 4
_HALF_CEIL_CODE = 7
_HALF_FLOOR_CODE = 8
_ROUNDING_BY_CODE = {
    0: ROUND_UP,
    1: ROUND_DOWN,
    2: ROUND_CEILING,
    3: ROUND_FLOOR,
    4: ROUND_HALF_UP,
    5: ROUND_HALF_DOWN,
    6: ROUND_HALF_EVEN,
}


@dataclass(frozen=True)
class EngineConfig:
    exponential_at: int
    precision: int
    division_decimal_places: int
    division_rounding_code: int = HALF_UP_CODE

    @classmethod
    def from_settings(cls, source: Settings) -> "EngineConfig":
        return cls(
            exponential_at=source.exponential_at,
            precision=source.precision,
            division_decimal_places=source.division_decimal_places,
        )


def build_context(config: EngineConfig) -> Context:
    return Context(
        prec=config.precision,
        rounding=ROUND_HALF_UP,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow],
    )


ENGINE_CONFIG = EngineConfig.from_settings(settings)
_ENGINE_CONTEXT = build_context(ENGINE_CONFIG)

# Literals the engine accepts: ASCII digits, optional fraction and exponent, or a signed Infinity.
_NUMERIC_LITERAL = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|-?Infinity")


def _working_context(digits: int, rounding: str = ROUND_HALF_UP, exact: bool = True) -> Context:
    """Copy of the engine context holding at least ``digits`` significant digits.

    The configured precision is a floor. Exact contexts trap ``Inexact`` so a
    result is either complete or an error.
    """
    context = _ENGINE_CONTEXT.copy()
    context.prec = max(digits, ENGINE_CONFIG.precision)
    context.rounding = rounding
    context.traps[Inexact] = exact
    return context


def _digit_span(*values: Decimal) -> int:
    # Digits between the highest leading digit and the lowest exponent, plus a carry.
    finite = [value for value in values if value.is_finite()]
    if not finite:
        return 1
    top = max(value.adjusted() for value in finite)
    bottom = min(value.as_tuple().exponent for value in finite)
    return top - bottom + 2


def _digit_count(*values: Decimal) -> int:
    return sum(len(value.as_tuple().digits) for value in values if value.is_finite()) + 1


def _rejected(value: Any, error: BaseException | None = None) -> InvalidValueError:
    message = build_invalid_value_message(value, error)
    logger.debug(
        "value.rejected",
        extra={"extra_fields": {"value_type": type(value).__name__}},
    )
    return InvalidValueError(message, detail={"value_type": type(value).__name__})


def get_canonical(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        candidate = value
    elif isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise _rejected(value)
    elif isinstance(value, str):
        if _NUMERIC_LITERAL.fullmatch(value) is None:
            raise _rejected(value, ValueError("Not a decimal numeric literal"))
        candidate = Decimal(value)
    elif isinstance(value, float):
        candidate = Decimal(str(value))
    else:
        candidate = Decimal(value)
    if candidate.is_nan():
        raise _rejected(value)
    return candidate


def _apply(
    operation: Callable[[Decimal, Decimal], Decimal],
    left: Decimal,
    right: Decimal,
    context: Context,
) -> Decimal:
    try:
        with localcontext(context):
            return operation(left, right)
    except (InvalidOperation, DivisionByZero, Overflow, Inexact) as exc:
        raise InvalidValueError(
            f"The operation on {to_plain_string(left)} and {to_plain_string(right)} "
            f"did not produce a number | {exc.__class__.__name__}",
        ) from exc


def add(left: Decimal, right: Decimal) -> Decimal:
    return _apply(lambda a, b: a + b, left, right, _working_context(_digit_span(left, right)))


def subtract(left: Decimal, right: Decimal) -> Decimal:
    return _apply(lambda a, b: a - b, left, right, _working_context(_digit_span(left, right)))


def multiply(left: Decimal, right: Decimal) -> Decimal:
    return _apply(lambda a, b: a * b, left, right, _working_context(_digit_count(left, right)))


def divide(dividend: Decimal, divisor: Decimal) -> Decimal:
    if divisor.is_zero():
        raise InvalidValueError(
            f"Cannot divide {to_plain_string(dividend)} by zero.",
            detail={"dividend": to_plain_string(dividend)},
        )
    places = ENGINE_CONFIG.division_decimal_places
    # Two guard digits rounded with ROUND_05UP keep the final rounding correct.
    digits = dividend.adjusted() - divisor.adjusted() + places + 3
    context = _working_context(digits, ROUND_05UP, exact=False)
    quotient = _apply(lambda a, b: a / b, dividend, divisor, context)
    return round_decimal_places(quotient, places, ENGINE_CONFIG.division_rounding_code)


def compare(left: Decimal, right: Decimal) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def _resolve_rounding(code: int, value: Decimal) -> str:
    # Half-ceil and half-floor only differ from half-up/half-down by sign.
    if code == _HALF_CEIL_CODE:
        return ROUND_HALF_DOWN if value.is_signed() else ROUND_HALF_UP
    if code == _HALF_FLOOR_CODE:
        return ROUND_HALF_UP if value.is_signed() else ROUND_HALF_DOWN
    try:
        return _ROUNDING_BY_CODE[code]
    except KeyError:
        raise InvalidRoundingModeError(f"The rounding mode code '{code}' is invalid.") from None


def round_decimal_places(value: Decimal, places: int, code: int) -> Decimal:
    rounding = _resolve_rounding(code, value)
    if not value.is_finite() or value.as_tuple().exponent >= -places:
        return value
    quantum = Decimal((0, (1,), -places))
    context = _working_context(value.adjusted() + places + 2, rounding, exact=False)
    try:
        return value.quantize(quantum, context=context)
    except InvalidOperation as exc:
        raise InvalidValueError(
            f"{to_plain_string(value)} cannot be rounded to {places} decimal places.",
        ) from exc


def _signed_infinity(value: Decimal) -> str:
    return "-Infinity" if value.is_signed() else "Infinity"


def _normalize(value: Decimal) -> Decimal:
    # Exactly as many digits as the coefficient, so only trailing zeros go.
    return value.normalize(_working_context(len(value.as_tuple().digits)))


def to_fixed_string(value: Decimal) -> str:
    if not value.is_finite():
        return _signed_infinity(value)
    if value.is_zero():
        return "0"
    return format(_normalize(value), "f")


def to_plain_string(value: Decimal) -> str:
    if not value.is_finite():
        return _signed_infinity(value)
    if value.is_zero():
        return "0"
    normalized = _normalize(value)
    if abs(normalized.adjusted()) >= ENGINE_CONFIG.exponential_at:
        return format(normalized, "e")
    return format(normalized, "f")


def to_number(value: Decimal) -> float:
    return float(value)


def is_finite(value: Decimal) -> bool:
    return value.is_finite()


def is_integer(value: Decimal) -> bool:
    if not value.is_finite():
        return False
    if value.is_zero() or value.as_tuple().exponent >= 0:
        return True
    return _normalize(value).as_tuple().exponent >= 0
