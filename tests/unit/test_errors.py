import pytest

from bignumber_utils.errors import (
    BigNumberUtilsError,
    ErrorCode,
    InvalidBigNumberFormatError,
    InvalidDecimalPlacesError,
    InvalidRoundingModeError,
    InvalidTypeError,
    InvalidValueError,
    InvalidValuesArrayError,
    NegativeValueNotAllowedError,
    build_invalid_value_message,
    extract_message,
)


@pytest.mark.parametrize(
    ("error_class", "code"),
    [
        (InvalidValueError, ErrorCode.INVALID_VALUE),
        (InvalidTypeError, ErrorCode.INVALID_TYPE),
        (InvalidRoundingModeError, ErrorCode.INVALID_ROUNDING_MODE),
        (InvalidDecimalPlacesError, ErrorCode.INVALID_DECIMAL_PLACES),
        (InvalidBigNumberFormatError, ErrorCode.INVALID_BIGNUMBER_FORMAT),
        (InvalidValuesArrayError, ErrorCode.INVALID_VALUES_ARRAY),
        (NegativeValueNotAllowedError, ErrorCode.NEGATIVE_VALUE_NOT_ALLOWED),
    ],
)
def test_every_kind_carries_its_code(error_class, code) -> None:
    error = error_class("boom", detail={"value": "1"})
    assert isinstance(error, BigNumberUtilsError)
    assert error.error_code == code
    assert str(error) == f"boom ({code})"
    assert error.to_dict() == {"error_code": code, "message": "boom", "detail": {"value": "1"}}


def test_detail_defaults_to_empty_dict() -> None:
    assert InvalidValueError("boom").detail == {}


def test_build_invalid_value_message_includes_value() -> None:
    assert build_invalid_value_message("abc") == "BigNumber could not be instantiated with: abc."


def test_build_invalid_value_message_includes_engine_reason() -> None:
    err = ValueError("There has been an error while instantiating BigNumber")
    msg = build_invalid_value_message("NaN", err)
    assert "NaN" in msg
    assert err.args[0] in msg


def test_build_invalid_value_message_falls_back_to_unknown() -> None:
    class Opaque:
        def __str__(self) -> str:
            raise TypeError("no text")

    err = ValueError("engine rejected it")
    assert "UNKNOWN." in build_invalid_value_message(Opaque())
    msg = build_invalid_value_message(Opaque(), err)
    assert "UNKNOWN |" in msg
    assert "engine rejected it" in msg


def test_extract_message_falls_back_to_class_name() -> None:
    assert extract_message(KeyError()) == "KeyError"
    assert extract_message(InvalidTypeError("typed")) == "typed"
