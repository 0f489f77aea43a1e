from typing import Any


class ErrorCode:
    INVALID_VALUE = "INVALID_VALUE"
    INVALID_TYPE = "INVALID_TYPE"
    INVALID_ROUNDING_MODE = "INVALID_ROUNDING_MODE"
    INVALID_DECIMAL_PLACES = "INVALID_DECIMAL_PLACES"
    INVALID_BIGNUMBER_FORMAT = "INVALID_BIGNUMBER_FORMAT"
    INVALID_VALUES_ARRAY = "INVALID_VALUES_ARRAY"
    NEGATIVE_VALUE_NOT_ALLOWED = "NEGATIVE_VALUE_NOT_ALLOWED"


class BigNumberUtilsError(Exception):
    """Root of every error raised by the value layer."""

    error_code: str = "BIGNUMBER_UTILS_ERROR"

    def __init__(self, message: str, detail: dict[str, Any] | None = None) -> None:
        self.message = message
        self.detail = detail or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.message} ({self.error_code})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "detail": self.detail,
        }


class InvalidValueError(BigNumberUtilsError):
    error_code = ErrorCode.INVALID_VALUE


class InvalidTypeError(BigNumberUtilsError):
    error_code = ErrorCode.INVALID_TYPE


class InvalidRoundingModeError(BigNumberUtilsError):
    error_code = ErrorCode.INVALID_ROUNDING_MODE


class InvalidDecimalPlacesError(BigNumberUtilsError):
    error_code = ErrorCode.INVALID_DECIMAL_PLACES


class InvalidBigNumberFormatError(BigNumberUtilsError):
    error_code = ErrorCode.INVALID_BIGNUMBER_FORMAT


class InvalidValuesArrayError(BigNumberUtilsError):
    error_code = ErrorCode.INVALID_VALUES_ARRAY


class NegativeValueNotAllowedError(BigNumberUtilsError):
    error_code = ErrorCode.NEGATIVE_VALUE_NOT_ALLOWED


_UNKNOWN = "UNKNOWN"


def extract_message(error: BaseException) -> str:
    if isinstance(error, BigNumberUtilsError):
        return error.message
    try:
        message = str(error)
    except Exception:
        message = ""
    return message or error.__class__.__name__


def _render(value: Any) -> str:
    # Arbitrary objects may have a broken __str__.
    try:
        return str(value)
    except Exception:
        return _UNKNOWN


def build_invalid_value_message(value: Any, error: BaseException | None = None) -> str:
    rendered = _render(value)
    if error is None:
        return f"BigNumber could not be instantiated with: {rendered}."
    return f"BigNumber could not be instantiated with: {rendered} | {extract_message(error)}"
