from bignumber_utils.engine import BigNumberValue, get_canonical
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
)
from bignumber_utils.models.contracts import FormatConfig, OutputType, ProcessingConfig
from bignumber_utils.observability import setup_logging
from bignumber_utils.precision_policy import RoundingMode, RoundingModeName, round_big_number
from bignumber_utils.services.config_builder import build_config, build_format_config
from bignumber_utils.services.essential_calculations import (
    calculate_max,
    calculate_mean,
    calculate_median,
    calculate_min,
    calculate_sum,
    sort_big_numbers,
)
from bignumber_utils.services.financial_calculations import (
    calculate_exchange,
    calculate_exchange_fee,
    calculate_weighted_entry,
)
from bignumber_utils.services.formatting import prettify_value
from bignumber_utils.services.percentage_calculations import (
    adjust_by_percentage,
    calculate_percentage_change,
    calculate_percentage_representation,
)
from bignumber_utils.services.predicates import is_big_number, is_float, is_integer, is_number
from bignumber_utils.services.processing import process_value

__version__ = "1.0.0"

__all__ = [
    "BigNumberUtilsError",
    "BigNumberValue",
    "ErrorCode",
    "FormatConfig",
    "InvalidBigNumberFormatError",
    "InvalidDecimalPlacesError",
    "InvalidRoundingModeError",
    "InvalidTypeError",
    "InvalidValueError",
    "InvalidValuesArrayError",
    "NegativeValueNotAllowedError",
    "OutputType",
    "ProcessingConfig",
    "RoundingMode",
    "RoundingModeName",
    "adjust_by_percentage",
    "build_config",
    "build_format_config",
    "calculate_exchange",
    "calculate_exchange_fee",
    "calculate_max",
    "calculate_mean",
    "calculate_median",
    "calculate_min",
    "calculate_percentage_change",
    "calculate_percentage_representation",
    "calculate_sum",
    "calculate_weighted_entry",
    "get_canonical",
    "is_big_number",
    "is_float",
    "is_integer",
    "is_number",
    "prettify_value",
    "process_value",
    "round_big_number",
    "setup_logging",
    "sort_big_numbers",
]
