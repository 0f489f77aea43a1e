from decimal import Decimal
from typing import Any

from bignumber_utils.engine import get_canonical, to_number, to_plain_string
from bignumber_utils.errors import InvalidTypeError
from bignumber_utils.models.contracts import OUTPUT_TYPES
from bignumber_utils.precision_policy import round_big_number
from bignumber_utils.services.config_builder import ProcessingConfigInput, build_config

ProcessedValue = str | float | Decimal


def convert_to_type(value: Decimal, output_type: str) -> ProcessedValue:
    if output_type == "string":
        return to_plain_string(value)
    if output_type == "number":
        return to_number(value)
    if output_type == "bignumber":
        return value
    raise InvalidTypeError(
        f"The output type '{output_type}' is invalid for '{to_plain_string(value)}'.",
        detail={"supported": list(OUTPUT_TYPES)},
    )


def process_value(value: Any, config: ProcessingConfigInput = None, **overrides: Any) -> ProcessedValue:
    resolved = build_config(config, **overrides)
    canonical = get_canonical(value)
    rounded = round_big_number(canonical, resolved.decimal_places, resolved.rounding_mode)
    return convert_to_type(rounded, resolved.output_type)
