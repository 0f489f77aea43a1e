import re
from decimal import Decimal
from typing import Any

from bignumber_utils.engine import is_finite, to_fixed_string
from bignumber_utils.errors import BigNumberUtilsError, InvalidBigNumberFormatError, extract_message
from bignumber_utils.models.contracts import FormatConfig
from bignumber_utils.services.config_builder import (
    FormatConfigInput,
    ProcessingConfigInput,
    build_format_config,
)
from bignumber_utils.services.processing import process_value


def _group_integer(digits: str, format_config: FormatConfig) -> str:
    """Split the integer digits into groups.

    With a secondary group size the rightmost group keeps the primary size and
    every group to its left uses the secondary size (``1,23,45,678``).
    """
    size = format_config.group_size
    last_size = format_config.secondary_group_size
    length = len(digits)
    if last_size:
        size, last_size = last_size, size
        length -= last_size
    if size <= 0 or length <= 0:
        return digits

    index = length % size or size
    groups = [digits[:index]]
    while index < length:
        groups.append(digits[index : index + size])
        index += size
    if last_size > 0:
        groups.append(digits[index:])
    return format_config.group_separator.join(groups)


def _group_fraction(digits: str, format_config: FormatConfig) -> str:
    size = format_config.fraction_group_size
    if size <= 0:
        return digits
    separator = format_config.fraction_group_separator
    return re.sub(rf"\d{{{size}}}\B", lambda match: match.group(0) + separator, digits)


def format_big_number(value: Decimal, format_config: FormatConfig) -> str:
    plain = to_fixed_string(value)
    if not is_finite(value):
        return f"{format_config.prefix}{plain}{format_config.suffix}"

    negative = plain.startswith("-")
    integer_part, _, fraction_part = plain.lstrip("-").partition(".")
    body = _group_integer(integer_part, format_config)
    if negative:
        body = f"-{body}"
    if fraction_part:
        body += format_config.decimal_separator + _group_fraction(fraction_part, format_config)
    return f"{format_config.prefix}{body}{format_config.suffix}"


def prettify_value(
    value: Any,
    processing: ProcessingConfigInput = None,
    format_config: FormatConfigInput = None,
) -> str:
    try:
        canonical = process_value(value, processing, output_type="bignumber")
        return format_big_number(canonical, build_format_config(format_config))
    except BigNumberUtilsError:
        raise
    except Exception as exc:
        raise InvalidBigNumberFormatError(
            f"The value could not be prettified | {extract_message(exc)}",
        ) from exc
