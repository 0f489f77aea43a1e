from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from bignumber_utils.errors import (
    InvalidBigNumberFormatError,
    InvalidRoundingModeError,
    InvalidTypeError,
    extract_message,
)
from bignumber_utils.models.contracts import DEFAULT_OUTPUT_TYPE, FormatConfig, ProcessingConfig
from bignumber_utils.precision_policy import (
    DEFAULT_DECIMAL_PLACES,
    DEFAULT_ROUNDING_MODE,
    forces_integer_rounding,
)
from bignumber_utils.validations import validate_decimal_places

ProcessingConfigInput = ProcessingConfig | Mapping[str, Any] | None
FormatConfigInput = FormatConfig | Mapping[str, Any] | None


def _partial_fields(config: Any, model: type[BaseModel]) -> dict[str, Any]:
    """Collect the explicitly provided fields of a partial configuration.

    Keys may be field names or their camelCase aliases. ``None`` values count as
    omitted so that the defaults apply to them independently.
    """
    if config is None:
        return {}
    if isinstance(config, model):
        return config.model_dump()
    if not isinstance(config, Mapping):
        raise InvalidTypeError(
            f"The {model.__name__} must be a mapping or a {model.__name__} instance. "
            f"Received: {type(config).__name__}",
        )
    aliases = {field.alias: name for name, field in model.model_fields.items() if field.alias}
    fields: dict[str, Any] = {}
    for key, value in config.items():
        name = aliases.get(key, key)
        if value is not None and name in model.model_fields:
            fields[name] = value
    return fields


def build_config(config: ProcessingConfigInput = None, **overrides: Any) -> ProcessingConfig:
    fields = {
        **_partial_fields(config, ProcessingConfig),
        **_partial_fields(overrides, ProcessingConfig),
    }
    rounding_mode = fields.get("rounding_mode", DEFAULT_ROUNDING_MODE)
    if not isinstance(rounding_mode, str):
        raise InvalidRoundingModeError(f"The rounding mode '{rounding_mode}' is invalid.")
    output_type = fields.get("output_type", DEFAULT_OUTPUT_TYPE)
    if not isinstance(output_type, str):
        raise InvalidTypeError(f"The output type '{output_type}' is invalid.")

    if forces_integer_rounding(rounding_mode):
        decimal_places = 0
    else:
        decimal_places = fields.get("decimal_places", DEFAULT_DECIMAL_PLACES)
    validate_decimal_places(decimal_places)

    return ProcessingConfig(
        decimal_places=int(decimal_places),
        rounding_mode=rounding_mode,
        output_type=output_type,
    )


def build_format_config(config: FormatConfigInput = None) -> FormatConfig:
    fields = _partial_fields(config, FormatConfig)
    try:
        return FormatConfig(**fields)
    except ValidationError as exc:
        raise InvalidBigNumberFormatError(
            f"The format configuration is invalid | {extract_message(exc)}",
            detail={"fields": sorted(str(error["loc"][0]) for error in exc.errors() if error["loc"])},
        ) from exc
