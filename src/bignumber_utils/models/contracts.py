from typing import Literal, TypeAlias

from pydantic import BaseModel, Field

OutputType: TypeAlias = Literal["string", "number", "bignumber"]

OUTPUT_TYPES: tuple[str, ...] = ("string", "number", "bignumber")
DEFAULT_OUTPUT_TYPE = "number"


class ProcessingConfig(BaseModel):
    decimal_places: int = Field(2, alias="decimalPlaces")
    rounding_mode: str = Field("ROUND_HALF_UP", alias="roundingMode")
    output_type: str = Field(DEFAULT_OUTPUT_TYPE, alias="outputType")

    model_config = {"populate_by_name": True, "frozen": True}


class FormatConfig(BaseModel):
    prefix: str = ""
    decimal_separator: str = Field(".", alias="decimalSeparator")
    group_separator: str = Field(",", alias="groupSeparator")
    group_size: int = Field(3, alias="groupSize")
    secondary_group_size: int = Field(0, alias="secondaryGroupSize")
    fraction_group_separator: str = Field(" ", alias="fractionGroupSeparator")
    fraction_group_size: int = Field(0, alias="fractionGroupSize")
    suffix: str = ""

    model_config = {"populate_by_name": True, "frozen": True}
