"""Pydantic schemas for conversion requests and results."""

from pydantic import BaseModel, Field, model_validator

from conversion.config import TimeTableMode
from conversion.selection import parse_unit
from conversion.units import UnitCategory


class ConversionRequest(BaseModel):
    """A value to convert between two units of the same category."""

    category: UnitCategory
    value: float = Field(allow_inf_nan=False)
    from_unit: str
    to_unit: str

    @model_validator(mode="after")
    def units_belong_to_category(self) -> "ConversionRequest":
        # parse_unit raises a ValueError subclass, which pydantic reports as a validation error.
        self.from_unit = parse_unit(self.category, self.from_unit).value
        self.to_unit = parse_unit(self.category, self.to_unit).value
        return self


class ConversionResult(BaseModel):
    category: UnitCategory
    value: float
    from_unit: str
    to_unit: str
    result: float
    display: str
    time_table: TimeTableMode | None = None


class CategorySummary(BaseModel):
    """Units available in a category and the pair the form starts with."""

    category: UnitCategory
    units: list[str]
    default_from: str
    default_to: str
