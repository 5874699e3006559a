"""
Shared base classes for calculation inputs and outputs.

Records are exchanged with the frontend and stored inside deal records using
camelCase keys, so every schema accepts either spelling and emits camelCase.
"""

import math
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _none_as_zero(value: Any) -> Any:
    """Missing amounts in stored records arrive as null."""
    if value is None:
        return 0.0
    return value


def finite_or_none(value: float) -> Optional[float]:
    """JSON has no infinity; emit null the way JSON.stringify does."""
    if math.isinf(value) or math.isnan(value):
        return None
    return value


def none_as_empty(value: Any) -> Any:
    """Optional nested sections may be stored as null."""
    if value is None:
        return {}
    return value


# Dollar amounts and whole-number percents (8 means 8%).
Amount = Annotated[float, BeforeValidator(_none_as_zero)]
Percent = Annotated[float, BeforeValidator(_none_as_zero)]
# Terms and timelines (years or months, as named).
Count = Annotated[float, BeforeValidator(_none_as_zero)]


class CamelModel(BaseModel):
    """Base schema with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CalculationResult(CamelModel):
    """Immutable output of a calculator."""

    model_config = ConfigDict(frozen=True)
