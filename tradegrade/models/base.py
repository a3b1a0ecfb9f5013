from decimal import Decimal
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ScoringModel(BaseModel):
    """
    Base Pydantic model for scoring inputs and outputs.

    Instances are immutable. Floats are converted to Decimal through their
    string form so 0.1 becomes Decimal("0.1"), not its binary expansion.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    @field_validator("*", mode="before")
    @classmethod
    def floats_to_decimal(cls, value: Any) -> Any:
        if isinstance(value, float):
            return Decimal(str(value))
        return value
