from __future__ import annotations

import math
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ReadinessInputs(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "processVolume": 1000,
                    "variance": 20,
                    "exceptionRate": 10,
                    "dataQuality": 70,
                    "systemAccess": 60,
                    "complianceSensitivity": 30,
                }
            ]
        },
    )
    process_volume: int = Field(default=1000, ge=0)
    variance: int = Field(default=20, ge=0, le=100)
    exception_rate: int = Field(default=10, ge=0, le=100)
    data_quality: int = Field(default=70, ge=0, le=100)
    system_access: int = Field(default=60, ge=0, le=100)
    compliance_sensitivity: int = Field(default=30, ge=0, le=100)


INPUT_FIELDS: Tuple[str, ...] = tuple(ReadinessInputs.model_fields.keys())

DEFAULT_INPUTS: Dict[str, int] = ReadinessInputs().model_dump()

# (min, max) per field; volume has no upper bound
INPUT_CONSTRAINTS: Dict[str, Tuple[float, float]] = {
    "process_volume": (0, math.inf),
    "variance": (0, 100),
    "exception_rate": (0, 100),
    "data_quality": (0, 100),
    "system_access": (0, 100),
    "compliance_sensitivity": (0, 100),
}


def field_for_key(key: str) -> str | None:
    """Map a snake_case or camelCase key onto an input field name."""
    if key in ReadinessInputs.model_fields:
        return key
    for name in ReadinessInputs.model_fields:
        if to_camel(name) == key:
            return name
    return None
