from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from automation_readiness.models.factor import Band
from automation_readiness.models.inputs import ReadinessInputs


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BlockerSnapshot(_CamelModel):
    reason: str
    hint: str
    gap: float


class OutputSnapshot(_CamelModel):
    readiness_score: int = Field(ge=0, le=100)
    band: Band
    narrative: str
    top_blockers: List[BlockerSnapshot] = Field(default_factory=list)


class ReadinessSnapshot(_CamelModel):
    inputs: ReadinessInputs
    output: OutputSnapshot
