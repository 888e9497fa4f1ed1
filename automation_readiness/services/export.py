from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any, Dict, List

from automation_readiness.models.inputs import ReadinessInputs
from automation_readiness.models.snapshot import BlockerSnapshot, OutputSnapshot, ReadinessSnapshot
from automation_readiness.scoring.evaluator import ReadinessResult

CSV_HEADERS: List[str] = [
    "processVolume",
    "variance",
    "exceptionRate",
    "dataQuality",
    "systemAccess",
    "complianceSensitivity",
    "readinessScore",
    "band",
    "topBlockers",
]


def build_snapshot(inputs: ReadinessInputs, result: ReadinessResult) -> ReadinessSnapshot:
    return ReadinessSnapshot(
        inputs=inputs,
        output=OutputSnapshot(
            readiness_score=result.readiness_score,
            band=result.band,
            narrative=result.narrative,
            top_blockers=[
                BlockerSnapshot(reason=b.reason, hint=b.hint, gap=b.gap)
                for b in result.top_blockers
            ],
        ),
    )


def to_json_snapshot(inputs: ReadinessInputs, result: ReadinessResult) -> Dict[str, Any]:
    return build_snapshot(inputs, result).model_dump(mode="json", by_alias=True)


def to_json(inputs: ReadinessInputs, result: ReadinessResult) -> str:
    return json.dumps(to_json_snapshot(inputs, result), indent=2)


def blockers_text(result: ReadinessResult) -> str:
    return "; ".join(f"{b.reason}: {b.hint}" for b in result.top_blockers)


def to_csv(inputs: ReadinessInputs, result: ReadinessResult) -> str:
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(CSV_HEADERS)
    # text cells always quoted, so the blockers cell is quoted even when empty
    writer = csv.writer(buf, lineterminator="\n", quoting=csv.QUOTE_NONNUMERIC)
    writer.writerow(
        [
            inputs.process_volume,
            inputs.variance,
            inputs.exception_rate,
            inputs.data_quality,
            inputs.system_access,
            inputs.compliance_sensitivity,
            result.readiness_score,
            result.band.value,
            blockers_text(result),
        ]
    )
    return buf.getvalue()


def write_csv(path: Path, inputs: ReadinessInputs, result: ReadinessResult) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_csv(inputs, result), encoding="utf-8")
    return path
