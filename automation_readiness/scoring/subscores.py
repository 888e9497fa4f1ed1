from __future__ import annotations

import math
from typing import Dict

from automation_readiness.models.factor import FACTOR_MAX_SUBSCORE, Factor
from automation_readiness.models.inputs import ReadinessInputs
from automation_readiness.scoring.utils import clamp

VOLUME_LOG_SCALE = 31.5


def compute_volume_subscore(process_volume: float) -> float:
    """
    Log-scaled volume: each order of magnitude adds ~31.5 points, capped at 95.
    """
    if process_volume <= 0:
        return 0.0
    # log10 takes ints of any size; float(volume) would overflow past ~1.8e308
    scaled = math.log10(process_volume + 1) * VOLUME_LOG_SCALE
    return clamp(scaled, 0.0, FACTOR_MAX_SUBSCORE[Factor.volume_potential])


def compute_subscores(inputs: ReadinessInputs) -> Dict[Factor, float]:
    # higher is always more automation-friendly
    return {
        Factor.stable_process: 100.0 - inputs.variance,
        Factor.low_exceptions: 100.0 - inputs.exception_rate,
        Factor.data_quality: float(inputs.data_quality),
        Factor.system_access: float(inputs.system_access),
        Factor.low_compliance_risk: 100.0 - inputs.compliance_sensitivity,
        Factor.volume_potential: compute_volume_subscore(inputs.process_volume),
    }
