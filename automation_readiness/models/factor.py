from __future__ import annotations
from enum import StrEnum


class Factor(StrEnum):
    stable_process = "stableProcess"
    low_exceptions = "lowExceptions"
    data_quality = "dataQuality"
    system_access = "systemAccess"
    low_compliance_risk = "lowComplianceRisk"
    volume_potential = "volumePotential"


class Band(StrEnum):
    red = "Red"
    yellow = "Yellow"
    green = "Green"


DEFAULT_FACTOR_WEIGHTS: dict[Factor, float] = {
    Factor.stable_process: 0.20,
    Factor.low_exceptions: 0.20,
    Factor.data_quality: 0.20,
    Factor.system_access: 0.15,
    Factor.low_compliance_risk: 0.15,
    Factor.volume_potential: 0.10,
}

# volume alone never saturates a factor
FACTOR_MAX_SUBSCORE: dict[Factor, float] = {
    Factor.stable_process: 100.0,
    Factor.low_exceptions: 100.0,
    Factor.data_quality: 100.0,
    Factor.system_access: 100.0,
    Factor.low_compliance_risk: 100.0,
    Factor.volume_potential: 95.0,
}
