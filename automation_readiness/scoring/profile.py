from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from automation_readiness.models.factor import (
    DEFAULT_FACTOR_WEIGHTS,
    FACTOR_MAX_SUBSCORE,
    Band,
    Factor,
)

if TYPE_CHECKING:
    from automation_readiness.config import Settings


@dataclass(frozen=True)
class BlockerHint:
    reason: str
    hint: str


BLOCKER_HINTS: Mapping[Factor, BlockerHint] = MappingProxyType(
    {
        Factor.stable_process: BlockerHint(
            reason="High Process Variance",
            hint="Standardize steps, document SOPs, and reduce branching or edge cases.",
        ),
        Factor.low_exceptions: BlockerHint(
            reason="High Exception Rate",
            hint="Perform root-cause analysis on exceptions, add decision tables, or redesign inputs.",
        ),
        Factor.data_quality: BlockerHint(
            reason="Low Data Quality",
            hint="Add validation, enrichment layers, define golden records, or implement MDM.",
        ),
        Factor.system_access: BlockerHint(
            reason="Low System Access",
            hint=(
                "Expose APIs, create service accounts, remove MFA for service principals, "
                "or use RPA as a last resort."
            ),
        ),
        Factor.low_compliance_risk: BlockerHint(
            reason="High Compliance Sensitivity",
            hint=(
                "Minimize data usage, pseudonymize PII, add Human-in-the-Loop (HITL) checks, "
                "and enhance audit logging."
            ),
        ),
        Factor.volume_potential: BlockerHint(
            reason="Low Volume / Payoff",
            hint="A pilot is still possible. Consider combining adjacent processes to reach scale.",
        ),
    }
)

BAND_NARRATIVES: Mapping[Band, str] = MappingProxyType(
    {
        Band.green: "This process is a strong candidate for automation. Proceed with detailed analysis.",
        Band.yellow: (
            "This process shows potential but has clear blockers. "
            "Address top issues to improve readiness."
        ),
        Band.red: "This process has significant blockers. Focus on fundamentals before automating.",
    }
)

NO_BLOCKERS_MESSAGE = (
    "No significant blockers found! This process appears to be highly ready for automation."
)


@dataclass(frozen=True)
class ScoringProfile:
    """
    Immutable scoring configuration handed to the evaluator.
    - weights must cover every factor and sum to 1.0
    - bands: score >= green_threshold -> Green, >= yellow_threshold -> Yellow, else Red
    - blockers: gap strictly above gap_threshold, at most max_blockers kept
    """

    weights: Mapping[Factor, float] = field(default_factory=lambda: MappingProxyType(dict(DEFAULT_FACTOR_WEIGHTS)))
    max_subscores: Mapping[Factor, float] = field(default_factory=lambda: MappingProxyType(dict(FACTOR_MAX_SUBSCORE)))
    hints: Mapping[Factor, BlockerHint] = field(default_factory=lambda: BLOCKER_HINTS)
    narratives: Mapping[Band, str] = field(default_factory=lambda: BAND_NARRATIVES)
    green_threshold: int = 75
    yellow_threshold: int = 50
    gap_threshold: float = 15.0
    max_blockers: int = 4

    def __post_init__(self) -> None:
        for name in ("weights", "max_subscores", "hints"):
            missing = [f.value for f in Factor if f not in getattr(self, name)]
            if missing:
                raise ValueError(f"{name} missing factors: {missing}")
        missing_bands = [b.value for b in Band if b not in self.narratives]
        if missing_bands:
            raise ValueError(f"narratives missing bands: {missing_bands}")
        total = math.fsum(self.weights.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"weights must sum to 1.0 (got {total})")
        if self.yellow_threshold > self.green_threshold:
            raise ValueError("yellow_threshold must not exceed green_threshold")
        if self.max_blockers < 0:
            raise ValueError("max_blockers must be >= 0")
        # freeze caller-supplied dicts
        for name in ("weights", "max_subscores", "hints", "narratives"):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))


DEFAULT_PROFILE = ScoringProfile()


def profile_from_settings(s: Settings) -> ScoringProfile:
    return ScoringProfile(
        gap_threshold=float(s.blocker_gap_threshold),
        max_blockers=int(s.max_blockers),
    )
