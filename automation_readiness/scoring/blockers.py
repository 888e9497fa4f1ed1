from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping

from automation_readiness.models.factor import Factor
from automation_readiness.scoring.profile import DEFAULT_PROFILE, ScoringProfile


@dataclass(frozen=True)
class Blocker:
    factor: Factor
    reason: str
    hint: str
    gap: float         # max attainable subscore - actual
    subscore: float


def rank_blockers(
    subscores: Mapping[Factor, float],
    profile: ScoringProfile = DEFAULT_PROFILE,
) -> List[Blocker]:
    """
    Keep factors whose gap is strictly above the threshold, largest gap first.
    Equal gaps stay in Factor declaration order (sorted() is stable).
    """
    candidates: List[Blocker] = []
    for factor in Factor:
        subscore = float(subscores[factor])
        gap = float(profile.max_subscores[factor]) - subscore
        if gap <= profile.gap_threshold:
            continue
        hint = profile.hints[factor]
        candidates.append(
            Blocker(
                factor=factor,
                reason=hint.reason,
                hint=hint.hint,
                gap=gap,
                subscore=subscore,
            )
        )

    ranked = sorted(candidates, key=lambda b: b.gap, reverse=True)
    return ranked[: profile.max_blockers]
