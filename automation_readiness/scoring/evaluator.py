from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from automation_readiness.models.factor import Band, Factor
from automation_readiness.models.inputs import ReadinessInputs
from automation_readiness.scoring.bands import assign_band, narrative_for
from automation_readiness.scoring.blockers import Blocker, rank_blockers
from automation_readiness.scoring.profile import DEFAULT_PROFILE, ScoringProfile
from automation_readiness.scoring.subscores import compute_subscores
from automation_readiness.scoring.utils import round_half_up, weighted_sum


@dataclass(frozen=True)
class ReadinessResult:
    readiness_score: int                  # 0-100
    band: Band
    top_blockers: Tuple[Blocker, ...]     # gap descending, at most max_blockers
    narrative: str
    # explainability; read-only view, left out of the hash
    subscores: Mapping[Factor, float] = field(hash=False)


def compute_weighted_score(
    subscores: Mapping[Factor, float],
    weights: Mapping[Factor, float],
) -> float:
    factors = list(Factor)
    return weighted_sum(
        [subscores[f] for f in factors],
        [weights[f] for f in factors],
    )


class ReadinessEvaluator:
    """
    Pure scoring pipeline: subscores -> weighted score -> band -> blockers.
    Holds only an immutable profile, so one instance can be shared freely.
    """

    def __init__(self, profile: ScoringProfile = DEFAULT_PROFILE) -> None:
        self.profile = profile

    def evaluate(self, inputs: ReadinessInputs) -> ReadinessResult:
        subscores = compute_subscores(inputs)
        score = round_half_up(compute_weighted_score(subscores, self.profile.weights))
        band = assign_band(score, self.profile)
        return ReadinessResult(
            readiness_score=score,
            band=band,
            top_blockers=tuple(rank_blockers(subscores, self.profile)),
            narrative=narrative_for(band, self.profile),
            subscores=MappingProxyType(subscores),
        )


def evaluate(inputs: ReadinessInputs, profile: ScoringProfile = DEFAULT_PROFILE) -> ReadinessResult:
    return ReadinessEvaluator(profile).evaluate(inputs)
