from .utils import clamp, clamp_int, round_half_up, weighted_sum
from .profile import (
    BAND_NARRATIVES,
    BLOCKER_HINTS,
    DEFAULT_PROFILE,
    NO_BLOCKERS_MESSAGE,
    BlockerHint,
    ScoringProfile,
    profile_from_settings,
)
from .subscores import compute_subscores, compute_volume_subscore
from .bands import assign_band, narrative_for
from .blockers import Blocker, rank_blockers
from .evaluator import ReadinessEvaluator, ReadinessResult, compute_weighted_score, evaluate

__all__ = [
    "clamp",
    "clamp_int",
    "round_half_up",
    "weighted_sum",
    "BAND_NARRATIVES",
    "BLOCKER_HINTS",
    "DEFAULT_PROFILE",
    "NO_BLOCKERS_MESSAGE",
    "BlockerHint",
    "ScoringProfile",
    "profile_from_settings",
    "compute_subscores",
    "compute_volume_subscore",
    "assign_band",
    "narrative_for",
    "Blocker",
    "rank_blockers",
    "ReadinessEvaluator",
    "ReadinessResult",
    "compute_weighted_score",
    "evaluate",
]
