from __future__ import annotations

from automation_readiness.models.factor import Band
from automation_readiness.scoring.profile import DEFAULT_PROFILE, ScoringProfile


def assign_band(score: float, profile: ScoringProfile = DEFAULT_PROFILE) -> Band:
    """
    >= 75 Green
    >= 50 Yellow
    else  Red
    """
    if score >= profile.green_threshold:
        return Band.green
    if score >= profile.yellow_threshold:
        return Band.yellow
    return Band.red


def narrative_for(band: Band, profile: ScoringProfile = DEFAULT_PROFILE) -> str:
    return profile.narratives[band]
