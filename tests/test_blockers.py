from automation_readiness.models.factor import Factor
from automation_readiness.scoring.blockers import rank_blockers
from automation_readiness.scoring.profile import BLOCKER_HINTS, ScoringProfile


def _subscores(**overrides):
    base = {
        Factor.stable_process: 100.0,
        Factor.low_exceptions: 100.0,
        Factor.data_quality: 100.0,
        Factor.system_access: 100.0,
        Factor.low_compliance_risk: 100.0,
        Factor.volume_potential: 95.0,
    }
    base.update({Factor(k): v for k, v in overrides.items()})
    return base


def test_gap_of_exactly_15_is_excluded():
    assert rank_blockers(_subscores(dataQuality=85.0)) == []


def test_gap_just_over_15_is_included():
    out = rank_blockers(_subscores(dataQuality=84.9999))
    assert [b.factor for b in out] == [Factor.data_quality]
    assert out[0].gap > 15


def test_volume_gap_uses_95_ceiling():
    assert rank_blockers(_subscores(volumePotential=80.0)) == []
    out = rank_blockers(_subscores(volumePotential=79.0))
    assert out[0].factor == Factor.volume_potential
    assert out[0].gap == 16.0


def test_sorted_by_gap_and_truncated_to_four():
    out = rank_blockers(
        _subscores(
            stableProcess=50.0,
            lowExceptions=10.0,
            dataQuality=30.0,
            systemAccess=70.0,
            lowComplianceRisk=20.0,
            volumePotential=0.0,
        )
    )
    assert [b.factor for b in out] == [
        Factor.volume_potential,
        Factor.low_exceptions,
        Factor.low_compliance_risk,
        Factor.data_quality,
    ]


def test_equal_gaps_keep_declaration_order():
    # dataQuality and lowComplianceRisk both sit at 70
    out = rank_blockers(_subscores(stableProcess=10.0, dataQuality=70.0, systemAccess=60.0, lowComplianceRisk=70.0))
    assert [b.factor for b in out] == [
        Factor.stable_process,
        Factor.system_access,
        Factor.data_quality,
        Factor.low_compliance_risk,
    ]


def test_blocker_carries_static_reason_and_hint():
    out = rank_blockers(_subscores(systemAccess=10.0))
    b = out[0]
    assert b.reason == BLOCKER_HINTS[Factor.system_access].reason == "Low System Access"
    assert b.hint == BLOCKER_HINTS[Factor.system_access].hint
    assert b.subscore == 10.0
    assert b.gap == 90.0


def test_profile_threshold_and_limit_are_respected():
    profile = ScoringProfile(gap_threshold=50.0, max_blockers=1)
    out = rank_blockers(_subscores(stableProcess=10.0, lowExceptions=20.0, dataQuality=60.0), profile)
    assert [b.factor for b in out] == [Factor.stable_process]
