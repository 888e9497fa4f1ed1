import pytest

from automation_readiness.models.factor import Factor
from automation_readiness.models.inputs import ReadinessInputs
from automation_readiness.scoring.subscores import compute_subscores, compute_volume_subscore


def test_volume_zero_is_zero():
    assert compute_volume_subscore(0) == 0.0


def test_volume_negative_is_zero():
    assert compute_volume_subscore(-50) == 0.0


def test_volume_log_scale_known_points():
    assert compute_volume_subscore(100) == pytest.approx(63, abs=1)
    assert compute_volume_subscore(1000) == pytest.approx(94.5, abs=1)


@pytest.mark.parametrize("volume", [10_000, 100_000, 1_000_000, 10**9])
def test_volume_caps_at_95(volume):
    assert compute_volume_subscore(volume) == 95.0


def test_subscores_invert_where_lower_is_better(high_variance_inputs):
    subs = compute_subscores(high_variance_inputs)
    assert subs[Factor.stable_process] == 10.0
    assert subs[Factor.low_exceptions] == 90.0
    assert subs[Factor.data_quality] == 70.0
    assert subs[Factor.system_access] == 60.0
    assert subs[Factor.low_compliance_risk] == 70.0
    assert subs[Factor.volume_potential] == pytest.approx(94.5, abs=0.1)


def test_subscores_cover_every_factor():
    subs = compute_subscores(ReadinessInputs())
    assert list(subs.keys()) == list(Factor)


def test_volume_beyond_float_range_caps_at_95():
    assert compute_volume_subscore(10**400) == 95.0
    subs = compute_subscores(ReadinessInputs(process_volume=10**400))
    assert subs[Factor.volume_potential] == 95.0
