from automation_readiness.models.inputs import ReadinessInputs
from automation_readiness.services.input_store import resolve_inputs
from automation_readiness.services.share_link import build_share_url, decode_query, encode_query


def test_encode_uses_short_codes_in_fixed_order(default_inputs):
    assert encode_query(default_inputs) == "pv=1000&v=20&e=10&dq=70&sa=60&c=30"


def test_decode_is_partial_and_skips_garbage():
    assert decode_query("?pv=500&v=abc&dq=80") == {"process_volume": 500, "data_quality": 80}


def test_decode_accepts_full_url():
    out = decode_query("https://example.com/calc?sa=12&c=99&other=1")
    assert out == {"system_access": 12, "compliance_sensitivity": 99}


def test_decode_empty():
    assert decode_query("") == {}


def test_share_url_replaces_existing_query(high_variance_inputs):
    url = build_share_url("https://example.com/calc?old=1#frag", high_variance_inputs)
    assert url == "https://example.com/calc?pv=1000&v=90&e=10&dq=70&sa=60&c=30"


def test_share_link_restores_the_same_inputs(high_variance_inputs):
    url = build_share_url("https://example.com/", high_variance_inputs)
    assert resolve_inputs(query=decode_query(url)) == high_variance_inputs


def test_out_of_range_query_values_are_clamped_on_restore():
    restored = resolve_inputs(query=decode_query("v=500&pv=-3"))
    assert restored == ReadinessInputs(variance=100, process_volume=0)


def test_restore_huge_volume_from_query():
    restored = resolve_inputs(query=decode_query("pv=1" + "0" * 400))
    assert restored.process_volume == 10**400
    assert resolve_inputs(query={"process_volume": 2**53 + 1}).process_volume == 2**53 + 1
