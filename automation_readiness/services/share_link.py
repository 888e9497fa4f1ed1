from __future__ import annotations

from typing import Dict
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from automation_readiness.models.inputs import ReadinessInputs
from automation_readiness.services.validation import parse_int

# short query codes -> input field, in encoding order
PARAM_CODES: Dict[str, str] = {
    "pv": "process_volume",
    "v": "variance",
    "e": "exception_rate",
    "dq": "data_quality",
    "sa": "system_access",
    "c": "compliance_sensitivity",
}


def encode_query(inputs: ReadinessInputs) -> str:
    return urlencode([(code, getattr(inputs, field)) for code, field in PARAM_CODES.items()])


def decode_query(query: str) -> Dict[str, int]:
    """
    Partial decode: only codes present with a parseable value are returned.
    Accepts a bare query string, one with a leading '?', or a full URL.
    """
    q = (query or "").strip()
    if "://" in q:
        q = urlsplit(q).query
    q = q.lstrip("?")

    params = parse_qs(q, keep_blank_values=True)
    out: Dict[str, int] = {}
    for code, field in PARAM_CODES.items():
        values = params.get(code)
        if not values:
            continue
        parsed = parse_int(values[0])
        if parsed is not None:
            out[field] = parsed
    return out


def build_share_url(base_url: str, inputs: ReadinessInputs) -> str:
    parts = urlsplit(base_url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path or "/", encode_query(inputs), ""))
