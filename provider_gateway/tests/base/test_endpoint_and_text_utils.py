from __future__ import annotations

from datetime import datetime, timezone

from provider_gateway.base.utils.endpoints import redact_endpoint, resolve_endpoint
from provider_gateway.base.utils.json_text import clean_json_markers
from provider_gateway.base.utils.timestamps import from_unix_seconds, isoformat_utc


def test_resolve_endpoint_prefers_custom_url(request_factory):
    assert resolve_endpoint(request_factory(), "https://d.test") == "https://d.test"  # nosec B101
    custom = request_factory(custom_url="https://c.test/x?y=1")
    assert resolve_endpoint(custom, "https://d.test") == "https://c.test/x?y=1"  # nosec B101


def test_redact_endpoint_masks_key_param():
    url = "https://generativelanguage.googleapis.com/v1beta/models/g:generateContent?key=SECRET"
    out = redact_endpoint(url)
    assert "SECRET" not in out  # nosec B101
    assert out.endswith("?key=REDACTED")  # nosec B101
    assert redact_endpoint("https://api.openai.com/v1/chat/completions") == (  # nosec B101
        "https://api.openai.com/v1/chat/completions"
    )


def test_clean_json_markers():
    assert clean_json_markers('```json\n{"a": 1}\n```') == '{"a": 1}'  # nosec B101
    assert clean_json_markers("```\n[1]\n```") == "[1]"  # nosec B101
    assert clean_json_markers('  {"a": 1} ') == '{"a": 1}'  # nosec B101


def test_timestamps():
    moment = datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)
    assert isoformat_utc(moment) == "2024-01-02T03:04:05.678Z"  # nosec B101
    assert isoformat_utc(datetime(2024, 1, 2)) == "2024-01-02T00:00:00.000Z"  # nosec B101
    assert from_unix_seconds(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)  # nosec B101
    assert from_unix_seconds("1700000000") is None  # nosec B101
    assert from_unix_seconds(True) is None  # nosec B101


def test_out_of_range_epoch_gives_none():
    assert from_unix_seconds(1e20) is None  # nosec B101
    assert from_unix_seconds(-1e20) is None  # nosec B101
    assert from_unix_seconds(float("nan")) is None  # nosec B101
