from __future__ import annotations

from pathlib import Path

import pytest

from summify.utils.analytics import AnalyticsStore, RequestLogRecord


def _record(latency_ms: float, summary_chars: int) -> RequestLogRecord:
    return RequestLogRecord(
        ts=123.0,
        latency_ms=latency_ms,
        source="text",
        length="medium",
        input_chars=100,
        summary_chars=summary_chars,
        sentence_count=8,
        selected_count=4,
    )


def test_analytics_store_writes_files(tmp_path: Path) -> None:
    store = AnalyticsStore(log_dir=tmp_path, requests_jsonl="requests.jsonl", usage_json="usage.json")
    store.append_request(_record(10.0, 20))
    store.append_request(_record(30.0, 40))

    assert len((tmp_path / "requests.jsonl").read_text(encoding="utf-8").splitlines()) == 2
    usage = store.read_usage()
    assert usage["request_count"] == 2
    assert usage["avg_latency_ms"] == pytest.approx(20.0)
    assert usage["avg_summary_chars"] == pytest.approx(30.0)


def test_corrupt_usage_file_is_reset(tmp_path: Path) -> None:
    (tmp_path / "usage.json").write_text("{not json", encoding="utf-8")
    store = AnalyticsStore(log_dir=tmp_path, requests_jsonl="requests.jsonl", usage_json="usage.json")
    store.append_request(_record(5.0, 10))
    assert store.read_usage()["request_count"] == 1


@pytest.mark.parametrize("content", ["[1]", '"text"', '{"request_count": "many"}', '{"avg_latency_ms": null}'])
def test_malformed_usage_file_is_reset(tmp_path: Path, content: str) -> None:
    (tmp_path / "usage.json").write_text(content, encoding="utf-8")
    store = AnalyticsStore(log_dir=tmp_path, requests_jsonl="requests.jsonl", usage_json="usage.json")
    store.append_request(_record(5.0, 10))
    usage = store.read_usage()
    assert usage["request_count"] == 1
    assert usage["avg_latency_ms"] == pytest.approx(5.0)
