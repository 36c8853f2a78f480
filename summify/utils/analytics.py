from __future__ import annotations

import json
import logging
import threading
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any


logger = logging.getLogger("summify.analytics")


@dataclass
class RequestLogRecord:
    ts: float
    latency_ms: float
    source: str
    length: str
    input_chars: int
    summary_chars: int
    sentence_count: int
    selected_count: int


class AnalyticsStore:
    """Append-only request log plus a running usage summary."""

    def __init__(self, log_dir: Path, requests_jsonl: str, usage_json: str):
        self.log_dir = log_dir
        self.requests_path = log_dir / requests_jsonl
        self.usage_path = log_dir / usage_json
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def append_request(self, rec: RequestLogRecord) -> None:
        with self._lock:
            with self.requests_path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(asdict(rec), ensure_ascii=False) + "\n")
            self._update_usage(latency_ms=rec.latency_ms, summary_chars=rec.summary_chars)

    def read_usage(self) -> dict[str, Any]:
        base: dict[str, Any] = {
            "updated_at": None,
            "request_count": 0,
            "avg_latency_ms": 0.0,
            "avg_summary_chars": 0.0,
        }
        if not self.usage_path.exists():
            return base
        try:
            loaded = json.loads(self.usage_path.read_text(encoding="utf-8"))
            if not isinstance(loaded, dict):
                raise ValueError(f"expected a JSON object, got {type(loaded).__name__}")
            usage = {
                "updated_at": loaded.get("updated_at"),
                "request_count": int(loaded.get("request_count", 0)),
                "avg_latency_ms": float(loaded.get("avg_latency_ms", 0.0)),
                "avg_summary_chars": float(loaded.get("avg_summary_chars", 0.0)),
            }
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Ignoring unreadable usage file %s: %s", self.usage_path, e)
            return base
        return usage

    def _update_usage(self, latency_ms: float, summary_chars: int) -> None:
        base = self.read_usage()

        n = base["request_count"]
        avg_lat = base["avg_latency_ms"]
        avg_sum = base["avg_summary_chars"]

        n2 = n + 1
        base["request_count"] = n2
        base["avg_latency_ms"] = (avg_lat * n + latency_ms) / n2
        base["avg_summary_chars"] = (avg_sum * n + summary_chars) / n2
        base["updated_at"] = time.time()

        self.usage_path.write_text(json.dumps(base, indent=2), encoding="utf-8")
