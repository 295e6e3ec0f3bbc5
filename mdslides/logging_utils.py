"""Structured JSONL run logs."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

RUN_LOG_NAME = "run_log.jsonl"


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def log_event(
    log_path: Path,
    event_type: str,
    payload: Dict[str, Any],
    run_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Append one event record to a JSONL log and return it."""
    record: Dict[str, Any] = {
        "timestamp": _utc_timestamp(),
        "event_type": event_type,
        "payload": payload,
    }
    if run_id is not None:
        record["run_id"] = run_id
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(record, sort_keys=True, ensure_ascii=True) + "\n")
    return record


class RunLog:
    """A run directory's event log, stamping every record with the run id."""

    def __init__(self, run_dir: Path, run_id: str) -> None:
        self.path = run_dir / RUN_LOG_NAME
        self.run_id = run_id

    def event(self, event_type: str, **payload: Any) -> Dict[str, Any]:
        return log_event(self.path, event_type, payload, run_id=self.run_id)

    def read(self) -> list:
        if not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as handle:
            return [json.loads(line) for line in handle if line.strip()]
