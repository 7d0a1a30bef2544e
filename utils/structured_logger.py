# utils/structured_logger.py

import json
import shutil
import threading
from datetime import datetime, timezone

from core.config_schema import LoggingConfig

_lock = threading.Lock()


def _utcnow():
    return datetime.now(timezone.utc)


def _rotate_if_needed(settings: LoggingConfig):
    log_file = settings.log_file
    try:
        if log_file.exists() and log_file.stat().st_size >= settings.max_bytes:
            timestamp = _utcnow().strftime("%Y%m%dT%H%M%S%fZ")
            archived = settings.archive_dir / f"{log_file.stem}_{timestamp}{log_file.suffix}"
            shutil.move(str(log_file), str(archived))
    except OSError:
        # rotation must not break logging
        pass


def log_event(settings: LoggingConfig, prompter_id: str, step: str, input_data=None, output_data=None,
              outcome: str = "ok", extra: dict | None = None):
    """
    Appends a structured event as a single line JSON (NDJSON). Thread-safe.
    Does nothing when event logging is disabled.
    """
    if not settings.enabled:
        return

    entry = {
        "prompter_id": prompter_id,
        "step": step,
        "input": input_data,
        "output": output_data,
        "outcome": outcome,
        "extra": extra or {},
        "timestamp": _utcnow().isoformat(),
    }
    line = json.dumps(entry, ensure_ascii=False)
    with _lock:
        settings.ensure_dirs()
        _rotate_if_needed(settings)
        with open(settings.log_file, "a", encoding="utf-8") as f:
            f.write(line + "\n")


def redact_answer(answer: str):
    return f"<redacted:{len(answer)} chars>"


def read_events(settings: LoggingConfig, prompter_id: str = None, limit: int = 100):
    """
    Reads the last `limit` events, optionally filtered by prompter_id.
    """
    if not settings.log_file.exists():
        return []

    results = []
    with open(settings.log_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if prompter_id is None or obj.get("prompter_id") == prompter_id:
                results.append(obj)
    return results[-limit:]
