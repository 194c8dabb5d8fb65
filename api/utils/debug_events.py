from __future__ import annotations

import itertools
import time
from collections import deque
from threading import Lock
from typing import Any, Deque, Dict, List, Optional

from config import DEBUG_CONSOLE_ENABLED, DEBUG_EVENTS_MAX

_LOCK = Lock()
_EVENTS: Deque[Dict[str, Any]] = deque(maxlen=DEBUG_EVENTS_MAX)
_IDS = itertools.count(1)


def debug_enabled() -> bool:
    return bool(DEBUG_CONSOLE_ENABLED)


def record_event(
    category: str,
    message: str,
    *,
    data: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
    level: str = "info",
) -> Dict[str, Any]:
    """Append one event to the in-memory console buffer; no-op when the console is off."""
    if not debug_enabled():
        return {}
    with _LOCK:
        event = {
            "id": next(_IDS),
            "ts": time.time(),
            "level": level,
            "category": category,
            "message": message,
            "request_id": request_id or "",
            "data": data or {},
        }
        _EVENTS.append(event)
    return event


def list_events(since_id: int = 0) -> List[Dict[str, Any]]:
    with _LOCK:
        if since_id <= 0:
            return list(_EVENTS)
        return [e for e in _EVENTS if e["id"] > since_id]


def clear_events() -> None:
    with _LOCK:
        _EVENTS.clear()
