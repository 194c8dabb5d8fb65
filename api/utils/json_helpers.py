from __future__ import annotations

import uuid
from typing import Any, Tuple

from flask import Response, jsonify, request


def _request_id() -> str:
    return request.headers.get("X-Request-Id") or str(uuid.uuid4())


def jerror(message: str, status: int = 400, code: str = "bad_request") -> Tuple[Response, int]:
    rid = _request_id()
    return jsonify({"ok": False, "error": {"code": code, "message": message}, "request_id": rid}), status


def jok(data: Any, status: int = 200) -> Tuple[Response, int]:
    rid = _request_id()
    return jsonify({"ok": True, "data": data, "request_id": rid}), status
