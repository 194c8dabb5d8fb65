from __future__ import annotations

import time
import uuid
from typing import Optional

from flask import Flask, g, request, got_request_exception
from flask_cors import CORS

from config import ELEVENLABS_SETTINGS, FLASK_SECRET, ElevenLabsSettings, log
from utils.debug_events import debug_enabled, record_event
from utils.error_handlers import register_error_handlers


def create_app(settings: Optional[ElevenLabsSettings] = None) -> Flask:
    app = Flask(__name__)
    app.secret_key = FLASK_SECRET
    app.config["ELEVENLABS_SETTINGS"] = settings or ELEVENLABS_SETTINGS
    CORS(app, supports_credentials=True)

    @app.before_request
    def _debug_request_start():
        rid = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        g.request_id = rid
        g.request_start_ts = time.time()
        if debug_enabled():
            record_event(
                "request",
                f"{request.method} {request.path} start",
                data={"method": request.method, "path": request.path},
                request_id=rid,
            )

    @app.after_request
    def _debug_request_end(response):
        rid = getattr(g, "request_id", None)
        start_ts = getattr(g, "request_start_ts", None)
        duration_ms = int((time.time() - start_ts) * 1000) if start_ts else None
        response.headers["X-Request-Id"] = rid or response.headers.get("X-Request-Id", "")
        if debug_enabled():
            record_event(
                "request",
                f"{request.method} {request.path} end",
                data={"status": response.status_code, "duration_ms": duration_ms},
                request_id=rid,
            )
        return response

    def _log_exception(sender, exception, **extra):
        log.error("Unhandled %s on %s", type(exception).__name__, request.path, exc_info=exception)
        record_event(
            "error",
            f"{type(exception).__name__}",
            data={"error": str(exception), "path": request.path},
            request_id=getattr(g, "request_id", None),
            level="error",
        )

    got_request_exception.connect(_log_exception, app, weak=False)

    # Register blueprints
    from routes.debug import debug_bp
    from routes.elevenlabs import elevenlabs_bp
    from routes.meta import meta_bp

    app.register_blueprint(elevenlabs_bp)
    app.register_blueprint(meta_bp)
    app.register_blueprint(debug_bp)

    register_error_handlers(app)
    return app


app = create_app()
