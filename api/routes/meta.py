from __future__ import annotations

from flask import Blueprint, current_app

from clients.elevenlabs_client import DEFAULT_API_HOST
from config import APP_NAME, APP_VERSION
from utils.json_helpers import jok

meta_bp = Blueprint("meta", __name__)


# =========================
# Meta / Health
# =========================
@meta_bp.get("/health")
def health():
    settings = current_app.config["ELEVENLABS_SETTINGS"]
    return jok(
        {
            "name": APP_NAME,
            "version": APP_VERSION,
            "elevenlabs_key_configured": bool((settings.api_key or "").strip()),
            "elevenlabs_host": settings.api_host or DEFAULT_API_HOST,
        }
    )


@meta_bp.get("/version")
def version():
    return jok({"name": APP_NAME, "version": APP_VERSION})
