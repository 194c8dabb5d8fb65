from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, current_app, g, request
from flask_cors import cross_origin

from config import ElevenLabsSettings
from schemas.elevenlabs import SpeechInput, VoicesInput, parse_input
from services.elevenlabs_service import list_voices, synthesize_speech
from utils.errors import ServiceError
from utils.json_helpers import jerror, jok

elevenlabs_bp = Blueprint("elevenlabs", __name__)


def _settings() -> ElevenLabsSettings:
    return current_app.config["ELEVENLABS_SETTINGS"]


def _json_body() -> Any:
    """
    Parsed JSON body, or {} when the request has no body at all.
    A body that fails to parse is handed back as raw text so validation rejects it.
    """
    raw = request.get_data(cache=True, as_text=True)
    if not raw.strip():
        return {}
    data = request.get_json(force=True, silent=True)
    if data is None:
        return raw
    return data


# =========================
# Voices: list voices available to this api key
# =========================
@elevenlabs_bp.route("/elevenlabs/voices", methods=["GET", "POST"])
def voices():
    """
    GET  /elevenlabs/voices?elevenKey=...
    POST /elevenlabs/voices  { elevenKey?: str }

    Custom voices come first, 'premade' ones last; the first voice is flagged default.
    """
    if request.method == "GET":
        data = request.args.to_dict()
    else:
        data = _json_body()

    try:
        voices_input = parse_input(VoicesInput, data)
        out = list_voices(_settings(), voices_input, request_id=getattr(g, "request_id", None))
        return jok(out)
    except ServiceError as e:
        return jerror(e.message, e.status, e.code)


# =========================
# Text-to-Speech (binary body, outside the JSON envelope)
# =========================
@elevenlabs_bp.post("/elevenlabs/speech")
@cross_origin()
def speech():
    data = _json_body()
    try:
        speech_input = parse_input(SpeechInput, data)
        audio_bytes = synthesize_speech(_settings(), speech_input, request_id=getattr(g, "request_id", None))
        return Response(audio_bytes, mimetype="audio/mpeg")
    except ServiceError as e:
        return jerror(e.message, e.status, e.code)
