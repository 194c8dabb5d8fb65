from __future__ import annotations

from typing import List, Optional

from clients.elevenlabs_client import (
    elevenlabs_access,
    elevenlabs_get,
    elevenlabs_post,
    elevenlabs_voice_id,
)
from config import ElevenLabsSettings, log
from schemas.elevenlabs import (
    SpeechInput,
    VoiceOut,
    VoicesInput,
    VoicesResponse,
    WireTTSRequest,
    WireVoice,
    WireVoicesList,
)
from utils.debug_events import record_event

PREMADE_CATEGORY = "premade"
MULTILINGUAL_MODEL_ID = "eleven_multilingual_v1"


def prioritize_custom_voices(voices: List[WireVoice]) -> List[WireVoice]:
    """Move 'premade' voices after everything else, keeping input order on both sides."""
    return sorted(voices, key=lambda v: v.get("category") == PREMADE_CATEGORY)


def to_voice_out(voice: WireVoice, is_default: bool) -> VoiceOut:
    return {
        "id": voice.get("voice_id"),
        "name": voice.get("name"),
        "description": voice.get("description"),
        "previewUrl": voice.get("preview_url"),
        "category": voice.get("category"),
        "default": is_default,
    }


def list_voices(
    settings: ElevenLabsSettings,
    data: VoicesInput,
    request_id: Optional[str] = None,
) -> VoicesResponse:
    access = elevenlabs_access(settings, data.elevenKey, "/v1/voices")
    record_event("upstream", "GET /v1/voices", data={"url": access.url}, request_id=request_id)

    response = elevenlabs_get(access, timeout=settings.timeout_secs)
    voices_list: WireVoicesList = response.json()

    ordered = prioritize_custom_voices(voices_list["voices"])
    log.info("[ElevenLabs] voices=%d", len(ordered))
    return {
        "voices": [to_voice_out(voice, idx == 0) for idx, voice in enumerate(ordered)],
    }


def build_speech_body(text: str, non_english: bool) -> WireTTSRequest:
    body: WireTTSRequest = {"text": text}
    if non_english:
        body["model_id"] = MULTILINGUAL_MODEL_ID
    return body


def synthesize_speech(
    settings: ElevenLabsSettings,
    data: SpeechInput,
    request_id: Optional[str] = None,
) -> bytes:
    voice_id = elevenlabs_voice_id(settings, data.voiceId)
    api_path = f"/v1/text-to-speech/{voice_id}"
    access = elevenlabs_access(settings, data.elevenKey, api_path)
    record_event("upstream", f"POST {api_path}", data={"url": access.url}, request_id=request_id)

    response = elevenlabs_post(
        access,
        dict(build_speech_body(data.text, data.nonEnglish)),
        timeout=settings.timeout_secs,
    )
    log.info("[ElevenLabs] speech voice=%s bytes=%d", voice_id, len(response.content))
    return response.content
