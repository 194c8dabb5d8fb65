from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from config import ElevenLabsSettings, log
from utils.errors import MissingCredentialError, UpstreamError

DEFAULT_API_HOST = "api.elevenlabs.io"
DEFAULT_VOICE_ID = "21m00Tcm4TlvDq8ikWAM"


@dataclass(frozen=True)
class ElevenLabsAccess:
    headers: Dict[str, str]
    url: str


# =========================
# Access builder
# =========================
def elevenlabs_access(
    settings: ElevenLabsSettings,
    eleven_key: Optional[str],
    api_path: str,
) -> ElevenLabsAccess:
    """
    Resolve the API key and host for one upstream call.
    The caller's key wins when it is non-blank; otherwise settings.api_key is used.
    """
    key = (eleven_key or "").strip() or (settings.api_key or "").strip()
    if not key:
        raise MissingCredentialError()

    host = (settings.api_host or DEFAULT_API_HOST).strip()
    if not host.startswith("http"):
        host = f"https://{host}"
    if host.endswith("/") and api_path.startswith("/"):
        host = host[:-1]

    return ElevenLabsAccess(
        headers={
            "Content-Type": "application/json",
            "xi-api-key": key,
        },
        url=host + api_path,
    )


def elevenlabs_voice_id(settings: ElevenLabsSettings, voice_id: Optional[str] = None) -> str:
    return (voice_id or "").strip() or settings.voice_id or DEFAULT_VOICE_ID


# =========================
# Upstream error propagation
# =========================
def rethrow_elevenlabs_error(response: requests.Response) -> None:
    if response.ok:
        return

    error_payload: Any = None
    try:
        error_payload = response.json()
    except ValueError:
        pass

    log.warning("ElevenLabs %s -> %s", response.url, response.status_code)
    raise UpstreamError(
        "ElevenLabs error: " + json.dumps(error_payload, separators=(",", ":"), ensure_ascii=False),
        upstream_status=response.status_code,
    )


# =========================
# HTTP calls
# =========================
def elevenlabs_get(access: ElevenLabsAccess, timeout: Optional[float] = None) -> requests.Response:
    response = requests.get(access.url, headers=access.headers, timeout=timeout)
    rethrow_elevenlabs_error(response)
    return response


def elevenlabs_post(
    access: ElevenLabsAccess,
    body: Dict[str, Any],
    timeout: Optional[float] = None,
) -> requests.Response:
    response = requests.post(access.url, headers=access.headers, json=body, timeout=timeout)
    rethrow_elevenlabs_error(response)
    return response
