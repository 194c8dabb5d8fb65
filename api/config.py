from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.abspath(__file__))     # api/
ROOT_DIR = os.path.dirname(BASE_DIR)                      # project root

# =========================
# Config & Initialization
# =========================
# Load root .env first, then any CWD .env.
load_dotenv(os.path.join(ROOT_DIR, ".env"))
load_dotenv()

APP_NAME = os.getenv("APP_NAME", "Eleven Voices API")
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
PORT = int(os.getenv("PORT", "5050"))
DEBUG = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
FLASK_SECRET = os.getenv("FLASK_SECRET", "eleven_voices_secret")

DEBUG_CONSOLE_ENABLED = os.getenv("DEBUG_CONSOLE_ENABLED", "false").lower() in ("1", "true", "yes")
DEBUG_EVENTS_MAX = int(os.getenv("DEBUG_EVENTS_MAX", "500"))

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
log = logging.getLogger("elevenvoices")


# =========================
# ElevenLabs settings
# =========================
@dataclass(frozen=True)
class ElevenLabsSettings:
    """Process-wide ElevenLabs defaults, read once at start-up and passed down explicitly."""

    api_key: Optional[str] = None
    api_host: Optional[str] = None
    voice_id: Optional[str] = None
    timeout_secs: Optional[float] = None

    @classmethod
    def from_env(cls) -> "ElevenLabsSettings":
        timeout = (os.getenv("ELEVENLABS_TIMEOUT_SECS") or "").strip()
        return cls(
            api_key=os.getenv("ELEVENLABS_API_KEY") or None,
            api_host=os.getenv("ELEVENLABS_API_HOST") or None,
            voice_id=os.getenv("ELEVENLABS_VOICE_ID") or None,
            timeout_secs=float(timeout) if timeout else None,
        )


ELEVENLABS_SETTINGS = ElevenLabsSettings.from_env()
