from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, TypedDict, TypeVar

from pydantic import BaseModel, StrictBool, StrictStr, ValidationError

from utils.errors import ServiceError

# =========================
# Inbound (validated at the route boundary)
# =========================


class VoicesInput(BaseModel):
    elevenKey: Optional[StrictStr] = None


class SpeechInput(BaseModel):
    elevenKey: Optional[StrictStr] = None
    text: StrictStr
    voiceId: Optional[StrictStr] = None
    nonEnglish: StrictBool


ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_input(model: Type[ModelT], data: Any) -> ModelT:
    """Validate a request payload, turning pydantic errors into a 400 ServiceError."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
            for err in e.errors()
        )
        raise ServiceError(f"Invalid input: {problems}", 400, "invalid_input") from e


# =========================
# Upstream wire shapes (ElevenLabs /v1)
# =========================


class VoiceSettings(TypedDict):
    stability: float
    similarity_boost: float


class WireVoice(TypedDict, total=False):
    voice_id: str
    name: str
    category: str
    labels: Dict[str, str]
    description: str
    preview_url: str
    settings: VoiceSettings


class WireVoicesList(TypedDict):
    voices: List[WireVoice]


class WireTTSRequest(TypedDict, total=False):
    text: str
    model_id: str
    voice_settings: VoiceSettings


# =========================
# Outbound (what the frontend receives)
# =========================


class VoiceOut(TypedDict):
    id: str
    name: str
    description: str
    previewUrl: str
    category: str
    default: bool


class VoicesResponse(TypedDict):
    voices: List[VoiceOut]
