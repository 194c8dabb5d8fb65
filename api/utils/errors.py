from __future__ import annotations

from typing import Optional


class ServiceError(Exception):
    def __init__(self, message: str, status: int = 400, code: str = "bad_request"):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code


class MissingCredentialError(ServiceError):
    """No usable ElevenLabs API key, neither from the caller nor from settings."""

    def __init__(self, message: str = "Missing ElevenLabs API key."):
        super().__init__(message, 400, "missing_credential")


class UpstreamError(ServiceError):
    """ElevenLabs answered with a non-success status."""

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message, 502, "upstream_error")
        self.upstream_status = upstream_status
