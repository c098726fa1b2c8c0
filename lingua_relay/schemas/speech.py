from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SpeechRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Text to synthesise.")
    voice: Any = Field(
        default=None,
        description="Preferred voice. Unknown values fall back to the default voice.",
    )
    speed: Any = Field(
        default=None,
        description="Playback speed. Clamped into the supported range.",
    )


class SpeedRange(BaseModel):
    min: float
    max: float
    default: float


class SpeechOptionsResponse(BaseModel):
    voices: list[str] = Field(default_factory=list)
    default: str
    speed: SpeedRange
