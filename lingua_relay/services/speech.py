from __future__ import annotations

import logging
import math
from typing import Any

from lingua_relay.core.config import AppSettings
from lingua_relay.integrations.openai_gateway import OpenAIGateway
from lingua_relay.schemas.speech import SpeechRequest

logger = logging.getLogger(__name__)

MISSING_TEXT_MESSAGE = "Missing text parameter"
TTS_FAILED_MESSAGE = "TTS generation failed"

SUPPORTED_VOICES: tuple[str, ...] = ("alloy", "echo", "fable", "onyx", "nova", "shimmer")
DEFAULT_VOICE = "alloy"
MIN_SPEED = 0.25
MAX_SPEED = 4.0
DEFAULT_SPEED = 1.0


def normalize_voice(voice: Any) -> str:
    """Return ``voice`` when supported, otherwise the default voice."""
    if isinstance(voice, str) and voice in SUPPORTED_VOICES:
        return voice
    return DEFAULT_VOICE


def clamp_speed(speed: Any) -> float:
    """Clamp ``speed`` into [MIN_SPEED, MAX_SPEED].

    Infinite values and integers too large for a float clamp to the nearest
    bound. Missing, boolean, non-numeric and NaN values resolve to the default
    speed instead of raising.
    """
    if speed is None or isinstance(speed, bool):
        return DEFAULT_SPEED
    try:
        value = float(speed)
    except OverflowError:
        return MAX_SPEED if speed > 0 else MIN_SPEED
    except (TypeError, ValueError):
        return DEFAULT_SPEED
    if math.isnan(value):
        return DEFAULT_SPEED
    return max(MIN_SPEED, min(MAX_SPEED, value))


class SpeechService:
    """Forward text-to-speech requests to the upstream speech endpoint."""

    def __init__(self, gateway: OpenAIGateway, settings: AppSettings) -> None:
        self._gateway = gateway
        self._model = settings.openai_speech_model

    async def synthesize(self, request: SpeechRequest) -> bytes:
        voice = normalize_voice(request.voice)
        speed = clamp_speed(request.speed)
        if voice != request.voice and request.voice is not None:
            logger.debug("Unsupported voice %r replaced with %s", request.voice, voice)

        logger.info(
            "Synthesising %d characters (voice=%s speed=%s)",
            len(request.text),
            voice,
            speed,
        )
        return await self._gateway.synthesize_speech(
            request.text,
            model=self._model,
            voice=voice,
            speed=speed,
            fallback_error=TTS_FAILED_MESSAGE,
        )
