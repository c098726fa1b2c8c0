from fastapi import APIRouter

from lingua_relay.schemas.speech import SpeechOptionsResponse, SpeedRange
from lingua_relay.schemas.translation import LanguageListResponse, LanguageOption
from lingua_relay.services.languages import LANGUAGE_NAMES
from lingua_relay.services.speech import (
    DEFAULT_SPEED,
    DEFAULT_VOICE,
    MAX_SPEED,
    MIN_SPEED,
    SUPPORTED_VOICES,
)

router = APIRouter()


@router.get("/languages", response_model=LanguageListResponse)
async def list_languages() -> LanguageListResponse:
    """Language codes with display names, in presentation order."""
    return LanguageListResponse(
        languages=[LanguageOption(code=code, name=name) for code, name in LANGUAGE_NAMES.items()]
    )


@router.get("/voices", response_model=SpeechOptionsResponse)
async def list_voices() -> SpeechOptionsResponse:
    return SpeechOptionsResponse(
        voices=list(SUPPORTED_VOICES),
        default=DEFAULT_VOICE,
        speed=SpeedRange(min=MIN_SPEED, max=MAX_SPEED, default=DEFAULT_SPEED),
    )
