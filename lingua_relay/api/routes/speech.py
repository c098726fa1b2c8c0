from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from lingua_relay.api.cors import preflight_response
from lingua_relay.api.deps import get_speech_service, parse_json_body
from lingua_relay.core.config import AppSettings, get_settings
from lingua_relay.schemas.speech import SpeechRequest
from lingua_relay.services.speech import MISSING_TEXT_MESSAGE, SpeechService

router = APIRouter()


@router.options("/tts", include_in_schema=False)
async def tts_preflight(settings: AppSettings = Depends(get_settings)) -> Response:
    return preflight_response(settings.cors_allow_origin)


@router.post(
    "/tts",
    response_class=Response,
    status_code=status.HTTP_200_OK,
    summary="Synthesise speech for the submitted text.",
    responses={200: {"content": {"audio/mpeg": {}}}},
)
async def text_to_speech(
    request: Request,
    service: SpeechService = Depends(get_speech_service),
    settings: AppSettings = Depends(get_settings),
) -> Response:
    payload = await parse_json_body(
        request,
        SpeechRequest,
        error_message=MISSING_TEXT_MESSAGE,
    )
    audio = await service.synthesize(payload)
    return Response(
        content=audio,
        media_type="audio/mpeg",
        headers={"Cache-Control": f"public, max-age={settings.tts_cache_max_age}"},
    )
