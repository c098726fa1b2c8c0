from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from lingua_relay.api.cors import preflight_response
from lingua_relay.api.deps import get_translation_service, parse_json_body
from lingua_relay.core.config import AppSettings, get_settings
from lingua_relay.schemas.translation import TranslationRequest, TranslationResponse
from lingua_relay.services.translation import MISSING_PARAMETERS_MESSAGE, TranslationService

router = APIRouter()


@router.options("/translate", include_in_schema=False)
async def translate_preflight(settings: AppSettings = Depends(get_settings)) -> Response:
    return preflight_response(settings.cors_allow_origin)


@router.post(
    "/translate",
    response_model=TranslationResponse,
    status_code=status.HTTP_200_OK,
    summary="Translate text between two languages using the upstream model.",
)
async def translate(
    request: Request,
    translator: TranslationService = Depends(get_translation_service),
) -> TranslationResponse:
    """Return the upstream model's translation of the submitted text."""
    payload = await parse_json_body(
        request,
        TranslationRequest,
        error_message=MISSING_PARAMETERS_MESSAGE,
    )
    translated = await translator.translate(payload)
    return TranslationResponse(translated_text=translated)
