from typing import Any, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError

from lingua_relay.core.config import AppSettings, get_settings
from lingua_relay.core.errors import BadRequest
from lingua_relay.integrations.openai_gateway import OpenAIGateway
from lingua_relay.services.speech import SpeechService
from lingua_relay.services.translation import TranslationService

ModelT = TypeVar("ModelT", bound=BaseModel)


async def get_openai_gateway(
    settings: AppSettings = Depends(get_settings),
) -> OpenAIGateway:
    """Provide an OpenAIGateway bound to the current settings."""
    return OpenAIGateway(settings)


async def get_translation_service(
    gateway: OpenAIGateway = Depends(get_openai_gateway),
    settings: AppSettings = Depends(get_settings),
) -> TranslationService:
    """Provide TranslationService instance."""
    return TranslationService(gateway, settings)


async def get_speech_service(
    gateway: OpenAIGateway = Depends(get_openai_gateway),
    settings: AppSettings = Depends(get_settings),
) -> SpeechService:
    """Provide SpeechService instance."""
    return SpeechService(gateway, settings)


async def parse_json_body(request: Request, model: type[ModelT], *, error_message: str) -> ModelT:
    """Validate the JSON request body against ``model``.

    Unparseable bodies and validation failures both surface as ``BadRequest``
    carrying ``error_message``.
    """
    try:
        payload: Any = await request.json()
    except ValueError as exc:
        raise BadRequest(error_message) from exc
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise BadRequest(error_message) from exc
