from __future__ import annotations

import logging

from lingua_relay.core.config import AppSettings
from lingua_relay.integrations.openai_gateway import OpenAIGateway
from lingua_relay.schemas.translation import TranslationRequest
from lingua_relay.services.languages import resolve_language_name

logger = logging.getLogger(__name__)

MISSING_PARAMETERS_MESSAGE = "Missing required parameters"
TRANSLATION_FAILED_MESSAGE = "Translation failed"

_SYSTEM_PROMPT = (
    "You are a professional translator. Translate the given text from {source} "
    "to {target}. Only return the translated text, nothing else."
)


class TranslationService:
    """Forward translation requests to the upstream chat-completion model."""

    def __init__(self, gateway: OpenAIGateway, settings: AppSettings) -> None:
        self._gateway = gateway
        self._model = settings.openai_translation_model
        self._temperature = settings.openai_translation_temperature

    def build_messages(self, request: TranslationRequest) -> list[dict[str, str]]:
        system_prompt = _SYSTEM_PROMPT.format(
            source=resolve_language_name(request.source_lang),
            target=resolve_language_name(request.target_lang),
        )
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": request.text},
        ]

    async def translate(self, request: TranslationRequest) -> str:
        # Identical source and target codes are forwarded as-is.
        logger.info(
            "Translating %d characters from %s to %s",
            len(request.text),
            request.source_lang,
            request.target_lang,
        )
        content = await self._gateway.complete_chat(
            self.build_messages(request),
            model=self._model,
            temperature=self._temperature,
            fallback_error=TRANSLATION_FAILED_MESSAGE,
        )
        return content.strip()
