from __future__ import annotations

import logging
from typing import Any, Callable

import openai
from openai import AsyncOpenAI

from lingua_relay.core.config import AppSettings
from lingua_relay.core.errors import Misconfigured, UpstreamFailure


logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = "OpenAI API key not configured"


class OpenAIGateway:
    """Single-call wrapper around the OpenAI chat and speech endpoints.

    A fresh ``AsyncOpenAI`` client is built for every call and closed once the
    call finishes. SDK retries are disabled so each proxied request maps to
    exactly one upstream request.
    """

    def __init__(
        self,
        settings: AppSettings,
        *,
        client_factory: Callable[[str], AsyncOpenAI] | None = None,
    ) -> None:
        self._settings = settings
        self._client_factory = client_factory or self._default_client

    @property
    def is_configured(self) -> bool:
        return self._settings.has_openai_credentials

    def ensure_configured(self) -> str:
        """Return the API key, raising ``Misconfigured`` when it is absent."""
        api_key = self._settings.openai_api_key
        if api_key is None or not api_key.get_secret_value():
            logger.error("OPENAI_API_KEY is not set; refusing to call upstream.")
            raise Misconfigured(MISSING_API_KEY_MESSAGE)
        return api_key.get_secret_value()

    async def complete_chat(
        self,
        messages: list[dict[str, str]],
        *,
        model: str,
        temperature: float,
        fallback_error: str,
    ) -> str:
        """Return the first choice's text content from a chat completion."""
        api_key = self.ensure_configured()
        try:
            async with self._client_factory(api_key) as client:
                response = await client.chat.completions.create(
                    model=model,
                    messages=messages,  # type: ignore[arg-type]
                    temperature=temperature,
                )
        except openai.APIError as exc:
            raise self._upstream_failure(exc, fallback_error) from exc

        try:
            content = response.choices[0].message.content if response.choices else None
        except (AttributeError, IndexError, TypeError):
            # The SDK hands back the raw text when a 200 reply is not JSON.
            logger.warning("Chat completion from %s was not a completion payload.", model)
            raise UpstreamFailure(fallback_error) from None
        if content is None:
            logger.warning("Chat completion from %s returned no content.", model)
            raise UpstreamFailure(fallback_error)
        return content

    async def synthesize_speech(
        self,
        text: str,
        *,
        model: str,
        voice: str,
        speed: float,
        fallback_error: str,
    ) -> bytes:
        """Return the raw mp3 bytes produced by the speech endpoint."""
        api_key = self.ensure_configured()
        try:
            async with self._client_factory(api_key) as client:
                response = await client.audio.speech.create(
                    model=model,
                    input=text,
                    voice=voice,  # type: ignore[arg-type]
                    speed=speed,
                    response_format="mp3",
                )
                audio = response.content
        except openai.APIError as exc:
            raise self._upstream_failure(exc, fallback_error) from exc
        return audio

    def _default_client(self, api_key: str) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key=api_key,
            base_url=self._settings.openai_base_url,
            max_retries=0,
        )

    def _upstream_failure(self, exc: openai.APIError, fallback: str) -> UpstreamFailure:
        message = _extract_error_message(exc) or fallback
        logger.warning("OpenAI request failed: %s", message, exc_info=exc)
        return UpstreamFailure(message)


def _extract_error_message(exc: openai.APIError) -> str | None:
    if isinstance(exc, openai.APIStatusError):
        payload: Any = exc.body
        if isinstance(payload, dict):
            message = payload.get("message")
            if message:
                return str(message)
        return None
    # Transport failures (connection refused, DNS, timeouts) carry a readable message.
    return exc.message or None
