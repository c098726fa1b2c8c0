from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "en": "English",
        "es": "Spanish",
        "fr": "French",
        "de": "German",
        "it": "Italian",
        "pt": "Portuguese",
        "ru": "Russian",
        "ja": "Japanese",
        "ko": "Korean",
        "zh-CN": "Chinese (Simplified)",
        "ar": "Arabic",
        "hi": "Hindi",
    }
)


def resolve_language_name(code: str) -> str:
    """Return the display name for ``code``, or the code itself when unknown."""
    return LANGUAGE_NAMES.get(code) or code
