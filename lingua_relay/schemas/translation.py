from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TranslationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., min_length=1, description="Source text to translate.")
    source_lang: str = Field(
        ...,
        alias="sourceLang",
        min_length=1,
        description="Language code of the source text, e.g. 'en'.",
    )
    target_lang: str = Field(
        ...,
        alias="targetLang",
        min_length=1,
        description="Language code to translate into, e.g. 'zh-CN'.",
    )


class TranslationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(
        ...,
        alias="translatedText",
        description="Translated text with surrounding whitespace removed.",
    )


class LanguageOption(BaseModel):
    code: str
    name: str


class LanguageListResponse(BaseModel):
    languages: list[LanguageOption] = Field(default_factory=list)
