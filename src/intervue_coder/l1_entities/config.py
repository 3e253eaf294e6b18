"""Configuration Pydantic models — the persisted settings and partial updates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from intervue_coder.l1_entities.model_catalog import DEFAULT_MODELS
from intervue_coder.l1_entities.provider import DEFAULT_PROVIDER, Provider

MIN_OPACITY = 0.1
MAX_OPACITY = 1.0
DEFAULT_LANGUAGE = 'python'
DEFAULT_OLLAMA_BASE_URL = 'http://localhost:11434/v1'

MODEL_FIELDS = ('extraction_model', 'solution_model', 'debugging_model')


def clamp_opacity(value: float) -> float:
    return min(MAX_OPACITY, max(MIN_OPACITY, float(value)))


_DEFAULT_TRIPLE = DEFAULT_MODELS[DEFAULT_PROVIDER]


class AppConfig(BaseModel):
    """Full user configuration. Immutable; derive new values with model_copy()."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: str = Field(default='', alias='apiKey')
    provider: Provider = Field(default=DEFAULT_PROVIDER, alias='apiProvider')
    extraction_model: str = Field(default=_DEFAULT_TRIPLE.extraction, alias='extractionModel')
    solution_model: str = Field(default=_DEFAULT_TRIPLE.solution, alias='solutionModel')
    debugging_model: str = Field(default=_DEFAULT_TRIPLE.debugging, alias='debuggingModel')
    language: str = DEFAULT_LANGUAGE
    opacity: float = MAX_OPACITY
    ollama_base_url: str = Field(default=DEFAULT_OLLAMA_BASE_URL, alias='ollamaBaseUrl')

    @field_validator('opacity')
    @classmethod
    def _clamp_opacity(cls, v: float) -> float:
        return clamp_opacity(v)

    def to_json_dict(self) -> dict:
        """Serialize with the stable on-disk field names."""
        return self.model_dump(mode='json', by_alias=True)


class ConfigUpdate(BaseModel):
    """Partial update. A field counts as present only when explicitly set to a non-None value."""

    model_config = ConfigDict(populate_by_name=True)

    api_key: str | None = Field(default=None, alias='apiKey')
    provider: Provider | None = Field(default=None, alias='apiProvider')
    extraction_model: str | None = Field(default=None, alias='extractionModel')
    solution_model: str | None = Field(default=None, alias='solutionModel')
    debugging_model: str | None = Field(default=None, alias='debuggingModel')
    language: str | None = None
    opacity: float | None = None
    ollama_base_url: str | None = Field(default=None, alias='ollamaBaseUrl')

    def present(self) -> dict:
        """Return only the explicitly supplied, non-None fields (attribute names)."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }


DEFAULT_CONFIG = AppConfig()
