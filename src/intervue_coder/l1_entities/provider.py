"""L1 entity: supported AI provider backends."""

from __future__ import annotations

import enum


class Provider(enum.Enum):
    OPENAI = 'openai'
    GEMINI = 'gemini'
    ANTHROPIC = 'anthropic'
    OPENROUTER = 'openrouter'
    OLLAMA = 'ollama'

    @classmethod
    def parse(cls, value: object) -> Provider | None:
        """Parse wire text into a Provider. Returns None for anything unrecognized."""
        if isinstance(value, Provider):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def open_catalog(self) -> bool:
        """Open-catalog providers accept any model identifier."""
        return self in (Provider.OPENROUTER, Provider.OLLAMA)

    @property
    def requires_api_key(self) -> bool:
        return self is not Provider.OLLAMA


DEFAULT_PROVIDER = Provider.GEMINI

_LABELS = {
    Provider.OPENAI: 'OpenAI',
    Provider.GEMINI: 'Gemini',
    Provider.ANTHROPIC: 'Anthropic',
    Provider.OPENROUTER: 'OpenRouter',
    Provider.OLLAMA: 'Ollama',
}
