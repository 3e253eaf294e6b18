"""Provider policy — pure functions over the model catalog and credential shapes."""

from __future__ import annotations

import re

from intervue_coder.l1_entities.model_catalog import (
    CATALOGS,
    DEFAULT_MODELS,
    FALLBACK_MODELS,
    ModelInfo,
    ModelTriple,
)
from intervue_coder.l1_entities.provider import Provider

# Most specific first: OpenRouter and Anthropic keys both start with the generic 'sk-'.
_DETECTION_RULES: tuple[tuple[str, Provider], ...] = (
    ('sk-ant-', Provider.ANTHROPIC),
    ('sk-or-', Provider.OPENROUTER),
    ('sk-', Provider.OPENAI),
)
_FALLBACK_DETECTED = Provider.GEMINI

_OPENAI_KEY_RE = re.compile(r'^sk-[a-zA-Z0-9]{32,}$')
ANTHROPIC_KEY_RE = re.compile(r'^sk-ant-[a-zA-Z0-9]{32,}$')
GEMINI_MIN_KEY_LENGTH = 10


def allowed_models(provider: Provider) -> tuple[str, ...] | None:
    """Model ids accepted by *provider*, or None when any id is accepted."""
    catalog = CATALOGS.get(provider)
    if catalog is None:
        return None
    return tuple(m.id for m in catalog)


def catalog_for(provider: Provider) -> tuple[ModelInfo, ...]:
    return CATALOGS.get(provider, ())


def sanitize_model(model: str, provider: Provider) -> str:
    """Map *model* onto *provider*'s allow-list: the input if listed, else the fallback."""
    allowed = allowed_models(provider)
    if allowed is None or model in allowed:
        return model
    return FALLBACK_MODELS[provider]


def defaults_for(provider: Provider) -> ModelTriple:
    return DEFAULT_MODELS[provider]


def detect_provider(credential: str) -> Provider:
    """Infer a provider from the shape of *credential*. Unrecognized shapes map to Gemini."""
    key = credential.strip()
    for prefix, provider in _DETECTION_RULES:
        if key.startswith(prefix):
            return provider
    return _FALLBACK_DETECTED


def is_valid_key_format(credential: str, provider: Provider | None = None) -> bool:
    """Loose shape check for *credential*. Says nothing about whether the key is authorized."""
    if provider is None:
        return True
    key = credential.strip()
    if provider is Provider.OPENAI:
        return bool(_OPENAI_KEY_RE.match(key))
    if provider is Provider.GEMINI:
        return len(key) >= GEMINI_MIN_KEY_LENGTH
    if provider is Provider.ANTHROPIC:
        return bool(ANTHROPIC_KEY_RE.match(key))
    if provider is Provider.OPENROUTER:
        return key.startswith('sk-or-')
    return True


def mask_api_key(api_key: str) -> str:
    """Mask a key for display: ``"sk-abcdefghijk"`` → ``"sk-a...hijk"``. Short keys mask to empty."""
    if not api_key or len(api_key) < 10:
        return ''
    return f'{api_key[:4]}...{api_key[-4:]}'
