"""Normalization of stored configuration documents against provider policy."""

from __future__ import annotations

import logging

from intervue_coder.l1_entities.config import MODEL_FIELDS, AppConfig
from intervue_coder.l1_entities.provider import DEFAULT_PROVIDER, Provider
from intervue_coder.l1_entities.provider_policy import sanitize_model

log = logging.getLogger('ivc.config')

_PROVIDER_KEYS = ('apiProvider', 'provider')


def sanitize_config(config: AppConfig) -> AppConfig:
    """Force every model field onto the config's provider allow-list. Idempotent."""
    fixes = {}
    for name in MODEL_FIELDS:
        current = getattr(config, name)
        sanitized = sanitize_model(current, config.provider)
        if sanitized != current:
            log.debug('Replaced %s %r with %r for %s', name, current, sanitized, config.provider.value)
            fixes[name] = sanitized
    if not fixes:
        return config
    return config.model_copy(update=fixes)


def parse_stored_config(raw: dict) -> AppConfig:
    """Build a policy-consistent AppConfig from a raw stored document.

    Unknown providers fall back to the default provider. Missing fields take
    defaults. Raises pydantic.ValidationError when a field has an unusable type.
    """
    data = {k: v for k, v in raw.items() if v is not None}
    provider_key = next((k for k in _PROVIDER_KEYS if k in data), None)
    if provider_key is not None:
        provider = Provider.parse(data[provider_key])
        if provider is None:
            log.warning('Unknown provider %r in stored config, using %s', data[provider_key], DEFAULT_PROVIDER.value)
            provider = DEFAULT_PROVIDER
        data[provider_key] = provider.value
    return sanitize_config(AppConfig.model_validate(data))
