"""Use case: merge a partial update onto the current configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from intervue_coder.l1_entities.config import MODEL_FIELDS, AppConfig, ConfigUpdate
from intervue_coder.l1_entities.provider_policy import defaults_for, detect_provider, sanitize_model

log = logging.getLogger('ivc.config')


@dataclass(frozen=True)
class UpdateResult:
    """Merged configuration plus what the caller supplied."""

    config: AppConfig
    supplied: frozenset[str] = frozenset()
    provider_switched: bool = False

    @property
    def should_notify(self) -> bool:
        # Any supplied field counts, even when its value is unchanged.
        return bool(self.supplied)


class UpdateConfigUseCase:
    """Pure merge pipeline: detect provider, reset models on switch, sanitize, merge."""

    def execute(self, current: AppConfig, update: ConfigUpdate) -> UpdateResult:
        changes = update.present()
        supplied = frozenset(changes)

        api_key = changes.get('api_key')
        if api_key and 'provider' not in changes:
            changes['provider'] = detect_provider(api_key)
            log.debug('Detected provider %s from supplied key', changes['provider'].value)

        provider = changes.get('provider', current.provider)
        switched = provider is not current.provider
        if switched:
            # Provider switch wins over any model fields in the same update.
            triple = defaults_for(provider)
            changes['extraction_model'] = triple.extraction
            changes['solution_model'] = triple.solution
            changes['debugging_model'] = triple.debugging
            log.info('Provider switched %s -> %s, models reset', current.provider.value, provider.value)

        for name in MODEL_FIELDS:
            if name not in changes:
                continue
            sanitized = sanitize_model(changes[name], provider)
            if sanitized != changes[name]:
                log.debug('Replaced %s %r with %r for %s', name, changes[name], sanitized, provider.value)
                changes[name] = sanitized

        merged = AppConfig.model_validate({**current.model_dump(), **changes})
        return UpdateResult(config=merged, supplied=supplied, provider_switched=switched)
