"""SettingsController — the boundary the UI and inference code talk to."""

from __future__ import annotations

import logging
from collections.abc import Callable

from intervue_coder.l1_entities.config import AppConfig, ConfigUpdate
from intervue_coder.l1_entities.provider import Provider
from intervue_coder.l1_entities.provider_policy import mask_api_key
from intervue_coder.l1_entities.verdict import CredentialVerdict
from intervue_coder.l2_use_cases.change_notifier import ConfigSubscriber
from intervue_coder.l2_use_cases.validate_credential_use_case import ValidateCredentialUseCase
from intervue_coder.l3_interface_adapters.controllers.config_store import ConfigStore

log = logging.getLogger('ivc.controller')

LinkOpener = Callable[[str], object]


class SettingsController:
    """Wraps the store and the credential validator behind one interface."""

    def __init__(
        self,
        store: ConfigStore,
        validator: ValidateCredentialUseCase,
        link_opener: LinkOpener | None = None,
    ) -> None:
        self._store = store
        self._validator = validator
        self._link_opener = link_opener

    @property
    def store(self) -> ConfigStore:
        return self._store

    def get_config(self) -> AppConfig:
        return self._store.load()

    def update_config(self, partial: ConfigUpdate | dict) -> AppConfig:
        return self._store.update(partial)

    async def test_credential(self, credential: str, provider: Provider | str | None = None) -> CredentialVerdict:
        """Validate *credential*. Reads the stored local base URL only for ollama and never writes."""
        if Provider.parse(provider) is Provider.OLLAMA:
            return await self._validator.execute(
                credential, provider, ollama_base_url=self._store.peek().ollama_base_url
            )
        return await self._validator.execute(credential, provider)

    def subscribe(self, callback: ConfigSubscriber) -> Callable[[], None]:
        return self._store.subscribe(callback)

    def has_credential(self) -> bool:
        return self._store.has_credential()

    def masked_api_key(self) -> str:
        return mask_api_key(self._store.load().api_key)

    def open_external_link(self, url: str) -> None:
        """Hand *url* to the host shell. No-op (logged) when no opener is wired."""
        if self._link_opener is None:
            log.warning('No link opener configured; cannot open %s', url)
            return
        self._link_opener(url)
