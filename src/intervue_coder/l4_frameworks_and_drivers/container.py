"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from intervue_coder.l2_use_cases.change_notifier import ChangeNotifier
from intervue_coder.l2_use_cases.ports.config_repository import ConfigRepository
from intervue_coder.l2_use_cases.ports.credential_probe import CredentialProbe
from intervue_coder.l2_use_cases.validate_credential_use_case import ValidateCredentialUseCase
from intervue_coder.l3_interface_adapters.controllers.config_store import ConfigStore
from intervue_coder.l3_interface_adapters.controllers.settings_controller import LinkOpener, SettingsController
from intervue_coder.l3_interface_adapters.gateways.json_config_repository import JsonConfigRepository
from intervue_coder.l3_interface_adapters.gateways.openai_credential_probe import OpenAICompatCredentialProbe
from intervue_coder.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        infra: InfraConfig | None = None,
        link_opener: LinkOpener | None = None,
    ) -> None:
        self.infra = infra or InfraConfig()

        self.repository: ConfigRepository = JsonConfigRepository(self.infra.config_path)
        self.notifier = ChangeNotifier()
        self.store = ConfigStore(self.repository, self.notifier)

        self.probe: CredentialProbe = OpenAICompatCredentialProbe()
        self.validator = ValidateCredentialUseCase(
            self.probe,
            timeout=self.infra.probe_timeout,
            openai_base_url=self.infra.openai_base_url,
            openrouter_base_url=self.infra.openrouter_base_url,
        )

        self.controller = SettingsController(self.store, self.validator, link_opener=link_opener)
