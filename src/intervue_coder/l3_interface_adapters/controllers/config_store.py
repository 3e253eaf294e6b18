"""ConfigStore — single authoritative owner of the persisted configuration.

All reads and writes of the configuration file go through one store object,
constructed once at process start and passed to its consumers.

Concurrency: update() holds a re-entrant lock across load -> merge -> save ->
notify, so two threads in the same process cannot lose each other's writes and
subscribers receive snapshots in write order. A subscriber may call back into
the store from its own thread. There is no cross-process file lock; one writing
process per machine is assumed. Writes replace the file atomically, so a
concurrent reader sees either the old or the new document, never a torn one.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from intervue_coder.l1_entities.config import DEFAULT_CONFIG, AppConfig, ConfigUpdate, clamp_opacity
from intervue_coder.l1_entities.errors import PersistenceError
from intervue_coder.l2_use_cases.change_notifier import ChangeNotifier, ConfigSubscriber
from intervue_coder.l2_use_cases.ports.config_repository import ConfigRepository
from intervue_coder.l2_use_cases.update_config_use_case import UpdateConfigUseCase
from intervue_coder.l2_use_cases.utils.config_sanitizer import parse_stored_config

log = logging.getLogger('ivc.config')


class ConfigStore:
    """Load / save / update pipeline over a ConfigRepository, with change notification."""

    def __init__(self, repository: ConfigRepository, notifier: ChangeNotifier | None = None) -> None:
        self._repo = repository
        self._notifier = notifier or ChangeNotifier()
        self._update_uc = UpdateConfigUseCase()
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._repo.path

    @property
    def notifier(self) -> ChangeNotifier:
        return self._notifier

    def subscribe(self, callback: ConfigSubscriber) -> Callable[[], None]:
        return self._notifier.subscribe(callback)

    def load(self) -> AppConfig:
        """Return the stored configuration, or defaults (rewritten to disk) on any failure. Never raises."""
        with self._lock:
            config, err = self._read()
            if err is not None:
                log.warning('%s; falling back to defaults', err)
                self.save(DEFAULT_CONFIG)
            return config

    def peek(self) -> AppConfig:
        """Like load(), but never writes: a missing or broken file just reads as defaults."""
        with self._lock:
            config, err = self._read()
        if err is not None:
            log.debug('peek: %s; using defaults', err)
        return config

    def _read(self) -> tuple[AppConfig, PersistenceError | None]:
        if not self._repo.exists():
            return DEFAULT_CONFIG, PersistenceError(f'No config at {self._repo.path}')

        raw, err = self._repo.read()
        if err is not None:
            return DEFAULT_CONFIG, err

        try:
            return parse_stored_config(raw), None
        except ValidationError as e:
            return DEFAULT_CONFIG, PersistenceError(f'Invalid config at {self._repo.path} ({e.error_count()} errors)')

    def save(self, config: AppConfig) -> None:
        """Persist *config*. Failures are logged, never raised."""
        err = self._repo.write(config.to_json_dict())
        if err is not None:
            log.error('Error saving config: %s', err)

    def update(self, partial: ConfigUpdate | dict) -> AppConfig:
        """Merge *partial* onto the stored configuration, persist, and notify. Returns the new configuration."""
        update = partial if isinstance(partial, ConfigUpdate) else ConfigUpdate.model_validate(partial)
        with self._lock:
            current = self.load()
            result = self._update_uc.execute(current, update)
            self.save(result.config)
            if result.should_notify:
                self._notifier.emit(result.config)
        return result.config

    def get_opacity(self) -> float:
        return self.load().opacity

    def set_opacity(self, opacity: float) -> AppConfig:
        return self.update(ConfigUpdate(opacity=clamp_opacity(opacity)))

    def get_language(self) -> str:
        return self.load().language

    def set_language(self, language: str) -> AppConfig:
        return self.update(ConfigUpdate(language=language))

    def has_credential(self) -> bool:
        config = self.load()
        if not config.provider.requires_api_key:
            return True
        return bool(config.api_key.strip())
