"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from intervue_coder.l1_entities.errors import PersistenceError
from intervue_coder.l1_entities.verdict import CredentialVerdict
from intervue_coder.l2_use_cases.change_notifier import ChangeNotifier
from intervue_coder.l3_interface_adapters.controllers.config_store import ConfigStore
from intervue_coder.l3_interface_adapters.gateways.json_config_repository import JsonConfigRepository

# --- Protocol-conforming Fakes ---


class FakeConfigRepository:
    """In-memory ConfigRepository for L3 controller tests."""

    def __init__(self, data: dict | None = None, path: Path | None = None) -> None:
        self._data = data
        self._path = path or Path('/fake/config.json')
        self._read_error: PersistenceError | None = None
        self._write_error: PersistenceError | None = None
        self.write_calls: list[dict] = []

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._data is not None or self._read_error is not None

    def read(self) -> tuple[dict | None, PersistenceError | None]:
        if self._read_error is not None:
            return None, self._read_error
        return dict(self._data or {}), None

    def write(self, data: dict) -> PersistenceError | None:
        self.write_calls.append(dict(data))
        if self._write_error is not None:
            return self._write_error
        self._data = dict(data)
        self._read_error = None
        return None

    @property
    def data(self) -> dict | None:
        return self._data

    def set_data(self, data: dict) -> None:
        self._data = dict(data)

    def set_read_error(self, message: str) -> None:
        self._read_error = PersistenceError(message)

    def set_write_error(self, message: str) -> None:
        self._write_error = PersistenceError(message)


class FakeCredentialProbe:
    """Fake CredentialProbe for L2 use case tests."""

    def __init__(self, verdict: CredentialVerdict | None = None, delay: float = 0.0) -> None:
        self._verdict = verdict or CredentialVerdict.ok(verified=True)
        self._delay = delay
        self.calls: list[tuple[str, str]] = []

    async def list_models(self, api_key: str, base_url: str) -> CredentialVerdict:
        self.calls.append((api_key, base_url))
        if self._delay:
            await asyncio.sleep(self._delay)
        return self._verdict

    def set_verdict(self, verdict: CredentialVerdict) -> None:
        self._verdict = verdict

    def set_delay(self, seconds: float) -> None:
        self._delay = seconds


class RecordingSubscriber:
    """Callable subscriber that records every payload it receives."""

    def __init__(self) -> None:
        self.received = []

    def __call__(self, config) -> None:
        self.received.append(config)


# --- Standard Fixtures ---


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / 'settings' / 'config.json'


@pytest.fixture
def json_repo(config_path: Path) -> JsonConfigRepository:
    return JsonConfigRepository(config_path)


@pytest.fixture
def store(json_repo: JsonConfigRepository) -> ConfigStore:
    return ConfigStore(json_repo, ChangeNotifier())


@pytest.fixture
def fake_repo() -> FakeConfigRepository:
    return FakeConfigRepository()


@pytest.fixture
def fake_probe() -> FakeCredentialProbe:
    return FakeCredentialProbe()


@pytest.fixture
def recorder() -> RecordingSubscriber:
    return RecordingSubscriber()
