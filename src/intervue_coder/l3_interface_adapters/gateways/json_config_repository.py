"""Gateway: JSON file configuration repository — implements ConfigRepository port."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from intervue_coder.l1_entities.errors import PersistenceError
from intervue_coder.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATH

log = logging.getLogger('ivc.config')


class JsonConfigRepository:
    """Reads and writes one JSON object. Writes go to a temp file, then replace the target."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read(self) -> tuple[dict | None, PersistenceError | None]:
        try:
            text = self._path.read_text(encoding='utf-8')
        except OSError as e:
            return None, PersistenceError(f'Cannot read {self._path}: {e}')
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            return None, PersistenceError(f'Corrupt config {self._path}: {e}')
        if not isinstance(data, dict):
            return None, PersistenceError(f'Config {self._path} is not a JSON object')
        return data, None

    def write(self, data: dict) -> PersistenceError | None:
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f'.{self._path.name}.',
                suffix='.tmp',
                dir=self._path.parent,
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write('\n')
            os.replace(tmp_name, self._path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            return PersistenceError(f'Cannot write {self._path}: {e}')
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
        log.debug('Wrote config to %s', self._path)
        return None
