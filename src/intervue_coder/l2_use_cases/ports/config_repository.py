"""Port: configuration repository."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from intervue_coder.l1_entities.errors import PersistenceError


class ConfigRepository(Protocol):
    """Abstract storage for the raw configuration document.

    Failures come back as values, never as raised exceptions.
    """

    @property
    def path(self) -> Path: ...

    def exists(self) -> bool:
        """Whether a stored document is present."""
        ...

    def read(self) -> tuple[dict | None, PersistenceError | None]:
        """Return (data, None) on success or (None, error) on any failure."""
        ...

    def write(self, data: dict) -> PersistenceError | None:
        """Persist *data*. Returns the error instead of raising."""
        ...
