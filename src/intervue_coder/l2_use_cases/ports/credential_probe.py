"""Port: live credential probe against a model-listing endpoint."""

from __future__ import annotations

from typing import Protocol

from intervue_coder.l1_entities.verdict import CredentialVerdict


class CredentialProbe(Protocol):
    """Abstract probe. Zero SDK types leak through."""

    async def list_models(self, api_key: str, base_url: str) -> CredentialVerdict:
        """Call the endpoint's "list models" route and classify the outcome."""
        ...
