"""Credential validation verdict — ephemeral result of a single probe."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ValidationStatus(enum.Enum):
    VALID = 'valid'
    INVALID_CREDENTIAL = 'invalid_credential'
    RATE_LIMITED = 'rate_limited'
    UNREACHABLE = 'unreachable'
    MALFORMED_FORMAT = 'malformed_format'
    UNKNOWN_PROVIDER = 'unknown_provider'


@dataclass(frozen=True)
class CredentialVerdict:
    """Outcome of validating a credential.

    ``verified`` is True only when a live endpoint accepted the credential.
    A format-only pass (gemini, anthropic) is valid but unverified: the key
    looks right, nothing more.
    """

    status: ValidationStatus
    error: str | None = None
    verified: bool = False

    @property
    def valid(self) -> bool:
        return self.status is ValidationStatus.VALID

    @classmethod
    def ok(cls, *, verified: bool) -> CredentialVerdict:
        return cls(status=ValidationStatus.VALID, verified=verified)

    @classmethod
    def fail(cls, status: ValidationStatus, error: str) -> CredentialVerdict:
        return cls(status=status, error=error)
