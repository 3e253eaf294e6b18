"""Use case: validate a credential against a provider without touching stored state."""

from __future__ import annotations

import asyncio
import logging

from intervue_coder.l1_entities.config import DEFAULT_OLLAMA_BASE_URL
from intervue_coder.l1_entities.provider import Provider
from intervue_coder.l1_entities.provider_policy import ANTHROPIC_KEY_RE, detect_provider, mask_api_key
from intervue_coder.l1_entities.verdict import CredentialVerdict, ValidationStatus
from intervue_coder.l2_use_cases.ports.credential_probe import CredentialProbe

log = logging.getLogger('ivc.validate')

DEFAULT_PROBE_TIMEOUT = 12.0
OPENAI_BASE_URL = 'https://api.openai.com/v1'
OPENROUTER_BASE_URL = 'https://openrouter.ai/api/v1'
GEMINI_MIN_PROBE_LENGTH = 20
OLLAMA_PLACEHOLDER_KEY = 'ollama'


class ValidateCredentialUseCase:
    """Produces a CredentialVerdict per request. Stateless; no retries.

    openai / openrouter / ollama get a live "list models" probe bounded by
    *timeout*. gemini and anthropic only get a format check: a valid verdict
    for them has ``verified=False`` and does not prove the key is authorized.
    Cancelling the awaiting task cancels the probe.
    """

    def __init__(
        self,
        probe: CredentialProbe,
        *,
        timeout: float = DEFAULT_PROBE_TIMEOUT,
        openai_base_url: str = OPENAI_BASE_URL,
        openrouter_base_url: str = OPENROUTER_BASE_URL,
    ) -> None:
        self._probe = probe
        self._timeout = timeout
        self._base_urls = {
            Provider.OPENAI: openai_base_url,
            Provider.OPENROUTER: openrouter_base_url,
        }

    async def execute(
        self,
        credential: str,
        provider: Provider | str | None = None,
        *,
        ollama_base_url: str = DEFAULT_OLLAMA_BASE_URL,
    ) -> CredentialVerdict:
        key = (credential or '').strip()
        if provider is None:
            resolved = detect_provider(key)
        else:
            resolved = Provider.parse(provider)
            if resolved is None:
                log.warning('Validation requested for unknown provider %r', provider)
                return CredentialVerdict.fail(ValidationStatus.UNKNOWN_PROVIDER, 'Unknown API provider.')

        log.info('Validating %s credential %s', resolved.value, mask_api_key(key) or '(short)')

        if resolved is Provider.GEMINI:
            return _check_gemini_format(key)
        if resolved is Provider.ANTHROPIC:
            return _check_anthropic_format(key)
        if resolved is Provider.OLLAMA:
            return await self._check_ollama(ollama_base_url)

        if not key:
            return CredentialVerdict.fail(ValidationStatus.MALFORMED_FORMAT, f'{resolved.label} API key is required.')
        verdict = await self._live_probe(key, self._base_urls[resolved])
        return _describe(verdict, resolved)

    async def _check_ollama(self, base_url: str) -> CredentialVerdict:
        verdict = await self._live_probe(OLLAMA_PLACEHOLDER_KEY, base_url)
        if verdict.valid:
            return verdict
        log.info('Ollama probe at %s failed: %s', base_url, verdict.error)
        return CredentialVerdict.fail(
            ValidationStatus.UNREACHABLE,
            f"Could not connect to Ollama at {base_url}. Ensure it's running (`ollama serve`).",
        )

    async def _live_probe(self, api_key: str, base_url: str) -> CredentialVerdict:
        try:
            return await asyncio.wait_for(self._probe.list_models(api_key, base_url), timeout=self._timeout)
        except TimeoutError:
            log.warning('Probe of %s timed out after %.1fs', base_url, self._timeout)
            return CredentialVerdict.fail(ValidationStatus.UNREACHABLE, f'timed out after {self._timeout:g}s')


def _check_gemini_format(key: str) -> CredentialVerdict:
    if len(key) >= GEMINI_MIN_PROBE_LENGTH:
        return CredentialVerdict.ok(verified=False)
    return CredentialVerdict.fail(ValidationStatus.MALFORMED_FORMAT, 'Invalid Gemini API key format.')


def _check_anthropic_format(key: str) -> CredentialVerdict:
    if ANTHROPIC_KEY_RE.match(key):
        return CredentialVerdict.ok(verified=False)
    return CredentialVerdict.fail(ValidationStatus.MALFORMED_FORMAT, 'Invalid Anthropic API key format.')


def _describe(verdict: CredentialVerdict, provider: Provider) -> CredentialVerdict:
    """Replace the probe's raw detail with a provider-specific message."""
    label = provider.label
    if verdict.status is ValidationStatus.INVALID_CREDENTIAL:
        message = f'Invalid {label} API key.'
    elif verdict.status is ValidationStatus.RATE_LIMITED:
        message = f'{label} rate limit exceeded. The key may still be valid; try again later.'
    elif verdict.status is ValidationStatus.UNREACHABLE:
        message = f'Could not reach {label}: {verdict.error}'
    else:
        return verdict
    return CredentialVerdict.fail(verdict.status, message)
