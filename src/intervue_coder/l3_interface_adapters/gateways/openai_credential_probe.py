"""Gateway: OpenAI-compatible credential probe — implements CredentialProbe port.

Works with any OpenAI-compatible "list models" route: OpenAI, OpenRouter,
Ollama's /v1 endpoint, LM Studio, vLLM, etc.
"""

from __future__ import annotations

import logging

import httpx
import openai

from intervue_coder.l1_entities.verdict import CredentialVerdict, ValidationStatus

log = logging.getLogger('ivc.validate')


class OpenAICompatCredentialProbe:
    """Wraps openai.AsyncOpenAI to classify a models.list() call."""

    async def list_models(self, api_key: str, base_url: str) -> CredentialVerdict:
        client: openai.AsyncOpenAI | None = None
        try:
            client = openai.AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
            await client.models.list()
            return CredentialVerdict.ok(verified=True)
        except (httpx.InvalidURL, ValueError) as e:
            log.warning('Bad base URL %r: %s', base_url, e)
            return CredentialVerdict.fail(ValidationStatus.UNREACHABLE, f'Invalid URL {base_url!r}: {e}')
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            log.info('Probe of %s rejected the key: %s', base_url, e)
            return CredentialVerdict.fail(ValidationStatus.INVALID_CREDENTIAL, f'Authentication failed: {e}')
        except openai.RateLimitError as e:
            log.info('Probe of %s rate limited: %s', base_url, e)
            return CredentialVerdict.fail(ValidationStatus.RATE_LIMITED, f'Rate limit exceeded: {e}')
        except openai.APIConnectionError as e:
            log.warning('Probe of %s could not connect: %s', base_url, e)
            return CredentialVerdict.fail(ValidationStatus.UNREACHABLE, f'Cannot connect: {e}')
        except openai.OpenAIError as e:
            log.warning('Probe of %s failed: %s', base_url, e, exc_info=True)
            return CredentialVerdict.fail(ValidationStatus.UNREACHABLE, f'Error: {e}')
        finally:
            if client is not None:
                await client.close()
