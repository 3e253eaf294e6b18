"""Tests for provider policy — allow-lists, defaults, detection, key shapes."""

from __future__ import annotations

import pytest

from intervue_coder.l1_entities.model_catalog import FALLBACK_MODELS, ModelRole
from intervue_coder.l1_entities.provider import Provider
from intervue_coder.l1_entities.provider_policy import (
    allowed_models,
    catalog_for,
    defaults_for,
    detect_provider,
    is_valid_key_format,
    mask_api_key,
    sanitize_model,
)

CLOSED = [Provider.OPENAI, Provider.GEMINI, Provider.ANTHROPIC]
OPEN = [Provider.OPENROUTER, Provider.OLLAMA]


class TestSanitizeModel:
    @pytest.mark.parametrize('provider', CLOSED)
    def test_listed_model_unchanged(self, provider: Provider):
        for model in allowed_models(provider):
            assert sanitize_model(model, provider) == model

    @pytest.mark.parametrize('provider', CLOSED)
    @pytest.mark.parametrize('model', ['not-a-real-model', '', 'GPT-4O', 'google/gemini-2.0-flash-001'])
    def test_unlisted_model_falls_back(self, provider: Provider, model: str):
        assert sanitize_model(model, provider) == FALLBACK_MODELS[provider]

    @pytest.mark.parametrize('provider', CLOSED)
    @pytest.mark.parametrize('model', ['gpt-4o', 'claude-3-opus-20240229', 'junk', 'gemini-1.5-pro'])
    def test_closure_never_yields_third_value(self, provider: Provider, model: str):
        result = sanitize_model(model, provider)
        assert result in (model, FALLBACK_MODELS[provider])
        assert result in allowed_models(provider)

    @pytest.mark.parametrize('provider', OPEN)
    @pytest.mark.parametrize('model', ['anything/goes', 'deepseek-r1:14b', '', 'gpt-4o'])
    def test_open_providers_accept_anything(self, provider: Provider, model: str):
        assert sanitize_model(model, provider) == model

    def test_idempotent(self):
        once = sanitize_model('bogus', Provider.ANTHROPIC)
        assert sanitize_model(once, Provider.ANTHROPIC) == once

    def test_fallback_is_in_allow_list(self):
        for provider in CLOSED:
            assert FALLBACK_MODELS[provider] in allowed_models(provider)


class TestDefaultsFor:
    def test_openai(self):
        assert tuple(defaults_for(Provider.OPENAI)) == ('gpt-4o', 'gpt-4o', 'gpt-4o')

    def test_openrouter(self):
        assert defaults_for(Provider.OPENROUTER).solution == 'google/gemini-2.0-flash-001'

    def test_ollama_roles_diverge(self):
        triple = defaults_for(Provider.OLLAMA)
        assert triple.extraction == 'llama3.2-vision'
        assert triple.solution == 'deepseek-r1'
        assert triple.debugging == 'deepseek-r1'

    def test_only_ollama_diverges(self):
        for provider in Provider:
            triple = defaults_for(provider)
            assert (triple.extraction != triple.solution) == (provider is Provider.OLLAMA)

    @pytest.mark.parametrize('provider', CLOSED)
    def test_closed_defaults_are_allowed(self, provider: Provider):
        for model in defaults_for(provider):
            assert model in allowed_models(provider)

    def test_for_role(self):
        triple = defaults_for(Provider.OLLAMA)
        assert triple.for_role(ModelRole.EXTRACTION) == 'llama3.2-vision'
        assert triple.for_role(ModelRole.DEBUGGING) == 'deepseek-r1'


class TestDetectProvider:
    def test_anthropic_beats_generic_prefix(self):
        assert detect_provider('sk-ant-REDACTED') is Provider.ANTHROPIC

    def test_openrouter_beats_generic_prefix(self):
        assert detect_provider('sk-or-v1-abcdef') is Provider.OPENROUTER

    def test_generic_prefix_is_openai(self):
        assert detect_provider('sk-proj-1234567890') is Provider.OPENAI

    def test_anything_else_is_gemini(self):
        assert detect_provider('AIzaSyD-example-key') is Provider.GEMINI

    def test_trims_whitespace(self):
        assert detect_provider('   sk-ant-xyz  ') is Provider.ANTHROPIC

    def test_empty_is_gemini(self):
        assert detect_provider('') is Provider.GEMINI


class TestKeyFormat:
    def test_no_provider_is_loose(self):
        assert is_valid_key_format('whatever') is True

    def test_openai(self):
        assert is_valid_key_format('sk-' + 'a' * 32, Provider.OPENAI)
        assert not is_valid_key_format('sk-short', Provider.OPENAI)

    def test_gemini_min_length(self):
        assert is_valid_key_format('x' * 10, Provider.GEMINI)
        assert not is_valid_key_format('x' * 9, Provider.GEMINI)

    def test_anthropic(self):
        assert is_valid_key_format('sk-ant-' + 'B' * 32, Provider.ANTHROPIC)
        assert not is_valid_key_format('bad-format', Provider.ANTHROPIC)

    def test_openrouter_prefix(self):
        assert is_valid_key_format('sk-or-anything', Provider.OPENROUTER)
        assert not is_valid_key_format('sk-anything', Provider.OPENROUTER)

    def test_ollama_always(self):
        assert is_valid_key_format('', Provider.OLLAMA)


class TestCatalog:
    def test_open_providers_have_no_allow_list(self):
        assert allowed_models(Provider.OPENROUTER) is None
        assert catalog_for(Provider.OLLAMA) == ()

    def test_catalog_entries_have_names(self):
        for provider in CLOSED:
            assert all(m.name for m in catalog_for(provider))


class TestMaskApiKey:
    def test_masks_middle(self):
        assert mask_api_key('sk-abcdefghijk') == 'sk-a...hijk'

    def test_short_key_masks_to_empty(self):
        assert mask_api_key('sk-short') == ''

    def test_empty(self):
        assert mask_api_key('') == ''
