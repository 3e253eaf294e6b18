"""Model catalog Pydantic models — per-provider allow-lists and default triples."""

from __future__ import annotations

import enum
from typing import NamedTuple

from pydantic import BaseModel

from intervue_coder.l1_entities.provider import Provider


class ModelInfo(BaseModel):
    """A single selectable model in a closed catalog."""

    id: str
    name: str
    description: str = ''


class ModelRole(enum.Enum):
    EXTRACTION = 'extraction'
    SOLUTION = 'solution'
    DEBUGGING = 'debugging'

    @property
    def title(self) -> str:
        return _ROLE_TEXT[self][0]

    @property
    def description(self) -> str:
        return _ROLE_TEXT[self][1]


_ROLE_TEXT = {
    ModelRole.EXTRACTION: (
        'Problem Extraction',
        'Model used to analyze screenshots and extract problem details',
    ),
    ModelRole.SOLUTION: ('Solution Generation', 'Model used to generate coding solutions'),
    ModelRole.DEBUGGING: ('Debugging', 'Model used to debug and improve solutions'),
}


class ModelTriple(NamedTuple):
    extraction: str
    solution: str
    debugging: str

    def for_role(self, role: ModelRole) -> str:
        return getattr(self, role.value)


CATALOGS: dict[Provider, tuple[ModelInfo, ...]] = {
    Provider.OPENAI: (
        ModelInfo(id='gpt-4o', name='gpt-4o', description='Best overall performance'),
        ModelInfo(id='gpt-4o-mini', name='gpt-4o-mini', description='Faster, cost-effective'),
        ModelInfo(id='o1-mini', name='o1-mini', description='Reasoning, compact'),
        ModelInfo(id='o3-mini', name='o3-mini', description='Reasoning, newer compact'),
    ),
    Provider.GEMINI: (
        ModelInfo(id='gemini-1.5-pro', name='Gemini 1.5 Pro', description='Best overall performance'),
        ModelInfo(id='gemini-2.0-flash', name='Gemini 2.0 Flash', description='Faster, cost-effective'),
        ModelInfo(
            id='gemini-2.0-flash-thinking-exp-01-21',
            name='Gemini 2.0 Flash Thinking',
            description='Experimental reasoning',
        ),
    ),
    Provider.ANTHROPIC: (
        ModelInfo(id='claude-3-7-sonnet-20250219', name='Claude 3.7 Sonnet', description='Best overall performance'),
        ModelInfo(id='claude-3-5-sonnet-20241022', name='Claude 3.5 Sonnet', description='Balanced performance'),
        ModelInfo(id='claude-3-opus-20240229', name='Claude 3 Opus', description='Largest previous generation'),
    ),
}

# Substituted for any out-of-catalog model on a closed provider.
FALLBACK_MODELS: dict[Provider, str] = {
    Provider.OPENAI: 'gpt-4o',
    Provider.GEMINI: 'gemini-2.0-flash',
    Provider.ANTHROPIC: 'claude-3-7-sonnet-20250219',
}

DEFAULT_MODELS: dict[Provider, ModelTriple] = {
    Provider.OPENAI: ModelTriple('gpt-4o', 'gpt-4o', 'gpt-4o'),
    Provider.GEMINI: ModelTriple('gemini-2.0-flash', 'gemini-2.0-flash', 'gemini-2.0-flash'),
    Provider.ANTHROPIC: ModelTriple(
        'claude-3-7-sonnet-20250219',
        'claude-3-7-sonnet-20250219',
        'claude-3-7-sonnet-20250219',
    ),
    Provider.OPENROUTER: ModelTriple(
        'google/gemini-2.0-flash-001',
        'google/gemini-2.0-flash-001',
        'google/gemini-2.0-flash-001',
    ),
    # Extraction needs image input; most local text models lack it.
    Provider.OLLAMA: ModelTriple('llama3.2-vision', 'deepseek-r1', 'deepseek-r1'),
}
