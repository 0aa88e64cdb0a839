"""Article rewriting with a language model."""

from .llm_provider import LLMProvider, MockLLMProvider, OpenAIProvider
from .prompts import SYSTEM_PROMPT, ReferenceExcerpt, build_user_prompt

__all__ = [
    "LLMProvider",
    "MockLLMProvider",
    "OpenAIProvider",
    "ReferenceExcerpt",
    "SYSTEM_PROMPT",
    "build_user_prompt",
]
