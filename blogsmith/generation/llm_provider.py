"""LLM provider interface and implementations."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import httpx
import openai
from openai import OpenAI
from rich.console import Console

from ..errors import (
    EmptyResultError,
    PaymentRequiredError,
    ProviderFailure,
    RateLimitedError,
    TransportError,
)

console = Console()


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def rewrite(self, system_prompt: str, user_prompt: str) -> str:
        """
        Rewrite content with a system instruction and one user message.

        Args:
            system_prompt: Fixed editor instruction
            user_prompt: Article and reference material

        Returns:
            The rewritten text

        Raises:
            RateLimitedError: Provider is throttling
            PaymentRequiredError: Provider quota or billing exhausted
            ProviderFailure: Any other non-success response
            TransportError: Provider unreachable
            EmptyResultError: Success response without usable text
        """
        pass

    @abstractmethod
    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        pass

    def close(self) -> None:
        """Release the underlying HTTP client, if any."""
        pass


class OpenAIProvider(LLMProvider):
    """Provider for OpenAI compatible chat completion endpoints."""

    def __init__(
        self,
        api_key: str,
        model: str = "google/gemini-2.5-flash",
        base_url: Optional[str] = None,
        timeout: float = 120.0,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize OpenAI provider.

        Args:
            api_key: Gateway API key
            model: Model name to use
            base_url: Custom base URL (gateway or testing)
            timeout: Request timeout in seconds
            http_client: Preconfigured httpx client (for testing)
        """
        # Failures are terminal for an enhancement run, so the SDK must not retry
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )
        self.model = model
        self.total_tokens = 0
        self.api_calls = 0

    def rewrite(self, system_prompt: str, user_prompt: str) -> str:
        """Rewrite using a chat completion."""
        self.api_calls += 1
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except openai.RateLimitError as e:
            console.print(f"[red]LLM rate limited: {e}[/red]")
            raise RateLimitedError() from e
        except openai.APIStatusError as e:
            console.print(f"[red]LLM gateway error {e.status_code}: {e.message}[/red]")
            if e.status_code == 402:
                raise PaymentRequiredError() from e
            raise ProviderFailure(f"AI gateway error: {e.status_code}", status_code=e.status_code) from e
        except (openai.APITimeoutError, openai.APIConnectionError) as e:
            raise TransportError(f"AI gateway unreachable: {e}") from e

        if response.usage:
            self.total_tokens += response.usage.total_tokens

        content = None
        if response.choices:
            content = response.choices[0].message.content
        if not content or not content.strip():
            raise EmptyResultError("No enhanced content generated")
        return content.strip()

    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        return {
            "total_tokens": self.total_tokens,
            "api_calls": self.api_calls,
            "model": self.model,
        }

    def close(self) -> None:
        self.client.close()


class MockLLMProvider(LLMProvider):
    """Mock LLM provider for testing and dry runs."""

    def __init__(self, response: Optional[str] = None, error: Optional[Exception] = None) -> None:
        """
        Initialize mock provider.

        Args:
            response: Fixed text to return instead of the generated placeholder
            error: Exception raised on every call instead of returning
        """
        self.response = response
        self.error = error
        self.calls: List[tuple] = []

    def rewrite(self, system_prompt: str, user_prompt: str) -> str:
        """Mock rewrite."""
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        if self.response is not None:
            return self.response

        first_line = next((line for line in user_prompt.splitlines() if line.startswith("Title:")), "")
        return f"# Enhanced article\n\n{first_line}\n\n[Mock rewrite]\n\n## References\n"

    def get_usage_stats(self) -> Dict:
        """Get mock usage statistics."""
        return {
            "total_tokens": len(self.calls) * 100,
            "api_calls": len(self.calls),
            "model": "mock",
        }
