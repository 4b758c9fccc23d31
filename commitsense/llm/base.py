"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationRequest:
    """One outbound completion request. Only built from a non-empty diff."""
    prompt: str
    model: str
    max_tokens: int


@dataclass
class LLMResponse:
    """Structured response from any LLM provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class MalformedResponseError(LLMError):
    """The provider answered, but without a usable completion."""
    pass


class LLMClient(ABC):
    """Abstract base for LLM clients."""

    model: str
    max_tokens: int

    def build_request(self, prompt: str) -> GenerationRequest:
        return GenerationRequest(prompt=prompt, model=self.model, max_tokens=self.max_tokens)

    @abstractmethod
    def generate(self, request: GenerationRequest) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
