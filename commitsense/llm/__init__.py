"""LLM Client Package"""

from commitsense.llm.base import GenerationRequest, LLMClient, LLMResponse, LLMError, MalformedResponseError
from commitsense.llm.completions import OpenAIClient, extract_completion


def get_client(
    model: str | None = None,
    max_tokens: int | None = None,
    endpoint: str | None = None,
    timeout: int | None = None,
) -> LLMClient:
    """Get the completions client. Raises LLMError when the credential is missing."""
    return OpenAIClient(model=model, max_tokens=max_tokens, endpoint=endpoint, timeout=timeout)


__all__ = [
    "GenerationRequest",
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "MalformedResponseError",
    "OpenAIClient",
    "extract_completion",
    "get_client",
]
