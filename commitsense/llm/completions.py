"""OpenAI Text Completions Client"""

import os
import json
import http.client
import socket
import urllib.request
import urllib.error

from commitsense.llm.base import GenerationRequest, LLMClient, LLMResponse, LLMError, MalformedResponseError

API_KEY_ENV = "OPENAI_API_KEY"
DEFAULT_ENDPOINT = "https://api.openai.com/v1/completions"


def extract_completion(data) -> str:
    """Return choices[0].text from a completions response body."""
    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        raise MalformedResponseError("no completion returned")
    first = choices[0]
    text = first.get("text") if isinstance(first, dict) else None
    if not isinstance(text, str):
        raise MalformedResponseError("no completion returned")
    return text


class OpenAIClient(LLMClient):
    """Client for the /v1/completions endpoint. Requires OPENAI_API_KEY env var."""

    DEFAULT_MODEL = "gpt-4"
    MAX_TOKENS = 100

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        endpoint: str | None = None,
        timeout: int | None = None,
    ):
        self.api_key = api_key or os.environ.get(API_KEY_ENV)
        self.model = model or self.DEFAULT_MODEL
        self.max_tokens = max_tokens or self.MAX_TOKENS
        self.endpoint = endpoint or DEFAULT_ENDPOINT
        self.timeout = timeout

        if not self.api_key:
            raise LLMError(
                f"No API key found. Set {API_KEY_ENV} environment variable:\n"
                f"  export {API_KEY_ENV}='your-key-here'"
            )

    @property
    def name(self) -> str:
        return f"OpenAI ({self.model})"

    def _call_api(self, request: GenerationRequest) -> dict:
        """Make a single API call and decode the JSON body."""
        payload = {
            "model": request.model,
            "prompt": request.prompt,
            "max_tokens": request.max_tokens,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        data = json.dumps(payload).encode('utf-8')
        req = urllib.request.Request(self.endpoint, data=data, headers=headers, method="POST")

        # No timeout argument means the transport default applies
        kwargs = {"timeout": self.timeout} if self.timeout else {}
        with urllib.request.urlopen(req, **kwargs) as response:
            return json.loads(response.read().decode('utf-8'))

    def _timeout_message(self) -> str:
        if self.timeout:
            return f"Request timed out after {self.timeout}s"
        return "Request timed out"

    @staticmethod
    def _error_detail(e: urllib.error.HTTPError) -> str:
        """Pull error.message out of an API error body, falling back to the reason."""
        try:
            body = json.loads(e.read().decode('utf-8'))
            return body["error"]["message"]
        except (ValueError, KeyError, TypeError, AttributeError, OSError):
            return str(e.reason)

    def generate(self, request: GenerationRequest) -> LLMResponse:
        """Send one completion request. No retries."""
        try:
            result = self._call_api(request)
        except urllib.error.HTTPError as e:
            if e.code == 401:
                raise LLMError(f"Invalid API key. Check your {API_KEY_ENV}.")
            raise LLMError(f"OpenAI API error ({e.code}): {self._error_detail(e)}")
        except urllib.error.URLError as e:
            if isinstance(e.reason, socket.timeout):
                raise LLMError(self._timeout_message())
            raise LLMError(f"OpenAI request failed: {e.reason}")
        except socket.timeout:
            raise LLMError(self._timeout_message())
        except json.JSONDecodeError:
            raise MalformedResponseError("Invalid response from OpenAI: body is not JSON")
        except http.client.HTTPException as e:
            raise LLMError(f"Incomplete response from OpenAI: {e}")
        except OSError as e:
            raise LLMError(f"Connection to OpenAI lost: {e}")

        usage = result.get("usage") if isinstance(result, dict) else None
        if not isinstance(usage, dict):
            usage = {}
        return LLMResponse(
            content=extract_completion(result),
            model=result.get("model", request.model),
            tokens_used=usage.get("total_tokens", 0)
        )
