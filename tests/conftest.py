"""Shared fakes for the requester, git and the completions endpoint."""

import io
import json
import subprocess
import urllib.request

import pytest

from commitsense import requester
from commitsense.llm import GenerationRequest, LLMClient, LLMResponse
from commitsense.sink import ResultSink


class RecordingSink(ResultSink):
    """Sink that remembers every call in order."""

    def __init__(self):
        self.calls = []

    def show_message(self, text):
        self.calls.append(("message", text))

    def show_warning(self, text):
        self.calls.append(("warning", text))

    def show_error(self, text):
        self.calls.append(("error", text))

    def set_pending_commit_message(self, text):
        self.calls.append(("pending", text))
        return True

    def kinds(self):
        return [kind for kind, _ in self.calls]


class FakeClient(LLMClient):
    """LLM client returning a canned response or raising a canned error."""

    def __init__(self, content="feat: add thing", error=None, tokens_used=0):
        self.model = "test-model"
        self.max_tokens = 100
        self.content = content
        self.error = error
        self.tokens_used = tokens_used
        self.requests: list[GenerationRequest] = []

    @property
    def name(self):
        return "Fake (test-model)"

    def generate(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, model=self.model, tokens_used=self.tokens_used)


class FakeGit:
    """Stands in for GitAnalyzer; records the roots it was built for."""

    def __init__(self, diff="", error=None):
        self.diff = diff
        self.error = error
        self.roots = []

    def __call__(self, root):
        self.roots.append(root)
        return self

    def get_staged_diff(self):
        if self.error is not None:
            raise self.error
        return self.diff


class FakeHTTPResponse:
    def __init__(self, body: bytes):
        self._body = io.BytesIO(body)

    def read(self):
        return self._body.read()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def repo(tmp_path):
    """A directory that looks like a git working tree."""
    root = tmp_path / "repo"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture
def fake_urlopen(monkeypatch):
    """Replace urlopen; set .body (dict or bytes) or .error, inspect .requests."""
    class _Fake:
        def __init__(self):
            self.body = {"choices": [{"text": "feat: add thing"}]}
            self.error = None
            self.requests = []
            self.timeouts = []

        def __call__(self, req, **kwargs):
            self.requests.append(req)
            self.timeouts.append(kwargs.get("timeout"))
            if self.error is not None:
                raise self.error
            body = self.body if isinstance(self.body, bytes) else json.dumps(self.body).encode("utf-8")
            return FakeHTTPResponse(body)

    fake = _Fake()
    monkeypatch.setattr(urllib.request, "urlopen", fake)
    return fake


@pytest.fixture
def fake_git_run(monkeypatch):
    """Replace subprocess.run; set .stdout/.stderr/.returncode or .error."""
    class _Fake:
        def __init__(self):
            self.stdout = ""
            self.stderr = ""
            self.returncode = 0
            self.error = None
            self.calls = []

        def __call__(self, cmd, **kwargs):
            self.calls.append((cmd, kwargs))
            if self.error is not None:
                raise self.error
            return subprocess.CompletedProcess(cmd, self.returncode, stdout=self.stdout, stderr=self.stderr)

    fake = _Fake()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture(autouse=True)
def clear_in_flight():
    requester._in_flight.clear()
    yield
    requester._in_flight.clear()
