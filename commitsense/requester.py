"""Change Summary Requester - staged diff in, proposed commit message out."""

import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from commitsense.git import GitAnalyzer, GitError, has_repository
from commitsense.llm import LLMClient, LLMError
from commitsense.prompts import build_prompt
from commitsense.sink import ResultSink

NO_WORKSPACE = "no workspace"
NO_REPOSITORY = "no repository detected"
NOTHING_STAGED = "nothing staged"
EMPTY_COMPLETION = "empty completion"
IN_PROGRESS = "generation already in progress"


@dataclass(frozen=True)
class WorkingDirectoryContext:
    """Root of the working directory for a single invocation."""
    root_path: Path

    @classmethod
    def from_path(cls, path) -> Optional['WorkingDirectoryContext']:
        """None when path is not an existing directory."""
        root = Path(path)
        if not root.is_dir():
            return None
        return cls(root_path=root)


class OutcomeKind(Enum):
    DELIVERED = "delivered"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class DeliveryOutcome:
    """Terminal state of one invocation."""
    kind: OutcomeKind
    text: str = ""
    reason: str = ""
    error: str = ""
    prompt_chars: int = 0
    tokens_used: int = 0
    timings: dict = field(default_factory=dict)

    @classmethod
    def delivered(cls, text: str, **extra) -> 'DeliveryOutcome':
        return cls(OutcomeKind.DELIVERED, text=text, **extra)

    @classmethod
    def skipped(cls, reason: str, **extra) -> 'DeliveryOutcome':
        return cls(OutcomeKind.SKIPPED, reason=reason, **extra)

    @classmethod
    def failed(cls, error: str, **extra) -> 'DeliveryOutcome':
        return cls(OutcomeKind.FAILED, error=error, **extra)

    @property
    def is_delivered(self) -> bool:
        return self.kind is OutcomeKind.DELIVERED

    @property
    def is_skipped(self) -> bool:
        return self.kind is OutcomeKind.SKIPPED

    @property
    def is_failed(self) -> bool:
        return self.kind is OutcomeKind.FAILED


# Roots with an invocation currently running, shared by every requester
_in_flight: set[str] = set()
_in_flight_lock = threading.Lock()


def _claim(root: Path) -> Optional[str]:
    key = str(root.resolve())
    with _in_flight_lock:
        if key in _in_flight:
            return None
        _in_flight.add(key)
    return key


def _release(key: str) -> None:
    with _in_flight_lock:
        _in_flight.discard(key)


class ChangeSummaryRequester:
    """Runs the staged-diff to commit-message pipeline once per call to run().

    Every failure is reported to the sink and returned as a DeliveryOutcome;
    nothing propagates to the caller.
    """

    def __init__(
        self,
        client: LLMClient,
        sink: ResultSink,
        git_factory: Callable[[Path], GitAnalyzer] = GitAnalyzer,
    ):
        self.client = client
        self.sink = sink
        self.git_factory = git_factory

    def run(self, context: Optional[WorkingDirectoryContext]) -> DeliveryOutcome:
        if context is None:
            self.sink.show_warning("No workspace folder open. Please open a Git repository to use CommitSense.")
            return DeliveryOutcome.skipped(NO_WORKSPACE)

        key = None
        try:
            key = _claim(context.root_path)
            if key is None:
                self.sink.show_warning("A commit message is already being generated for this repository.")
                return DeliveryOutcome.skipped(IN_PROGRESS)
            return self._run(context.root_path)
        except Exception as e:
            self.sink.show_error(f"An error occurred while generating the commit message: {e}")
            return DeliveryOutcome.failed(str(e))
        finally:
            if key is not None:
                _release(key)

    def _run(self, root: Path) -> DeliveryOutcome:
        timings = {}

        if not has_repository(root):
            self.sink.show_warning("No Git repository detected in the workspace folder.")
            return DeliveryOutcome.skipped(NO_REPOSITORY)

        t0 = time.time()
        try:
            diff = self.git_factory(root).get_staged_diff()
        except GitError as e:
            self.sink.show_error(f"Failed to get Git diff: {e}")
            return DeliveryOutcome.failed(str(e))
        timings['git'] = time.time() - t0

        if not diff:
            self.sink.show_message("No changes staged for commit. Please stage your changes first.")
            return DeliveryOutcome.skipped(NOTHING_STAGED, timings=timings)

        prompt = build_prompt(diff)
        request = self.client.build_request(prompt)

        t0 = time.time()
        try:
            with self.sink.busy(f"Generating with {self.client.name}..."):
                response = self.client.generate(request)
        except LLMError as e:
            self.sink.show_error(f"Failed to generate commit message: {e}")
            return DeliveryOutcome.failed(str(e), prompt_chars=len(prompt), timings=timings)
        timings['generate'] = time.time() - t0

        message = response.content.strip()
        if not message:
            self.sink.show_warning("The model returned an empty commit message.")
            return DeliveryOutcome.skipped(EMPTY_COMPLETION, prompt_chars=len(prompt), tokens_used=response.tokens_used, timings=timings)

        self.sink.show_message(f"Generated Commit Message:\n{message}")
        self.sink.set_pending_commit_message(message)
        return DeliveryOutcome.delivered(message, prompt_chars=len(prompt), tokens_used=response.tokens_used, timings=timings)
