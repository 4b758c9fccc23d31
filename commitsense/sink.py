"""Result Sink - Where the requester reports what happened."""

from abc import ABC, abstractmethod
from contextlib import nullcontext


class ResultSink(ABC):
    """Receives user-facing reports from one invocation.

    Implemented by whatever embeds the requester: a terminal, an editor
    integration, a test harness.
    """

    @abstractmethod
    def show_message(self, text: str) -> None:
        pass

    @abstractmethod
    def show_warning(self, text: str) -> None:
        pass

    @abstractmethod
    def show_error(self, text: str) -> None:
        pass

    def set_pending_commit_message(self, text: str) -> bool:
        """Pre-fill the host's commit message field. Returns False when the host has none."""
        return False

    def busy(self, text: str):
        """Context manager wrapped around the generation request."""
        return nullcontext()
