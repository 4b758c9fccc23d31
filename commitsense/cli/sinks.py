"""Terminal result sinks."""

import sys

from commitsense.cli.utils import copy_to_clipboard
from commitsense.output import CHECK, Spinner, dim, info, print_error, print_ruled, print_warning, success, warning
from commitsense.sink import ResultSink


class TerminalSink(ResultSink):
    """Interactive terminal: coloured reports, clipboard as the commit message field."""

    def __init__(self, copy: bool = True):
        self.copy = copy

    def show_message(self, text: str) -> None:
        heading, _, body = text.partition('\n')
        if body:
            print_ruled(heading, body)
        else:
            print(info(heading))

    def show_warning(self, text: str) -> None:
        print_warning(text)

    def show_error(self, text: str) -> None:
        print_error(text)

    def set_pending_commit_message(self, text: str) -> bool:
        if not self.copy:
            return False
        copied, reason = copy_to_clipboard(text)
        if copied:
            print(f"{success(CHECK)} Copied to clipboard!")
        else:
            print(f"{warning('!')} Could not copy to clipboard{': ' + reason if reason else ''}")
            print(dim("  Select the message above to copy manually."))
        return copied

    def busy(self, text: str):
        return Spinner(dim(text))


class PipeSink(ResultSink):
    """Non-TTY stdout: only the raw commit message goes to stdout."""

    def show_message(self, text: str) -> None:
        pass

    def show_warning(self, text: str) -> None:
        print_warning(text, file=sys.stderr)

    def show_error(self, text: str) -> None:
        print_error(text)

    def set_pending_commit_message(self, text: str) -> bool:
        print(text)
        return True
