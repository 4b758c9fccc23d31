"""Git Analyzer - Read staged changes from a working directory."""

import subprocess
from pathlib import Path

GIT_DIR_NAME = '.git'


class GitError(Exception):
    """Raised when git operations fail."""
    pass


def has_repository(root: str | Path) -> bool:
    """True if the git metadata directory sits directly under root."""
    return (Path(root) / GIT_DIR_NAME).exists()


class GitAnalyzer:
    """Reads staged changes from the repository rooted at `root`."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def _run_git(self, *args: str) -> str:
        """Run a git command in the repository root and return stdout.

        Anything git writes to stderr is treated as a failure, even with a
        zero exit status.
        """
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.root,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        except OSError as e:
            raise GitError(f"Could not run git: {e}")

        stderr = (result.stderr or '').strip()
        if result.returncode != 0:
            raise GitError(stderr or f"git {' '.join(args)} exited with status {result.returncode}")
        if stderr:
            raise GitError(stderr)
        return result.stdout

    def get_staged_diff(self) -> str:
        """Diff of the index against HEAD. Empty string when nothing is staged."""
        return self._run_git('diff', '--cached')
