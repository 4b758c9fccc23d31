"""Git Operations Package"""

from commitsense.git.analyzer import GitAnalyzer, GitError, has_repository

__all__ = [
    "GitAnalyzer",
    "GitError",
    "has_repository",
]
