"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- NoCommitsError: Raised when the revision range holds no commits
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NoCommitsError(GitError):
    """Raised when the revision range contains no commits."""

    pass
