"""Git history access for aichangelog."""

from aichangelog.git.exceptions import GitError, NoCommitsError
from aichangelog.git.history import (
    first_line,
    get_commit_messages,
    get_last_tag,
    resolve_range,
)
from aichangelog.git.runner import GitCommandError, _run_git_command, get_repo_root

__all__ = [
    "GitError",
    "NoCommitsError",
    "GitCommandError",
    "_run_git_command",
    "get_repo_root",
    "get_last_tag",
    "resolve_range",
    "first_line",
    "get_commit_messages",
]
