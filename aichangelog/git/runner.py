"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
"""

import subprocess
from pathlib import Path

from aichangelog.git.exceptions import GitError

# Exit status git uses for fatal errors such as "not a git repository"
GIT_FATAL_EXIT_CODE = 128


class GitCommandError(GitError):
    """Raised when git runs but exits with a non-zero status."""

    def __init__(self, args: list[str], returncode: int, stderr: str):
        self.command = ["git"] + args
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"Git command failed (exit {returncode}): git {' '.join(args)}\n{stderr}".rstrip()
        )


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its stripped stdout.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If git is missing.
        GitCommandError: If git exits with a non-zero status.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    if result.returncode != 0:
        raise GitCommandError(args, result.returncode, (result.stderr or "").strip())

    return result.stdout.strip()


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
    except GitCommandError as e:
        if e.returncode == GIT_FATAL_EXIT_CODE:
            raise GitError(
                f"Not in a git repository ({Path.cwd()}). "
                "Please run this command from within a git repo."
            )
        raise
    return Path(root)
