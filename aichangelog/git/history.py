"""Commit history collection.

Contains:
- get_last_tag: Most recent tag reachable from HEAD
- resolve_range: Pick the revision range to read commits from
- first_line: Reduce a commit message to its subject line
- get_commit_messages: List commit messages in a revision range
"""

from typing import Optional

from aichangelog.git.exceptions import GitError, NoCommitsError
from aichangelog.git.runner import _run_git_command


def get_last_tag() -> Optional[str]:
    """Get the most recent tag reachable from HEAD.

    Returns:
        The tag name, or None if the repository has no tags.
    """
    try:
        tag = _run_git_command(["describe", "--tags", "--abbrev=0"])
    except GitError:
        # `git describe` fails when there is no tag to describe from
        return None
    return tag or None


def resolve_range(rev_range: Optional[str] = None) -> str:
    """Resolve the revision range to collect commits from.

    An explicit range is used as given. Otherwise everything since the
    last tag is used, or the whole history of HEAD if there are no tags.

    Args:
        rev_range: Revision range from the command line, if any.

    Returns:
        A range expression understood by `git log`.
    """
    if rev_range:
        return rev_range

    tag = get_last_tag()
    if tag:
        return f"{tag}..HEAD"
    return "HEAD"


def first_line(message: str) -> str:
    """Return the first line of a commit message."""
    return message.strip().split("\n")[0].strip()


def get_commit_messages(rev_range: str, short: bool = False) -> list[str]:
    """Get the commit messages in a revision range, newest first.

    Args:
        rev_range: A range expression understood by `git log`.
        short: Keep only the first line of each message.

    Returns:
        List of commit messages.

    Raises:
        GitError: If git fails or the range is invalid.
        NoCommitsError: If the range contains no commits.
    """
    # -z terminates each commit with NUL so multi-line bodies stay intact
    output = _run_git_command(["log", "-z", "--format=%B", rev_range, "--"])

    messages = []
    for raw in output.split("\0"):
        message = raw.strip()
        if not message:
            continue
        messages.append(first_line(message) if short else message)

    if not messages:
        raise NoCommitsError(f"No commits found in range: {rev_range}")

    return messages
