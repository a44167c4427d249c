"""Prompt templates for changelog generation."""

# System prompt for the model
SYSTEM_PROMPT = """You are an expert software engineer and release manager writing changelogs.
Be precise: only describe changes that are stated in the commit messages."""

# User prompt template
USER_PROMPT_TEMPLATE = """Given the following git commit messages, write a changelog in Markdown.

Rules:
- Output ONLY the Markdown changelog. No code fences. No commentary before or after.
- Group related changes under headings such as "Added", "Changed", "Fixed" and "Removed". Omit empty groups.
- One concise bullet per user-visible change. Merge commits that describe the same change.
- Leave out merge commits, version bumps and other housekeeping unless they matter to users.
- Only describe changes stated in the commits. Do not invent details.

[RANGE]
{rev_range}

[COMMITS]
{commits}"""


def format_commits(messages: list[str], max_chars: int = 50000) -> str:
    """Format commit messages as a Markdown bullet list.

    Continuation lines of multi-line messages are indented under their bullet.

    Args:
        messages: Commit messages, newest first.
        max_chars: Maximum characters for the formatted list.

    Returns:
        The formatted commit list.
    """
    bullets = []
    for message in messages:
        lines = message.strip().split("\n")
        bullet = f"- {lines[0]}"
        for line in lines[1:]:
            bullet += f"\n  {line}" if line.strip() else "\n"
        bullets.append(bullet)

    commits = "\n".join(bullets) if bullets else "- (no commits)"

    if len(commits) > max_chars:
        commits = commits[:max_chars] + "\n...[truncated]\n"

    return commits


def build_user_prompt(messages: list[str], rev_range: str, max_chars: int = 50000) -> str:
    """Build the user prompt from the collected commit messages.

    Args:
        messages: Commit messages, newest first.
        rev_range: The revision range the messages came from.
        max_chars: Maximum characters of commit text to include.

    Returns:
        The formatted user prompt.
    """
    return USER_PROMPT_TEMPLATE.format(
        rev_range=rev_range,
        commits=format_commits(messages, max_chars=max_chars),
    )
