"""Common formatting utilities for revoke output."""

from typing import List


def format_short_sha(sha: str) -> str:
    """
    Format SHA to 8-character abbreviated format for display.

    Args:
        sha: Full or partial SHA string

    Returns:
        8-character SHA or original if shorter than 8 chars
    """
    if not sha:
        return ""
    return sha[:8] if len(sha) >= 8 else sha


def format_command(args: List[str]) -> str:
    """Render a git argument list the way an operator would type it."""
    rendered = []
    for arg in args:
        if not arg or any(ch in arg for ch in " \"'"):
            rendered.append("'" + arg.replace("'", "'\\''") + "'")
        else:
            rendered.append(arg)
    return " ".join(["git"] + rendered)


def format_output_lines(output: str) -> List[str]:
    """Prefix each non-blank line of command output for echoing."""
    return ["  < " + line for line in output.split("\n") if line.strip()]
