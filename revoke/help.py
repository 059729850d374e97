"""Static usage text."""

from rich.console import Console

HELP_TEXT = """
================================================
Git command to revert merge commits without pain
================================================

Usage:
    revoke <merge_commit_hash> [--revive-at=<ref>] [--push | --no-push]
    revoke 928e58ad
    revoke 928e58ad --revive-at=origin/main

Before usage:
    Checkout branch with merge commit

How it works:
    1) Delete local branch of merge (if present)
    2) Delete remote branch of merge (if present)
    3) Revert merge commit
    4) Create copy of merge branch
    5) Cherry-pick merge changes to the copy
    6) Print suggestions for changes pushing

Options:
    --revive-at=<ref>   Checkout and pull <ref> before recreating the branch
    --push / --no-push  Answer the final push question up front
    --repo <path>       Repository to operate on (default: current directory)
    --version           Show version and exit
    --help              Show this message and exit
"""


def print_help(console: Console) -> None:
    """Print usage text."""
    console.print(HELP_TEXT, markup=False, highlight=False)
