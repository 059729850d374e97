"""Merge message parsing and branch existence checks."""

import re
from dataclasses import dataclass
from typing import List, Optional

from .git_basic import GitBasicInterface

MERGE_MESSAGE_PATTERN = re.compile(r"^Merge branch '(.*?)'")


@dataclass
class MergeInfo:
    """A merge commit subject and the branch it merged."""

    message: str
    branch_name: str


@dataclass
class BranchPresence:
    """Where a branch name currently exists."""

    local: bool
    remote: bool


def parse_merge_message(message: str) -> Optional[MergeInfo]:
    """
    Parse a commit subject of the form ``Merge branch '<name>' ...``.

    Returns:
        MergeInfo with the merged branch name, or None for a non-merge subject
    """
    match = MERGE_MESSAGE_PATTERN.match(message)
    if not match:
        return None
    return MergeInfo(message=message, branch_name=match.group(1))


def parse_branch_list(output: str) -> List[str]:
    """
    Normalize ``git branch --all`` output into plain branch names.

    Local branches come back as-is, remote-tracking ones as ``<remote>/<name>``.
    """
    branches = []
    for line in output.split("\n"):
        name = re.sub(r"^[*+]?\s+", "", line).strip()
        if not name:
            continue
        # remotes/origin/HEAD -> origin/main
        name = name.split(" -> ")[0]
        if name.startswith("remotes/"):
            name = name[len("remotes/") :]
        branches.append(name)
    return branches


def get_branch_presence(
    git: GitBasicInterface, branch_name: str, remote: str = "origin"
) -> BranchPresence:
    """Check whether branch_name exists locally and on the remote."""
    branches = parse_branch_list(git.run_command(["branch", "--all"]))
    return BranchPresence(
        local=branch_name in branches,
        remote=f"{remote}/{branch_name}" in branches,
    )
