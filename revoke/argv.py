"""Raw argument extraction for the revoke command."""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Union

REVIVE_AT_PATTERN = re.compile(r"^--revive-at=")
POSITIONAL_PATTERN = re.compile(r"^(?!--)")


@dataclass
class RevokeArgs:
    """Values pulled out of the raw argument list."""

    merge_hash: Optional[str] = None
    revive_at: Optional[str] = None
    show_help: bool = False


def get_arg(argv: List[str], pattern: Union[str, Pattern[str]]) -> Optional[str]:
    """
    Find the first token matching pattern and return it without the match.

    Surrounding quotes left over from the shell are stripped, so
    ``--revive-at="origin/main"`` yields ``origin/main``.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    for token in argv:
        if regex.search(token):
            value = regex.sub("", token, count=1)
            value = re.sub(r"^['\"]", "", value)
            return re.sub(r"['\"]$", "", value)

    return None


def parse_args(argv: List[str]) -> RevokeArgs:
    """Extract the merge hash and optional revive ref from argv."""
    return RevokeArgs(
        merge_hash=get_arg(argv, POSITIONAL_PATTERN) or None,
        revive_at=get_arg(argv, REVIVE_AT_PATTERN) or None,
        show_help="--help" in argv,
    )
