"""Core git command runner."""

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .formatting import format_command, format_output_lines
from .prompt import Prompter


class GitError(Exception):
    """Git operation failed."""

    pass


class RevokeAborted(GitError):
    """Operator aborted a conflicting git step."""

    def __init__(self, cause: GitError):
        super().__init__(str(cause))
        self.cause = cause


@dataclass
class ConflictRecovery:
    """
    What to do when a conflict-prone git command fails.

    Recoveries are plain data so call sites stay inspectable: the warning shown
    to the operator, git commands to run once conflicts are resolved, fallback
    commands if any of those fail, and commands to run on abort.
    """

    warning: str
    on_resolved: List[List[str]] = field(default_factory=list)
    on_resolved_fallback: List[List[str]] = field(default_factory=list)
    on_abort: List[List[str]] = field(default_factory=list)


class GitBasicInterface:
    """
    Runs git commands against a working repository.

    ``run_command`` is the quiet variant used for queries; ``run_with_log``
    echoes the command and its output for the operator and accepts a
    ``ConflictRecovery`` for steps whose usual failure mode is a merge conflict.
    """

    def __init__(
        self,
        repo_path: Optional[Path] = None,
        console: Optional[Console] = None,
        prompter: Optional[Prompter] = None,
    ):
        """Initialize with repository path, console and operator prompter."""
        self.repo_path = find_repo_root(Path(repo_path or Path.cwd()))
        self.console = console or Console()
        self.prompter = prompter or Prompter()

    def run_command(self, args: List[str]) -> str:
        """Execute git command and return stdout."""
        try:
            result = subprocess.run(
                ["git"] + args, cwd=self.repo_path, capture_output=True, text=True, check=True
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\nError: {e.stderr}") from e
        except FileNotFoundError as e:
            raise GitError("git executable not found on PATH") from e

    def run_with_log(self, args: List[str], recovery: Optional[ConflictRecovery] = None) -> str:
        """
        Execute git command, echoing it and its output.

        On failure without a recovery the ``GitError`` propagates. With a
        recovery the conflict-poll loop decides: resolved means the failure is
        handled and an empty string is returned, abort raises ``RevokeAborted``.
        """
        self.console.print(f"[dim]> {escape(format_command(args))}[/dim]")

        try:
            output = self.run_command(args)
        except GitError as e:
            if recovery is None:
                raise
            # Import here to avoid circular imports
            from .conflicts import wait_for_resolution

            if not wait_for_resolution(self, recovery):
                raise RevokeAborted(e) from e
            return ""

        for line in format_output_lines(output):
            self.console.print(escape(line))
        self.console.print()

        return output


def find_repo_root(start: Path) -> Path:
    """Walk up from start to the directory holding ``.git``."""
    start = start.expanduser().resolve()
    for candidate in [start] + list(start.parents):
        if (candidate / ".git").exists():
            return candidate
    raise GitError(f"Not a git repository: {start}")
