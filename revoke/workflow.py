"""Revoke workflow - revert a merge commit and revive its branch."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, cast

from rich.console import Console
from rich.markup import escape

from .argv import RevokeArgs
from .branches import MergeInfo, get_branch_presence, parse_merge_message
from .config import (
    DEFAULT_CONFIG,
    format_revert_message,
    format_revive_message,
    get_remote,
    validate_messages,
)
from .conflicts import cherry_pick_recovery, revert_recovery
from .formatting import format_short_sha
from .git_basic import GitBasicInterface, GitError, RevokeAborted
from .help import print_help


class Outcome(Enum):
    """How a revoke run ended."""

    COMPLETED = "completed"
    HELP = "help"
    NO_HASH = "no_hash"
    NOT_MERGE = "not_merge"
    ABORTED = "aborted"
    FAILED = "failed"


@dataclass
class RevokeResult:
    """Result of a revoke run, handed back to the CLI to pick an exit status."""

    outcome: Outcome
    message: str = ""
    branch_name: Optional[str] = None
    pushed: bool = False

    @property
    def success(self) -> bool:
        """True when the run ended without an error."""
        return self.outcome in (Outcome.COMPLETED, Outcome.HELP, Outcome.NO_HASH)


def check_usage(args: RevokeArgs, console: Console) -> Optional[RevokeResult]:
    """Handle --help and a missing hash; None means the workflow can run."""
    if args.show_help:
        print_help(console)
        return RevokeResult(Outcome.HELP)

    if not args.merge_hash:
        console.print("[yellow]No hash provided. Exit...[/yellow]")
        print_help(console)
        return RevokeResult(Outcome.NO_HASH, "No hash provided")

    return None


class RevokeWorkflow:
    """
    Sequences the revoke steps against one repository.

    Steps run strictly in order and any ``GitError`` stops the sequence; the
    error is turned into a ``RevokeResult`` instead of ending the process.
    Nothing already done is rolled back.
    """

    def __init__(self, git: GitBasicInterface, config: Optional[Dict[str, Any]] = None):
        """Initialize with a git runner (which carries console and prompter)."""
        self.git = git
        self.console = git.console
        self.prompter = git.prompter
        self.config = config or DEFAULT_CONFIG
        self.remote = get_remote(self.config)

    def run(self, args: RevokeArgs, push: Optional[bool] = None) -> RevokeResult:
        """Run the whole workflow for args.merge_hash."""
        usage = check_usage(args, self.console)
        if usage is not None:
            return usage
        merge_hash = cast(str, args.merge_hash)

        try:
            validate_messages(self.config)
        except ValueError as e:
            self.console.print(f"[red]Error: {escape(str(e))}[/red]")
            return RevokeResult(Outcome.FAILED, str(e))

        try:
            return self._revoke(merge_hash, args.revive_at, push)
        except RevokeAborted as e:
            self.console.print(f"\n[red]ERROR: {escape(str(e))}[/red]")
            return RevokeResult(Outcome.ABORTED, str(e))
        except GitError as e:
            self.console.print(f"\n[red]ERROR: {escape(str(e))}[/red]")
            return RevokeResult(Outcome.FAILED, str(e))

    def _revoke(
        self, merge_hash: str, revive_at: Optional[str], push: Optional[bool]
    ) -> RevokeResult:
        git = self.git

        merge_message = git.run_command(["log", "-n", "1", "--pretty=format:%s", merge_hash])
        merge = parse_merge_message(merge_message)
        if merge is None:
            self.console.print(
                "[red]ERROR: Cannot revoke usual commit. Provide hash for MERGE commit![/red]"
            )
            self.console.print(
                "[dim]P.S.: Merge commit - when message in format `Merge branch '...'`[/dim]"
            )
            return RevokeResult(Outcome.NOT_MERGE, f"Not a merge commit: {merge_hash}")

        current_branch = git.run_command(["rev-parse", "--abbrev-ref", "HEAD"]).strip()
        branch_name = merge.branch_name

        self.console.print(
            f"[bold cyan]Revoking {escape(format_short_sha(merge_hash))} "
            f"({escape(branch_name)}) on {escape(current_branch)}[/bold cyan]"
        )
        self.console.print()

        self._delete_stale_branch(branch_name)
        self._revert_merge(merge_hash, merge)

        if revive_at:
            git.run_with_log(["checkout", revive_at])
            git.run_with_log(["pull"])

        git.run_with_log(["checkout", "-b", branch_name])
        self._revive_changes(merge_hash, branch_name)

        self.console.print("[green]Success!!![/green]")
        pushed = self._offer_push(branch_name, current_branch, push)

        return RevokeResult(Outcome.COMPLETED, branch_name=branch_name, pushed=pushed)

    def _delete_stale_branch(self, branch_name: str) -> None:
        """Delete the merged branch locally, and on the remote if it was local too."""
        presence = get_branch_presence(self.git, branch_name, self.remote)

        # Remote copy is only cleaned up when a local one existed
        if presence.local:
            self.git.run_with_log(["branch", "-d", branch_name])

            if presence.remote:
                self.git.run_with_log(["push", "-d", self.remote, branch_name])

    def _revert_merge(self, merge_hash: str, merge: MergeInfo) -> None:
        self.git.run_with_log(["revert", "-n", "-m", "1", merge_hash], revert_recovery())
        self.git.run_with_log(
            ["commit", "--allow-empty", "-m", format_revert_message(self.config, merge.message)]
        )

    def _revive_changes(self, merge_hash: str, branch_name: str) -> None:
        self.git.run_with_log(["cherry-pick", "-n", "-m", "1", merge_hash], cherry_pick_recovery())
        self.git.run_with_log(
            ["commit", "--allow-empty", "-m", format_revive_message(self.config, branch_name)]
        )

    def _offer_push(self, branch_name: str, current_branch: str, push: Optional[bool]) -> bool:
        """Suggest the push sequence and run it if the operator agrees."""
        self.console.print()
        self.console.print("Do you want to push changes?")
        self.console.print(
            f"   git push -u {self.remote} {branch_name} && "
            f"git checkout {current_branch} && git push",
            markup=False,
        )

        if push is None:
            push = self.prompter.confirm("Y (push) / N (finish)")
            self.console.print()

        if not push:
            self.console.print("Good bye!!!")
            return False

        self.git.run_with_log(["push", "-u", self.remote, branch_name])
        self.git.run_with_log(["checkout", current_branch])
        self.git.run_with_log(["push"])
        return True
