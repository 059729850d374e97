"""Interactive conflict handling for revert and cherry-pick steps."""

from typing import List

from .git_basic import ConflictRecovery, GitBasicInterface, GitError

RESOLVE_CHOICES = (
    "   Y - I have fixed conflicts, continue\n"
    "   N - Abort {action}\n"
)


def list_unmerged_paths(git: GitBasicInterface) -> List[str]:
    """Get paths git still reports as unmerged."""
    output = git.run_command(["diff", "--name-only", "--diff-filter=U", "--relative"])
    return [line.strip() for line in output.split("\n") if line.strip()]


def has_unmerged_paths(git: GitBasicInterface) -> bool:
    """Check if any unmerged paths remain."""
    return len(list_unmerged_paths(git)) > 0


def revert_recovery() -> ConflictRecovery:
    """Recovery for ``git revert -n -m 1``."""
    return ConflictRecovery(
        warning="WARN: Revert conflicts:\n" + RESOLVE_CHOICES.format(action="revoke command"),
        on_resolved=[["revert", "--continue"]],
        on_resolved_fallback=[["revert", "--skip"]],
        on_abort=[["revert", "--abort"]],
    )


def cherry_pick_recovery() -> ConflictRecovery:
    """Recovery for ``git cherry-pick -n -m 1``; the caller commits afterwards."""
    return ConflictRecovery(
        warning="WARN: Cherry-pick conflicts:\n"
        + RESOLVE_CHOICES.format(action="cherry-pick command"),
        on_abort=[["cherry-pick", "--abort"]],
    )


def wait_for_resolution(git: GitBasicInterface, recovery: ConflictRecovery) -> bool:
    """
    Poll until the operator has cleared every unmerged path, or aborts.

    Each "yes" re-checks the unmerged paths; while any remain the warning is
    shown again and nothing else happens. Once none remain the on-resolved
    commands run and True is returned. Any other answer runs the on-abort
    commands and returns False.

    Returns:
        True to continue the outer workflow, False to abort it
    """
    console = git.console
    has_conflicts = True

    while has_conflicts:
        console.print()
        console.print(f"[yellow]{recovery.warning}[/yellow]")

        confirmed = git.prompter.confirm("Y / N")
        console.print()

        if not confirmed:
            for args in recovery.on_abort:
                git.run_with_log(args)
            return False

        has_conflicts = has_unmerged_paths(git)
        if has_conflicts:
            console.print("[red]Unmerged paths remain, resolve them first[/red]")

    _run_on_resolved(git, recovery)
    return True


def _run_on_resolved(git: GitBasicInterface, recovery: ConflictRecovery) -> None:
    """Run the resolved commands, switching to the fallback if one fails."""
    try:
        for args in recovery.on_resolved:
            git.run_with_log(args)
    except GitError:
        if not recovery.on_resolved_fallback:
            raise
        for args in recovery.on_resolved_fallback:
            git.run_with_log(args)
