"""Revoke CLI - revert merge commits and revive their branches."""

from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape

from . import __version__
from .argv import parse_args
from .config import get_push_preference, get_repo_path, load_config
from .git_basic import GitBasicInterface, GitError
from .prompt import Prompter
from .workflow import RevokeWorkflow, check_usage

app = typer.Typer(
    name="revoke",
    help="Git command to revert merge commits without pain",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version information."""
    if value:
        print(f"Revoke version: [bold]{__version__}[/bold]")
        raise typer.Exit()


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def revoke(
    ctx: typer.Context,
    repo: Optional[Path] = typer.Option(
        None, "--repo", help="Repository to operate on (default: current directory)"
    ),
    push: Optional[bool] = typer.Option(
        None, "--push/--no-push", help="Answer the final push question up front"
    ),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Revert a merge commit, then recreate its branch via cherry-pick."""
    args = parse_args(list(ctx.args))

    # Help and the no-hash notice need no repository or config
    if check_usage(args, console) is not None:
        return

    try:
        config = load_config()
        if push is None:
            push = get_push_preference(config)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    repo_path = repo or get_repo_path(config)
    try:
        git = GitBasicInterface(
            repo_path=Path(repo_path) if repo_path else None,
            console=console,
            prompter=Prompter(),
        )
    except GitError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        console.print("[yellow]Please run revoke from within a git repository.[/yellow]")
        raise typer.Exit(1) from None

    result = RevokeWorkflow(git, config).run(args, push=push)
    if not result.success:
        raise typer.Exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
