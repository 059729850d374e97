"""Operator input for interactive revoke steps."""

import typer

YES_ANSWERS = ("y", "yes")


def is_yes(answer: str) -> bool:
    """Check whether an answer means yes."""
    return answer.strip().lower() in YES_ANSWERS


class Prompter:
    """
    Reads one line of operator input on demand.

    A single instance is created by the CLI and handed to every component that
    needs to ask something, so tests can swap in a scripted source.
    """

    def ask(self, question: str) -> str:
        """Prompt for a free-form answer (empty input is allowed)."""
        return str(typer.prompt(question, default="", show_default=False))

    def confirm(self, question: str) -> bool:
        """Prompt for a yes/no answer; anything but yes counts as no."""
        return is_yes(self.ask(question))
