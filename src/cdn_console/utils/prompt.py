"""Single keypress yes/no prompts."""
from typing import Callable

import typer

MAX_ATTEMPTS = 10


def prompt_user(
    question: str,
    getchar: Callable[[], str] = typer.getchar,
    max_attempts: int = MAX_ATTEMPTS,
) -> bool:
    """
    Ask a yes/no question and read a single key.
    Any key other than Y or N asks again, up to max_attempts times,
    after which the answer counts as no. So does an unreadable input.
    """
    for _ in range(max_attempts):
        typer.echo(f"{question} (Y/N): ", nl=False)
        try:
            key = getchar()
        except (OSError, EOFError):
            typer.echo("")
            typer.echo("No terminal to read an answer from, skipping.")
            return False
        typer.echo(key if key.isprintable() else "")

        if key.lower() == "y":
            return True
        if key.lower() == "n":
            return False

    typer.echo(f"No answer after {max_attempts} attempts, skipping.")
    return False
