"""Shared command helpers."""
from __future__ import annotations

from typing import Annotated, Callable, ParamSpec, TypeVar

import typer
from azure.core.exceptions import AzureError
from typer import Option

from cdn_console.auth import AuthMethod
from cdn_console.models.settings import env
from cdn_console.utils.prompt import prompt_user

T = TypeVar("T")
P = ParamSpec("P")

ConfirmType = Annotated[bool, Option("--yes", "-y", help="Confirm action")]
AuthType = Annotated[AuthMethod, Option("--auth", help="Login flow to use")]


def attempt(func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> T:
    """Run a remote call, reporting Azure errors as a failed exit."""
    try:
        return func(*args, **kwargs)
    except AzureError as e:
        if env.verbose:
            raise
        typer.echo(f"❌  Error: {e}")
        raise SystemExit(1)


def confirm(question: str, yes: bool) -> bool:
    return yes or prompt_user(question)
