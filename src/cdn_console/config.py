"""Configuration"""
from __future__ import annotations

from typing import Optional

import rich
import typer
from typing_extensions import Annotated

from cdn_console.models.keyring_config import ConfigKey, KeyringConfig
from cdn_console.models.settings import env

app = typer.Typer(no_args_is_help=True)
cp = rich.print


@app.command(name="set")
def set_config(
        key: ConfigKey,
        value: Annotated[Optional[str], typer.Argument()] = None
):
    """Store an identity value in the keyring, or clear it when no value is given."""
    with KeyringConfig.load_from_keyring() as config:
        if value is None:
            config.pop(key, None)
        else:
            config[key] = value

    cp(f"{'Cleared' if value is None else 'Saved'} key {repr(key.value)}")


@app.command()
def show():
    """Show the keyring configuration."""
    config = KeyringConfig.load_from_keyring()
    cp(config.to_keys_json())


@app.command()
def settings():
    """Show the effective settings from the environment."""
    rich.print_json(env.model_dump_json())
