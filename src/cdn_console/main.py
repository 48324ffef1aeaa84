from typing import Annotated

import typer

from cdn_console import cdn, config, resource_groups, workflow
from cdn_console.auth import AuthMethod
from cdn_console.clients import AzureContext
from cdn_console.utils.cli import AuthType, attempt

app = typer.Typer(no_args_is_help=True)
app.add_typer(cdn.app, name="cdn")
app.add_typer(resource_groups.app, name="group")
app.add_typer(config.app, name="config")


@app.command()
def run(
    auth: AuthType = AuthMethod.BROWSER,
    pause: Annotated[bool, typer.Option("--pause/--no-pause")] = True,
):
    """Provision a resource group, CDN profile and endpoint, then offer to tear them down."""
    ctx = attempt(AzureContext, auth)
    attempt(workflow.run_demo, ctx.arm, ctx.cdn)

    if pause:
        typer.pause("Press any key to end program.")
