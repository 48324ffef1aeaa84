"""Resource group tools."""
from __future__ import annotations

import typer
from azure.mgmt.resource import ResourceManagementClient
from azure.mgmt.resource.resources.models import ResourceGroup

from cdn_console.auth import AuthMethod
from cdn_console.clients import AzureContext
from cdn_console.models.settings import env
from cdn_console.utils.cli import AuthType, ConfirmType, attempt, confirm
from cdn_console.utils.spinners import wait_for

app = typer.Typer(no_args_is_help=True)


def ensure_resource_group(client: ResourceManagementClient, name: str, location: str) -> bool:
    """Creates the resource group if it doesn't exist. Returns True if created."""
    if client.resource_groups.check_existence(name):
        typer.echo(f"Resource group {name} already exists.")
        return False

    typer.echo(f"Creating resource group {name}.")
    client.resource_groups.create_or_update(name, ResourceGroup(location=location))
    return True


def delete_resource_group(client: ResourceManagementClient, name: str):
    """Deletes the resource group and everything in it. Fails if it doesn't exist."""
    wait_for(client.resource_groups.begin_delete(name), f"Deleting resource group {name}...")


@app.command()
def ensure(auth: AuthType = AuthMethod.BROWSER):
    """Create the configured resource group if needed."""
    ctx = attempt(AzureContext, auth)
    attempt(ensure_resource_group, ctx.arm, env.resource_group_name, env.location)


@app.command()
def delete(auth: AuthType = AuthMethod.BROWSER, yes: ConfirmType = False):
    """Delete the configured resource group."""
    if not confirm(f"Delete resource group {env.resource_group_name}?", yes):
        raise typer.Abort()

    ctx = attempt(AzureContext, auth)
    attempt(delete_resource_group, ctx.arm, env.resource_group_name)
    typer.echo(f"🗑️  Deleted {env.resource_group_name!r}")
