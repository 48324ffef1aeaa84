"""The end-to-end demo: provision, inspect, then tear down on request."""
from __future__ import annotations

from typing import Callable

import typer
from azure.mgmt.cdn import CdnManagementClient
from azure.mgmt.resource import ResourceManagementClient

from cdn_console import cdn
from cdn_console.models.inventory import Inventory
from cdn_console.models.settings import EnvSettings, env
from cdn_console.resource_groups import delete_resource_group, ensure_resource_group
from cdn_console.utils.prompt import prompt_user

Prompt = Callable[[str], bool]


def prompt_purge(
    client: CdnManagementClient, settings: EnvSettings, prompt: Prompt = prompt_user
):
    if prompt(f"Purge CDN endpoint {settings.endpoint_name}?"):
        typer.echo("Purging endpoint. Please wait...")
        cdn.purge_endpoint(client, settings)
        typer.echo("Done.")
        typer.echo("")


def prompt_delete_endpoint(
    client: CdnManagementClient, settings: EnvSettings, prompt: Prompt = prompt_user
):
    if prompt(f"Delete CDN endpoint {settings.endpoint_name} on profile {settings.profile_name}?"):
        typer.echo("Deleting endpoint. Please wait...")
        cdn.delete_endpoint(client, settings)
        typer.echo("Done.")
        typer.echo("")


def prompt_delete_profile(
    client: CdnManagementClient, settings: EnvSettings, prompt: Prompt = prompt_user
):
    if prompt(f"Delete CDN profile {settings.profile_name}?"):
        typer.echo("Deleting profile. Please wait...")
        cdn.delete_profile(client, settings)
        typer.echo("Done.")
        typer.echo("")


def prompt_delete_resource_group(
    client: ResourceManagementClient, settings: EnvSettings, prompt: Prompt = prompt_user
):
    if prompt(f"Delete resource group {settings.resource_group_name}?"):
        typer.echo("Deleting resource group. Please wait...")
        delete_resource_group(client, settings.resource_group_name)
        typer.echo("Done.")
        typer.echo("")


def run_demo(
    arm: ResourceManagementClient,
    cdn_client: CdnManagementClient,
    settings: EnvSettings = env,
    prompt: Prompt = prompt_user,
) -> Inventory:
    """Runs every step in order. Remote errors propagate to the caller."""
    ensure_resource_group(arm, settings.resource_group_name, settings.location)

    inventory = cdn.list_inventory(cdn_client, settings.profile_name, settings.endpoint_name)
    cdn.ensure_profile(cdn_client, settings, inventory.profile_exists)
    cdn.ensure_endpoint(cdn_client, settings, inventory.endpoint_exists)
    typer.echo("")

    prompt_purge(cdn_client, settings, prompt)
    prompt_delete_endpoint(cdn_client, settings, prompt)
    prompt_delete_profile(cdn_client, settings, prompt)
    prompt_delete_resource_group(arm, settings, prompt)

    return inventory
