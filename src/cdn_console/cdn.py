"""Azure CDN profile and endpoint tools."""
from __future__ import annotations

from typing import Annotated, Callable, Iterable, Optional

import typer
from azure.core.exceptions import ResourceNotFoundError
from azure.mgmt.cdn import CdnManagementClient
from azure.mgmt.cdn.models import DeepCreatedOrigin, Endpoint, Profile, PurgeParameters, Sku
from azure.mgmt.core.tools import parse_resource_id
from rich import print_json

from cdn_console.auth import AuthMethod
from cdn_console.clients import AzureContext
from cdn_console.models.inventory import EndpointSummary, Inventory, ProfileSummary
from cdn_console.models.settings import EnvSettings, env
from cdn_console.utils.cli import AuthType, ConfirmType, attempt, confirm
from cdn_console.utils.spinners import wait_for

app = typer.Typer(no_args_is_help=True)


def profile_resource_group(profile: Profile) -> str:
    """Resource group name from a profile's ARM id."""
    return parse_resource_id(profile.id)["resource_group"]


def _sku_name(profile: Profile) -> str | None:
    if profile.sku is None:
        return None
    # enum member or plain string depending on the API version
    return getattr(profile.sku.name, "value", profile.sku.name)


def list_inventory(
    client: CdnManagementClient,
    profile_name: str,
    endpoint_name: str,
    echo: Callable[[str], None] = typer.echo,
) -> Inventory:
    """
    Lists every CDN profile in the subscription with its endpoints,
    printing each as it goes, and notes whether the named profile
    and endpoint are among them.
    """
    inventory = Inventory()

    for profile in client.profiles.list():
        resource_group = profile_resource_group(profile)
        echo(f"CDN profile {profile.name} in Resource Group {resource_group}")
        if profile.name == profile_name:
            inventory.profile_exists = True

        summary = ProfileSummary(
            name=profile.name, resource_group=resource_group, sku=_sku_name(profile)
        )

        echo("Endpoints:")
        for endpoint in client.endpoints.list_by_profile(resource_group, profile.name):
            echo(f"-{endpoint.name} ({endpoint.host_name})")
            # endpoint host names are global, so a match in any profile counts
            if endpoint.name == endpoint_name:
                inventory.endpoint_exists = True
            summary.endpoints.append(
                EndpointSummary(name=endpoint.name, host_name=endpoint.host_name)
            )
        echo("")

        inventory.profiles.append(summary)

    return inventory


def create_profile(client: CdnManagementClient, settings: EnvSettings = env) -> Profile:
    typer.echo(f"Creating profile {settings.profile_name}.")
    poller = client.profiles.begin_create(
        settings.resource_group_name,
        settings.profile_name,
        Profile(location=settings.location, sku=Sku(name=settings.sku)),
    )
    return wait_for(poller, f"Creating profile {settings.profile_name}...")


def create_endpoint(client: CdnManagementClient, settings: EnvSettings = env) -> Endpoint:
    typer.echo(f"Creating endpoint {settings.endpoint_name} on profile {settings.profile_name}.")
    endpoint = Endpoint(
        location=settings.location,
        origins=[DeepCreatedOrigin(name=settings.origin_name, host_name=settings.origin_host_name)],
        is_http_allowed=True,
        is_https_allowed=True,
    )
    poller = client.endpoints.begin_create(
        settings.resource_group_name,
        settings.profile_name,
        settings.endpoint_name,
        endpoint,
    )
    return wait_for(poller, f"Creating endpoint {settings.endpoint_name}...")


def ensure_profile(client: CdnManagementClient, settings: EnvSettings, exists: bool) -> bool:
    """Creates the profile unless it already exists. Returns True if created."""
    if exists:
        typer.echo(f"Profile {settings.profile_name} already exists.")
        return False
    create_profile(client, settings)
    return True


def ensure_endpoint(client: CdnManagementClient, settings: EnvSettings, exists: bool) -> bool:
    """Creates the endpoint unless it already exists. Returns True if created."""
    if exists:
        typer.echo(f"Endpoint {settings.endpoint_name} already exists.")
        return False
    create_endpoint(client, settings)
    return True


def purge_endpoint(
    client: CdnManagementClient,
    settings: EnvSettings = env,
    paths: Iterable[str] | None = None,
):
    """Purges cached content from the endpoint, everything by default."""
    content_paths = list(paths or settings.purge_paths)
    poller = client.endpoints.begin_purge_content(
        settings.resource_group_name,
        settings.profile_name,
        settings.endpoint_name,
        PurgeParameters(content_paths=content_paths),
    )
    wait_for(poller, f"Purging {', '.join(content_paths)}...")


def delete_endpoint(client: CdnManagementClient, settings: EnvSettings = env) -> bool:
    """Deletes the endpoint if it exists. Returns False if there was nothing to delete."""
    try:
        poller = client.endpoints.begin_delete(
            settings.resource_group_name, settings.profile_name, settings.endpoint_name
        )
        wait_for(poller, f"Deleting endpoint {settings.endpoint_name}...")
    except ResourceNotFoundError:
        typer.echo(f"Endpoint {settings.endpoint_name} does not exist.")
        return False
    return True


def delete_profile(client: CdnManagementClient, settings: EnvSettings = env) -> bool:
    """Deletes the profile if it exists. Returns False if there was nothing to delete."""
    try:
        poller = client.profiles.begin_delete(settings.resource_group_name, settings.profile_name)
        wait_for(poller, f"Deleting profile {settings.profile_name}...")
    except ResourceNotFoundError:
        typer.echo(f"Profile {settings.profile_name} does not exist.")
        return False
    return True


@app.command(name="list")
def list_profiles(
    auth: AuthType = AuthMethod.BROWSER,
    as_json: Annotated[bool, typer.Option("--json")] = False,
):
    """List CDN profiles and their endpoints."""
    ctx = attempt(AzureContext, auth, quiet=as_json)

    if as_json:
        inventory = attempt(
            list_inventory, ctx.cdn, env.profile_name, env.endpoint_name, echo=lambda _: None
        )
        print_json(inventory.model_dump_json(by_alias=True))
    else:
        attempt(list_inventory, ctx.cdn, env.profile_name, env.endpoint_name)


@app.command()
def ensure(auth: AuthType = AuthMethod.BROWSER):
    """Create the configured profile and endpoint if needed."""
    ctx = attempt(AzureContext, auth)

    inventory = attempt(list_inventory, ctx.cdn, env.profile_name, env.endpoint_name)
    attempt(ensure_profile, ctx.cdn, env, inventory.profile_exists)
    attempt(ensure_endpoint, ctx.cdn, env, inventory.endpoint_exists)


@app.command()
def purge(
    paths: Annotated[Optional[list[str]], typer.Argument()] = None,
    auth: AuthType = AuthMethod.BROWSER,
    yes: ConfirmType = False,
):
    """Purge cached content from the configured endpoint."""
    if not confirm(f"Purge CDN endpoint {env.endpoint_name}?", yes):
        raise typer.Abort()

    ctx = attempt(AzureContext, auth)
    attempt(purge_endpoint, ctx.cdn, env, paths)
    typer.echo(f"✅  Purged {env.endpoint_name!r}")


@app.command(name="delete-endpoint")
def delete_endpoint_cmd(auth: AuthType = AuthMethod.BROWSER, yes: ConfirmType = False):
    """Delete the configured endpoint if it exists."""
    if not confirm(f"Delete CDN endpoint {env.endpoint_name} on profile {env.profile_name}?", yes):
        raise typer.Abort()

    ctx = attempt(AzureContext, auth)
    if attempt(delete_endpoint, ctx.cdn, env):
        typer.echo(f"🗑️  Deleted {env.endpoint_name!r}")


@app.command(name="delete-profile")
def delete_profile_cmd(auth: AuthType = AuthMethod.BROWSER, yes: ConfirmType = False):
    """Delete the configured profile if it exists."""
    if not confirm(f"Delete CDN profile {env.profile_name}?", yes):
        raise typer.Abort()

    ctx = attempt(AzureContext, auth)
    if attempt(delete_profile, ctx.cdn, env):
        typer.echo(f"🗑️  Deleted {env.profile_name!r}")
