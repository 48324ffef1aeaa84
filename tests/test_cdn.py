from unittest.mock import MagicMock

from azure.core.exceptions import ResourceNotFoundError

from cdn_console import cdn
from conftest import fake_cdn_client, make_endpoint, make_profile


def test_profile_resource_group():
    profile = make_profile("media", "Media-RG")
    assert cdn.profile_resource_group(profile) == "Media-RG"


def test_inventory_lists_every_profile_in_order(capsys):
    profiles = [
        make_profile("alpha", "rg-a"),
        make_profile("CdnConsoleApp", "CdnConsoleRG"),
        make_profile("gamma", "rg-c"),
    ]
    endpoints = {
        "alpha": [make_endpoint("a1"), make_endpoint("a2")],
        "CdnConsoleApp": [make_endpoint("b1")],
        "gamma": [make_endpoint("c1")],
    }
    client = fake_cdn_client(endpoints, profiles)

    inventory = cdn.list_inventory(client, "CdnConsoleApp", "CdnConsoleEndpoint")

    assert inventory.profile_exists is True
    assert inventory.endpoint_exists is False
    assert [p.resource_group for p in inventory.profiles] == ["rg-a", "CdnConsoleRG", "rg-c"]

    lines = capsys.readouterr().out.splitlines()
    printed = [line for line in lines if line.startswith("-")]
    assert printed == [
        "-a1 (a1.azureedge.net)",
        "-a2 (a2.azureedge.net)",
        "-b1 (b1.azureedge.net)",
        "-c1 (c1.azureedge.net)",
    ]
    assert lines[0] == "CDN profile alpha in Resource Group rg-a"
    assert "CDN profile CdnConsoleApp in Resource Group CdnConsoleRG" in lines

    calls = [c.args for c in client.endpoints.list_by_profile.call_args_list]
    assert calls == [("rg-a", "alpha"), ("CdnConsoleRG", "CdnConsoleApp"), ("rg-c", "gamma")]


def test_inventory_finds_endpoint_in_any_profile():
    profiles = [make_profile("other", "rg-x")]
    client = fake_cdn_client({"other": [make_endpoint("CdnConsoleEndpoint")]}, profiles)

    inventory = cdn.list_inventory(client, "CdnConsoleApp", "CdnConsoleEndpoint", echo=lambda _: None)

    assert inventory.profile_exists is False
    assert inventory.endpoint_exists is True


def test_profile_created_once(settings):
    created = make_profile(settings.profile_name, settings.resource_group_name)
    client = MagicMock()
    client.profiles.list.side_effect = [[], [created]]
    client.endpoints.list_by_profile.return_value = []

    for _ in range(2):
        inventory = cdn.list_inventory(client, settings.profile_name, settings.endpoint_name)
        cdn.ensure_profile(client, settings, inventory.profile_exists)

    client.profiles.begin_create.assert_called_once()
    resource_group, name, profile = client.profiles.begin_create.call_args.args
    assert (resource_group, name) == ("CdnConsoleRG", "CdnConsoleApp")
    assert profile.location == "Central US"
    assert profile.sku.name == "Standard_Microsoft"


def test_endpoint_created_once(settings):
    profile = make_profile(settings.profile_name, settings.resource_group_name)
    client = MagicMock()
    client.profiles.list.return_value = [profile]
    client.endpoints.list_by_profile.side_effect = [[], [make_endpoint(settings.endpoint_name)]]

    for _ in range(2):
        inventory = cdn.list_inventory(client, settings.profile_name, settings.endpoint_name)
        cdn.ensure_endpoint(client, settings, inventory.endpoint_exists)

    client.endpoints.begin_create.assert_called_once()
    resource_group, profile_name, name, endpoint = client.endpoints.begin_create.call_args.args
    assert (resource_group, profile_name, name) == ("CdnConsoleRG", "CdnConsoleApp", "CdnConsoleEndpoint")
    assert len(endpoint.origins) == 1
    assert endpoint.origins[0].host_name == "www.contoso.com"
    assert endpoint.is_http_allowed is True
    assert endpoint.is_https_allowed is True


def test_existing_profile_is_reported(settings, capsys):
    client = MagicMock()

    assert cdn.ensure_profile(client, settings, exists=True) is False

    client.profiles.begin_create.assert_not_called()
    assert "Profile CdnConsoleApp already exists." in capsys.readouterr().out


def test_purge_everything_by_default(settings):
    client = MagicMock()

    cdn.purge_endpoint(client, settings)

    args = client.endpoints.begin_purge_content.call_args.args
    assert args[:3] == ("CdnConsoleRG", "CdnConsoleApp", "CdnConsoleEndpoint")
    assert args[3].content_paths == ["/*"]
    client.endpoints.begin_purge_content.return_value.result.assert_called_once()


def test_purge_given_paths(settings):
    client = MagicMock()

    cdn.purge_endpoint(client, settings, ["/img/*", "/index.html"])

    assert client.endpoints.begin_purge_content.call_args.args[3].content_paths == ["/img/*", "/index.html"]


def test_delete_missing_endpoint_is_a_no_op(settings, capsys):
    client = MagicMock()
    client.endpoints.begin_delete.side_effect = ResourceNotFoundError("gone")

    assert cdn.delete_endpoint(client, settings) is False
    assert "Endpoint CdnConsoleEndpoint does not exist." in capsys.readouterr().out


def test_delete_missing_profile_is_a_no_op(settings):
    client = MagicMock()
    client.profiles.begin_delete.return_value.result.side_effect = ResourceNotFoundError("gone")

    assert cdn.delete_profile(client, settings) is False


def test_delete_profile(settings):
    client = MagicMock()

    assert cdn.delete_profile(client, settings) is True
    client.profiles.begin_delete.assert_called_once_with("CdnConsoleRG", "CdnConsoleApp")
