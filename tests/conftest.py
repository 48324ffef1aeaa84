from types import SimpleNamespace
from unittest.mock import MagicMock

import keyring
import pytest

from cdn_console.models.settings import EnvSettings


def make_profile(name: str, resource_group: str, sku: str = "Standard_Microsoft"):
    return SimpleNamespace(
        id=f"/subscriptions/0000/resourceGroups/{resource_group}/providers/Microsoft.Cdn/profiles/{name}",
        name=name,
        sku=SimpleNamespace(name=sku),
    )


def make_endpoint(name: str):
    return SimpleNamespace(name=name, host_name=f"{name.lower()}.azureedge.net")


def fake_cdn_client(endpoints_by_profile: dict[str, list], profiles: list) -> MagicMock:
    client = MagicMock()
    client.profiles.list.return_value = profiles
    client.endpoints.list_by_profile.side_effect = (
        lambda resource_group, profile_name: endpoints_by_profile.get(profile_name, [])
    )
    return client


@pytest.fixture
def settings() -> EnvSettings:
    return EnvSettings(_env_file=None, subscription_id="0000")


@pytest.fixture
def keyring_store(monkeypatch) -> dict:
    store = {}
    monkeypatch.setattr(keyring, "get_password", lambda service, user: store.get((service, user)))
    monkeypatch.setattr(
        keyring, "set_password", lambda service, user, value: store.__setitem__((service, user), value)
    )
    return store
