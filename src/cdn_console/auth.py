"""Entra ID sign-in for the management API."""
from __future__ import annotations

import enum

from azure.core.credentials import AccessToken, TokenCredential
from azure.identity import DeviceCodeCredential, InteractiveBrowserCredential

MANAGEMENT_SCOPE = "https://management.azure.com/.default"


class AuthMethod(enum.StrEnum):
    BROWSER = "browser"
    DEVICE_CODE = "device-code"


def build_credential(
    method: AuthMethod,
    tenant_id: str | None = None,
    client_id: str | None = None,
    redirect_uri: str | None = None,
    authority: str | None = None,
) -> TokenCredential:
    """
    Creates a user credential without a persistent token cache,
    so every run signs in again. The browser flow can still complete
    without typing a password when the browser holds an Entra ID
    session; only device-code login always asks for user action.
    """
    kwargs = {}
    if tenant_id:
        kwargs["tenant_id"] = tenant_id
    if client_id:
        kwargs["client_id"] = client_id
    if authority:
        kwargs["authority"] = authority

    if method == AuthMethod.DEVICE_CODE:
        return DeviceCodeCredential(**kwargs)

    if redirect_uri:
        kwargs["redirect_uri"] = redirect_uri
    return InteractiveBrowserCredential(**kwargs)


def authenticate(credential: TokenCredential) -> AccessToken:
    """Signs in and returns a bearer token for the management API."""
    return credential.get_token(MANAGEMENT_SCOPE)
