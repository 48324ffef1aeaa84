from __future__ import annotations

from datetime import datetime

from azure.mgmt.cdn import CdnManagementClient
from azure.mgmt.resource import ResourceManagementClient
from rich import print as cp

from cdn_console import auth
from cdn_console.auth import AuthMethod
from cdn_console.models.keyring_config import ConfigKey, KeyringConfig
from cdn_console.models.settings import env


class AzureContext:
    def __init__(self, method: AuthMethod = AuthMethod.BROWSER, quiet: bool = False):
        """Sign in and build the management clients. quiet keeps stdout free for machine output."""
        cfg = KeyringConfig.load_from_keyring()
        self.subscription_id = cfg.get_with_prompt(ConfigKey.SUBSCRIPTION_ID, env.subscription_id)

        self.credential = auth.build_credential(
            method,
            tenant_id=cfg.resolve(ConfigKey.TENANT_ID, env.tenant_id),
            client_id=cfg.resolve(ConfigKey.CLIENT_ID, env.client_id),
            redirect_uri=env.redirect_uri,
            authority=env.authority_host,
        )
        self.token = auth.authenticate(self.credential)
        expires = datetime.fromtimestamp(self.token.expires_on)
        if not quiet:
            cp(f"Signed in, token valid until {expires:%H:%M:%S}")

        self.arm = ResourceManagementClient(self.credential, self.subscription_id)
        self.cdn = CdnManagementClient(self.credential, self.subscription_id)
