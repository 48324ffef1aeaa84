from __future__ import annotations

import enum
import json
import keyring


class ConfigKey(enum.StrEnum):
    SUBSCRIPTION_ID = "SUBSCRIPTION_ID"
    TENANT_ID = "TENANT_ID"
    CLIENT_ID = "CLIENT_ID"


class KeyringConfig(dict[ConfigKey, str]):
    KR_SERVICE_NAME: str = "cdn-console"
    KR_USERNAME: str = "config"

    def __enter__(self) -> KeyringConfig:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.save()

    @classmethod
    def load_from_keyring(cls) -> KeyringConfig:
        """Load the configuration from the keyring."""
        json_str = keyring.get_password(cls.KR_SERVICE_NAME, cls.KR_USERNAME)
        if json_str is None:
            return cls()
        return cls({ConfigKey(k): v for k, v in json.loads(json_str).items()})

    def resolve(self, key: ConfigKey, override: str | None = None) -> str | None:
        """Environment override first, then the stored value."""
        if override:
            return override
        return self.get(key) or None

    def get_with_prompt(self, key: ConfigKey, override: str | None = None) -> str:
        value = self.resolve(key, override)
        if value:
            return value

        import rich
        import typer

        rich.print(f"[red]Error:[/red] Required config key '{key.value}' not set. "
                   f"Please set CDN_{key.value} or run "
                   f"'cdn-console config set {key.value} {{value}}'.")

        raise typer.Exit(1)

    def save(self):
        """Save the configuration to the keyring."""
        json_str = json.dumps(self)
        keyring.set_password(self.KR_SERVICE_NAME, self.KR_USERNAME, json_str)

    def to_keys_json(self) -> str:
        """Render the stored keys with their values masked."""
        result = {}
        for key in ConfigKey:
            if key in self:
                # set, or explicitly emptied
                result[key] = "********" if self[key] else ""
            else:
                result[key] = "(not set)"

        return json.dumps(result, indent=2)
