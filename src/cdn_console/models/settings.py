import dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=dotenv.find_dotenv(usecwd=True),
        env_prefix="cdn_",
        extra="ignore",
    )

    # identity
    subscription_id: str | None = None
    tenant_id: str | None = None
    client_id: str | None = None
    redirect_uri: str | None = None
    authority_host: str = "login.microsoftonline.com"

    # resources
    resource_group_name: str = "CdnConsoleRG"
    location: str = "Central US"
    profile_name: str = "CdnConsoleApp"
    endpoint_name: str = "CdnConsoleEndpoint"
    origin_name: str = "Contoso-origin"
    origin_host_name: str = "www.contoso.com"
    sku: str = "Standard_Microsoft"
    purge_paths: list[str] = ["/*"]

    # debug
    verbose: bool = False


env = EnvSettings()
