"""Settings resolution with named profile support."""

import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

import tomlkit
import typer
from pydantic import SecretStr
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

CONFIG_PATH = Path.home() / ".config" / "clickup-mcp" / "config.toml"

DEFAULT_BASE_URL_V2 = "https://api.clickup.com/api/v2"
DEFAULT_BASE_URL_V3 = "https://api.clickup.com/api/v3"


class ClickUpSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CLICKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    default_profile: str | None = None

    api_key: SecretStr | None = None
    base_url_v2: str = DEFAULT_BASE_URL_V2
    base_url_v3: str = DEFAULT_BASE_URL_V3
    timeout: float = 30.0

    log_level: str = "INFO"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Profile values arrive as init kwargs; env and .env must win over them.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


@lru_cache(maxsize=1)
def _load_toml() -> tomlkit.TOMLDocument:
    """Load ~/.config/clickup-mcp/config.toml, returning empty document if missing."""
    if not CONFIG_PATH.exists():
        return tomlkit.document()
    return tomlkit.load(CONFIG_PATH.open())


def _list_profiles(config: Mapping) -> list[str]:
    # tomlkit Table implements MutableMapping but not dict, so check Mapping
    return [k for k, v in config.items() if isinstance(v, Mapping)]


def get_settings(profile: str | None = None) -> ClickUpSettings:
    """Resolve the active profile and return a fully populated ClickUpSettings.

    Profile precedence (highest to lowest):
    1. profile argument (--profile CLI flag)
    2. CLICKUP_DEFAULT_PROFILE env var
    3. default_profile key in ~/.config/clickup-mcp/config.toml
    4. First profile defined in ~/.config/clickup-mcp/config.toml

    Environment variables and .env always override values from the profile.
    """
    toml_config = _load_toml()

    active = (
        profile
        or os.environ.get("CLICKUP_DEFAULT_PROFILE")
        or toml_config.get("default_profile")
        or ((_profiles := _list_profiles(toml_config)) and _profiles[0] or None)
    )

    profile_defaults: dict = {}
    if active:
        if active in toml_config and isinstance(toml_config[active], Mapping):
            profile_defaults = dict(toml_config[active])
        else:
            profiles = _list_profiles(toml_config)
            typer.echo(f"Profile '{active}' not found in {CONFIG_PATH}. Available: {profiles or '(none)'}", err=True)
            raise typer.Exit(1)

    settings = ClickUpSettings(**profile_defaults)

    if not settings.api_key:
        typer.echo(
            "CLICKUP_API_KEY environment variable is required. Set it, or set "
            f"api_key in the [{active or 'profile'}] section of {CONFIG_PATH}",
            err=True,
        )
        raise typer.Exit(1)

    return settings
