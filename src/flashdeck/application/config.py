from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from flashdeck.domain.constants import CONFIG_DIR_NAME, DEFAULT_DECK_FILENAME


def default_config_file() -> Path:
    return Path.home() / CONFIG_DIR_NAME / "config.toml"


class AppConfig(BaseSettings):
    """
    Configuration model for flashdeck.
    Supports loading from:
    1. Environment variables (FLASHDECK_*)
    2. Config file (~/.config/flashdeck/config.toml)
    3. Manual overrides (CLI)
    """

    model_config = SettingsConfigDict(
        env_prefix="FLASHDECK_",
        extra="ignore",
    )

    # Paths
    deck_file: Path = Field(
        default_factory=lambda: Path.home() / CONFIG_DIR_NAME / DEFAULT_DECK_FILENAME
    )

    # Review
    input_mode: Literal["line", "key"] = "line"
    autosave: bool = True
    seed: int | None = None
    clear_screen: bool = False

    # Logging
    verbose: int = 1

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        from pydantic_settings import TomlConfigSettingsSource

        toml_file = default_config_file()
        if toml_file.exists():
            return (
                init_settings,
                env_settings,
                TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            )
        return (
            init_settings,
            env_settings,
        )

    @field_validator("deck_file", mode="before")
    @classmethod
    def resolve_deck_file(cls, v: Any) -> Path:
        return Path(v).expanduser().resolve()

    @field_validator("verbose")
    @classmethod
    def clamp_verbose(cls, v: int) -> int:
        return max(0, min(v, 2))


def resolve_config(cli_overrides: dict[str, Any] | None = None) -> AppConfig:
    """
    Multi-layered configuration resolution.
    1. Defaults in AppConfig
    2. ~/.config/flashdeck/config.toml (if exists)
    3. Environment variables (FLASHDECK_*)
    4. cli_overrides (passed from Typer)
    """
    # Typer hands us every option; unset ones arrive as None and must not
    # shadow lower layers.
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    return AppConfig(**overrides)
