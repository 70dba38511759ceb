"""Settings for the CLI and the web UI.

Sources, highest precedence first: explicit arguments, ``VALUES_SCHEMA_*``
environment variables, then a YAML config file (``--config`` or
``.values-schema.yaml`` in the working or home directory).
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Type, Union

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .errors import ValuesFileError
from .io_utils import load_yaml
from .options import GenerationOptions

CONFIG_FILE_NAME = ".values-schema.yaml"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VALUES_SCHEMA_", extra="ignore")

    debug: bool = False
    context: str = ""
    overrides: str = ""
    output: str = "values.schema.json"
    max_depth: Optional[int] = Field(default=None, ge=1)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return init_settings, env_settings, YamlConfigSettingsSource(settings_cls)

    def generation_options(self) -> GenerationOptions:
        return GenerationOptions(verbose=self.debug, max_depth=self.max_depth)


def find_config_file(config_path: Union[str, Path, None] = None) -> Optional[Path]:
    """Explicit path (must exist) or the first default location that exists."""
    if config_path:
        path = Path(config_path).expanduser()
        if not path.is_file():
            raise ValuesFileError(f"config file {path} not found", path)
        return path

    for directory in (Path.cwd(), Path.home()):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def load_settings(config_path: Union[str, Path, None] = None, **overrides) -> Settings:
    """Build :class:`Settings`; ``None`` overrides fall through to lower sources."""
    path = find_config_file(config_path)
    settings_cls: Type[Settings] = Settings
    if path is not None:
        # surface malformed files as ValuesFileError before pydantic reads them
        load_yaml(path)

        class FileSettings(Settings):
            model_config = SettingsConfigDict(yaml_file=path)

        settings_cls = FileSettings

    return settings_cls(**{k: v for k, v in overrides.items() if v is not None})
