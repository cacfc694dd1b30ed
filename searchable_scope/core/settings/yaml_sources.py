"""YAML settings sources with conf.d override directories.

Each settings class reads one base file plus any override files dropped
into a sibling ``.d`` directory, merged in name order:

    conf/
    ├── searchable.yaml          # published by `searchable-scope config publish`
    ├── searchable.d/
    │   └── 10-catalogue.yaml    # e.g. default_columns for one deployment
    ├── logging.yaml
    └── logging.d/

The ``conf`` directory can be moved per settings class with
SEARCHABLE_CONFIG_DIR or LOGGING_CONFIG_DIR.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic_settings import YamlConfigSettingsSource

if TYPE_CHECKING:
    from pydantic_settings import BaseSettings

DEFAULT_CONFIG_DIR = "conf"
YAML_SUFFIXES = (".yaml", ".yml")


@dataclass(frozen=True, slots=True)
class ConfigLocation:
    """Where one settings class looks for YAML files."""

    filename: str
    dir_env: str

    @property
    def overrides_dirname(self) -> str:
        return f"{Path(self.filename).stem}.d"

    def base_dir(self) -> Path:
        """Configuration directory, honouring the override env var."""
        return Path(os.getenv(self.dir_env, DEFAULT_CONFIG_DIR))

    def files(self) -> list[Path]:
        """Existing YAML files in merge order: base file, then overrides by name."""
        base = self.base_dir()
        found = [base / self.filename] if (base / self.filename).is_file() else []

        overrides = base / self.overrides_dirname
        if overrides.is_dir():
            found.extend(
                sorted(
                    (p for p in overrides.iterdir() if p.suffix in YAML_SUFFIXES),
                    key=lambda p: p.name,
                )
            )
        return found


SEARCHABLE_CONFIG = ConfigLocation("searchable.yaml", "SEARCHABLE_CONFIG_DIR")
LOGGING_CONFIG = ConfigLocation("logging.yaml", "LOGGING_CONFIG_DIR")


class ConfDYamlConfigSettingsSource(YamlConfigSettingsSource):
    """pydantic-settings YAML source fed from a ConfigLocation.

    Later files override earlier ones. Missing files are skipped, so an
    empty ``conf`` directory contributes nothing.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        location: ConfigLocation,
        yaml_file_encoding: str | None = "utf-8",
    ) -> None:
        self.location = location
        self._yaml_files = location.files()
        super().__init__(
            settings_cls=settings_cls,
            yaml_file=self._yaml_files or None,
            yaml_file_encoding=yaml_file_encoding,
        )

    @property
    def yaml_files(self) -> list[Path]:
        """Files this source reads, in merge order."""
        return list(self._yaml_files)

    def __repr__(self) -> str:
        files = ", ".join(str(f) for f in self._yaml_files)
        return f"{type(self).__name__}({self.location.filename}: [{files}])"


def searchable_config_dir() -> Path:
    """Directory holding searchable.yaml (honours SEARCHABLE_CONFIG_DIR)."""
    return SEARCHABLE_CONFIG.base_dir()


def create_searchable_yaml_source(settings_cls: type[BaseSettings]) -> ConfDYamlConfigSettingsSource:
    """YAML source for SearchableSettings (searchable.yaml + searchable.d/)."""
    return ConfDYamlConfigSettingsSource(settings_cls, SEARCHABLE_CONFIG)


def create_logging_yaml_source(settings_cls: type[BaseSettings]) -> ConfDYamlConfigSettingsSource:
    """YAML source for LoggingSettings (logging.yaml + logging.d/)."""
    return ConfDYamlConfigSettingsSource(settings_cls, LOGGING_CONFIG)
