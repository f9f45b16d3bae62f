"""Config store: load/save of the brand-ui project config and shadcn's components.json."""

import json
import os
from contextlib import contextmanager
from dataclasses import dataclass

from brand_ui.paths import DEFAULT_BASE_DIR, DEFAULT_BRAND_DIR, resolve_alias_path

PROJECT_CONFIG_FILE = ".brand-uirc.json"
SCAFFOLD_CONFIG_FILE = "components.json"


class NotInitializedError(Exception):
    """A config file brand-ui needs has not been created yet."""

    def __init__(self, config_file: str):
        super().__init__(f"Config file not found: {config_file}")
        self.config_file = config_file


@dataclass(frozen=True)
class ProjectConfig:
    base_dir: str = DEFAULT_BASE_DIR
    brand_dir: str = DEFAULT_BRAND_DIR

    @property
    def resolved_base_dir(self) -> str:
        return resolve_alias_path(self.base_dir)

    @property
    def resolved_brand_dir(self) -> str:
        return resolve_alias_path(self.brand_dir)

    @classmethod
    def from_dict(cls, data: dict) -> "ProjectConfig":
        """Build a config from parsed JSON.

        Raises KeyError for a missing key and ValueError when the document is
        not an object or a directory is not a string.
        """
        if not isinstance(data, dict):
            raise ValueError(f"{PROJECT_CONFIG_FILE} must contain a JSON object")
        base_dir, brand_dir = data["baseDir"], data["brandDir"]
        for key, value in (("baseDir", base_dir), ("brandDir", brand_dir)):
            if not isinstance(value, str):
                raise ValueError(f"{PROJECT_CONFIG_FILE}: {key} must be a string")
        return cls(base_dir=base_dir, brand_dir=brand_dir)

    def to_dict(self) -> dict:
        return {"baseDir": self.base_dir, "brandDir": self.brand_dir}


class ScaffoldConfig:
    """Wraps shadcn's components.json.

    Only ``aliases.components`` is read or written; every other field is
    passed through untouched.
    """

    def __init__(self, config_file: str, data: dict):
        self._config_file = config_file
        self._data = data

    @classmethod
    def load(cls, config_file: str) -> "ScaffoldConfig":
        data = _read_json(config_file)
        name = os.path.basename(config_file)
        if not isinstance(data, dict):
            raise ValueError(f"{name} must contain a JSON object")
        if not isinstance(data.get("aliases", {}), dict):
            raise ValueError(f"{name}: aliases must be an object")
        return cls(config_file, data)

    def save(self) -> None:
        _write_json(self._config_file, self._data)

    @property
    def components_alias(self) -> str:
        return self._data["aliases"]["components"]

    @components_alias.setter
    def components_alias(self, alias: str) -> None:
        self._data.setdefault("aliases", {})["components"] = alias


def _read_json(config_file):
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        if e.filename == config_file:
            raise NotInitializedError(os.path.basename(config_file)) from e
        raise


def _write_json(config_file, data):
    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")


def read_project_config(project_dir=".") -> ProjectConfig:
    data = _read_json(os.path.join(project_dir, PROJECT_CONFIG_FILE))
    return ProjectConfig.from_dict(data)


def write_project_config(config: ProjectConfig, project_dir=".") -> None:
    _write_json(os.path.join(project_dir, PROJECT_CONFIG_FILE), config.to_dict())


def read_scaffold_config(project_dir=".") -> ScaffoldConfig:
    return ScaffoldConfig.load(os.path.join(project_dir, SCAFFOLD_CONFIG_FILE))


def write_scaffold_config(config: ScaffoldConfig) -> None:
    """Persist *config* to the components.json it was loaded from."""
    config.save()


@contextmanager
def scaffold_components_alias(scaffold_config: ScaffoldConfig, alias: str, restore_to: str):
    """Point shadcn's components alias at *alias* for the duration of the block.

    The alias is set back to *restore_to* and saved on every exit path,
    including when the block raises.
    """
    scaffold_config.components_alias = alias
    scaffold_config.save()
    try:
        yield scaffold_config
    finally:
        scaffold_config.components_alias = restore_to
        scaffold_config.save()
