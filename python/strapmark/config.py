from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from . import kinds
from .core import RenderOptions
from .errors import ConfigError

CONFIG_FILENAME = "strapmark.toml"

ATTRIBUTE_NAME_MODES = ("strict", "relaxed")

# Default configuration structure
DEFAULT_CONFIG: Dict[str, Any] = {
    "render": {
        # "strict" enforces the full attribute name pattern; "relaxed" only rejects empty names.
        "attribute_names": "strict",
        "warn_unconsumed_pseudo_attributes": True,
    },
}


class Config:
    def __init__(self, data: Dict[str, Any], path: Optional[Path] = None):
        self.data = data
        self.path = path

    @classmethod
    def defaults(cls) -> "Config":
        return cls(copy.deepcopy(DEFAULT_CONFIG))

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from strapmark.toml."""
        if path is None:
            path = Path.cwd() / CONFIG_FILENAME
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {path}.")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse {path}: {e}") from e

        return cls(data, path)

    @property
    def render(self) -> Dict[str, Any]:
        section = self.data.get("render", {})
        if not isinstance(section, dict):
            raise ConfigError("[render] must be a table")
        return section

    def _render_value(self, key: str) -> Any:
        return self.render.get(key, DEFAULT_CONFIG["render"][key])

    @property
    def attribute_names(self) -> str:
        mode = self._render_value("attribute_names")
        if mode not in ATTRIBUTE_NAME_MODES:
            choices = ", ".join(ATTRIBUTE_NAME_MODES)
            raise ConfigError(f"render.attribute_names must be one of {choices}; got {mode!r}")
        return mode

    @property
    def warn_unconsumed_pseudo_attributes(self) -> bool:
        value = self._render_value("warn_unconsumed_pseudo_attributes")
        if not isinstance(value, bool):
            raise ConfigError(f"render.warn_unconsumed_pseudo_attributes must be a boolean; got {value!r}")
        return value

    def render_options(self) -> RenderOptions:
        return RenderOptions(strict_attribute_names=self.attribute_names == "strict")

    def apply(self) -> None:
        """Install process-wide settings that are read at element build time."""
        kinds.set_warn_unconsumed(self.warn_unconsumed_pseudo_attributes)
