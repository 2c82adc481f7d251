"""Project defaults for nullcheck read from a TOML file.

Example ``nullcheck.toml``::

    [nullcheck]
    include_paths = ["Sources", "Vendor"]
    exclude_paths = ["Vendor/Generated"]
    warn_only = false
    verbose = false
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import toml

from .config import CONFIG_SECTION, DEFAULT_CONFIG_FILE
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    "include_paths": [],
    "exclude_paths": [],
    "warn_only": False,
    "verbose": False,
}


def find_config_file(explicit: Optional[Path] = None) -> Optional[Path]:
    """Return the config file to use, or None when there is none.

    An explicitly requested file must exist. Otherwise the default file name
    is looked up in the current working directory.
    """
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigurationError(f"config file not found at given location: {explicit}")
        return explicit
    candidate = Path.cwd() / DEFAULT_CONFIG_FILE
    return candidate if candidate.is_file() else None


def _path_list(value: Any, key: str, base_dir: Path) -> List[Path]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"'{key}' must be a list of paths")
    return [base_dir / v for v in value]


def load_config(path: Optional[Path]) -> Dict[str, Any]:
    """Load the ``[nullcheck]`` section of *path*.

    Returns:
        Settings dictionary with every key of :data:`DEFAULT_SETTINGS`.
        Relative paths are anchored at the config file's directory.
        Defaults are returned when *path* is None.

    Raises:
        ConfigurationError: on unreadable or malformed TOML, unknown keys or
            wrongly typed values.
    """
    settings = {key: (list(v) if isinstance(v, list) else v) for key, v in DEFAULT_SETTINGS.items()}
    if path is None:
        return settings

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        raise ConfigurationError(f"could not read config file {path}: {exc}") from exc

    section = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"[{CONFIG_SECTION}] in {path} must be a table")

    unknown = set(section) - set(DEFAULT_SETTINGS)
    if unknown:
        raise ConfigurationError(f"unknown keys in {path}: {', '.join(sorted(unknown))}")

    base_dir = path.resolve().parent
    for key in ("include_paths", "exclude_paths"):
        if key in section:
            settings[key] = _path_list(section[key], key, base_dir)
    for key in ("warn_only", "verbose"):
        if key in section:
            if not isinstance(section[key], bool):
                raise ConfigurationError(f"'{key}' must be true or false")
            settings[key] = section[key]

    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings
