"""Project config file loading.

A project may keep its options in ``stagecraft.config.toml`` at the project
root. ``load_options`` reads that file (when present), layers caller overrides
on top and hands the result to ``resolve_options``.
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .errors import ConfigError
from .merge import deep_merge
from .options import resolve_options
from .probe import FilesystemProbe, PathProbe

# Conditional TOML import: stdlib tomllib (3.11+) or fallback tomli (<3.11)
try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "stagecraft.config.toml"


def find_config_file(root_dir: Union[str, Path], probe: Optional[PathProbe] = None) -> Optional[Path]:
    """Return the project config file under ``root_dir``, if there is one."""
    probe = probe if probe is not None else FilesystemProbe()
    candidate = Path(root_dir) / CONFIG_FILENAME
    if probe.is_file(candidate):
        return candidate
    return None


def load_config_file(path: Path) -> dict[str, Any]:
    """Read a TOML config file into a raw option tree."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to load config from {path}: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config TOML must be a table: {path}")
    logger.debug("Loaded project config %s", path)
    return data


def load_options(
    root_dir: Union[str, Path],
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    probe: Optional[PathProbe] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, Any]:
    """Resolve the options of the project at ``root_dir``.

    Layer order (later wins):
    1) stagecraft.config.toml in root_dir (optional)
    2) ``overrides`` from the caller

    ``rootDir`` defaults to ``root_dir`` when neither layer sets it; relative
    directories in the file are resolved against it.
    """
    root = Path(root_dir).resolve()
    config_path = find_config_file(root, probe)
    raw: dict[str, Any] = load_config_file(config_path) if config_path else {}

    if overrides:
        raw = deep_merge(raw, overrides)
    if not raw.get("rootDir"):
        raw["rootDir"] = str(root)

    return resolve_options(raw, probe=probe, environ=environ, cwd=str(root))
