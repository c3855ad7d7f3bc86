"""Stagecraft Core - option resolution for the stagecraft build/render tool."""

from .__version__ import __version__, __version_info__

from .defaults import DEFAULT_BUILD_DIR, DEFAULT_MODULES_DIR, DEFAULT_PUBLIC_PATH, default_tree
from .errors import ConfigError, ProbeError, StagecraftError
from .loader import CONFIG_FILENAME, find_config_file, load_config_file, load_options
from .merge import deep_merge, defaults_deep
from .modes import MODE_PRESETS, RenderMode, resolve_mode, select_mode
from .normalize import normalize_options
from .options import ENV_MODE_VAR, is_dev_environment, is_url, resolve_options
from .paths import ProjectPaths, resolve_paths
from .probe import FilesystemProbe, PathProbe, POSTCSS_CONFIG_FILENAMES
from .style_pipeline import DEFAULT_POSTCSS_PLUGINS, resolve_postcss

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    # Resolution
    "resolve_options",
    "load_options",
    "is_dev_environment",
    "is_url",
    "ENV_MODE_VAR",
    # Config file
    "CONFIG_FILENAME",
    "find_config_file",
    "load_config_file",
    # Defaults
    "default_tree",
    "DEFAULT_BUILD_DIR",
    "DEFAULT_MODULES_DIR",
    "DEFAULT_PUBLIC_PATH",
    # Modes
    "MODE_PRESETS",
    "RenderMode",
    "resolve_mode",
    "select_mode",
    # Stages
    "normalize_options",
    "defaults_deep",
    "deep_merge",
    "ProjectPaths",
    "resolve_paths",
    "resolve_postcss",
    "DEFAULT_POSTCSS_PLUGINS",
    # Probes
    "PathProbe",
    "FilesystemProbe",
    "POSTCSS_CONFIG_FILENAMES",
    # Errors
    "StagecraftError",
    "ConfigError",
    "ProbeError",
]
