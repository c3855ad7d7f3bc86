"""Read-only filesystem probes used to auto-detect project features.

Every check goes through a ``PathProbe`` so resolution logic can be exercised
against an in-memory tree. ``FilesystemProbe`` is the real implementation: a
missing path is "not found", any other ``OSError`` is a ``ProbeError``.
"""

from __future__ import annotations

import errno
import logging
import os
import stat
from pathlib import Path
from typing import Iterable, Optional, Protocol, Union

from .errors import ProbeError

logger = logging.getLogger(__name__)

APP_TEMPLATE_FILENAME = "app.html"
STORE_DIRNAME = "store"

# Search order matters: first hit wins.
POSTCSS_CONFIG_FILENAMES = (
    "postcss.config.js",
    ".postcssrc.js",
    ".postcssrc",
    ".postcssrc.json",
    ".postcssrc.yaml",
)

# stat() failures that mean the path simply is not there.
_MISSING_ERRNOS = {errno.ENOENT, errno.ENOTDIR}

PathLike = Union[str, Path]


class PathProbe(Protocol):
    def is_file(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...


class FilesystemProbe:
    """Probe the real filesystem with ``os.stat``."""

    def _stat(self, path: Path) -> Optional[os.stat_result]:
        try:
            return os.stat(path)
        except OSError as e:
            if e.errno in _MISSING_ERRNOS:
                return None
            raise ProbeError(path, e.strerror or str(e)) from e

    def is_file(self, path: Path) -> bool:
        st = self._stat(path)
        return st is not None and not stat.S_ISDIR(st.st_mode)

    def is_dir(self, path: Path) -> bool:
        st = self._stat(path)
        return st is not None and stat.S_ISDIR(st.st_mode)


def find_app_template(probe: PathProbe, src_dir: PathLike) -> Optional[Path]:
    candidate = Path(src_dir) / APP_TEMPLATE_FILENAME
    if probe.is_file(candidate):
        logger.debug("Using app template override %s", candidate)
        return candidate
    return None


def has_store_dir(probe: PathProbe, src_dir: PathLike) -> bool:
    return probe.is_dir(Path(src_dir) / STORE_DIRNAME)


def find_postcss_config(probe: PathProbe, search_dirs: Iterable[PathLike]) -> Optional[Path]:
    """Return the first conventional postcss config file under ``search_dirs``."""
    for directory in search_dirs:
        for filename in POSTCSS_CONFIG_FILENAMES:
            candidate = Path(directory) / filename
            if probe.is_file(candidate):
                logger.debug("Found postcss config %s", candidate)
                return candidate
    return None
