"""Option resolution pipeline.

``resolve_options`` turns a sparse, user-authored option tree into the fully
populated tree consumed by the bundler, the renderer and the static
generator. Stages run in a fixed order:

1) Shallow clone + shorthand normalization
2) Defaults merge (structural shape)
3) Path resolution against rootDir (app template probe)
4) Dev public path, store probe
5) Postcss sub-resolution (config file probe)
6) debug defaults to dev
7) Mode preset overlay, then the default tree as final fallback

Only the probes touch the filesystem. A probe that fails raises ``ProbeError``
and nothing is returned.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

from .defaults import DEFAULT_PUBLIC_PATH, default_tree
from .merge import defaults_deep, is_record
from .modes import resolve_mode, select_mode
from .normalize import normalize_options
from .paths import resolve_paths
from .probe import FilesystemProbe, PathProbe, has_store_dir
from .style_pipeline import resolve_postcss

logger = logging.getLogger(__name__)

ENV_MODE_VAR = "STAGECRAFT_ENV"
PRODUCTION = "production"


def is_url(value: Any) -> bool:
    return isinstance(value, str) and value.startswith(("http", "//"))


def is_dev_environment(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get(ENV_MODE_VAR) != PRODUCTION


def resolve_options(
    raw: Optional[Mapping[str, Any]] = None,
    *,
    probe: Optional[PathProbe] = None,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[str] = None,
) -> dict[str, Any]:
    """Resolve ``raw`` into a complete option tree.

    Args:
        raw: Caller options; never modified.
        probe: Path existence checker (defaults to the real filesystem).
        environ: Environment used for the ``dev`` default (defaults to os.environ).
        cwd: Directory used when rootDir is not given (defaults to os.getcwd()).

    Returns:
        A new dict sharing no containers with ``raw`` or the defaults.

    Raises:
        ProbeError: If the project tree cannot be read.
    """
    probe = probe if probe is not None else FilesystemProbe()

    options = normalize_options(dict(raw or {}))
    if options.get("dev") is None:
        options["dev"] = is_dev_environment(environ)

    options = defaults_deep(options, default_tree())

    # The selector is evaluated exactly once per resolution.
    mode_value = select_mode(options.get("mode"))
    mode, preset = resolve_mode(mode_value)
    if mode is not None:
        options["mode"] = mode.value
    elif isinstance(mode_value, str):
        options["mode"] = mode_value

    paths = resolve_paths(options, probe, cwd=cwd)
    options.update(paths.to_options())

    build = options["build"]
    if is_record(build) and options["dev"] and is_url(build.get("publicPath")):
        build["publicPath"] = DEFAULT_PUBLIC_PATH

    if options.get("store") is not False and has_store_dir(probe, options["srcDir"]):
        options["store"] = True
    if options.get("store") is None:
        options["store"] = False

    if is_record(build):
        resolve_postcss(build, probe, src_dir=options["srcDir"], root_dir=options["rootDir"])

    if options.get("debug") is None:
        options["debug"] = options["dev"]

    options = defaults_deep(options, preset)
    options = defaults_deep(options, default_tree())

    logger.debug(
        "Resolved options for %s (mode=%s, dev=%s)",
        options["rootDir"],
        options.get("mode"),
        options["dev"],
    )
    return options
