"""Postcss (style pipeline) option resolution.

``build.postcss`` is tri-state:

1. ``False``: the pipeline is disabled and nothing below applies.
2. A config file (``postcss.config.js`` and friends) exists in srcDir or
   rootDir: the value becomes ``True`` so loaders pick that file up.
3. Otherwise a plugin list or settings record is expanded and merged over the
   default plugin set.
"""

from __future__ import annotations

from typing import Any

from .merge import copy_value, is_record
from .probe import PathProbe, find_postcss_config

DEFAULT_POSTCSS_PLUGINS = (
    "postcss-import",
    "postcss-url",
    "postcss-cssnext",
)


def default_postcss_options(css_source_map: Any) -> dict[str, Any]:
    return {
        "sourceMap": css_source_map,
        "plugins": {name: {} for name in DEFAULT_POSTCSS_PLUGINS},
    }


def resolve_postcss(
    build: dict[str, Any],
    probe: PathProbe,
    *,
    src_dir: str,
    root_dir: str,
) -> None:
    """Rewrite ``build["postcss"]`` in place."""
    postcss = build.get("postcss")
    if postcss is False:
        return

    if find_postcss_config(probe, [src_dir, root_dir]) is not None:
        postcss = True

    if isinstance(postcss, (list, tuple)):
        postcss = {"plugins": copy_value(postcss)}
    if is_record(postcss):
        postcss = {**default_postcss_options(build.get("cssSourceMap")), **postcss}

    build["postcss"] = postcss
