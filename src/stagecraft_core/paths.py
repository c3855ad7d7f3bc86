"""Project directory resolution."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .defaults import DEFAULT_BUILD_DIR, DEFAULT_MODULES_DIR
from .probe import PathProbe, find_app_template

logger = logging.getLogger(__name__)

APP_TEMPLATE_FALLBACK = os.path.join("views", "app.template.html")


class ProjectPaths(BaseModel):
    """Absolute directories a build needs, resolved against the project root."""

    root_dir: Path = Field(..., description="Project root")
    src_dir: Path = Field(..., description="e.g., root_dir / srcDir, or root_dir")
    modules_dir: Path = Field(..., description="e.g., root_dir / node_modules")
    build_dir: Path = Field(..., description="e.g., root_dir / .stagecraft")
    app_template_path: Path = Field(..., description="HTML shell used by the renderer")

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    def to_options(self) -> dict[str, str]:
        return {
            "rootDir": str(self.root_dir),
            "srcDir": str(self.src_dir),
            "modulesDir": str(self.modules_dir),
            "buildDir": str(self.build_dir),
            "appTemplatePath": str(self.app_template_path),
        }


def _has_value(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def resolve_path(base: str, fragment: str) -> str:
    """``path.resolve`` semantics: absolute fragments win, result is normalized."""
    return os.path.normpath(os.path.join(base, fragment))


def resolve_paths(
    options: Mapping[str, Any],
    probe: PathProbe,
    *,
    cwd: Optional[str] = None,
) -> ProjectPaths:
    """Resolve rootDir, srcDir, modulesDir, buildDir and appTemplatePath.

    Directories are not required to exist; only the app template override is
    probed.
    """
    base = cwd if cwd is not None else os.getcwd()

    raw_root = options.get("rootDir")
    root_dir = resolve_path(base, raw_root) if _has_value(raw_root) else os.path.normpath(base)

    raw_src = options.get("srcDir")
    src_dir = resolve_path(root_dir, raw_src) if _has_value(raw_src) else root_dir

    raw_modules = options.get("modulesDir")
    modules_dir = resolve_path(
        root_dir, raw_modules if _has_value(raw_modules) else DEFAULT_MODULES_DIR
    )

    raw_build = options.get("buildDir")
    build_dir = resolve_path(root_dir, raw_build if _has_value(raw_build) else DEFAULT_BUILD_DIR)

    app_template = find_app_template(probe, src_dir)
    app_template_path = (
        str(app_template) if app_template is not None
        else os.path.join(build_dir, APP_TEMPLATE_FALLBACK)
    )

    paths = ProjectPaths(
        root_dir=Path(root_dir),
        src_dir=Path(src_dir),
        modules_dir=Path(modules_dir),
        build_dir=Path(build_dir),
        app_template_path=Path(app_template_path),
    )
    logger.debug("Resolved project paths: %s", paths)
    return paths
