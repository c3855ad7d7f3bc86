from pathlib import Path
from typing import Iterable, Optional

from hypothesis import HealthCheck, settings

# Prevent Hypothesis from writing a local example database (e.g. `.hypothesis/`) during tests.
settings.register_profile(
    "stagecraft-tests",
    database=None,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("stagecraft-tests")


class FakeProbe:
    """In-memory PathProbe: only the listed paths exist.

    Every lookup is recorded in ``calls`` so tests can assert probe order.
    """

    def __init__(self, files: Iterable[str] = (), dirs: Iterable[str] = ()) -> None:
        self.files = {Path(p) for p in files}
        self.dirs = {Path(p) for p in dirs}
        self.calls: list[Path] = []

    def is_file(self, path: Path) -> bool:
        self.calls.append(Path(path))
        return Path(path) in self.files

    def is_dir(self, path: Path) -> bool:
        self.calls.append(Path(path))
        return Path(path) in self.dirs


def make_project(
    root: Path,
    *,
    files: Iterable[str] = (),
    dirs: Iterable[str] = (),
    config: Optional[str] = None,
) -> Path:
    """Create a project tree under ``root`` for on-disk resolution tests.

    Args:
        root: Temporary workspace root (tmp_path).
        files: Relative file paths to create (empty files).
        dirs: Relative directories to create.
        config: Optional contents of stagecraft.config.toml.

    Returns:
        The project root.
    """
    root.mkdir(parents=True, exist_ok=True)
    for rel in dirs:
        (root / rel).mkdir(parents=True, exist_ok=True)
    for rel in files:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")
    if config is not None:
        (root / "stagecraft.config.toml").write_text(config, encoding="utf-8")
    return root
