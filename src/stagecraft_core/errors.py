"""Exception taxonomy for stagecraft-core."""

from pathlib import Path
from typing import Union


class StagecraftError(Exception):
    """Base exception for all stagecraft errors."""

    pass


# Config errors


class ConfigError(StagecraftError):
    """Failed to load or resolve project configuration."""

    pass


class ProbeError(ConfigError):
    """A filesystem probe could not read the project tree.

    Raised instead of reporting "not found" so that an unreadable project
    never silently changes which features get enabled.
    """

    def __init__(self, path: Union[str, Path], details: str) -> None:
        self.path = Path(path)
        self.details = details
        super().__init__(f"Cannot probe {self.path}: {details}")
