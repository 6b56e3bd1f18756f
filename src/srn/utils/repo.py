"""
Config root discovery.

`srn` commands read naming defaults from the nearest `.srn/` directory at or
above the working directory.
"""

from pathlib import Path
from typing import Optional

CONFIG_DIR_NAME = ".srn"


def has_config_dir(directory: Path) -> bool:
    return (directory / CONFIG_DIR_NAME).is_dir()


def find_config_root(start: Optional[Path] = None) -> Path:
    """
    Nearest directory at or above `start` (default: cwd) holding `.srn/`.

    Falls back to `start` itself, where config accessors return defaults.
    """
    origin = (start or Path.cwd()).resolve()
    return next(
        (candidate for candidate in (origin, *origin.parents) if has_config_dir(candidate)),
        origin,
    )
