"""Project root lookup.

Walks upward from a starting directory until a directory holding a project
marker is found. ``SyncConfig`` uses it to locate the default manifest, but
any callable taking a start path and returning a directory can replace it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from .errors import ProjectRootNotFoundError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# composer.json marks a Drupal (composer-managed) project root
DEFAULT_MARKERS = ("module-sync.yml", "composer.json", ".git")


def find_project_root(
    start: Optional[PathLike] = None,
    marker: Optional[str] = None,
) -> Path:
    """Return the nearest ancestor directory containing a project marker.

    Parameters
    ----------
    start : PathLike, optional
        Directory (or file) to start from. Defaults to the current
        working directory.
    marker : str, optional
        File or directory name to look for. If None, any of
        ``DEFAULT_MARKERS`` matches.

    Returns
    -------
    Path
        Absolute path of the first matching directory.

    Raises
    ------
    ProjectRootNotFoundError
        If no directory up to the filesystem root holds a marker.
    """
    current = Path(start) if start is not None else Path.cwd()
    current = current.resolve()
    if current.is_file():
        current = current.parent

    markers: Sequence[str] = (marker,) if marker else DEFAULT_MARKERS
    logger.debug("Looking up project root from %s (markers: %s)", current, markers)

    for directory in (current, *current.parents):
        if any((directory / name).exists() for name in markers):
            logger.debug("Found project root: %s", directory)
            return directory

    raise ProjectRootNotFoundError(
        f"No project root found above {current}. "
        f"Looked for: {', '.join(markers)}"
    )
