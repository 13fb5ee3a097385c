"""Manifest configuration for module-sync.

Example
-------
>>> from module_sync.config import SyncConfig
>>>
>>> # Discover module-sync.yml from the current project root
>>> config = SyncConfig()
>>> print(config.get_version())
1
>>> print(config.has_scope("stage"))
True
"""

from .errors import (
    ConfigNotFoundError,
    InvalidConfigPathError,
    InvalidScopeError,
    MalformedConfigError,
    ModuleSyncError,
    ProjectRootNotFoundError,
)
from .lookup import DEFAULT_MARKERS, find_project_root
from .sync_config import ScopeEntry, SyncConfig

__all__ = [
    "SyncConfig",
    "ScopeEntry",
    "find_project_root",
    "DEFAULT_MARKERS",
    "ModuleSyncError",
    "ConfigNotFoundError",
    "ProjectRootNotFoundError",
    "InvalidConfigPathError",
    "InvalidScopeError",
    "MalformedConfigError",
]
