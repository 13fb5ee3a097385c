"""module-sync: manifest access for synchronizing modules across environments.

This package loads a ``module-sync.yml`` manifest that declares which modules
belong to each deployment scope (``stage``, ``local``, ...), and answers
queries about it:
- Schema version and declared scopes
- Per-scope module lists, optionally extended by a shared base list
- Module types to exclude from sync operations

Example usage:
    >>> from module_sync import SyncConfig
    >>>
    >>> config = SyncConfig("path/to/module-sync.yml")
    >>> config.get_scopes()
    ['stage', 'local']
    >>> config.get_modules_by_scope("local")
    ['devel', 'stage_file_proxy', 'views_ui']
"""

__version__ = "0.1.0"

from .config import (
    ConfigNotFoundError,
    InvalidConfigPathError,
    InvalidScopeError,
    MalformedConfigError,
    ModuleSyncError,
    ProjectRootNotFoundError,
    ScopeEntry,
    SyncConfig,
    find_project_root,
)

__all__ = [
    "SyncConfig",
    "ScopeEntry",
    "find_project_root",
    "ModuleSyncError",
    "ConfigNotFoundError",
    "ProjectRootNotFoundError",
    "InvalidConfigPathError",
    "InvalidScopeError",
    "MalformedConfigError",
]
