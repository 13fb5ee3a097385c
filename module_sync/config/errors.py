"""Errors raised while loading or querying a module-sync manifest."""


class ModuleSyncError(Exception):
    """Base class for all module-sync errors."""

    pass


class ConfigNotFoundError(ModuleSyncError, FileNotFoundError):
    """Raised when no default manifest can be discovered."""

    pass


class ProjectRootNotFoundError(ConfigNotFoundError):
    """Raised when the upward lookup reaches the filesystem root."""

    pass


class InvalidConfigPathError(ModuleSyncError, ValueError):
    """Raised when the manifest path does not point to a regular file."""

    pass


class InvalidScopeError(ModuleSyncError, ValueError):
    """Raised when a scope is not declared in the manifest."""

    pass


class MalformedConfigError(ModuleSyncError, ValueError):
    """Raised when the manifest cannot be decoded into the expected shape."""

    pass
