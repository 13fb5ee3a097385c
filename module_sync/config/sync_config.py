"""Module-sync manifest loader.

The manifest is a YAML document listing the modules to keep in sync for each
deployment scope:

```yaml
version: 1
exclude_types:
  - profile
base:
  - views_ui
scope:
  stage:
    modules:
      - stage_file_proxy
  local:
    modules:
      - devel
    extend_base: true
```

Example
-------
>>> from module_sync.config import SyncConfig
>>> config = SyncConfig("module-sync.yml")
>>> config.get_modules_by_scope("local")
['devel', 'views_ui']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import yaml

from .errors import (
    ConfigNotFoundError,
    InvalidConfigPathError,
    InvalidScopeError,
    MalformedConfigError,
)
from .lookup import find_project_root

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
PathResolver = Callable[[Path], Path]


@dataclass(frozen=True)
class ScopeEntry:
    """Declaration of a single scope.

    Attributes
    ----------
    name : str
        Scope name (key under ``scope``)
    modules : List[str], optional
        Modules declared for the scope. None when the key is absent or null.
    extend_base : bool
        Whether the shared ``base`` list is appended to ``modules``
    """

    name: str
    modules: Optional[List[str]] = None
    extend_base: bool = False

    @classmethod
    def from_dict(cls, name: str, data: Optional[Dict[str, Any]]) -> "ScopeEntry":
        """Create a scope entry from its YAML mapping (None means empty)."""
        if data is None:
            return cls(name=name)
        if not isinstance(data, dict):
            raise MalformedConfigError(
                f"Scope '{name}' must be a mapping, got {type(data).__name__}"
            )

        modules = data.get("modules")
        if modules is not None and not isinstance(modules, list):
            raise MalformedConfigError(f"Scope '{name}' modules must be a list")

        return cls(
            name=name,
            modules=list(modules) if modules is not None else None,
            extend_base=bool(data.get("extend_base", False)),
        )


class SyncConfig:
    """Loads a module-sync manifest and answers queries against it.

    The manifest is read once at construction time and never modified
    afterwards, so an instance is safe for concurrent reads.

    Parameters
    ----------
    path : PathLike, optional
        Path to the manifest. If None, the project root is looked up from
        ``start_dir`` and ``module-sync.yml`` is expected inside it.
    start_dir : PathLike, optional
        Where the project root lookup starts (default: current directory).
    resolver : Callable[[Path], Path]
        Returns the project root for a starting directory.

    Attributes
    ----------
    path : Path
        Resolved manifest path

    Raises
    ------
    ConfigNotFoundError
        If no path is given and no default manifest can be discovered
    InvalidConfigPathError
        If the manifest path does not exist or is not a regular file
    MalformedConfigError
        If the manifest is not valid YAML or has no ``scope`` mapping
    """

    DEFAULT_VERSION = 1
    DEFAULT_FILENAME = "module-sync.yml"

    def __init__(
        self,
        path: Optional[PathLike] = None,
        *,
        start_dir: Optional[PathLike] = None,
        resolver: PathResolver = find_project_root,
    ):
        if path is None:
            path = self._discover_path(start_dir, resolver)

        self.path = Path(path)
        self._config = self._parse_config(self.path)

    def __repr__(self) -> str:
        return f"SyncConfig(path={str(self.path)!r}, scopes={self.get_scopes()!r})"

    def get_version(self) -> int:
        """Return the manifest version (``DEFAULT_VERSION`` if unset)."""
        version = self._config.get("version")
        return version if version is not None else self.DEFAULT_VERSION

    def get_scopes(self) -> List[str]:
        """Return declared scope names in document order."""
        return list(self._config["scope"].keys())

    def has_scope(self, scope: str) -> bool:
        """Return True if the scope is declared in the manifest."""
        return scope in self.get_scopes()

    def get_exclude_types(self) -> List[str]:
        """Return module types excluded from sync operations."""
        return list(self._config.get("exclude_types") or [])

    def get_base(self) -> List[str]:
        """Return the shared base module list."""
        return list(self._config.get("base") or [])

    def get_scope(self, scope: str) -> ScopeEntry:
        """Return the raw declaration of a scope.

        Raises
        ------
        InvalidScopeError
            If the scope is not declared
        """
        self._check_scope(scope)
        return ScopeEntry.from_dict(scope, self._config["scope"][scope])

    def get_modules_by_scope(self, scope: str) -> List[str]:
        """Return the effective module list for a scope.

        Parameters
        ----------
        scope : str
            Scope name

        Returns
        -------
        List[str]
            Scope modules, followed by the base list when the scope sets
            ``extend_base``. Empty when the scope declares no modules and
            the manifest has no base list.

        Raises
        ------
        InvalidScopeError
            If the scope is not declared
        """
        self._check_scope(scope)
        return self.get_modules().get(scope, [])

    def get_modules(self) -> Dict[str, List[str]]:
        """Return effective module lists keyed by scope.

        Scopes without ``modules`` are left out when there is no base list.
        Recomputed on every call.
        """
        base = self._config.get("base")
        modules: Dict[str, List[str]] = {}

        for name, info in self._config["scope"].items():
            entry = ScopeEntry.from_dict(name, info)
            if entry.modules is None and not base:
                continue

            scope_modules = list(entry.modules or [])
            if entry.extend_base:
                scope_modules.extend(base or [])
            modules[name] = scope_modules

        return modules

    def to_dict(self) -> Dict[str, Any]:
        """Summarize the manifest as plain data."""
        return {
            "path": str(self.path),
            "version": self.get_version(),
            "scopes": self.get_scopes(),
            "exclude_types": self.get_exclude_types(),
            "base": self.get_base(),
            "modules": self.get_modules(),
        }

    def _check_scope(self, scope: str) -> None:
        if not self.has_scope(scope):
            raise InvalidScopeError("Invalid scope has been passed.")

    def _discover_path(
        self, start_dir: Optional[PathLike], resolver: PathResolver
    ) -> Path:
        """Locate the default manifest in the project root."""
        start = Path(start_dir) if start_dir is not None else Path.cwd()
        root = resolver(start)
        filename = Path(root) / self.DEFAULT_FILENAME

        if not filename.is_file():
            raise ConfigNotFoundError(
                f"Undefined or non-existent configuration path: {filename}"
            )

        logger.debug("Discovered module-sync manifest: %s", filename)
        return filename

    @staticmethod
    def _parse_config(config_path: Path) -> Dict[str, Any]:
        """Read and decode the manifest.

        Parameters
        ----------
        config_path : Path
            Path to the YAML manifest

        Returns
        -------
        Dict[str, Any]
            Decoded manifest with a validated ``scope`` mapping
        """
        if not config_path.is_file():
            raise InvalidConfigPathError(
                f"Invalid path to the module-sync YAML configuration: {config_path}"
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise MalformedConfigError(
                f"Could not decode YAML in {config_path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise MalformedConfigError(
                f"Configuration in {config_path} must be a mapping"
            )
        if not isinstance(data.get("scope"), dict):
            raise MalformedConfigError(
                f"Configuration in {config_path} has no 'scope' mapping"
            )

        version = data.get("version")
        if version is not None and (
            isinstance(version, bool) or not isinstance(version, int)
        ):
            raise MalformedConfigError(
                f"'version' in {config_path} must be an integer"
            )
        for key in ("base", "exclude_types"):
            if data.get(key) is not None and not isinstance(data[key], list):
                raise MalformedConfigError(
                    f"'{key}' in {config_path} must be a list"
                )

        # Validate entries up front so queries never fail on shape
        for name, info in data["scope"].items():
            ScopeEntry.from_dict(name, info)

        logger.debug(
            "Loaded module-sync manifest %s (%d scopes)",
            config_path,
            len(data["scope"]),
        )
        return data
