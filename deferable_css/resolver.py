"""Resolution of stylesheet aliases to local files or remote URLs."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .config import DeferableCSSConfig
from .errors import ConfigurationError, ResolutionError
from .filesystem import LocalFileSystem
from .models import (
    AliasSpec,
    Asset,
    Disabled,
    ExactPath,
    LocalAsset,
    PathSpec,
    RemoteAsset,
    SameAsName,
    UrlSpec,
)
from .utils import candidate_filenames

logger = logging.getLogger("deferable_css")


def relative_name(path: Path, root: Path) -> str:
    """POSIX-style path of ``path`` relative to ``root``."""
    try:
        relative = path.relative_to(root)
    except ValueError:
        relative = Path(os.path.relpath(path, root))
    return relative.as_posix()


class AliasResolver:
    """Build the alias -> asset table once and serve it read-only afterwards."""

    def __init__(
        self,
        config: DeferableCSSConfig,
        filesystem: Optional[LocalFileSystem] = None,
    ) -> None:
        self.config = config
        self.filesystem = filesystem or LocalFileSystem()
        self._errors = config.error_handler
        self._files: Optional[Mapping[str, Asset]] = None
        self._lock = threading.Lock()
        self._validate_root()

    def _validate_root(self) -> None:
        root = self.config.css_root
        if root is None:
            self._errors.error(ConfigurationError("css_root is required"))
        elif not self.filesystem.is_dir(root):
            self._errors.error(
                ConfigurationError(f"css_root '{root}' is not a directory")
            )

    @property
    def css_files(self) -> Mapping[str, Asset]:
        files = self._files
        if files is None:
            with self._lock:
                if self._files is None:
                    self._files = MappingProxyType(self._build())
                files = self._files
        return files

    def get(self, name: str) -> Optional[Asset]:
        return self.css_files.get(name)

    def _build(self) -> Dict[str, Asset]:
        files: Dict[str, Asset] = {}
        for name, spec in self.config.alias_specs.items():
            asset = self.resolve(name, spec)
            if asset is not None:
                files[name] = asset
        logger.debug("Resolved %d of %d aliases", len(files), len(self.config.alias_specs))
        return files

    def resolve(self, name: str, spec: AliasSpec) -> Optional[Asset]:
        """Resolve a single alias without touching the cached table."""
        if isinstance(spec, Disabled):
            return None
        if isinstance(spec, UrlSpec):
            return RemoteAsset(spec.url)
        if isinstance(spec, ExactPath):
            path = spec.path
            if not path.is_absolute():
                path = (self.config.css_root or Path()) / path
            return self._local_asset(name, [path])
        if isinstance(spec, SameAsName):
            base = name
        elif isinstance(spec, PathSpec):
            base = spec.base
        else:
            raise TypeError(f"unexpected alias spec {spec!r}")
        root = self.config.css_root or Path()
        candidates = [
            root / filename
            for filename in candidate_filenames(base, self.config.prefer_min)
        ]
        return self._local_asset(name, candidates)

    def _local_asset(self, name: str, candidates) -> Optional[LocalAsset]:
        root = self.config.css_root or Path()
        for path in candidates:
            if self.filesystem.exists(path):
                size = self.filesystem.size(path)
                logger.debug("Alias %s resolved to %s (%d bytes)", name, path, size)
                return LocalAsset(path=path, name=relative_name(path, root), size=size)
        self._errors.error(
            ResolutionError(f"alias '{name}' refers to a non-existent file")
        )
        return None
