"""HTML rendering for stylesheet aliases: links, inline styles and deferred loading."""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from .config import DeferableCSSConfig
from .errors import ConfigurationError, InvalidAliasError, TypeMismatchError
from .filesystem import LocalFileSystem
from .models import Asset, LocalAsset, RemoteAsset
from .resolver import AliasResolver
from .utils import unique

logger = logging.getLogger("deferable_css")


class DeferableCSS:
    """Render ``<link>``, ``<style>`` and deferred preload markup for aliases.

    The resolved alias table is built lazily on first use and shared by all
    subsequent calls. Rendering itself is stateless; every call re-reads the
    files it inlines and the preload shim it embeds.
    """

    def __init__(
        self,
        config: DeferableCSSConfig,
        filesystem: Optional[LocalFileSystem] = None,
    ) -> None:
        self.config = config
        self.filesystem = filesystem or LocalFileSystem()
        self.resolver = AliasResolver(config, self.filesystem)
        self._errors = config.error_handler

    @property
    def css_files(self) -> Mapping[str, Asset]:
        return self.resolver.css_files

    def check(self) -> bool:
        """Resolve every alias now and make sure at least one is usable."""
        if not self.css_files:
            self._errors.error(ConfigurationError("no aliases"))
            return False
        return True

    def _lookup(self, name: Optional[str], asset: Optional[Asset] = None) -> Optional[Asset]:
        if name is None:
            self._errors.error(InvalidAliasError("missing name"))
            return None
        if asset is None:
            asset = self.resolver.get(name)
        if asset is None:
            self._errors.error(InvalidAliasError(f"invalid name '{name}'"))
        return asset

    def href(self, name: Optional[str], asset: Optional[Asset] = None) -> str:
        asset = self._lookup(name, asset)
        if asset is None:
            return ""
        if isinstance(asset, RemoteAsset):
            return asset.url
        href = self.config.url_base_path + asset.name
        if self.config.asset_id:
            href += "?" + self.config.asset_id
        if self.config.use_cdn_links and self.config.cdn_links:
            return self.config.cdn_links.get(name) or href
        return href

    def link_html(self, name: Optional[str], asset: Optional[Asset] = None) -> str:
        href = self.href(name, asset)
        if not href:
            return ""
        return self.config.link_template(href)

    def inline_html(self, name: Optional[str], asset: Optional[Asset] = None) -> str:
        asset = self._lookup(name, asset)
        if asset is None:
            return ""
        if not isinstance(asset, LocalAsset):
            self._errors.error(TypeMismatchError(f"alias '{name}' refers to a URI"))
            return ""
        content = self.filesystem.read_text(asset.path)
        if not content:
            self._errors.warning(f"empty file '{asset.path}'")
            return ""
        return f"<style>{content}</style>"

    def link_or_inline_html(self, *names: str) -> str:
        """Inline small local stylesheets, link everything else."""
        html = ""
        for name in unique(names):
            asset = self._lookup(name)
            if asset is None:
                continue
            if isinstance(asset, LocalAsset) and asset.size <= self.config.inline_max:
                html += self.inline_html(name, asset)
            else:
                html += self.link_html(name, asset)
        return html

    def deferred_link_html(self, *names: str) -> str:
        """Inline small stylesheets and load the rest asynchronously.

        Deferred stylesheets get a preload link each, an optional
        ``<noscript>`` block of plain links, and the preload shim script.
        URL aliases report a size of zero and so take the inline branch,
        which fails for them.
        """
        html = ""
        deferred: List[str] = []
        for name in unique(names):
            asset = self._lookup(name)
            if asset is None:
                continue
            if asset.size <= self.config.inline_max:
                html += self.inline_html(name, asset)
            elif self.config.defer_css:
                href = self.href(name, asset)
                logger.debug("Deferring %s as %s", name, href)
                deferred.append(href)
                html += self.config.preload_template(href)
            else:
                html += self.link_html(name, asset)

        if deferred:
            if self.config.include_noscript:
                html += "<noscript>"
                html += "".join(self.config.link_template(href) for href in deferred)
                html += "</noscript>"
            script = self.filesystem.read_text(self.config.preload_script)
            html += f"<script>{script}</script>"
        return html
