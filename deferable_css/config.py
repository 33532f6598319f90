"""Configuration objects and constants for stylesheet rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Union

from .errors import (
    ConfigurationError,
    ErrorHandler,
    LogSink,
    make_error_handler,
)
from .filesystem import preload_script_path
from .models import AliasSpec, Disabled, ExactPath, PathSpec, SameAsName, UrlSpec
from .utils import is_url

DEFAULT_URL_BASE_PATH = "/"
DEFAULT_INLINE_MAX = 1024

Template = Callable[[str], str]

_SPEC_TYPES = (Disabled, SameAsName, PathSpec, UrlSpec, ExactPath)


def default_link_template(href: str) -> str:
    return f'<link rel="stylesheet" href="{href}">'


def default_preload_template(href: str) -> str:
    return (
        f'<link rel="preload" as="style" href="{href}" '
        "onload=\"this.onload=null;this.rel='stylesheet'\">"
    )


def parse_alias_spec(value: object) -> AliasSpec:
    """Normalize a raw alias table value into an ``AliasSpec``.

    ``True``, ``1`` and ``"1"`` mean the alias name is also the file stem;
    falsy values (and ``"0"``) disable the alias; strings that look like URLs
    pass through untouched; ``Path`` objects are used verbatim.
    """
    if isinstance(value, _SPEC_TYPES):
        return value
    if isinstance(value, Path):
        return ExactPath(value)
    if value is True or value == 1 or value == "1":
        return SameAsName()
    if not value or value == "0":
        return Disabled()
    if not isinstance(value, str):
        raise ConfigurationError(f"unsupported alias value {value!r}")
    if is_url(value):
        return UrlSpec(value)
    if Path(value).is_absolute():
        raise ConfigurationError(f"alias value '{value}' must be a relative path")
    return PathSpec(value)


@dataclass
class DeferableCSSConfig:
    """Settings that control alias resolution and HTML rendering."""

    aliases: Mapping[str, object]
    css_root: Optional[Path]
    url_base_path: str = DEFAULT_URL_BASE_PATH
    prefer_min: bool = True
    cdn_links: Optional[Mapping[str, str]] = None
    use_cdn_links: Optional[bool] = None
    inline_max: int = DEFAULT_INLINE_MAX
    defer_css: bool = True
    include_noscript: Optional[bool] = None
    asset_id: Optional[str] = None
    link_template: Template = default_link_template
    preload_template: Template = default_preload_template
    preload_script: Optional[Path] = None
    log: Optional[Union[ErrorHandler, LogSink]] = None
    alias_specs: Dict[str, AliasSpec] = field(init=False, repr=False)
    error_handler: ErrorHandler = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.error_handler = make_error_handler(self.log)
        if self.css_root is not None:
            self.css_root = Path(self.css_root)
        if self.use_cdn_links is None:
            self.use_cdn_links = bool(self.cdn_links)
        if self.include_noscript is None:
            self.include_noscript = self.defer_css
        if self.preload_script is None:
            self.preload_script = preload_script_path()
        else:
            self.preload_script = Path(self.preload_script)
        if self.inline_max < 0:
            self.error_handler.error(
                ConfigurationError(
                    f"inline_max must be zero or positive, got {self.inline_max}"
                )
            )
            self.inline_max = 0
        if self.asset_id is not None and not self.asset_id:
            self.error_handler.error(ConfigurationError("asset_id must not be empty"))
            self.asset_id = None
        self.alias_specs = self._normalize_aliases()

    def _normalize_aliases(self) -> Dict[str, AliasSpec]:
        specs: Dict[str, AliasSpec] = {}
        for name, value in (self.aliases or {}).items():
            if not name:
                self.error_handler.error(ConfigurationError("empty alias name"))
                continue
            try:
                specs[name] = parse_alias_spec(value)
            except ConfigurationError as exc:
                self.error_handler.error(
                    ConfigurationError(f"alias '{name}': {exc}")
                )
                specs[name] = Disabled()
        return specs
