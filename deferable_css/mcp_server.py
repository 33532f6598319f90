"""MCP server exposing deferable-css rendering tools."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from .config import DEFAULT_INLINE_MAX, DEFAULT_URL_BASE_PATH, DeferableCSSConfig
from .renderer import DeferableCSS

logger = logging.getLogger("deferable_css.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="deferable-css")


@mcp.tool()
def render_css(
    css_root: str,
    aliases: Dict[str, str],
    names: List[str],
    deferred: bool = True,
    url_base_path: str = DEFAULT_URL_BASE_PATH,
    inline_max: int = DEFAULT_INLINE_MAX,
    asset_id: Optional[str] = None,
) -> str:
    """Return HTML that includes the named stylesheets from ``css_root``."""

    config = DeferableCSSConfig(
        aliases=aliases,
        css_root=css_root,
        url_base_path=url_base_path,
        inline_max=inline_max,
        asset_id=asset_id,
    )
    css = DeferableCSS(config)
    if deferred:
        return css.deferred_link_html(*names)
    return css.link_or_inline_html(*names)


@mcp.tool()
def list_aliases(css_root: str, aliases: Dict[str, str]) -> Dict[str, str]:
    """Resolve aliases and return the URL each one would be linked with."""

    css = DeferableCSS(DeferableCSSConfig(aliases=aliases, css_root=css_root))
    css.check()
    return {name: css.href(name) for name in css.css_files}


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
