"""Command-line entry point for rendering stylesheet markup."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, Sequence

from .config import DEFAULT_INLINE_MAX, DEFAULT_URL_BASE_PATH, DeferableCSSConfig
from .errors import DeferableCSSError
from .renderer import DeferableCSS

logger = logging.getLogger("deferable_css.cli")

RENDER_MODES = ("href", "link", "inline", "auto", "deferred")


def _parse_pairs(values: Iterable[str], option: str) -> Dict[str, str]:
    pairs: Dict[str, str] = {}
    for value in values:
        name, sep, target = value.partition("=")
        if not sep or not name:
            raise argparse.ArgumentTypeError(
                f"{option} expects NAME=VALUE, got {value!r}"
            )
        pairs[name] = target
    return pairs


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        required=True,
        type=Path,
        help="Directory containing the stylesheets",
    )
    parser.add_argument(
        "--alias",
        action="append",
        default=[],
        metavar="NAME=SPEC",
        help="Alias definition; SPEC is a path under --root, a URL, 1 for the alias name, or empty to disable",
    )
    parser.add_argument(
        "--prefer-full",
        action="store_true",
        help="Prefer NAME.css over NAME.min.css when both exist",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )


def _add_render_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("names", nargs="+", help="Aliases to render")
    parser.add_argument(
        "--mode",
        choices=RENDER_MODES,
        default="deferred",
        help="Kind of markup to emit (default: deferred)",
    )
    parser.add_argument(
        "--url-base-path",
        default=DEFAULT_URL_BASE_PATH,
        help="Prefix for local stylesheet URLs",
    )
    parser.add_argument(
        "--inline-max",
        type=int,
        default=DEFAULT_INLINE_MAX,
        help="Inline stylesheets up to this many bytes",
    )
    parser.add_argument(
        "--no-defer",
        action="store_true",
        help="Emit plain links instead of preload links for large stylesheets",
    )
    parser.add_argument(
        "--no-noscript",
        action="store_true",
        help="Omit the <noscript> fallback block",
    )
    parser.add_argument(
        "--asset-id",
        default=None,
        help="Cache-busting token appended to local URLs",
    )
    parser.add_argument(
        "--cdn",
        action="append",
        default=[],
        metavar="NAME=URL",
        help="CDN URL overriding the local URL for an alias",
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resolve stylesheet aliases and render link, inline or deferred HTML.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check", help="Resolve every alias and report problems"
    )
    _add_common_arguments(check_parser)

    render_parser = subparsers.add_parser(
        "render", help="Print HTML for one or more aliases"
    )
    _add_common_arguments(render_parser)
    _add_render_arguments(render_parser)

    argv = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(argv)
    try:
        args.aliases = _parse_pairs(args.alias, "--alias")
        args.cdn_links = _parse_pairs(getattr(args, "cdn", []), "--cdn")
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    return args


def build_config(args: argparse.Namespace) -> DeferableCSSConfig:
    options = dict(
        aliases=args.aliases,
        css_root=Path(args.root).resolve(),
        prefer_min=not args.prefer_full,
    )
    if args.command == "render":
        options.update(
            url_base_path=args.url_base_path,
            inline_max=args.inline_max,
            defer_css=not args.no_defer,
            include_noscript=False if args.no_noscript else None,
            asset_id=args.asset_id,
            cdn_links=args.cdn_links or None,
        )
    return DeferableCSSConfig(**options)


def _render(css: DeferableCSS, mode: str, names: Sequence[str]) -> str:
    if mode == "href":
        return "\n".join(css.href(name) for name in names)
    if mode == "link":
        return "".join(css.link_html(name) for name in names)
    if mode == "inline":
        return "".join(css.inline_html(name) for name in names)
    if mode == "auto":
        return css.link_or_inline_html(*names)
    return css.deferred_link_html(*names)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    try:
        css = DeferableCSS(build_config(args))
        if args.command == "check":
            css.check()
            logger.info("%d aliases resolved under %s", len(css.css_files), args.root)
            for name, asset in sorted(css.css_files.items()):
                logger.debug("%s -> %s (%d bytes)", name, asset.name, asset.size)
            return 0
        html = _render(css, args.mode, args.names)
    except DeferableCSSError as exc:
        logger.error("%s", exc)
        return 1

    sys.stdout.write(html if html.endswith("\n") else html + "\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
