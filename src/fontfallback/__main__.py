import argparse
import json
import logging
from typing import Any

from fontfallback import css
from fontfallback.config import FontFallbackOptions
from fontfallback.core.fallback import (
    AutomaticFallback,
    FontFallback,
    ManualFallback,
    get_font_fallback,
)
from fontfallback.core.scoping import (
    FontFamilyType,
    compute_request_hash,
    get_scoped_font_family,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate a metric-adjusted fallback font for a web font"
    )
    parser.add_argument(
        "font_family",
        metavar="FAMILY",
        type=str,
        help='Font family name, e.g. "Roboto Slab"',
    )
    parser.add_argument(
        "--fallback",
        metavar="FAMILY",
        action="append",
        default=None,
        help="Manual fallback family. Can be repeated. Disables metric lookup.",
    )
    parser.add_argument(
        "--no-adjust",
        dest="adjust_font_fallback",
        action="store_false",
        default=None,
        help="Do not compute ascent, descent, line-gap and size-adjust overrides.",
    )
    parser.add_argument(
        "--metrics",
        metavar="PATH",
        type=str,
        default=None,
        help="Custom font metrics JSON file. Default: packaged capsize metrics",
    )
    parser.add_argument(
        "--format",
        metavar="FORMAT",
        type=str,
        choices=["css", "json"],
        default="css",
        help="Output format (css, json). Default: css",
    )
    parser.add_argument(
        "--selector",
        metavar="SELECTOR",
        type=str,
        default=None,
        help="CSS selector for the font-family rule. Default: class named after the font",
    )
    parser.add_argument(
        "--loglevel",
        metavar="LEVEL",
        default="WARNING",
        help="Logging level, default WARNING",
    )
    return parser.parse_args(argv)


def fallback_to_dict(fallback: FontFallback) -> dict[str, Any]:
    """Convert a fallback result to a JSON serializable dictionary."""
    if isinstance(fallback, ManualFallback):
        return {"type": "manual", "fontFamilies": fallback.font_families}
    if isinstance(fallback, AutomaticFallback):
        return {
            "type": "automatic",
            "scopedFontFamily": fallback.scoped_font_family,
            "localFontFamily": fallback.local_font_family,
            "adjustment": (
                fallback.adjustment.to_dict() if fallback.adjustment else None
            ),
        }
    return {"type": "unavailable"}


def main(argv: list[str] | None = None) -> None:
    """Print the fallback font for a family as CSS or JSON."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.loglevel.upper(), "WARNING"))

    overrides: dict[str, Any] = {"fallback": args.fallback}
    if args.adjust_font_fallback is not None:
        overrides["adjust_font_fallback"] = args.adjust_font_fallback
    if args.metrics is not None:
        overrides["metrics_path"] = args.metrics
    options = FontFallbackOptions.default(args.font_family, **overrides)

    request_hash = compute_request_hash(options)
    fallback = get_font_fallback(options, request_hash=request_hash)

    if args.format == "json":
        print(json.dumps(fallback_to_dict(fallback), indent=2))
        return

    primary = get_scoped_font_family(
        FontFamilyType.WEB_FONT, options.font_family, request_hash
    )
    print(css.to_stylesheet(primary, fallback, args.selector))


if __name__ == "__main__":
    main()
