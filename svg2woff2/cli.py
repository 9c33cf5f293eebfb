"""Command line: build an icon WOFF2 and its stylesheet from a folder of SVG icons.

    svg2woff2 icons/ --font-family "My Icons" --output dist/icons.woff2 --css dist/icons.css

Icons are taken in the order given on the command line, or sorted by file name
when no names are passed. Code points follow that order starting at U+E000.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from svg2woff2.config import settings
from svg2woff2.css.emitter import generate_css
from svg2woff2.engine.context import ConversionReport
from svg2woff2.engine.pipeline import create_pipeline
from svg2woff2.exceptions import Svg2Woff2Error
from svg2woff2.fonts.compiler import compile_ttf
from svg2woff2.fonts.compressor import compress_woff2
from svg2woff2.models.options import GenerateCssOptions, SvgFontParameters, SvgSource, TtfFontParameters

logger = logging.getLogger(__name__)


def iter_svg_files(src_dir: Path) -> Iterable[Path]:
    """SVG files in a directory, sorted by name."""
    for entry in sorted(src_dir.glob("*.svg")):
        if entry.is_file():
            yield entry


def load_sources(src_dir: Path, names: list[str] | None = None) -> list[SvgSource]:
    """Read ``<src_dir>/<name>.svg`` for each name, or every SVG in the directory."""
    if not src_dir.is_dir():
        raise FileNotFoundError(f"Icon directory not found: {src_dir}")

    if names:
        paths = [src_dir / f"{name}.svg" for name in names]
    else:
        paths = list(iter_svg_files(src_dir))
    if not paths:
        raise ValueError(f"No SVG files in {src_dir}")

    return [SvgSource(name=p.stem, content=p.read_text(encoding="utf-8")) for p in paths]


def _write(path: Path, data: bytes | str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, bytes):
        path.write_bytes(data)
    else:
        path.write_text(data, encoding="utf-8")
    logger.info("Wrote %s", path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svg2woff2",
        description="Build a WOFF2 icon font and CSS from SVG icons",
    )
    parser.add_argument("src_dir", type=Path, help="Directory containing the SVG icons")
    parser.add_argument("names", nargs="*", help="Icon names (file stems) in code point order")
    parser.add_argument("--font-family", required=True, help="Font family name")
    parser.add_argument("--output", type=Path, required=True, help="Where to write the WOFF2 font")
    parser.add_argument("--css", type=Path, help="Where to write the stylesheet")
    parser.add_argument("--font-url", help="URL of the font in the stylesheet (default: output file name)")
    parser.add_argument("--svg-font", type=Path, help="Also write the intermediate SVG font")
    parser.add_argument("--ttf", type=Path, help="Also write the intermediate TTF")
    parser.add_argument(
        "--unicode-base",
        type=lambda s: int(s, 0),
        default=settings.unicode_base,
        help="First code point (default 0xE000, Private Use Area)",
    )
    parser.add_argument("--units-per-em", type=float)
    parser.add_argument("--ascent", type=float)
    parser.add_argument("--descent", type=float)
    parser.add_argument("--offset-y", type=float, help="Baseline shift in font units")
    parser.add_argument("--height-decrease", type=float, help="Shrink glyph height by this many units")
    parser.add_argument(
        "--no-preserve-viewbox",
        dest="preserve_viewbox",
        action="store_false",
        help="Scale each icon by its own bounds instead of its viewBox",
    )
    parser.add_argument("--vertical-align", help="CSS vertical-align for the .hf class")
    parser.add_argument("--version", dest="font_version", default="1.0", help="Font version string")
    parser.add_argument("--description", default="", help="Font description")
    parser.add_argument("--url", default="", help="Vendor URL stored in the font")
    parser.add_argument("--log-level", default=settings.svg2woff2_log_level)
    return parser


def run(args: argparse.Namespace) -> ConversionReport:
    sources = load_sources(args.src_dir, args.names)
    params = SvgFontParameters(
        font_family=args.font_family,
        units_per_em=args.units_per_em,
        ascent=args.ascent,
        descent=args.descent,
        offset_y=args.offset_y,
        height_decrease=args.height_decrease,
        preserve_viewbox=args.preserve_viewbox,
    )
    report = ConversionReport()
    pipeline = create_pipeline(params, args.unicode_base, precision=settings.path_precision)
    svg_font = pipeline.build_svg_font(sources, report)
    if args.svg_font:
        _write(args.svg_font, svg_font)

    ttf = compile_ttf(
        svg_font,
        TtfFontParameters(version=args.font_version, description=args.description, url=args.url),
    )
    if args.ttf:
        _write(args.ttf, ttf)
    _write(args.output, compress_woff2(ttf))

    if args.css:
        css = generate_css(
            sources,
            GenerateCssOptions(
                font_family=pipeline.metrics.font_family,
                font_url=args.font_url or args.output.name,
                unicode_base=args.unicode_base,
                vertical_align=args.vertical_align,
            ),
        )
        _write(args.css, css)
    return report


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        report = run(args)
    except (Svg2Woff2Error, OSError, ValueError) as exc:
        logger.error("Conversion failed: %s", exc)
        return 1

    if report.dropped_sources:
        logger.warning("Dropped %d icon(s): %s", len(report.dropped_sources), ", ".join(report.dropped_sources))
    print(f"Done: {args.output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
