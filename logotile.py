"""
logotile.py
===========

Renders a "background" PNG: a solid colour covered with dark, randomly shaded
copies of a small pixel-art logo, tessellated outward from the center along a
square spiral, with one bright copy of the logo centered on top.

Key features
------------
- Fixed 11-cell glyph scaled by a tile size (``px``), one solid square per cell.
- Background copies placed on a grid whose cell is the logo's bounding box,
  visited in Ulam-spiral order so the pattern grows symmetrically around the
  centered logo whatever the canvas aspect ratio.
- Each cell gets a shade picked at random from a small grayscale palette;
  background tiles alternate between two palettes along the spiral.
- Output name carries the dimensions, tile size and an MD5 of the pixels, so
  distinct images never overwrite each other.
- Deterministic output with a random seed.

Quick start
-----------
>>> from logotile import generate
>>> generate(width=1920, height=1080, background=(0, 0, 0, 255), px=12, seed=7)
'./background-1920x1080-12px-<md5>.png'

Command line
------------
$ python logotile.py -dimensions 1920x1080 -background 20,20,40 -pixel 12

License: MIT
"""

import argparse
import hashlib
import logging
import os
import random
import re
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

try:
    from PIL import Image
except Exception as e:  # pragma: no cover
    raise SystemExit("This script requires Pillow. Try: pip install pillow") from e

try:
    import numpy as np
except Exception as e:  # pragma: no cover
    raise SystemExit("This script requires NumPy. Try: pip install numpy") from e


logger = logging.getLogger("logotile")

Point = Tuple[int, int]
Colour = Tuple[int, int, int, int]
Palette = Sequence[Colour]

DEFAULT_DIMENSIONS = "800x600"
DEFAULT_BACKGROUND = "0,0,0"
DEFAULT_PIXEL = 10


# ---------------------------- Utilities ------------------------------------

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(s: str) -> int:
    """Strict decimal integer: optional sign and digits, nothing else."""
    if not _INT_RE.fullmatch(s):
        raise ValueError(f"invalid integer: {s!r}")
    return int(s)


def gray(v: int) -> Colour:
    return (v, v, v, 255)


def div_ceil(a: int, b: int) -> int:
    return -(-a // b)


def div_trunc(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Configures the logger for the 'logotile' namespace.

    Output goes to stderr; stdout is left silent.
    """
    log = logging.getLogger("logotile")
    log.setLevel(level)

    if log.hasHandlers():
        log.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    log.addHandler(handler)


# ---------------------------- Input parsing ---------------------------------

def parse_dimensions(s: str) -> Tuple[int, int]:
    """Parse 'WxH' into (w, h). A single number 'N' gives a square (N, N).

    Only the first 'x' splits, so '8x6x2' fails on the height part.
    """
    parts = s.split("x", 1)
    if len(parts) == 2:
        try:
            return parse_int(parts[0]), parse_int(parts[1])
        except ValueError as e:
            raise ValueError(f"invalid dimensions {s!r}: {e}") from e
    try:
        n = parse_int(parts[0])
    except ValueError as e:
        raise ValueError(f"invalid dimensions {s!r}: {e}") from e
    return n, n


def parse_colour(s: str) -> Colour:
    """Parse 'R,G,B' into an opaque RGBA tuple.

    Channels wrap to 8 bits (256 -> 0, -1 -> 255).
    """
    rgb = s.split(",", 2)
    if len(rgb) != 3:
        raise ValueError(f"invalid colour {s!r}: expected R,G,B")
    try:
        r, g, b = (parse_int(c) & 0xFF for c in rgb)
    except ValueError as e:
        raise ValueError(f"invalid colour {s!r}: {e}") from e
    return (r, g, b, 255)


# ---------------------------- Logo & palettes -------------------------------

LOGO: Tuple[Point, ...] = (
    (0, 0), (4, 0),
    (0, 1), (1, 1), (3, 1), (4, 1),
    (0, 2), (2, 2), (4, 2),
    (1, 3), (3, 3),
)

BACKGROUND_PALETTES: Tuple[Palette, ...] = (
    tuple(gray(v) for v in (6, 7, 8, 9, 10)),
    tuple(gray(v) for v in (11, 12, 13, 14, 15)),
)

FOREGROUND_PALETTE: Palette = tuple(gray(v) for v in (255, 245, 235, 225, 215))


# ---------------------------- Layout ----------------------------------------

@dataclass(frozen=True)
class Layout:
    logo_width: int
    logo_height: int
    dx: int   # offset of the centered logo
    dy: int


def logo_bounds(points: Sequence[Point], px: int) -> Tuple[int, int]:
    """Pixel size of the glyph: one tile past the farthest column and row."""
    mx = max([x for x, _ in points] + [0])
    my = max([y for _, y in points] + [0])
    return mx * px + px, my * px + px


def compute_layout(size: Tuple[int, int], points: Sequence[Point], px: int) -> Layout:
    w, h = size
    lw, lh = logo_bounds(points, px)
    return Layout(lw, lh, div_trunc(w - lw, 2), div_trunc(h - lh, 2))


# ---------------------------- Spiral ----------------------------------------

def spiral(steps: int) -> Iterator[Tuple[int, int, int]]:
    """Yield (index, x, y) along a square spiral starting at the origin.

    The walk turns a quarter each time it reaches a corner of the current
    ring, so every coordinate is visited once and ring k is complete after
    (2k+1)**2 steps.
    """
    x, y = 0, 0
    xd, yd = 0, -1
    for i in range(steps):
        yield i, x, y
        if x == y or (x < 0 and x == -y) or (x > 0 and x == 1 - y):
            xd, yd = -yd, xd
        x, y = x + xd, y + yd


# ---------------------------- Drawing ---------------------------------------

def draw_logo(
    canvas: Image.Image,
    points: Sequence[Point],
    palette: Palette,
    x: int,
    y: int,
    px: int,
    rng: random.Random,
) -> None:
    """Fill each glyph cell at offset (x, y) with a random palette shade."""
    for cx, cy in points:
        c = rng.choice(palette)
        x1, y1 = cx * px + x, cy * px + y
        # paste() clips to the canvas and treats the box as half-open
        canvas.paste(c, (x1, y1, x1 + px, y1 + px))


def draw_background(
    canvas: Image.Image,
    points: Sequence[Point],
    px: int,
    rng: random.Random,
    palettes: Sequence[Palette] = BACKGROUND_PALETTES,
) -> int:
    """Tessellate background logos outward from the centered one.

    Returns the number of logos drawn.
    """
    iw, ih = canvas.size
    layout = compute_layout(canvas.size, points, px)
    lw, lh = layout.logo_width, layout.logo_height

    # enough tiles to cover the canvas from the centered origin, with spares
    wt, ht = div_ceil(iw + layout.dx, lw), div_ceil(ih + layout.dy, lh)
    hw, hh = wt // 2, ht // 2
    logger.debug("Spiral: %dx%d tiles, %d steps", wt, ht, wt * ht)

    drawn = 0
    for i, x, y in spiral(wt * ht):
        if -hw <= x <= hw and -hh <= y <= hh:
            draw_logo(canvas, points, palettes[i % len(palettes)],
                      layout.dx + x * lw, layout.dy + y * lh, px, rng)
            drawn += 1
    return drawn


def draw_foreground(
    canvas: Image.Image,
    points: Sequence[Point],
    px: int,
    rng: random.Random,
    palette: Palette = FOREGROUND_PALETTE,
) -> None:
    layout = compute_layout(canvas.size, points, px)
    draw_logo(canvas, points, palette, layout.dx, layout.dy, px, rng)


# ---------------------------- High-level API --------------------------------

@dataclass
class GenerateArgs:
    width: int
    height: int
    background: Colour = (0, 0, 0, 255)
    px: int = DEFAULT_PIXEL
    seed: Optional[int] = None
    out_dir: str = "."


def validate(width: int, height: int, px: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"dimensions must be positive, got {width}x{height}")
    if px <= 0:
        raise ValueError(f"pixel size must be positive, got {px}")


def render(
    width: int,
    height: int,
    background: Colour,
    px: int,
    rng: random.Random,
    points: Sequence[Point] = LOGO,
) -> Image.Image:
    """Compose the full image: background fill, spiral tiles, centered logo."""
    validate(width, height, px)
    canvas = Image.new("RGBA", (width, height), color=tuple(background))
    n = draw_background(canvas, points, px, rng)
    draw_foreground(canvas, points, px, rng)
    logger.debug("Rendered %dx%d at %dpx with %d background logos", width, height, px, n)
    return canvas


def content_hash(canvas: Image.Image) -> str:
    """MD5 hex digest of the raw interleaved RGBA pixel bytes."""
    pix = np.asarray(canvas.convert("RGBA"), dtype=np.uint8)
    return hashlib.md5(pix.tobytes()).hexdigest()


def output_name(width: int, height: int, px: int, digest: str) -> str:
    return f"background-{width}x{height}-{px}px-{digest}.png"


def save(canvas: Image.Image, px: int, out_dir: str = ".") -> str:
    """Encode to PNG under a name derived from the pixels. Returns the path."""
    w, h = canvas.size
    path = os.path.join(out_dir, output_name(w, h, px, content_hash(canvas)))
    canvas.save(path, format="PNG", optimize=True)
    logger.info("Wrote %s", path)
    return path


def rng_from_seed(seed: Optional[int]) -> random.Random:
    """Return a Random instance from seed (or system)."""
    r = random.Random()
    if seed is not None:
        r.seed(int(seed))
    else:
        r.seed()
    return r


def generate(
    width: int,
    height: int,
    background: Colour = (0, 0, 0, 255),
    px: int = DEFAULT_PIXEL,
    seed: Optional[int] = None,
    out_dir: str = ".",
) -> str:
    """High-level convenience. Returns the path of the saved PNG."""
    args = GenerateArgs(width=width, height=height, background=background,
                        px=px, seed=seed, out_dir=out_dir)
    img = render(args.width, args.height, args.background, args.px,
                 rng_from_seed(args.seed))
    return save(img, args.px, args.out_dir)


# ---------------------------- CLI -------------------------------------------

def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Generate a spiral-tiled logo background PNG")
    ap.add_argument("-dimensions", "--dimensions", default=DEFAULT_DIMENSIONS,
                    help="image dimensions, separate values with an x, single value "
                         "without an x will be a square image")
    ap.add_argument("-background", "--background", default=DEFAULT_BACKGROUND,
                    help="background colour in rgb format (0,0,0 = black, 255,255,255 = white)")
    ap.add_argument("-pixel", "--pixel", type=int, default=DEFAULT_PIXEL, help='"pixel" size')
    ap.add_argument("--seed", type=int, default=None, help="Seed for reproducible shading")
    ap.add_argument("--out-dir", default=".", help="Directory to write the PNG to")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    args = ap.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        width, height = parse_dimensions(args.dimensions)
        background = parse_colour(args.background)
        generate(width=width, height=height, background=background,
                 px=args.pixel, seed=args.seed, out_dir=args.out_dir)
    except (ValueError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
