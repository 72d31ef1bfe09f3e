"""
config.py

Global constants and command-line overrides.

Slider ranges, window size and the palette live here so the rest of the code
never hardcodes them.
"""

import argparse
import logging

# ============================================================
# SLIDERS
# ============================================================

SLIDER_MIN = -4.0
SLIDER_MAX = 4.0
SLIDER_STEP = 0.1

# The diagram opens on a configuration where x1, x2 and x1-x2 are all visible.
DEFAULT_B = 3.0
DEFAULT_LAMBDA1 = 1.0
DEFAULT_LAMBDA2 = -2.0

# ============================================================
# WINDOW
# ============================================================

WINDOW_SIZE = (1560, 940)
MIN_WINDOW_SIZE = (1000, 700)
FPS = 60

SCREENSHOT_NAME = "nullspace_{:03d}.png"

# ============================================================
# PALETTE (RGB)
# ============================================================

COLORS = {
    "page": (249, 250, 251),
    "card": (255, 255, 255),
    "border": (229, 231, 235),
    "grid": (229, 231, 235),
    "axes": (156, 163, 175),
    "text": (31, 41, 55),
    "text_dim": (107, 114, 128),
    "title": (49, 46, 129),
    "x1": (37, 99, 235),
    "x2": (5, 150, 105),
    "diff": (239, 68, 68),
    "b": (124, 58, 237),
    "null": (156, 163, 175),
    "null_label": (107, 114, 128),
    "solution": (59, 130, 246),
    "column": (203, 213, 225),
    "column_label": (148, 163, 184),
    "note_bg": (238, 242, 255),
    "note_text": (55, 48, 163),
    "formula_bg": (249, 250, 251),
    "track": (229, 231, 235),
    "track_x1": (219, 234, 254),
    "track_x2": (209, 250, 229),
    "ok": (5, 150, 105),
    "bad": (220, 38, 38),
}

# ============================================================
# COMMAND LINE
# ============================================================

def _level(name):
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"unknown log level: {name}")
    return level

def build_parser():
    p = argparse.ArgumentParser(
        prog="nullspace-viz",
        description="Interactive diagram: the difference of two solutions of Ax=b solves Ax=0.",
    )
    p.add_argument("--b", type=float, default=DEFAULT_B, dest="b_scalar",
                   help="initial position of the target b along the column space")
    p.add_argument("--lambda1", type=float, default=DEFAULT_LAMBDA1,
                   help="initial position of x1 along the solution line")
    p.add_argument("--lambda2", type=float, default=DEFAULT_LAMBDA2,
                   help="initial position of x2 along the solution line")
    p.add_argument("--width", type=int, default=WINDOW_SIZE[0])
    p.add_argument("--height", type=int, default=WINDOW_SIZE[1])
    p.add_argument("--fps", type=int, default=FPS)
    p.add_argument("--snapshot", metavar="PATH",
                   help="render a single frame off-screen to PATH (PNG) and exit")
    p.add_argument("--log-level", type=_level, default=logging.INFO,
                   help="DEBUG, INFO, WARNING, ...")
    p.add_argument("--log-file", help="also write logs to this file")
    return p

def parse_args(argv=None):
    args = build_parser().parse_args(argv)
    args.width = max(MIN_WINDOW_SIZE[0], args.width)
    args.height = max(MIN_WINDOW_SIZE[1], args.height)
    args.fps = max(1, args.fps)
    return args
