"""
text.py

Fonts and Unicode-safe text rendering.

Pygame + fonts can be fragile with math symbols (subscripts, minus signs).
If a font doesn't cover a character you get little squares ("tofu"), so when
we can't find a Unicode-friendly font the text is rewritten to plain ASCII.
"""

import logging

import pygame

logger = logging.getLogger(__name__)

PREFERRED_FONTS = [
    # Windows
    "Segoe UI", "Segoe UI Symbol",
    # Linux
    "DejaVu Sans", "Noto Sans", "Liberation Sans",
    # macOS / general
    "Arial Unicode MS", "Arial",
]

MONO_FONTS = ["DejaVu Sans Mono", "Consolas", "Menlo", "Courier New"]

UNICODE_FRIENDLY = ["segoe", "dejavu", "noto", "arialuni", "symbol", "liberation"]

UNICODE_REPLACEMENTS = {
    "₁": "1",
    "₂": "2",
    "−": "-",
    "·": "*",
    "→": "->",
    "‖": "||",
    "λ": "lambda",
    "–": "-",
    "—": "-",
    "•": "-",
}

def sanitize_unicode(text: str) -> str:
    """Replace math Unicode with ASCII so it never renders as tofu."""
    for k, v in UNICODE_REPLACEMENTS.items():
        text = text.replace(k, v)
    return text

def _pick_font_path(names, bold=False):
    for name in names:
        path = pygame.font.match_font(name, bold=bold)
        if path:
            return path
    return None

def load_font(size, bold=False, mono=False):
    """
    Load a font with decent coverage for subscripts.
    Returns (font_obj, unicode_ok_flag).
    """
    path = _pick_font_path(MONO_FONTS if mono else PREFERRED_FONTS, bold=bold)
    if path:
        unicode_ok = any(k in path.lower() for k in UNICODE_FRIENDLY)
        try:
            return pygame.font.Font(path, size), unicode_ok
        except (OSError, pygame.error) as exc:
            logger.debug("Could not load %s (%s), using default font", path, exc)

    return pygame.font.Font(None, size), False

class Fonts:
    """The handful of font sizes the layout uses, plus one Unicode flag for all of them."""
    def __init__(self):
        self.title, ok1 = load_font(26, bold=True)
        self.heading, ok2 = load_font(19, bold=True)
        self.body, ok3 = load_font(15)
        self.small, ok4 = load_font(13)
        self.label, ok5 = load_font(15, bold=True)
        self.mono, ok6 = load_font(14, mono=True)
        self.unicode_ok = all((ok1, ok2, ok3, ok4, ok5, ok6))
        if not self.unicode_ok:
            logger.info("No Unicode-friendly font found, math symbols will be shown as ASCII.")

    def clean(self, text):
        return text if self.unicode_ok else sanitize_unicode(text)

    def render(self, font, text, color):
        return font.render(self.clean(text), True, color)

def wrap_text(font, text, width):
    """Greedy word wrap into lines no wider than width pixels."""
    lines = []
    current = ""
    for word in text.split():
        trial = word if not current else current + " " + word
        if current and font.size(trial)[0] > width:
            lines.append(current)
            current = word
        else:
            current = trial
    if current:
        lines.append(current)
    return lines
