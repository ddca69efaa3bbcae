"""
Font resolution for bar glyphs.

The default chart font has no coverage for the category pictographs, and
Agg can only rasterise outline fonts, so glyphs are drawn from a monochrome
emoji font (Noto Emoji, Symbola, ...) registered with matplotlib's font
manager. When no registered font covers a glyph the overlay falls back to
the category's initial instead of drawing an empty box.
"""

import logging
import os
from typing import Dict, Iterable, List, NamedTuple, Optional, Set

from matplotlib import font_manager

logger = logging.getLogger(__name__)

VARIATION_SELECTOR = "\ufe0f"
GLYPH_FONT_MARKERS = ("emoji", "symbola")
UNSUPPORTED_FONT_MARKERS = ("color", "colour")


class ResolvedGlyph(NamedTuple):
    text: str
    font_path: str
    fallback: bool = False


def discover_glyph_fonts(paths: Optional[Iterable[str]] = None) -> List[str]:
    """Installed outline fonts whose file name marks them as monochrome emoji fonts."""
    if paths is None:
        paths = font_manager.findSystemFonts(fontext="ttf")
    found = []
    for path in sorted(paths):
        name = os.path.basename(path).lower()
        if not any(marker in name for marker in GLYPH_FONT_MARKERS):
            continue
        if any(marker in name for marker in UNSUPPORTED_FONT_MARKERS):
            continue
        found.append(path)
    return found


class GlyphFontResolver:
    """Maps glyph strings to a font file that can render every code point."""

    def __init__(self, font_family: str, font_paths: Iterable[str] = (), discover: bool = True):
        self.font_family = font_family
        self.base_font_path = font_manager.findfont(font_manager.FontProperties(family=font_family))
        self.coverage: Dict[str, Set[int]] = {}
        self.family_names: List[str] = []
        self._reported: Set[str] = set()

        candidates = list(font_paths)
        if discover:
            candidates.extend(path for path in discover_glyph_fonts() if path not in candidates)
        for path in candidates:
            self.add_font(path)
        self.coverage.setdefault(self.base_font_path, self._load_charmap(self.base_font_path) or set())

    def _load_charmap(self, path: str) -> Optional[Set[int]]:
        try:
            return set(font_manager.get_font(path).get_charmap())
        except (OSError, RuntimeError, ValueError) as e:
            logger.warning(f"Skipping glyph font {path}: {e}")
            return None

    def add_font(self, path: str) -> bool:
        """Register ``path`` with matplotlib; returns False if it cannot be loaded."""
        charmap = self._load_charmap(path)
        if charmap is None:
            return False
        font_manager.fontManager.addfont(path)
        family = font_manager.get_font(path).family_name
        if family not in self.family_names:
            self.family_names.append(family)
        self.coverage[path] = charmap
        logger.debug(f"Registered glyph font {family} ({path})")
        return True

    def covers(self, path: str, text: str) -> bool:
        charmap = self.coverage.get(path, set())
        return bool(text) and all(ord(char) in charmap for char in text)

    def resolve(self, glyph: str, fallback: str) -> ResolvedGlyph:
        """
        Pick the font for ``glyph``, trying glyph fonts before the base font.

        Emoji presentation selectors are dropped since outline fonts carry
        only the text form. Without coverage, ``fallback`` is drawn in the
        base font and the gap is logged once per glyph.
        """
        text = glyph.replace(VARIATION_SELECTOR, "")
        for path in self.coverage:
            if path != self.base_font_path and self.covers(path, text):
                return ResolvedGlyph(text, path)
        if self.covers(self.base_font_path, text):
            return ResolvedGlyph(text, self.base_font_path)

        if glyph not in self._reported:
            self._reported.add(glyph)
            logger.error(
                f"No installed font can render glyph {glyph!r}; drawing {fallback!r} instead. "
                f"Install a monochrome emoji font or set CHART__GLYPH_FONT_PATHS"
            )
        return ResolvedGlyph(fallback, self.base_font_path, fallback=True)
