#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Font Metrics

Glyph width measurement backed by ReportLab. The same font object is handed
to the PDF renderer, so measured widths match what gets drawn.

Font selection (ReportLabFont.from_settings):
1. Settings.font_path, when configured
2. The first existing Unicode TrueType font in Settings.font_candidates
3. The built-in Settings.font_name (Latin-1 only), with a warning

Version: 1.0.0
"""

from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from config.constants import LAYOUT_DEFAULT_FONT
from config.logging_config import get_logger
from converter.exceptions import FontLoadError, FontNotFoundError

logger = get_logger(__name__)

# Registered TrueType font name -> resolved file path
_truetype_files: Dict[str, Path] = {}


def register_truetype(name: str, path: Path) -> str:
    """
    Register a TrueType file with ReportLab and return its font name.

    A file already registered keeps its name. When name is taken by another
    font, a numbered name (``name-2``, ``name-3``, ...) is used instead.

    Raises:
        FontLoadError: the file is not a loadable TrueType font
    """
    resolved = path.resolve()
    candidate = name
    suffix = 1
    while True:
        known = _truetype_files.get(candidate)
        if known == resolved:
            return candidate
        if known is None and candidate not in pdfmetrics.getRegisteredFontNames():
            break
        suffix += 1
        candidate = f"{name}-{suffix}"

    try:
        pdfmetrics.registerFont(TTFont(candidate, str(resolved)))
    except (TTFError, OSError) as e:
        raise FontLoadError(path, e) from e

    _truetype_files[candidate] = resolved
    if candidate != name:
        logger.warning(f"Font name {name} already in use; registered {resolved} as {candidate}")
    logger.info(f"Registered TrueType font {candidate} from {resolved}")
    return candidate


class ReportLabFont:
    """
    A font registered with ReportLab, usable as a GlyphMetrics provider.

    Without a path the name must be one of the 14 standard PDF fonts
    (Helvetica, Times-Roman, Courier, ...), which only cover Latin-1.
    With a path, the TrueType file is registered under the given name
    (or a numbered variant when another file already uses it).

    Usage:
        font = ReportLabFont("NotoSans", "fonts/NotoSans-Regular.ttf")
        font.width_of("hello", 12)
    """

    def __init__(
        self,
        name: str = LAYOUT_DEFAULT_FONT,
        path: Optional[Union[str, Path]] = None,
    ):
        self.path = Path(path) if path is not None else None

        if self.path is not None:
            if not self.path.exists():
                raise FontNotFoundError(self.path)
            self.name = register_truetype(name, self.path)
        else:
            try:
                pdfmetrics.getFont(name)
            except KeyError as exc:
                raise FontNotFoundError(name) from exc
            self.name = name

    @classmethod
    def find_unicode_font(cls, candidates: Iterable[Union[str, Path]]) -> Optional['ReportLabFont']:
        """First candidate file that exists and loads, or None"""
        for candidate in candidates:
            path = Path(candidate)
            if not path.is_file():
                continue
            try:
                return cls(name=path.stem, path=path)
            except FontLoadError as e:
                logger.warning(f"Skipping font candidate: {e}")
        return None

    @classmethod
    def from_settings(cls, settings) -> 'ReportLabFont':
        """Font described by Settings (see module docstring for the order)"""
        if settings.font_path:
            path = Path(settings.font_path)
            return cls(name=path.stem, path=path)

        font = cls.find_unicode_font(settings.font_candidates)
        if font is not None:
            return font

        logger.warning(
            f"No Unicode TrueType font found; using built-in {settings.font_name}. "
            f"Text outside Latin-1 will not render correctly. "
            f"Set CONVERTER_FONT_PATH to a .ttf file to fix this."
        )
        return cls(name=settings.font_name)

    @property
    def embedded(self) -> bool:
        return self.path is not None

    def width_of(self, text: str, font_size: float) -> float:
        return pdfmetrics.stringWidth(text, self.name, font_size)

    def __repr__(self) -> str:
        return f"<ReportLabFont(name={self.name}, path={self.path})>"
