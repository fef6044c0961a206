#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Engine

Turns plain text into a paginated Document:
- Split text into paragraphs on newlines
- Wrap each paragraph against glyph metrics
- Paginate the wrapped lines

Layout is total: any string produces a well-formed Document. Invalid page
geometry is rejected earlier, when PageGeometry is constructed.

Version: 1.0.0
"""

from typing import List, Optional

from config.logging_config import get_logger
from converter.contracts import Document, GlyphMetrics, Line, PageGeometry
from .paginator import paginate
from .wrapper import wrap_paragraph

logger = get_logger(__name__)


def split_paragraphs(text: Optional[str]) -> List[str]:
    """Split on '\\n', dropping the '\\r' of CRLF line endings"""
    paragraphs = (text or "").split("\n")
    return [p[:-1] if p.endswith("\r") else p for p in paragraphs]


class LayoutEngine:
    """
    Wraps and paginates text for one font and page geometry.

    The engine holds no per-call state; one instance can serve
    concurrent callers.

    Usage:
        engine = LayoutEngine(font, geometry)
        document = engine.layout("hello world")
    """

    def __init__(self, metrics: GlyphMetrics, geometry: PageGeometry):
        self.metrics = metrics
        self.geometry = geometry

    def wrap(self, paragraphs: List[str]) -> List[Line]:
        """Wrap all paragraphs, keeping reading order"""
        lines: List[Line] = []
        for index, paragraph in enumerate(paragraphs):
            lines.extend(wrap_paragraph(
                paragraph,
                self.metrics,
                self.geometry.font_size,
                self.geometry.max_text_width,
                index=index,
            ))
        return lines

    def layout(self, text: Optional[str]) -> Document:
        paragraphs = split_paragraphs(text)
        lines = self.wrap(paragraphs)
        pages = paginate(lines, self.geometry)

        logger.debug(
            f"Laid out {len(paragraphs)} paragraphs into "
            f"{len(lines)} lines on {len(pages)} pages"
        )
        return Document(
            geometry=self.geometry,
            pages=pages,
            paragraphs=tuple(paragraphs),
        )


def layout(text: Optional[str], metrics: GlyphMetrics, geometry: PageGeometry) -> Document:
    """Lay out text with the given metrics and geometry"""
    return LayoutEngine(metrics, geometry).layout(text)
