#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Module

Wraps and paginates plain text into a Document of positioned lines.

Components:
- ReportLabFont: glyph metrics from a ReportLab font
- wrap_paragraph: greedy word wrapping with code point fallback
- paginate: single-pass page filling
- LayoutEngine: the full text -> Document pipeline

Usage:
    from converter.layout import LayoutEngine, ReportLabFont
    from converter.contracts import PageGeometry

    font = ReportLabFont()
    geometry = PageGeometry.for_page_size("letter", margin=40, font_size=12)
    document = LayoutEngine(font, geometry).layout(text)

Version: 1.0.0
"""

from .engine import LayoutEngine, layout, split_paragraphs
from .metrics import ReportLabFont, register_truetype
from .paginator import paginate
from .wrapper import break_word, wrap_paragraph, wrap_text

__all__ = [
    "LayoutEngine",
    "layout",
    "split_paragraphs",
    "ReportLabFont",
    "register_truetype",
    "paginate",
    "break_word",
    "wrap_paragraph",
    "wrap_text",
]

__version__ = "1.0.0"
