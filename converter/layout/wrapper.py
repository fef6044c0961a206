#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Line Wrapper

Greedy word wrapping against measured glyph widths.

Words are the paragraph split on single spaces, so runs of spaces survive
inside a line. A word wider than the text column is broken by code points.

Version: 1.0.0
"""

from typing import Callable, List, Tuple

from config.constants import LAYOUT_PLACEHOLDER
from converter.contracts import GlyphMetrics, Line

Measure = Callable[[str], float]


def break_word(word: str, measure: Measure, max_width: float) -> Tuple[List[str], str]:
    """
    Break an over-wide word into chunks that each fit max_width.

    Returns the completed chunks and the trailing partial chunk, which the
    caller keeps accumulating into. A single code point wider than max_width
    still forms a chunk of its own.
    """
    chunks: List[str] = []
    chunk = ""
    for char in word:
        candidate = chunk + char
        if measure(candidate) <= max_width:
            chunk = candidate
        else:
            if chunk:
                chunks.append(chunk)
            chunk = char
    return chunks, chunk


def wrap_text(paragraph: str, measure: Measure, max_width: float) -> List[str]:
    """Wrap one paragraph into line strings. May return an empty list."""
    lines: List[str] = []
    current = ""

    for word in paragraph.split(" "):
        candidate = f"{current} {word}" if current else word
        if measure(candidate) <= max_width:
            current = candidate
            continue

        if current:
            lines.append(current)

        if measure(word) > max_width:
            chunks, current = break_word(word, measure, max_width)
            lines.extend(chunks)
        else:
            current = word

    if current:
        lines.append(current)
    return lines


def wrap_paragraph(
    paragraph: str,
    metrics: GlyphMetrics,
    font_size: float,
    max_width: float,
    index: int = 0,
) -> List[Line]:
    """
    Wrap a paragraph into measured Lines.

    Paragraphs that produce no text (empty, or spaces only) yield a single
    placeholder line so blank lines stay visible.
    """
    def measure(text: str) -> float:
        return metrics.width_of(text, font_size)

    texts = wrap_text(paragraph, measure, max_width) or [LAYOUT_PLACEHOLDER]
    return [Line(text=text, width=measure(text), paragraph=index) for text in texts]
