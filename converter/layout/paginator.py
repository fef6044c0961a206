#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Paginator

Single forward pass that stacks lines top-down and opens a new page when
the next line would cross the bottom margin. Uniform line height, no
widow/orphan control.

Version: 1.0.0
"""

from typing import Iterable, List

from converter.contracts import Line, Page, PageGeometry


def paginate(lines: Iterable[Line], geometry: PageGeometry) -> List[Page]:
    """
    Place lines on pages.

    Always returns at least one page. Every line is placed at
    x = margin with margin <= y <= height - margin.
    """
    page = Page(number=1, cursor=geometry.top)
    pages = [page]

    for line in lines:
        if not page.has_room(geometry.line_height, geometry.margin):
            page.seal()
            page = Page(number=page.number + 1, cursor=geometry.top)
            pages.append(page)
        page.place(line, x=geometry.margin)
        page.advance(geometry.line_height)

    return pages
