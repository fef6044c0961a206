#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Converter Contracts Module

Value objects shared by the layout engine, the page renderers and the
size-targeted image encoder.

Usage:
    from converter.contracts import PageGeometry, SizeConstraint

    geometry = PageGeometry.for_page_size("letter", margin=40, font_size=12)
    constraint = SizeConstraint.from_kilobytes(80)

Version: 1.0.0
"""

from .base import (
    BaseContract,
    ContractError,
    ContractValidationError,
)

from .layout import (
    GlyphMetrics,
    InvalidGeometryError,
    PAGE_SIZES,
    PageGeometry,
    Line,
    PlacedLine,
    Page,
    Document,
)

from .encoding import (
    KILOBYTE,
    QUALITY_MAX,
    QUALITY_MIN,
    SizeConstraint,
    EncodeAttempt,
    EncodeResult,
)

__all__ = [
    # Base
    "BaseContract",
    "ContractError",
    "ContractValidationError",
    # Layout
    "GlyphMetrics",
    "InvalidGeometryError",
    "PAGE_SIZES",
    "PageGeometry",
    "Line",
    "PlacedLine",
    "Page",
    "Document",
    # Encoding
    "KILOBYTE",
    "QUALITY_MAX",
    "QUALITY_MIN",
    "SizeConstraint",
    "EncodeAttempt",
    "EncodeResult",
]

__version__ = "1.0.0"
