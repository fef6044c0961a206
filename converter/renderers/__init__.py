#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Renderer Module

Provides document rendering for multiple output formats.
"""

from .base_renderer import BaseRenderer
from .csv_renderer import CsvRenderer
from .docx_renderer import DocxRenderer
from .pdf_renderer import PDFRenderer
from .registry import RendererRegistry, build_default_registry, normalize_format

__all__ = [
    "BaseRenderer",
    "CsvRenderer",
    "DocxRenderer",
    "PDFRenderer",
    "RendererRegistry",
    "build_default_registry",
    "normalize_format",
]
