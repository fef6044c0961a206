#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Renderer Registry

Maps format tags ("pdf", "docx", "csv") to renderer instances.
Built once at startup and read-only afterwards.

Version: 1.0.0
"""

from typing import Dict, Iterator, List

from config.logging_config import get_logger
from converter.exceptions import UnsupportedFormatError
from converter.layout.metrics import ReportLabFont
from .base_renderer import BaseRenderer
from .csv_renderer import CsvRenderer
from .docx_renderer import DocxRenderer
from .pdf_renderer import PDFRenderer

logger = get_logger(__name__)


def normalize_format(format_name) -> str:
    """Format tags are compared trimmed and lower-cased"""
    return str(format_name).strip().lower()


class RendererRegistry:
    """
    Format tag -> renderer lookup.

    Usage:
        registry = RendererRegistry()
        registry.register(CsvRenderer())
        registry.get("CSV").render(document)
    """

    def __init__(self):
        self._renderers: Dict[str, BaseRenderer] = {}

    def register(self, renderer: BaseRenderer) -> None:
        for format_name in renderer.get_supported_formats():
            key = normalize_format(format_name)
            if key in self._renderers:
                logger.warning(f"Replacing renderer for format '{key}'")
            self._renderers[key] = renderer

    def get(self, format_name: str) -> BaseRenderer:
        key = normalize_format(format_name)
        try:
            return self._renderers[key]
        except KeyError:
            raise UnsupportedFormatError(key, self.formats()) from None

    def formats(self) -> List[str]:
        return sorted(self._renderers)

    def __contains__(self, format_name) -> bool:
        return normalize_format(format_name) in self._renderers

    def __iter__(self) -> Iterator[str]:
        return iter(self.formats())

    def __len__(self) -> int:
        return len(self._renderers)


def build_default_registry(font: ReportLabFont) -> RendererRegistry:
    """Registry with the PDF, DOCX and CSV renderers"""
    registry = RendererRegistry()
    registry.register(PDFRenderer(font))
    registry.register(DocxRenderer())
    registry.register(CsvRenderer())
    return registry
