#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PDF Renderer

Draws each placed line of a Document at its laid out position.
Uses the ReportLab canvas; one PDF page per layout page.

Version: 1.0.0
"""

import io

from reportlab.pdfgen import canvas

from config.constants import DOCUMENT_CREATOR, DOCUMENT_TITLE
from config.logging_config import get_logger
from converter.contracts import Document
from converter.layout.metrics import ReportLabFont
from .base_renderer import BaseRenderer

logger = get_logger(__name__)


class PDFRenderer(BaseRenderer):
    """
    Renders a Document to PDF bytes.

    The font must be the one the document was measured with, otherwise
    lines may overflow the right margin.

    Usage:
        renderer = PDFRenderer(font)
        pdf_bytes = renderer.render(document)
    """

    format_name = "pdf"
    media_type = "application/pdf"
    extension = "pdf"

    def __init__(self, font: ReportLabFont):
        self.font = font

    def render(self, document: Document) -> bytes:
        geometry = document.geometry
        buffer = io.BytesIO()

        # invariant: identical documents produce identical bytes
        pdf = canvas.Canvas(
            buffer,
            pagesize=(geometry.width, geometry.height),
            invariant=1,
        )
        pdf.setTitle(DOCUMENT_TITLE)
        pdf.setCreator(DOCUMENT_CREATOR)

        for page in document.pages:
            pdf.setFont(self.font.name, geometry.font_size)
            for placed in page.lines:
                pdf.drawString(placed.x, placed.y, placed.text)
            pdf.showPage()

        pdf.save()
        data = buffer.getvalue()
        logger.debug(f"Rendered PDF: {document.page_count} pages, {len(data)} bytes")
        return data
