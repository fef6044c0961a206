#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DOCX Renderer

Flow format: Word re-wraps text itself, so the renderer writes one
paragraph per source paragraph and only carries page size, margins and
font size over from the layout geometry.

Version: 1.0.0
"""

import io
import re

from docx import Document as DocxDocument
from docx.shared import Pt

from config.constants import (
    DOCUMENT_CREATOR,
    DOCUMENT_DESCRIPTION,
    DOCUMENT_TITLE,
    LAYOUT_PLACEHOLDER,
)
from config.logging_config import get_logger
from converter.contracts import Document
from .base_renderer import BaseRenderer

logger = get_logger(__name__)

# Control characters that are not allowed in WordprocessingML text
_XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


class DocxRenderer(BaseRenderer):
    """
    Renders a Document to DOCX bytes with python-docx.

    Usage:
        renderer = DocxRenderer()
        docx_bytes = renderer.render(document)
    """

    format_name = "docx"
    media_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    extension = "docx"

    def render(self, document: Document) -> bytes:
        doc = DocxDocument()
        self._setup_page_layout(doc, document)
        self._setup_metadata(doc)

        for paragraph in document.paragraphs:
            text = _XML_INVALID_CHARS.sub("", paragraph)
            doc.add_paragraph(text or LAYOUT_PLACEHOLDER)

        buffer = io.BytesIO()
        doc.save(buffer)
        data = buffer.getvalue()
        logger.debug(f"Rendered DOCX: {len(document.paragraphs)} paragraphs, {len(data)} bytes")
        return data

    def _setup_page_layout(self, doc, document: Document) -> None:
        """Configure page size, margins and body font size."""
        geometry = document.geometry
        for section in doc.sections:
            section.page_width = Pt(geometry.width)
            section.page_height = Pt(geometry.height)
            section.left_margin = Pt(geometry.margin)
            section.right_margin = Pt(geometry.margin)
            section.top_margin = Pt(geometry.margin)
            section.bottom_margin = Pt(geometry.margin)

        doc.styles["Normal"].font.size = Pt(geometry.font_size)

    def _setup_metadata(self, doc) -> None:
        """Set document core properties."""
        props = doc.core_properties
        props.author = DOCUMENT_CREATOR
        props.title = DOCUMENT_TITLE
        props.comments = DOCUMENT_DESCRIPTION
