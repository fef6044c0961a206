"""
CSV Renderer

Single-column CSV: one row per source paragraph.
"""

import csv
import io

from converter.contracts import Document
from .base_renderer import BaseRenderer


class CsvRenderer(BaseRenderer):
    """Renders the source paragraphs of a Document as UTF-8 CSV rows"""

    format_name = "csv"
    media_type = "text/csv"
    extension = "csv"

    def render(self, document: Document) -> bytes:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        for paragraph in document.paragraphs:
            writer.writerow([paragraph])
        return buffer.getvalue().encode("utf-8")
