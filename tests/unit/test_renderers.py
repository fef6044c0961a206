"""
Smoke Tests for Page Renderers

Each renderer turns a laid out Document into a valid file of its format.
"""

import csv
import io
import re

import pytest
from docx import Document as open_docx

from converter.exceptions import UnsupportedFormatError
from converter.layout import layout
from converter.renderers import (
    CsvRenderer,
    DocxRenderer,
    PDFRenderer,
    RendererRegistry,
    build_default_registry,
)

PAGE_OBJECT = re.compile(rb"/Type\s*/Page\b")


@pytest.fixture
def document(helvetica, letter_geometry):
    return layout("First paragraph\n\nThird, after a blank line", helvetica, letter_geometry)


class TestPDFRenderer:
    """Test PDF output."""

    def test_renders_pdf(self, helvetica, document):
        data = PDFRenderer(helvetica).render(document)

        assert data.startswith(b"%PDF-")
        assert data.rstrip().endswith(b"%%EOF")

    def test_one_pdf_page_per_layout_page(self, helvetica, letter_geometry):
        text = "\n".join(f"line {i}" for i in range(100))
        document = layout(text, helvetica, letter_geometry)
        data = PDFRenderer(helvetica).render(document)

        assert document.page_count == 3
        assert len(PAGE_OBJECT.findall(data)) == 3

    def test_deterministic_output(self, helvetica, document):
        renderer = PDFRenderer(helvetica)
        assert renderer.render(document) == renderer.render(document)

    def test_renderer_attributes(self, helvetica):
        renderer = PDFRenderer(helvetica)
        assert renderer.media_type == "application/pdf"
        assert renderer.filename == "converted.pdf"
        assert PDFRenderer.supports_format(" PDF ")


class TestDocxRenderer:
    """Test DOCX output."""

    def test_one_paragraph_per_source_paragraph(self, document):
        doc = open_docx(io.BytesIO(DocxRenderer().render(document)))
        texts = [p.text for p in doc.paragraphs]

        assert texts[-3:] == ["First paragraph", " ", "Third, after a blank line"]

    def test_metadata(self, document):
        doc = open_docx(io.BytesIO(DocxRenderer().render(document)))
        props = doc.core_properties

        assert props.author == "File Converter"
        assert props.title == "Converted Document"
        assert props.comments == "Generated from plain text"

    def test_control_characters_removed(self, metrics, letter_geometry):
        document = layout("bell\x07 and form feed\x0c", metrics, letter_geometry)
        doc = open_docx(io.BytesIO(DocxRenderer().render(document)))
        assert doc.paragraphs[-1].text == "bell and form feed"

    def test_page_setup_follows_geometry(self, document):
        doc = open_docx(io.BytesIO(DocxRenderer().render(document)))
        section = doc.sections[0]

        assert section.page_width.pt == pytest.approx(612)
        assert section.left_margin.pt == pytest.approx(40)


class TestCsvRenderer:
    """Test CSV output."""

    def test_one_row_per_paragraph(self, document):
        rows = list(csv.reader(io.StringIO(CsvRenderer().render(document).decode("utf-8"))))
        assert rows == [["First paragraph"], [""], ["Third, after a blank line"]]

    def test_quotes_and_unicode(self, helvetica, letter_geometry):
        document = layout('say "hi", café', helvetica, letter_geometry)
        data = CsvRenderer().render(document)

        assert data.decode("utf-8").startswith('"say ""hi"", café"')


class TestRendererRegistry:
    """Test format lookup."""

    def test_default_formats(self, helvetica):
        registry = build_default_registry(helvetica)
        assert registry.formats() == ["csv", "docx", "pdf"]
        assert len(registry) == 3

    def test_lookup_is_normalized(self, helvetica):
        registry = build_default_registry(helvetica)
        assert isinstance(registry.get("  PDF"), PDFRenderer)
        assert "Docx" in registry

    def test_unknown_format(self, helvetica):
        registry = build_default_registry(helvetica)
        with pytest.raises(UnsupportedFormatError) as exc_info:
            registry.get("odt")
        assert exc_info.value.supported == ("csv", "docx", "pdf")

    def test_register_replaces(self):
        registry = RendererRegistry()
        first, second = CsvRenderer(), CsvRenderer()
        registry.register(first)
        registry.register(second)
        assert registry.get("csv") is second
