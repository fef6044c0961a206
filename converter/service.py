#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Conversion Service

Entry point shared by the CLI and any hosting layer:
- convert_text(): text -> PDF / DOCX / CSV bytes
- resize_image(): image -> JPEG bytes within a target size

Holds only startup-time collaborators (font, renderer registry, codec),
so one instance can serve concurrent requests.

Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from config.constants import IMAGE_MEDIA_TYPE, IMAGE_OUTPUT_NAME
from config.logging_config import get_logger
from config.settings import Settings, settings as default_settings
from converter.contracts import EncodeResult, PageGeometry, SizeConstraint
from converter.imaging import ImageCodec, PillowCodec, SizeTargetedEncoder
from converter.layout import LayoutEngine, ReportLabFont
from converter.renderers import RendererRegistry, build_default_registry, normalize_format

logger = get_logger(__name__)


@dataclass(frozen=True)
class ConversionOutput:
    """Encoded file ready to be written or streamed"""
    content: bytes
    media_type: str
    filename: str

    @property
    def size(self) -> int:
        return len(self.content)


class ConversionService:
    """
    Text conversion and image resizing with injected collaborators.

    Usage:
        service = ConversionService()
        output = service.convert_text("hello world", "pdf")
        output, result = service.resize_image(jpeg_bytes, target_kb=80)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        font: Optional[ReportLabFont] = None,
        registry: Optional[RendererRegistry] = None,
        codec: Optional[ImageCodec] = None,
        geometry: Optional[PageGeometry] = None,
    ):
        self.settings = settings or default_settings
        self.font = font or ReportLabFont.from_settings(self.settings)
        self.geometry = geometry or self.settings.page_geometry()
        self.registry = registry or build_default_registry(self.font)
        self.engine = LayoutEngine(self.font, self.geometry)
        self.encoder = SizeTargetedEncoder(codec or PillowCodec())

        logger.info(
            f"ConversionService initialized: font={self.font.name}, "
            f"page={self.geometry.width:g}x{self.geometry.height:g}, "
            f"formats={', '.join(self.registry.formats())}"
        )

    def convert_text(self, text: str, format_name: Optional[str] = None) -> ConversionOutput:
        """
        Lay out text and render it in the requested format.

        Raises:
            UnsupportedFormatError: no renderer for format_name
        """
        fmt = normalize_format(format_name or self.settings.default_format)
        renderer = self.registry.get(fmt)

        document = self.engine.layout(text)
        content = renderer.render(document)

        logger.info(
            f"Converted {len(document.paragraphs)} paragraphs to {fmt}: "
            f"{document.page_count} pages, {len(content)} bytes"
        )
        return ConversionOutput(
            content=content,
            media_type=renderer.media_type,
            filename=renderer.filename,
        )

    def resize_image(self, data: bytes, target_kb=None) -> Tuple[ConversionOutput, EncodeResult]:
        """
        Re-encode data as JPEG of at most target_kb kilobytes (best effort).

        target_kb is clamped into the configured bounds.

        Raises:
            EncodingExhausted: the image cannot be decoded or encoded
        """
        kb = self.settings.clamp_target_kb(target_kb)
        result = self.encoder.encode(data, SizeConstraint.from_kilobytes(kb))
        output = ConversionOutput(
            content=result.data,
            media_type=IMAGE_MEDIA_TYPE,
            filename=IMAGE_OUTPUT_NAME,
        )
        return output, result
