#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Image Codec

Decode/metadata/encode primitive driven by the size-targeted encoder.
PillowCodec re-encodes any image Pillow can open as baseline JPEG.

Version: 1.0.0
"""

import io
from dataclasses import dataclass
from typing import Optional, Protocol

from PIL import Image, UnidentifiedImageError

from config.logging_config import get_logger
from converter.exceptions import ConverterError

logger = get_logger(__name__)


class EncodingExhausted(ConverterError):
    """The codec cannot process the input at all"""
    pass


class DecodeFailed(EncodingExhausted):
    """Input bytes are not a decodable image"""
    pass


class CodecUnavailable(EncodingExhausted):
    """The codec failed to produce output for a decodable image"""
    pass


@dataclass(frozen=True)
class ImageMetadata:
    """Pixel dimensions of an image; None when the codec cannot tell"""
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None


class ImageCodec(Protocol):
    """Capability consumed by the size-targeted encoder"""

    def decode_metadata(self, data: bytes) -> ImageMetadata:
        ...

    def encode(self, data: bytes, quality: int, width: Optional[int] = None) -> bytes:
        ...


class PillowCodec:
    """
    JPEG codec backed by Pillow.

    - Transparent images are flattened onto a white background
    - A width override resizes with LANCZOS, preserving aspect ratio

    Usage:
        codec = PillowCodec()
        codec.decode_metadata(data).width
        jpeg = codec.encode(data, quality=70, width=800)
    """

    background = (255, 255, 255)

    def _open(self, data: bytes) -> Image.Image:
        try:
            return Image.open(io.BytesIO(data))
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise DecodeFailed(f"Cannot decode image: {e}") from e

    def decode_metadata(self, data: bytes) -> ImageMetadata:
        image = self._open(data)
        return ImageMetadata(width=image.width, height=image.height, format=image.format)

    def _to_rgb(self, image: Image.Image) -> Image.Image:
        """JPEG has no alpha channel"""
        has_alpha = image.mode in ("RGBA", "LA") or (
            image.mode == "P" and "transparency" in image.info
        )
        if has_alpha:
            rgba = image.convert("RGBA")
            flattened = Image.new("RGB", rgba.size, self.background)
            flattened.paste(rgba, mask=rgba.getchannel("A"))
            return flattened
        if image.mode != "RGB":
            return image.convert("RGB")
        return image

    def encode(self, data: bytes, quality: int, width: Optional[int] = None) -> bytes:
        image = self._open(data)
        try:
            image.load()
        except (OSError, SyntaxError, ValueError) as e:
            raise DecodeFailed(f"Cannot decode image: {e}") from e

        try:
            image = self._to_rgb(image)
            if width:
                height = max(1, round(image.height * width / image.width))
                image = image.resize((width, height), Image.LANCZOS)

            buffer = io.BytesIO()
            image.save(buffer, format="JPEG", quality=quality)
        except (OSError, ValueError) as e:
            raise CodecUnavailable(f"JPEG encoding failed: {e}") from e

        return buffer.getvalue()
