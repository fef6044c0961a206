#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Imaging Module

Size-targeted JPEG re-encoding.

Usage:
    from converter.imaging import PillowCodec, encode_to_size
    from converter.contracts import SizeConstraint

    result = encode_to_size(data, SizeConstraint.from_kilobytes(80), PillowCodec())
"""

from .codec import (
    CodecUnavailable,
    DecodeFailed,
    EncodingExhausted,
    ImageCodec,
    ImageMetadata,
    PillowCodec,
)
from .size_encoder import (
    SizeTargetedEncoder,
    encode_to_size,
    quality_steps,
    round_half_up,
    width_steps,
)

__all__ = [
    "CodecUnavailable",
    "DecodeFailed",
    "EncodingExhausted",
    "ImageCodec",
    "ImageMetadata",
    "PillowCodec",
    "SizeTargetedEncoder",
    "encode_to_size",
    "quality_steps",
    "round_half_up",
    "width_steps",
]
