#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Size-Targeted Encoder

Re-encodes an image until the output is at most max_bytes:

1. Quality descent: 80, 70, ..., 20 at full resolution
2. Width descent: at the last quality, width = round(width * 0.9)
   starting from the original width, while width > 100

Both phases only ever go down. The search stops at the first candidate
that fits; when none fits, the last buffer is returned with
within_target False. The minimum size is reported, never pursued.

Version: 1.0.0
"""

import math
from typing import Iterator, List, Optional, Tuple

from config.constants import (
    ENCODER_FALLBACK_WIDTH,
    ENCODER_MIN_WIDTH,
    ENCODER_QUALITY_FLOOR,
    ENCODER_QUALITY_STEP,
    ENCODER_SCALE_FACTOR,
    ENCODER_START_QUALITY,
)
from config.logging_config import get_logger
from converter.contracts import (
    QUALITY_MAX,
    QUALITY_MIN,
    ContractValidationError,
    EncodeAttempt,
    EncodeResult,
    SizeConstraint,
)
from .codec import ImageCodec

logger = get_logger(__name__)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (unlike round())"""
    return int(math.floor(value + 0.5))


def quality_steps(
    start: int = ENCODER_START_QUALITY,
    step: int = ENCODER_QUALITY_STEP,
    floor: int = ENCODER_QUALITY_FLOOR,
) -> Iterator[int]:
    """Qualities tried in phase 1: start, then step down while above floor"""
    quality = start
    yield quality
    while quality > max(floor, 1):
        quality = max(1, quality - step)
        yield quality


def width_steps(
    original_width: int,
    factor: float = ENCODER_SCALE_FACTOR,
    min_width: int = ENCODER_MIN_WIDTH,
) -> Iterator[int]:
    """Widths tried in phase 2, strictly decreasing, all above min_width"""
    width = round_half_up(original_width * factor)
    while width > min_width:
        yield width
        next_width = round_half_up(width * factor)
        width = min(next_width, width - 1)


class SizeTargetedEncoder:
    """
    Drives an ImageCodec through quality then width candidates.

    Holds only configuration; safe to share between threads.

    Usage:
        encoder = SizeTargetedEncoder(PillowCodec())
        result = encoder.encode(data, SizeConstraint.from_kilobytes(80))
        if not result.within_target:
            ...
    """

    def __init__(
        self,
        codec: ImageCodec,
        start_quality: int = ENCODER_START_QUALITY,
        quality_step: int = ENCODER_QUALITY_STEP,
        quality_floor: int = ENCODER_QUALITY_FLOOR,
        scale_factor: float = ENCODER_SCALE_FACTOR,
        min_width: int = ENCODER_MIN_WIDTH,
        fallback_width: int = ENCODER_FALLBACK_WIDTH,
    ):
        errors = []
        for label, quality in (('start_quality', start_quality), ('quality_floor', quality_floor)):
            if not QUALITY_MIN <= quality <= QUALITY_MAX:
                errors.append(f"{label} must be in {QUALITY_MIN}..{QUALITY_MAX}, got {quality}")
        if quality_step < 1:
            errors.append(f"quality_step must be at least 1, got {quality_step}")
        if not 0 < scale_factor < 1:
            errors.append(f"scale_factor must be between 0 and 1, got {scale_factor}")
        if errors:
            raise ContractValidationError(errors)

        self.codec = codec
        self.start_quality = start_quality
        self.quality_step = quality_step
        self.quality_floor = quality_floor
        self.scale_factor = scale_factor
        self.min_width = min_width
        self.fallback_width = fallback_width

    def original_width(self, image: bytes) -> int:
        metadata = self.codec.decode_metadata(image)
        width = getattr(metadata, "width", None)
        return width or self.fallback_width

    def candidates(self, image: bytes) -> Iterator[Tuple[int, Optional[int]]]:
        """
        (quality, width) pairs in search order.

        Width candidates are generated lazily, so metadata is only read
        once the quality phase is exhausted.
        """
        for quality in quality_steps(self.start_quality, self.quality_step, self.quality_floor):
            yield quality, None
        for width in width_steps(self.original_width(image), self.scale_factor, self.min_width):
            yield quality, width

    def encode(self, image: bytes, constraint: SizeConstraint) -> EncodeResult:
        attempts: List[EncodeAttempt] = []
        data = b""

        for quality, width in self.candidates(image):
            data = self.codec.encode(image, quality=quality, width=width)
            attempt = EncodeAttempt(quality=quality, width=width, size=len(data))
            attempts.append(attempt)
            logger.debug(f"Attempt {len(attempts)}: quality={quality} width={width} -> {attempt.size} bytes")
            if constraint.fits(attempt.size):
                break

        result = EncodeResult(
            data=data,
            attempt=attempts[-1],
            attempts=tuple(attempts),
            constraint=constraint,
        )
        self._log_outcome(result)
        return result

    def _log_outcome(self, result: EncodeResult) -> None:
        attempt = result.attempt
        summary = (
            f"{result.size} bytes (quality={attempt.quality}, width={attempt.width}) "
            f"after {len(result.attempts)} attempts"
        )
        if result.within_target:
            logger.info(f"Encoded image to {summary}")
        else:
            logger.warning(
                f"Target of {result.constraint.max_bytes} bytes not reached; "
                f"returning best effort {summary}"
            )
        if result.below_minimum:
            logger.debug(f"Output is below the {result.constraint.min_bytes} byte minimum")


def encode_to_size(image: bytes, constraint: SizeConstraint, codec: ImageCodec) -> EncodeResult:
    """Encode image with the default search parameters"""
    return SizeTargetedEncoder(codec).encode(image, constraint)
