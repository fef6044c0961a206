#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Encoding Contracts

Value objects for the size-targeted image encoder:
- SizeConstraint: accepted output byte range
- EncodeAttempt: parameters and outcome of one codec call
- EncodeResult: the buffer returned to the caller plus its search history

Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .base import BaseContract, ContractValidationError

KILOBYTE = 1024
QUALITY_MIN = 1
QUALITY_MAX = 100


@dataclass(frozen=True)
class SizeConstraint(BaseContract):
    """
    Accepted output size in bytes.

    Only max_bytes is enforced by the encoder; min_bytes is reported,
    never pursued.
    """
    min_bytes: int
    max_bytes: int

    def __post_init__(self):
        self.assert_valid()

    @classmethod
    def from_kilobytes(cls, target_kb: int, min_kb: int = 0) -> 'SizeConstraint':
        """Constraint with max_bytes = target_kb * 1024"""
        return cls(min_bytes=min_kb * KILOBYTE, max_bytes=target_kb * KILOBYTE)

    def fits(self, size: int) -> bool:
        return size <= self.max_bytes

    def validate(self) -> List[str]:
        errors = []
        if self.min_bytes < 0:
            errors.append(f"min_bytes must not be negative, got {self.min_bytes}")
        if self.max_bytes < 0:
            errors.append(f"max_bytes must not be negative, got {self.max_bytes}")
        if self.min_bytes > self.max_bytes:
            errors.append(
                f"min_bytes ({self.min_bytes}) exceeds max_bytes ({self.max_bytes})"
            )
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {"min_bytes": self.min_bytes, "max_bytes": self.max_bytes}


@dataclass(frozen=True)
class EncodeAttempt:
    """One codec call: quality, optional target width, resulting size"""
    quality: int
    width: Optional[int] = None
    size: int = 0

    def __post_init__(self):
        errors = []
        if not QUALITY_MIN <= self.quality <= QUALITY_MAX:
            errors.append(f"quality must be in {QUALITY_MIN}..{QUALITY_MAX}, got {self.quality}")
        if self.width is not None and self.width < 1:
            errors.append(f"width must be positive, got {self.width}")
        if errors:
            raise ContractValidationError(errors)

    def to_dict(self) -> Dict:
        return {"quality": self.quality, "width": self.width, "size": self.size}


@dataclass(frozen=True)
class EncodeResult(BaseContract):
    """Final buffer of a size-targeted encode and the attempts that led to it"""
    data: bytes
    attempt: EncodeAttempt
    attempts: Tuple[EncodeAttempt, ...]
    constraint: SizeConstraint

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def within_target(self) -> bool:
        return self.constraint.fits(self.size)

    @property
    def below_minimum(self) -> bool:
        return self.size < self.constraint.min_bytes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "attempt": self.attempt.to_dict(),
            "attempts": [a.to_dict() for a in self.attempts],
            "constraint": self.constraint.to_dict(),
            "within_target": self.within_target,
            "below_minimum": self.below_minimum,
        }
