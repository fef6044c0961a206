#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Layout Contracts

Value objects produced by the layout engine and consumed by page renderers:
- PageGeometry: page size, margin and font size
- Line / PlacedLine: wrapped text and its position on a page
- Page / Document: the paginated result

Coordinates follow PDF conventions: points, origin at the bottom-left
corner, y growing upwards.

Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Protocol, Tuple

from reportlab.lib.pagesizes import A4, A5, B5, legal, letter

from config.constants import LAYOUT_LEADING_RATIO
from .base import BaseContract, ContractError, ContractValidationError


class InvalidGeometryError(ContractValidationError):
    """Raised when a page geometry cannot hold a single line"""
    pass


class GlyphMetrics(Protocol):
    """Measures rendered text width, in the same unit as PageGeometry"""

    def width_of(self, text: str, font_size: float) -> float:
        ...


# Page sizes in points (width, height)
PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "letter": letter,
    "legal": legal,
    "A4": A4,
    "A5": A5,
    "B5": B5,
}


@dataclass(frozen=True)
class PageGeometry(BaseContract):
    """Immutable page description. Validated on construction."""
    width: float
    height: float
    margin: float
    font_size: float

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise InvalidGeometryError(errors)

    @classmethod
    def for_page_size(
        cls,
        page_size: str,
        margin: float,
        font_size: float,
    ) -> 'PageGeometry':
        """
        Build a geometry from a named page size.

        Lookup is case-insensitive; unknown names raise InvalidGeometryError.
        """
        sizes = {name.lower(): dims for name, dims in PAGE_SIZES.items()}
        dims = sizes.get(str(page_size).strip().lower())
        if dims is None:
            raise InvalidGeometryError([
                f"Unknown page size: {page_size!r} (known: {', '.join(PAGE_SIZES)})"
            ])
        width, height = dims
        return cls(width=width, height=height, margin=margin, font_size=font_size)

    @property
    def line_height(self) -> float:
        return self.font_size * LAYOUT_LEADING_RATIO

    @property
    def max_text_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def top(self) -> float:
        """Baseline of the first line on a page"""
        return self.height - self.margin

    def validate(self) -> List[str]:
        errors = []
        if self.font_size <= 0:
            errors.append(f"font_size must be positive, got {self.font_size}")
        if self.margin < 0:
            errors.append(f"margin must not be negative, got {self.margin}")
        if 2 * self.margin >= self.width:
            errors.append(
                f"margins ({self.margin} x 2) leave no room on a page {self.width} wide"
            )
        if self.font_size > 0 and 2 * self.margin + self.line_height > self.height:
            errors.append(
                f"page height {self.height} cannot hold one line of "
                f"{self.line_height:g} between margins of {self.margin}"
            )
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "margin": self.margin,
            "font_size": self.font_size,
            "line_height": self.line_height,
        }


@dataclass(frozen=True)
class Line:
    """One wrapped line of a source paragraph"""
    text: str
    width: float
    paragraph: int = 0

    def to_dict(self) -> Dict:
        return {
            "text": self.text,
            "width": self.width,
            "paragraph": self.paragraph,
        }


@dataclass(frozen=True)
class PlacedLine:
    """A line with its baseline position on a page"""
    line: Line
    x: float
    y: float

    @property
    def text(self) -> str:
        return self.line.text

    @property
    def width(self) -> float:
        return self.line.width

    def to_dict(self) -> Dict:
        data = self.line.to_dict()
        data.update({"x": self.x, "y": self.y})
        return data


@dataclass
class Page:
    """
    A page being filled by the paginator.

    Once sealed (a following page was opened) no more lines are accepted.
    """
    number: int
    cursor: float
    lines: List[PlacedLine] = field(default_factory=list)
    sealed: bool = False

    def place(self, line: Line, x: float) -> PlacedLine:
        """Place line at the cursor and return its positioned form"""
        if self.sealed:
            raise ContractError(f"Page {self.number} is sealed")
        placed = PlacedLine(line=line, x=x, y=self.cursor)
        self.lines.append(placed)
        return placed

    def has_room(self, line_height: float, bottom_margin: float) -> bool:
        """Whether another line fits above the bottom margin"""
        return self.cursor >= bottom_margin + line_height

    def advance(self, line_height: float):
        """Move the cursor down by one line"""
        self.cursor -= line_height

    def seal(self):
        self.sealed = True

    def to_dict(self) -> Dict:
        return {
            "number": self.number,
            "lines": [line.to_dict() for line in self.lines],
        }


@dataclass
class Document(BaseContract):
    """Paginated layout of a text, ready for a page renderer"""
    geometry: PageGeometry
    pages: List[Page] = field(default_factory=list)
    paragraphs: Tuple[str, ...] = ()

    def lines(self) -> Iterator[PlacedLine]:
        """All placed lines in reading order"""
        for page in self.pages:
            yield from page.lines

    @property
    def line_count(self) -> int:
        return sum(len(page.lines) for page in self.pages)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def validate(self) -> List[str]:
        errors = []
        if not self.pages:
            errors.append("Document has no pages")
        bottom = self.geometry.margin
        top = self.geometry.top
        for page in self.pages:
            for placed in page.lines:
                if not bottom <= placed.y <= top:
                    errors.append(
                        f"Line {placed.text!r} on page {page.number} at y={placed.y} "
                        f"is outside [{bottom}, {top}]"
                    )
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "geometry": self.geometry.to_dict(),
            "pages": [page.to_dict() for page in self.pages],
            "paragraph_count": len(self.paragraphs),
        }
