#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Any, List, Optional
from pydantic_settings import BaseSettings

from .constants import (
    DEFAULT_FORMAT,
    LAYOUT_DEFAULT_FONT,
    LAYOUT_FONT_SIZE,
    LAYOUT_MARGIN,
    LAYOUT_PAGE_SIZE,
    OUTPUT_DIR,
    TARGET_KB_DEFAULT,
    TARGET_KB_MAX,
    TARGET_KB_MIN,
    UNICODE_FONT_CANDIDATES,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Font ==========
    # TrueType file for Unicode text. When unset, the first existing
    # font_candidates entry is used, then the built-in font_name.
    font_path: Optional[Path] = None
    font_candidates: List[Path] = [Path(p) for p in UNICODE_FONT_CANDIDATES]
    font_name: str = LAYOUT_DEFAULT_FONT

    # ========== Page Layout ==========
    page_size: str = LAYOUT_PAGE_SIZE  # letter | A4 | A5 | B5 | legal
    font_size: float = LAYOUT_FONT_SIZE
    margin: float = LAYOUT_MARGIN

    # ========== Conversion ==========
    default_format: str = DEFAULT_FORMAT  # pdf | docx | csv

    # ========== Image Target Size (KB) ==========
    target_kb: int = TARGET_KB_DEFAULT
    min_target_kb: int = TARGET_KB_MIN
    max_target_kb: int = TARGET_KB_MAX

    # ========== Directories ==========
    output_dir: Path = BASE_DIR / OUTPUT_DIR

    class Config:
        env_prefix = "CONVERTER_"
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def clamp_target_kb(self, value: Any = None) -> int:
        """
        Clamp a requested target size into [min_target_kb, max_target_kb].

        Missing or non-numeric values fall back to target_kb.
        """
        try:
            requested = int(value) if value is not None else self.target_kb
        except (TypeError, ValueError):
            requested = self.target_kb
        return max(self.min_target_kb, min(self.max_target_kb, requested))

    def page_geometry(self):
        """Build the PageGeometry described by these settings"""
        from converter.contracts import PageGeometry

        return PageGeometry.for_page_size(
            self.page_size,
            margin=self.margin,
            font_size=self.font_size,
        )


# Global settings instance
settings = Settings()
