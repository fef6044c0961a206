#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Base Renderer Interface

Defines common interface for all page renderers.

Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import List

from converter.contracts import Document


class BaseRenderer(ABC):
    """
    Abstract base class for document renderers.

    All renderers must implement:
    - render(): Document -> encoded bytes

    and declare format_name, media_type and extension.
    """

    format_name: str = ""
    media_type: str = "application/octet-stream"
    extension: str = ""

    @abstractmethod
    def render(self, document: Document) -> bytes:
        """
        Render a laid out document.

        Args:
            document: Document from the layout engine

        Returns:
            Encoded file contents
        """
        pass

    @property
    def filename(self) -> str:
        """Default download name for rendered output"""
        return f"converted.{self.extension}"

    @classmethod
    def supports_format(cls, format_name: str) -> bool:
        """Check if renderer supports given format"""
        return format_name.strip().lower() in cls.get_supported_formats()

    @classmethod
    def get_supported_formats(cls) -> List[str]:
        """Get list of supported formats"""
        return [cls.format_name] if cls.format_name else []
