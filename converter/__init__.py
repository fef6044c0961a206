"""
File Converter

Plain text -> paginated PDF / DOCX / CSV, and size-targeted JPEG re-encoding.

Subpackages:
- contracts: value objects (PageGeometry, Document, SizeConstraint, ...)
- layout: wrapping and pagination
- renderers: Document -> bytes per output format
- imaging: image codec and size-targeted encoder
"""

__version__ = "1.0.0"
