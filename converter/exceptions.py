"""
Exception hierarchy for File Converter.

Every error raised on purpose by the package derives from ConverterError,
so callers can handle the whole family with one except clause.
"""


class ConverterError(Exception):
    """Base error for the converter package"""
    pass


class UnsupportedFormatError(ConverterError):
    """Raised when no renderer is registered for a format tag"""

    def __init__(self, format_name: str, supported=()):
        self.format_name = format_name
        self.supported = tuple(supported)
        message = f"Unsupported format: {format_name!r}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)


class FontNotFoundError(ConverterError):
    """Raised when the configured font file does not exist"""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Missing font file at {path}. Add a Unicode TTF font.")


class FontLoadError(ConverterError):
    """Raised when a font file exists but cannot be loaded as TrueType"""

    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Cannot load TrueType font from {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
