"""
Exception hierarchy for the BMP codec.

Everything the codec raises derives from BmpError so callers (the CLI,
scripts) can catch one type and present it to the user.
"""

from typing import Optional


class BmpError(Exception):
    """Base class for errors raised while reading or writing BMP files."""


class BmpIoError(BmpError, OSError):
    """
    Raised when opening, reading, seeking or writing fails.

    Attributes:
        path: File path involved, if known
    """
    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        message = self.args[0] if self.args else ""
        if self.path:
            return f"{message} ({self.path})"
        return message


class TruncatedDataError(BmpIoError):
    """Raised when the stream ends before the declared data does."""


class InvalidSignatureError(BmpError, ValueError):
    """Raised when the first two bytes are not the "BM" magic."""

    def __init__(self, signature: int):
        self.signature = signature
        super().__init__(
            f"Wrong file signature 0x{signature:04X} (expected 0x4D42 'BM')"
        )


class UnsupportedBitDepthError(BmpError, ValueError):
    """Raised for bit depths other than 24 and 32."""

    def __init__(self, bit_count: int):
        self.bit_count = bit_count
        super().__init__(f"Unsupported bit depth: {bit_count} (only 24 and 32 are supported)")


class InvalidDimensionsError(BmpError, ValueError):
    """Raised when width/height are non-positive or above the configured cap."""
