"""
Exceptions raised while numbering a PDF.
"""

from typing import Any, Dict, Optional


class PageNumberingError(Exception):
    """Base exception for page numbering failures."""

    default_message = "unknown error"

    def __init__(self, message: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        """
        Args:
            message: Human-readable error message
            context: Additional context for logging (filename, page count, etc.)
        """
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class InvalidFileTypeError(PageNumberingError):
    """Raised when the selected file is not a PDF."""

    default_message = "Please select a PDF file."


class MissingFileError(PageNumberingError):
    """Raised when processing is requested without a selected file."""

    default_message = "Please select a file."


class InvalidPDFError(PageNumberingError):
    """Raised when the PDF cannot be parsed."""


class EncryptedPDFError(PageNumberingError):
    """Raised when a PDF is password-protected."""

    default_message = "The PDF is password-protected."


class ProcessingError(PageNumberingError):
    """Raised when embedding the font, drawing or saving fails."""
