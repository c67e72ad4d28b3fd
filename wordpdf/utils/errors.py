"""Typed exceptions for the conversion pipeline."""


class ConversionError(Exception):
    """Base class for conversion pipeline errors."""


class InputValidationError(ConversionError):
    """Raised when the upload is missing or is not a Word document."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EncodingError(ConversionError, ValueError):
    """Raised when a text fragment cannot be measured or drawn with the page font."""
