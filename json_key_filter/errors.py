from __future__ import annotations


class JsonKeyFilterError(Exception):
    """Base class for errors reported back to the user."""


class ReadError(JsonKeyFilterError):
    """The uploaded file or path could not be read."""


class ParseError(JsonKeyFilterError, ValueError):
    """The input text is not valid JSON."""


class EmptyDocumentError(JsonKeyFilterError, ValueError):
    """The document has no addressable keys."""

    def __init__(self, message: str = "No keys found in JSON."):
        super().__init__(message)


class NoDataToExportError(JsonKeyFilterError):
    def __init__(self, message: str = "No data to download."):
        super().__init__(message)
