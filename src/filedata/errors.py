"""Error kinds raised by the document store."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class DataAccessError(Exception):
    """Base class for store errors."""


class InvalidArgumentError(DataAccessError, ValueError):
    """Raised when an identifier or value is rejected before any I/O."""

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class DocumentNotFoundError(DataAccessError, FileNotFoundError):
    """Raised when no document exists for the requested identifier."""

    def __init__(self, document_id: str, path: Optional[Path] = None):
        super().__init__(f"Data file not found for id '{document_id}'.")
        self.document_id = document_id
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return f"Data file not found for id '{self.document_id}'."
        return f"Data file not found for id '{self.document_id}': {self.path}"


class DeserializationError(DataAccessError, ValueError):
    """Raised when a stored document cannot be parsed into the expected shape."""

    def __init__(self, document_id: str, path: Optional[Path], reason: str):
        location = f" from {path}" if path is not None else ""
        super().__init__(f"Could not read document '{document_id}'{location}: {reason}")
        self.document_id = document_id
        self.path = path
