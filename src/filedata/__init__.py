"""filedata package initialization."""

from .access import DataAccess, InMemoryDataAccess  # noqa: F401
from .errors import (  # noqa: F401
    DataAccessError,
    DeserializationError,
    DocumentNotFoundError,
    InvalidArgumentError,
)
from .identifiers import resolve_document_path, sanitize_identifier  # noqa: F401
from .settings import StoreSettings, load_settings  # noqa: F401
from .storage import FileDataAccess  # noqa: F401
from .web import create_app  # noqa: F401

__all__ = [
    "DataAccess",
    "InMemoryDataAccess",
    "FileDataAccess",
    "DataAccessError",
    "DeserializationError",
    "DocumentNotFoundError",
    "InvalidArgumentError",
    "resolve_document_path",
    "sanitize_identifier",
    "StoreSettings",
    "load_settings",
    "create_app",
]
