"""File-backed JSON document store, one file per identifier."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import ValidationError

from .codec import JsonCodec
from .errors import DeserializationError, DocumentNotFoundError, InvalidArgumentError
from .identifiers import resolve_document_path
from .settings import default_base_directory

T = TypeVar("T")

logger = logging.getLogger(__name__)


class FileDataAccess(Generic[T]):
    """Persist each value as a pretty-printed JSON file under a base directory.

    When ``base_directory`` is empty a ``Data`` folder next to the running
    program is used. The directory is created on construction; filesystem
    errors from that step propagate unchanged.

    Writes replace the whole file in one pass but are not atomic: a crash
    mid-write can leave a truncated document behind.
    """

    def __init__(self, model: Type[T] | Any = Any, base_directory: str | Path | None = None):
        if base_directory is None or not str(base_directory).strip():
            self._base_directory = default_base_directory()
        else:
            self._base_directory = Path(base_directory)
        self._base_directory.mkdir(parents=True, exist_ok=True)
        self._codec: JsonCodec[T] = JsonCodec(model)

    @property
    def base_directory(self) -> Path:
        return self._base_directory

    def path_for(self, identifier: Optional[str]) -> Path:
        """Resolve an identifier to its document path without touching disk."""
        return resolve_document_path(self._base_directory, identifier)

    def get(self, identifier: str) -> T:
        path = self.path_for(identifier)
        if not path.exists():
            raise DocumentNotFoundError(identifier, path)

        logger.debug("Reading document %s from %s", identifier, path)
        try:
            return self._codec.decode(path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            raise DeserializationError(identifier, path, "invalid UTF-8") from exc
        except json.JSONDecodeError as exc:
            raise DeserializationError(identifier, path, f"malformed JSON ({exc.msg})") from exc
        except ValidationError as exc:
            raise DeserializationError(
                identifier, path, f"{exc.error_count()} validation error(s)"
            ) from exc

    def set(self, identifier: str, value: T) -> None:
        if value is None:
            raise InvalidArgumentError("Value must be provided.", "value")

        path = self.path_for(identifier)
        path.parent.mkdir(parents=True, exist_ok=True)

        text = self._codec.encode(value)
        path.write_text(text, encoding="utf-8")
        logger.debug("Wrote document %s to %s (%s chars)", identifier, path, len(text))
