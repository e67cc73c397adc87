"""Data access contract shared by store backends."""
from __future__ import annotations

import json
from typing import Any, Dict, Generic, Protocol, Type, TypeVar, runtime_checkable

from pydantic import ValidationError

from .codec import JsonCodec
from .errors import DeserializationError, DocumentNotFoundError, InvalidArgumentError
from .identifiers import sanitize_identifier

T = TypeVar("T")


@runtime_checkable
class DataAccess(Protocol[T]):
    """Anything exposing ``get``/``set`` by identifier."""

    def get(self, identifier: str) -> T:
        ...

    def set(self, identifier: str, value: T) -> None:
        ...


class InMemoryDataAccess(Generic[T]):
    """Dict-backed store with the same identifier and copy semantics as the file store."""

    def __init__(self, model: Type[T] | Any = Any):
        self._codec: JsonCodec[T] = JsonCodec(model)
        self._documents: Dict[str, str] = {}

    def get(self, identifier: str) -> T:
        key = sanitize_identifier(identifier)
        if key not in self._documents:
            raise DocumentNotFoundError(identifier)
        try:
            return self._codec.decode(self._documents[key])
        except (json.JSONDecodeError, ValidationError) as exc:
            raise DeserializationError(identifier, None, str(exc)) from exc

    def set(self, identifier: str, value: T) -> None:
        if value is None:
            raise InvalidArgumentError("Value must be provided.", "value")
        key = sanitize_identifier(identifier)
        self._documents[key] = self._codec.encode(value)
