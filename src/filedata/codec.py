"""JSON encoding of stored values with case-insensitive field matching on read."""
from __future__ import annotations

import dataclasses
import json
import types
import typing
from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter

T = TypeVar("T")

_SEQUENCE_ORIGINS = (list, set, frozenset, tuple)


def _field_lookup(annotation: Any) -> Optional[Dict[str, tuple[str, Any]]]:
    """Map lower-cased field names (and aliases) to (input key, annotation)."""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        lookup: Dict[str, tuple[str, Any]] = {}
        for name, info in annotation.model_fields.items():
            key = info.alias or name
            lookup[name.lower()] = (key, info.annotation)
            lookup[key.lower()] = (key, info.annotation)
        return lookup
    if dataclasses.is_dataclass(annotation) and isinstance(annotation, type):
        hints = typing.get_type_hints(annotation)
        return {f.name.lower(): (f.name, hints.get(f.name, Any)) for f in dataclasses.fields(annotation)}
    if typing.is_typeddict(annotation):
        hints = typing.get_type_hints(annotation)
        return {name.lower(): (name, hint) for name, hint in hints.items()}
    return None


def _pick_union_member(members: tuple, payload: Any) -> Any:
    """Choose the union member whose shape fits ``payload``.

    For objects the member sharing the most keys (ignoring case) wins; ties
    keep declaration order.
    """
    best = None
    best_hits = -1
    for member in members:
        if member is type(None):
            continue
        member_origin = typing.get_origin(member)
        if isinstance(payload, list) and member_origin in _SEQUENCE_ORIGINS:
            return member
        if not isinstance(payload, dict):
            continue
        if member_origin is dict:
            hits = 0
        else:
            lookup = _field_lookup(member)
            if lookup is None:
                continue
            hits = sum(1 for key in payload if isinstance(key, str) and key.lower() in lookup)
        if hits > best_hits:
            best, best_hits = member, hits
    return best


def match_field_names(annotation: Any, payload: Any) -> Any:
    """Rewrite object keys in ``payload`` to the declared field names of ``annotation``.

    Keys are compared without regard to letter case. Nested models, lists,
    optionals and dict values are followed; unknown keys are left untouched.
    """
    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin is typing.Annotated:
        return match_field_names(args[0], payload)

    if origin is Union or origin is types.UnionType:
        candidate = _pick_union_member(args, payload)
        return payload if candidate is None else match_field_names(candidate, payload)

    if isinstance(payload, list) and origin is tuple and args and args[-1] is not Ellipsis:
        matched = [match_field_names(arg, item) for arg, item in zip(args, payload)]
        return matched + payload[len(args):]

    if isinstance(payload, list) and origin in _SEQUENCE_ORIGINS and args:
        return [match_field_names(args[0], item) for item in payload]

    if not isinstance(payload, dict):
        return payload

    if origin is dict and len(args) == 2:
        return {key: match_field_names(args[1], value) for key, value in payload.items()}

    lookup = _field_lookup(annotation)
    if lookup is None:
        return payload

    matched: Dict[str, Any] = {}
    for key, value in payload.items():
        target = lookup.get(key.lower()) if isinstance(key, str) else None
        if target is None:
            matched[key] = value
            continue
        field_key, field_annotation = target
        matched[field_key] = match_field_names(field_annotation, value)
    return matched


class JsonCodec(Generic[T]):
    """Serialize values of one shape to pretty-printed JSON and back."""

    def __init__(self, model: Type[T] | Any = Any, indent: int = 2):
        self.model = model
        self.indent = indent
        self._adapter: TypeAdapter[T] = TypeAdapter(model)

    def encode(self, value: T) -> str:
        data = self._adapter.dump_python(value, mode="json", by_alias=True)
        return json.dumps(data, ensure_ascii=False, indent=self.indent)

    def decode(self, text: str) -> T:
        """Parse JSON text; raises ``json.JSONDecodeError`` or ``pydantic.ValidationError``."""
        payload = json.loads(text)
        return self._adapter.validate_python(match_field_names(self.model, payload))
