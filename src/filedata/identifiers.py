"""Identifier to file-name mapping with path traversal guards."""
from __future__ import annotations

import re
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Optional

from .errors import InvalidArgumentError

DEFAULT_EXTENSION = ".json"

_SEPARATORS = re.compile(r"[\\/]")


def is_rooted(identifier: str) -> bool:
    """True for POSIX roots, Windows roots, drive letters and UNC shares."""
    return PurePosixPath(identifier).is_absolute() or bool(PureWindowsPath(identifier).anchor)


def has_extension(file_name: str) -> bool:
    dot = file_name.rfind(".")
    return dot != -1 and dot < len(file_name) - 1


def sanitize_identifier(identifier: Optional[str]) -> str:
    """Reduce a raw identifier to a bare file name, rejecting unsafe input.

    The rooted and ``..`` checks run on the raw identifier, before the
    directory portion is stripped.
    """
    if identifier is None or not identifier.strip():
        raise InvalidArgumentError("Id must be provided.", "identifier")

    if is_rooted(identifier) or ".." in identifier:
        raise InvalidArgumentError("Invalid id. Path traversal is not allowed.", "identifier")
    if "\x00" in identifier:
        raise InvalidArgumentError("Invalid id. Null characters are not allowed.", "identifier")

    file_name = _SEPARATORS.split(identifier)[-1]
    if not file_name.strip():
        raise InvalidArgumentError("Id is invalid after sanitization.", "identifier")

    if not has_extension(file_name):
        file_name += DEFAULT_EXTENSION
    return file_name


def resolve_document_path(base_directory: Path, identifier: Optional[str]) -> Path:
    return Path(base_directory) / sanitize_identifier(identifier)
