# objweld/errors.py
from __future__ import annotations

from typing import Optional


class MeshImportError(Exception):
    """Base class for every failure raised while importing a mesh."""


class ObjParseError(MeshImportError, ValueError):
    """Malformed OBJ text: bad number, bad face corner or short directive."""

    def __init__(
        self,
        message: str,
        *,
        source: str = "<memory>",
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.reason = message
        self.source = source
        self.line_number = line_number
        self.line = line

        location = source if line_number is None else f"{source}:{line_number}"
        text = f"{location}: {message}"
        if line is not None:
            text += f" (line: {line.strip()!r})"
        super().__init__(text)


class CornerReferenceError(MeshImportError, IndexError):
    """A face corner points outside one of the attribute tables."""

    def __init__(self, table: str, index: int, size: int) -> None:
        self.table = table
        self.index = index
        self.size = size
        # Report the index the way it was written in the file (1-based).
        super().__init__(
            f"{table} index {index + 1} out of range "
            f"({size} {table} entries defined)"
        )


class EmptyMeshError(MeshImportError, ValueError):
    """Raised when geometry is required but the file defines no faces."""


class UnsupportedAssetError(MeshImportError, ValueError):
    """No importer is registered for the file suffix."""


class EmptyBoundingBoxError(ValueError):
    """Geometry was requested from a bounding box that holds no points."""
