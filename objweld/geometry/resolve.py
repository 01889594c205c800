# objweld/geometry/resolve.py
from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

from objweld.errors import CornerReferenceError
from objweld.geometry.parser import ObjDocument
from objweld.types import CornerRef, ResolvedVertex

T = TypeVar("T")


def _lookup(table: Sequence[T], index: int, name: str) -> T:
    # Negative indices must not wrap around to the end of the table.
    if not 0 <= index < len(table):
        raise CornerReferenceError(name, index, len(table))
    return table[index]


def resolve_corner(ref: CornerRef, document: ObjDocument) -> ResolvedVertex:
    return ResolvedVertex(
        position=_lookup(document.positions, ref.position, "position"),
        normal=_lookup(document.normals, ref.normal, "normal"),
        uv=_lookup(document.texcoords, ref.texcoord, "texcoord"),
    )


def resolve_corners(
    refs: Iterable[CornerRef], document: ObjDocument
) -> List[ResolvedVertex]:
    return [resolve_corner(ref, document) for ref in refs]
