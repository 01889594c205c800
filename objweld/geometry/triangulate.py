# objweld/geometry/triangulate.py
from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from objweld.types import CornerRef, Face


def fan_triangles(corner_count: int) -> Iterator[Tuple[int, int, int]]:
    """
    Fan-split a polygon of ``corner_count`` corners into triangles
    (0, i, i + 1) for i in 1..n-2.

    Only correct for convex, planar polygons. No convexity check is made:
    a concave face yields valid but geometrically wrong triangles.
    """
    if corner_count < 3:
        raise ValueError(f"a face needs at least 3 corners, got {corner_count}")

    for i in range(1, corner_count - 1):
        yield 0, i, i + 1


def triangulate_face(face: Face) -> Iterator[CornerRef]:
    for a, b, c in fan_triangles(len(face)):
        yield face[a]
        yield face[b]
        yield face[c]


def triangulate(faces: Iterable[Face]) -> Iterator[CornerRef]:
    """Flat corner stream, three entries per triangle, in face order."""
    for face in faces:
        yield from triangulate_face(face)
