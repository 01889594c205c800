# objweld/geometry/weld.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from objweld.types import ResolvedVertex


@dataclass(frozen=True, slots=True)
class WeldResult:
    """
    vertices: unique values in first-occurrence order.
    remap: one entry per raw vertex, the index of its value in ``vertices``.
    """

    vertices: Tuple[ResolvedVertex, ...]
    remap: Tuple[int, ...]

    @property
    def raw_count(self) -> int:
        return len(self.remap)

    @property
    def unique_count(self) -> int:
        return len(self.vertices)


def weld_vertices(raw: Sequence[ResolvedVertex]) -> WeldResult:
    """
    Collapse bit-identical vertices.

    ResolvedVertex hashes the packed bytes of all of its components, so the
    dict lookup uses Python's seeded string hash over the whole record.
    """
    index_of: Dict[ResolvedVertex, int] = {}
    unique: List[ResolvedVertex] = []
    remap: List[int] = []

    for vertex in raw:
        index = index_of.get(vertex)
        if index is None:
            index = len(unique)
            unique.append(vertex)
            index_of[vertex] = index
        remap.append(index)

    assert len(unique) <= len(raw)
    assert len(remap) == len(raw)

    return WeldResult(vertices=tuple(unique), remap=tuple(remap))


def remap_indices(indices: Iterable[int], remap: Sequence[int]) -> Tuple[int, ...]:
    """Replace raw vertex positions with welded indices, keeping winding."""
    return tuple(remap[i] for i in indices)
