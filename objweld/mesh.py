# objweld/mesh.py
from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import StrEnum
from typing import List, Tuple

import numpy as np

from objweld.types import BoundingBox, ResolvedVertex


class PrimitiveTopology(StrEnum):
    TRIANGLE_LIST = "triangle_list"


@dataclass(frozen=True)
class VertexLayout:
    """Describes vertex attributes for VAO / input-layout creation."""

    attributes: List[str]  # e.g. ["in_pos", "in_normal", "in_uv"]
    format: str  # buffer format string e.g. "3f 3f 2f"
    stride_bytes: int  # e.g. 32

    @property
    def float_count(self) -> int:
        return self.stride_bytes // 4


BASE_LAYOUT = VertexLayout(
    attributes=["in_pos", "in_normal", "in_uv"],
    format="3f 3f 2f",
    stride_bytes=struct.calcsize("<3f3f2f"),
)

TANGENT_LAYOUT = VertexLayout(
    attributes=["in_pos", "in_normal", "in_uv", "in_tangent"],
    format="3f 3f 2f 3f",
    stride_bytes=struct.calcsize("<3f3f2f3f"),
)


@dataclass(frozen=True)
class MeshData:
    """Packed mesh buffers, ready for GPU upload."""

    vertices: bytes
    vertex_layout: VertexLayout
    aabb: BoundingBox
    indices: bytes
    index_count: int = 0
    primitive: PrimitiveTopology = PrimitiveTopology.TRIANGLE_LIST


@dataclass(frozen=True)
class Mesh:
    """
    Welded, triangulated mesh: the only value that leaves the import pipeline.

    ``indices`` groups into triangles by threes and every entry is a valid
    index into ``vertices``.
    """

    vertices: Tuple[ResolvedVertex, ...]
    indices: Tuple[int, ...]
    aabb: BoundingBox
    vertex_layout: VertexLayout = BASE_LAYOUT
    primitive: PrimitiveTopology = PrimitiveTopology.TRIANGLE_LIST
    name: str = field(default="", compare=False)

    @property
    def vertex_stride(self) -> int:
        return self.vertex_layout.stride_bytes

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def has_tangents(self) -> bool:
        return "in_tangent" in self.vertex_layout.attributes

    def triangles(self) -> List[Tuple[int, int, int]]:
        idx = self.indices
        return [(idx[i], idx[i + 1], idx[i + 2]) for i in range(0, len(idx), 3)]

    def vertex_array(self) -> np.ndarray:
        """Interleaved float32 vertices, shape (vertex_count, floats)."""
        width = self.vertex_layout.float_count
        if not self.vertices:
            return np.zeros((0, width), dtype=np.float32)
        return np.array([v.flatten() for v in self.vertices], dtype=np.float32)

    def index_array(self) -> np.ndarray:
        return np.asarray(self.indices, dtype=np.uint32)

    def to_mesh_data(self) -> MeshData:
        """Pack into little-endian float32 / uint32 buffers."""
        vertex_blob = self.vertex_array().astype("<f4", copy=False).tobytes()
        index_blob = self.index_array().astype("<u4", copy=False).tobytes()

        return MeshData(
            vertices=vertex_blob,
            vertex_layout=self.vertex_layout,
            aabb=self.aabb,
            indices=index_blob,
            index_count=self.index_count,
            primitive=self.primitive,
        )
