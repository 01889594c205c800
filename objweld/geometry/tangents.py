# objweld/geometry/tangents.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from objweld.geometry.passes import MeshPass
from objweld.mesh import TANGENT_LAYOUT, Mesh

logger = logging.getLogger(__name__)


class DegenerateUVPolicy(str, Enum):
    """What a triangle with a zero-area UV mapping contributes."""

    SKIP = "skip"  # nothing
    EDGE_FALLBACK = "edge_fallback"  # its normalized first position edge


@dataclass(frozen=True, slots=True)
class TangentResult:
    tangents: np.ndarray  # (vertex_count, 3) float64, unit length or zero
    degenerate_triangles: int


def _normalize_rows(v: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Normalize in place where possible; returns (v, mask of rows that were)."""
    length = np.linalg.norm(v, axis=1)
    ok = np.isfinite(length) & (length > 0.0)
    v[ok] /= length[ok, None]
    v[~ok] = 0.0
    return v, ok


def compute_tangents(
    mesh: Mesh,
    *,
    policy: DegenerateUVPolicy = DegenerateUVPolicy.SKIP,
    epsilon: float = 1e-12,
) -> TangentResult:
    """
    Per-vertex tangents from each triangle's position -> UV mapping.

    For every triangle the unit triangle is mapped to position space by the
    rows (e0, e1, e0 x e1) and to UV space by ((du0, dv0, 0), (du1, dv1, 0),
    (0, 0, 1)). Row 0 of inv(M_uv) @ M_pos is the direction of increasing U.
    Normalized per-triangle tangents are summed onto the three corners and
    the sums normalized at the end.
    """
    vertex_count = mesh.vertex_count
    acc = np.zeros((vertex_count, 3), dtype=np.float64)

    if mesh.triangle_count == 0:
        return TangentResult(tangents=acc, degenerate_triangles=0)

    pos = np.array([v.position for v in mesh.vertices], dtype=np.float64)
    uv = np.array([v.uv for v in mesh.vertices], dtype=np.float64)
    tri = np.asarray(mesh.indices, dtype=np.int64).reshape(-1, 3)

    # Position space
    p0, p1, p2 = pos[tri[:, 0]], pos[tri[:, 1]], pos[tri[:, 2]]
    edge0 = p1 - p0
    edge1 = p2 - p0
    normal = np.cross(edge0, edge1)
    unit_to_position = np.stack([edge0, edge1, normal], axis=1)

    # UV space, with a synthetic third axis
    uv0, uv1, uv2 = uv[tri[:, 0]], uv[tri[:, 1]], uv[tri[:, 2]]
    uv_edge0 = uv1 - uv0
    uv_edge1 = uv2 - uv0
    unit_to_uv = np.zeros_like(unit_to_position)
    unit_to_uv[:, 0, :2] = uv_edge0
    unit_to_uv[:, 1, :2] = uv_edge1
    unit_to_uv[:, 2, 2] = 1.0

    det = uv_edge0[:, 0] * uv_edge1[:, 1] - uv_edge0[:, 1] * uv_edge1[:, 0]
    invertible = np.isfinite(det) & (np.abs(det) > epsilon)

    tri_tangent = np.zeros((len(tri), 3), dtype=np.float64)
    valid = np.zeros(len(tri), dtype=bool)

    if invertible.any():
        uv_to_position = (
            np.linalg.inv(unit_to_uv[invertible]) @ unit_to_position[invertible]
        )
        tangent, ok = _normalize_rows(uv_to_position[:, 0, :].copy())
        tri_tangent[invertible] = tangent
        valid[invertible] = ok

    degenerate = ~valid
    degenerate_count = int(degenerate.sum())

    if degenerate_count and policy is DegenerateUVPolicy.EDGE_FALLBACK:
        fallback, _ = _normalize_rows(edge0[degenerate].copy())
        tri_tangent[degenerate] = fallback

    for corner in range(3):
        np.add.at(acc, tri[:, corner], tri_tangent)

    tangents, _ = _normalize_rows(acc)

    return TangentResult(tangents=tangents, degenerate_triangles=degenerate_count)


class TangentPass(MeshPass):
    """Adds a tangent to every vertex and switches to the tangent layout."""

    name = "tangents"

    def __init__(
        self,
        policy: DegenerateUVPolicy = DegenerateUVPolicy.SKIP,
        epsilon: float = 1e-12,
    ) -> None:
        self.policy = DegenerateUVPolicy(policy)
        self.epsilon = epsilon

    def apply(self, mesh: Mesh) -> Mesh:
        result = compute_tangents(mesh, policy=self.policy, epsilon=self.epsilon)

        if result.degenerate_triangles:
            logger.warning(
                "[TangentPass] %s: %d of %d triangles have a degenerate UV "
                "mapping (policy=%s)",
                mesh.name or "<mesh>",
                result.degenerate_triangles,
                mesh.triangle_count,
                self.policy.value,
            )

        vertices = tuple(
            vertex.with_tangent(
                (float(t[0]), float(t[1]), float(t[2]))
            )
            for vertex, t in zip(mesh.vertices, result.tangents)
        )

        return replace(mesh, vertices=vertices, vertex_layout=TANGENT_LAYOUT)
