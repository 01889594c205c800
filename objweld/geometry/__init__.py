from objweld.geometry.bounds import compute_bounds
from objweld.geometry.parser import ObjDocument, ParserState, parse_obj
from objweld.geometry.passes import MeshPass, apply_passes
from objweld.geometry.resolve import resolve_corner, resolve_corners
from objweld.geometry.tangents import (
    DegenerateUVPolicy,
    TangentPass,
    TangentResult,
    compute_tangents,
)
from objweld.geometry.triangulate import fan_triangles, triangulate
from objweld.geometry.weld import WeldResult, remap_indices, weld_vertices

__all__ = [
    "ObjDocument",
    "ParserState",
    "parse_obj",
    "fan_triangles",
    "triangulate",
    "resolve_corner",
    "resolve_corners",
    "WeldResult",
    "weld_vertices",
    "remap_indices",
    "compute_bounds",
    "MeshPass",
    "apply_passes",
    "DegenerateUVPolicy",
    "TangentPass",
    "TangentResult",
    "compute_tangents",
]
