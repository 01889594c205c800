# objweld/settings.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, List, Mapping

from objweld.geometry.passes import MeshPass
from objweld.geometry.tangents import DegenerateUVPolicy, TangentPass


@dataclass(frozen=True, slots=True)
class ImportSettings:
    """
    Import pipeline configuration.

    Attributes:
        generate_tangents: Run the tangent pass after welding.
        degenerate_uv_policy: Tangent contribution of zero-area UV triangles.
        degenerate_uv_epsilon: |det| at or below which a UV mapping is singular.
        require_geometry: Raise EmptyMeshError when the file has no faces.
        encoding: Text encoding of OBJ files.
    """

    generate_tangents: bool = False
    degenerate_uv_policy: DegenerateUVPolicy = DegenerateUVPolicy.SKIP
    degenerate_uv_epsilon: float = 1e-12
    require_geometry: bool = False
    encoding: str = "utf-8-sig"

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> ImportSettings:
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown import settings: {sorted(unknown)}")

        kwargs = dict(values)
        if "degenerate_uv_policy" in kwargs:
            kwargs["degenerate_uv_policy"] = DegenerateUVPolicy(
                kwargs["degenerate_uv_policy"]
            )
        return cls(**kwargs)

    def post_passes(self) -> List[MeshPass]:
        passes: List[MeshPass] = []
        if self.generate_tangents:
            passes.append(
                TangentPass(
                    policy=self.degenerate_uv_policy,
                    epsilon=self.degenerate_uv_epsilon,
                )
            )
        return passes
