# objweld/geometry/passes.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from objweld.mesh import Mesh


class MeshPass(ABC):
    """
    Optional post-processing step over a finished Mesh.

    Passes never mutate their input; they return a new Mesh so they can be
    chained in any order without touching the core import contract.
    """

    name: str = "mesh_pass"

    @abstractmethod
    def apply(self, mesh: Mesh) -> Mesh:
        pass


def apply_passes(mesh: Mesh, passes: Iterable[MeshPass]) -> Mesh:
    for mesh_pass in passes:
        mesh = mesh_pass.apply(mesh)
    return mesh
