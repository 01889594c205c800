"""
Wavefront OBJ ingestion: parse, fan-triangulate, weld and bound a polygon
mesh into an indexed triangle list ready for upload.
"""

import logging

from objweld.assets.importers.obj import ObjImporter, load_obj
from objweld.errors import (
    CornerReferenceError,
    EmptyBoundingBoxError,
    EmptyMeshError,
    MeshImportError,
    ObjParseError,
    UnsupportedAssetError,
)
from objweld.geometry.tangents import DegenerateUVPolicy, TangentPass
from objweld.mesh import Mesh, MeshData, PrimitiveTopology, VertexLayout
from objweld.settings import ImportSettings
from objweld.types import BoundingBox, CornerRef, ResolvedVertex

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "load_obj",
    "ObjImporter",
    "ImportSettings",
    "Mesh",
    "MeshData",
    "VertexLayout",
    "PrimitiveTopology",
    "BoundingBox",
    "CornerRef",
    "ResolvedVertex",
    "DegenerateUVPolicy",
    "TangentPass",
    "MeshImportError",
    "ObjParseError",
    "CornerReferenceError",
    "EmptyMeshError",
    "EmptyBoundingBoxError",
    "UnsupportedAssetError",
]
