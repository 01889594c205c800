# objweld/assets/importers/obj.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from objweld.assets.importers.base import AssetImporter
from objweld.errors import EmptyMeshError
from objweld.geometry.bounds import compute_bounds
from objweld.geometry.parser import parse_obj
from objweld.geometry.passes import apply_passes
from objweld.geometry.resolve import resolve_corners
from objweld.geometry.triangulate import triangulate
from objweld.geometry.weld import remap_indices, weld_vertices
from objweld.mesh import BASE_LAYOUT, Mesh
from objweld.settings import ImportSettings

logger = logging.getLogger(__name__)


class ObjImporter(AssetImporter):
    """
    OBJ -> Mesh: parse, triangulate, resolve, weld, bound, then run any
    configured post-passes. Either a complete Mesh comes back or an
    exception propagates; nothing partial escapes.
    """

    def __init__(self, settings: Optional[ImportSettings] = None) -> None:
        self.settings = settings or ImportSettings()

    def import_file(self, path: Union[str, Path]) -> Mesh:
        path = Path(path)
        data = path.read_bytes()
        return self.import_source(data, source=str(path))

    def import_source(
        self, data: Union[bytes, str], *, source: str = "<memory>"
    ) -> Mesh:
        document = parse_obj(data, source=source, encoding=self.settings.encoding)

        if document.ignored:
            logger.debug(
                "[ObjImporter] %s: ignored directives %s",
                source,
                ", ".join(sorted(document.ignored)),
            )

        if not document.faces and self.settings.require_geometry:
            raise EmptyMeshError(f"No geometry found in OBJ: {source}")

        aabb = compute_bounds(document.positions)

        raw = resolve_corners(triangulate(document.faces), document)
        welded = weld_vertices(raw)
        # Raw vertices are emitted in triangle order, so raw index i is
        # simply position i in the stream.
        indices = remap_indices(range(len(raw)), welded.remap)

        mesh = Mesh(
            vertices=welded.vertices,
            indices=indices,
            aabb=aabb,
            vertex_layout=BASE_LAYOUT,
            name=source,
        )

        logger.debug(
            "[ObjImporter] %s: %d pos | %d norms | %d uvs | %d faces",
            source,
            len(document.positions),
            len(document.normals),
            len(document.texcoords),
            len(document.faces),
        )
        if not aabb.is_empty:
            logger.debug(
                "[ObjImporter] %s: bounds %s to %s", source, aabb.minimum, aabb.maximum
            )

        mesh = apply_passes(mesh, self.settings.post_passes())

        logger.info(
            "[ObjImporter] Loaded %s - %d verts, %d indices",
            source,
            mesh.vertex_count,
            mesh.index_count,
        )
        return mesh


def load_obj(
    path: Union[str, Path], settings: Optional[ImportSettings] = None
) -> Mesh:
    """Load a Wavefront OBJ file into a welded, indexed Mesh."""
    return ObjImporter(settings).import_file(path)
