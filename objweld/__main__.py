"""
Import OBJ files and print what the pipeline produced.

    python -m objweld model.obj [--tangents] [-v]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from objweld.assets.importers.obj import ObjImporter
from objweld.errors import MeshImportError
from objweld.geometry.tangents import DegenerateUVPolicy
from objweld.log import configure_logging
from objweld.mesh import Mesh
from objweld.settings import ImportSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="objweld",
        description="Weld and index Wavefront OBJ meshes.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="OBJ files to import")
    parser.add_argument(
        "--tangents",
        action="store_true",
        help="generate per-vertex tangents",
    )
    parser.add_argument(
        "--degenerate-uv",
        choices=[p.value for p in DegenerateUVPolicy],
        default=DegenerateUVPolicy.SKIP.value,
        help="tangent policy for zero-area UV triangles",
    )
    parser.add_argument(
        "--require-geometry",
        action="store_true",
        help="fail on files without faces",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
    )
    return parser


def describe(mesh: Mesh) -> List[str]:
    lines = [
        f"[{mesh.name}]",
        f"  > Vertices:   {mesh.vertex_count} (stride {mesh.vertex_stride} bytes)",
        f"  > Indices:    {mesh.index_count} ({mesh.triangle_count} triangles)",
        f"  > Layout:     {mesh.vertex_layout.format}",
    ]
    if mesh.aabb.is_empty:
        lines.append("  > Bounds:     empty")
    else:
        lo, hi = mesh.aabb.as_tuple()
        for axis, name in enumerate("XYZ"):
            lines.append(f"  > Bounds {name}:   {lo[axis]:.3f} to {hi[axis]:.3f}")
    lines.append(f"  > Tangents:   {'yes' if mesh.has_tangents else 'no'}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = args.log_level or ("DEBUG" if args.verbose else "WARNING")
    configure_logging(level)

    settings = ImportSettings(
        generate_tangents=args.tangents,
        degenerate_uv_policy=DegenerateUVPolicy(args.degenerate_uv),
        require_geometry=args.require_geometry,
    )
    importer = ObjImporter(settings)

    status = 0
    for path in args.files:
        try:
            mesh = importer.import_file(path)
        except (OSError, MeshImportError) as exc:
            print(f"error: {path}: {exc}", file=sys.stderr)
            status = 1
            continue

        print("\n".join(describe(mesh)))

    return status


if __name__ == "__main__":
    sys.exit(main())
