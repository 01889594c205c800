from pathlib import Path

import pytest

from objweld.assets.importers.obj import ObjImporter

TRIANGLE_OBJ = """
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 0.0 1.0 0.0
vn 0.0 0.0 1.0
vt 0.0 0.0
vt 1.0 0.0
vt 0.0 1.0
f 1/1/1 2/2/1 3/3/1
"""

QUAD_OBJ = """
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 1.0 1.0 0.0
v 0.0 1.0 0.0
vn 0.0 0.0 1.0
vt 0.0 0.0
vt 1.0 0.0
vt 1.0 1.0
vt 0.0 1.0
f 1/1/1 2/2/1 3/3/1 4/4/1
"""


@pytest.fixture
def importer():
    """Returns an ObjImporter with default settings."""
    return ObjImporter()


@pytest.fixture
def write_obj(tmp_path):
    """Writes OBJ text into tmp_path and returns the file path."""

    def _write(text: str, name: str = "mesh.obj") -> Path:
        f = tmp_path / name
        f.write_text(text)
        return f

    return _write


@pytest.fixture
def triangle_obj():
    return TRIANGLE_OBJ


@pytest.fixture
def quad_obj():
    return QUAD_OBJ
