import pytest

from objweld.errors import CornerReferenceError
from objweld.geometry.parser import parse_obj
from objweld.geometry.resolve import resolve_corner, resolve_corners
from objweld.types import CornerRef, ResolvedVertex


@pytest.fixture
def document(triangle_obj):
    return parse_obj(triangle_obj)


def test_resolve_gathers_each_table(document):
    v = resolve_corner(CornerRef(1, 2, 0), document)

    assert v == ResolvedVertex((1.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, 0.0))
    assert v.tangent is None


def test_resolve_stream(document):
    verts = resolve_corners(document.faces[0], document)

    assert [v.position for v in verts] == list(document.positions)


@pytest.mark.parametrize(
    "ref, table",
    [
        (CornerRef(3, 0, 0), "position"),
        (CornerRef(0, 3, 0), "texcoord"),
        (CornerRef(0, 0, 1), "normal"),
    ],
)
def test_out_of_range_reference(document, ref, table):
    with pytest.raises(CornerReferenceError) as exc:
        resolve_corner(ref, document)

    assert exc.value.table == table


def test_zero_index_in_file_does_not_wrap():
    # "0" becomes -1 after the 1-based correction; it must not read the last entry.
    doc = parse_obj("v 0 0 0\nv 1 1 1\nvn 0 0 1\nvt 0 0\nf 0/1/1 1/1/1 2/1/1\n")

    with pytest.raises(CornerReferenceError) as exc:
        resolve_corners(doc.faces[0], doc)

    assert exc.value.index == -1
    assert isinstance(exc.value, IndexError)


def test_missing_table_is_out_of_range():
    doc = parse_obj("v 0 0 0\nvt 0 0\nf 1/1/1 1/1/1 1/1/1\n")

    with pytest.raises(CornerReferenceError, match="normal"):
        resolve_corners(doc.faces[0], doc)
