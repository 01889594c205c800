import pytest

from objweld.errors import ObjParseError
from objweld.geometry.parser import parse_obj
from objweld.types import CornerRef


def test_parse_attribute_tables(triangle_obj):
    doc = parse_obj(triangle_obj)

    assert doc.positions == ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert doc.normals == ((0.0, 0.0, 1.0),)
    assert len(doc.texcoords) == 3
    assert doc.faces == ((CornerRef(0, 0, 0), CornerRef(1, 1, 0), CornerRef(2, 2, 0)),)


def test_texcoord_v_is_flipped():
    doc = parse_obj("vt 0.25 0.75\nvt 1 0\n")

    assert doc.texcoords == ((0.25, 0.25), (1.0, 1.0))


def test_corner_indices_are_zero_based():
    doc = parse_obj("f 3/5/7 1/1/1 2/2/2\n")

    assert doc.faces[0][0] == CornerRef(position=2, texcoord=4, normal=6)


def test_comments_and_blank_lines_do_not_change_output(triangle_obj):
    noisy = "# header comment\n\n" + "\n".join(
        f"{line}   # trailing note\n\n" for line in triangle_obj.splitlines()
    )

    assert parse_obj(noisy) == parse_obj(triangle_obj)


def test_comment_truncates_mid_line():
    doc = parse_obj("v 1 2 3 # 4 5 6\nv 7 8 9#\n")

    assert doc.positions == ((1.0, 2.0, 3.0), (7.0, 8.0, 9.0))


def test_directives_are_case_insensitive():
    doc = parse_obj("V 1 2 3\nVN 0 1 0\nVt 0 0\nF 1/1/1 1/1/1 1/1/1\n")

    assert len(doc.positions) == 1
    assert len(doc.normals) == 1
    assert len(doc.texcoords) == 1
    assert len(doc.faces) == 1


def test_unknown_directives_are_ignored_and_recorded():
    doc = parse_obj("mtllib scene.mtl\nusemtl stone\no Cube\ns off\nv 1 2 3\n")

    assert doc.positions == ((1.0, 2.0, 3.0),)
    assert doc.ignored == frozenset({"mtllib", "usemtl", "o", "s"})


def test_extra_components_are_ignored():
    doc = parse_obj("v 1 2 3 1.0\nvt 0.5 0.5 0.0\n")

    assert doc.positions == ((1.0, 2.0, 3.0),)
    assert doc.texcoords == ((0.5, 0.5),)


def test_bytes_input_and_crlf_line_endings():
    doc = parse_obj(b"v 1 2 3\r\nv 4 5 6\r\n")

    assert doc.positions == ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))


def test_ngon_face_keeps_all_corners():
    doc = parse_obj("f 1/1/1 2/2/1 3/3/1 4/4/1 5/5/1\n")

    assert len(doc.faces[0]) == 5
    assert doc.corner_count == 5


def test_malformed_number_fails():
    with pytest.raises(ObjParseError) as exc:
        parse_obj("v 0 0 0\nv 1.0 abc 2.0\n", source="bad.obj")

    err = exc.value
    assert err.line_number == 2
    assert err.source == "bad.obj"
    assert "abc" in str(err)
    assert "bad.obj:2" in str(err)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_obj("vn 0 x 1\n")


@pytest.mark.parametrize(
    "line",
    [
        "v 1 2",
        "vn 1",
        "vt 0.5",
        "f 1/1/1 2/2/2",
        "f 1/1/1 2/2/2 3/3",
        "f 1//1 2//2 3//3",
        "f 1 2 3",
        "f 1/1/1 2/2/2 3.5/3/3",
        "f 1/1/1 2/2/2 a/b/c",
    ],
)
def test_malformed_directives_fail(line):
    with pytest.raises(ObjParseError):
        parse_obj(line + "\n")


def test_parses_are_independent():
    first = parse_obj("v 1 1 1\n")
    second = parse_obj("v 2 2 2\n")

    assert first.positions == ((1.0, 1.0, 1.0),)
    assert second.positions == ((2.0, 2.0, 2.0),)


def test_empty_source():
    doc = parse_obj("")

    assert doc.positions == ()
    assert doc.faces == ()
    assert doc.corner_count == 0


@pytest.mark.parametrize(
    "brk", ["\x0b", "\x0c", "\x1c", "\x1e", "\x85", "\u2028", "\u2029"]
)
def test_only_newline_ends_a_comment(brk):
    doc = parse_obj(f"v 1 2 3 # exported{brk}v 9 9 9\nv 4 5 6\n")

    assert doc.positions == ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))


def test_error_line_numbers_count_newlines_only():
    with pytest.raises(ObjParseError) as exc:
        parse_obj("v 0 0 0 # a\x0cb\r\nv 1 x 1\r\n")

    assert exc.value.line_number == 2
    assert exc.value.line == "v 1 x 1"


def test_byte_order_mark_is_dropped():
    data = "v 1 2 3\nv 4 5 6\n"

    from_bytes = parse_obj(data.encode("utf-8-sig"))
    from_text = parse_obj("\ufeff" + data)

    assert from_bytes.positions == ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))
    assert from_text.positions == from_bytes.positions
    assert from_bytes.ignored == frozenset()
