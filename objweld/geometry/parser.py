# objweld/geometry/parser.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Set, Tuple, Union

from objweld.errors import ObjParseError
from objweld.types import CornerRef, Face, Normal, Position, TexCoord


@dataclass(frozen=True, slots=True)
class ObjDocument:
    """Attribute tables and faces read from one OBJ source."""

    positions: Tuple[Position, ...]
    normals: Tuple[Normal, ...]
    texcoords: Tuple[TexCoord, ...]
    faces: Tuple[Face, ...]
    source: str = "<memory>"
    ignored: frozenset[str] = frozenset()

    @property
    def corner_count(self) -> int:
        return sum(len(face) for face in self.faces)


@dataclass(slots=True)
class ParserState:
    """
    Mutable state for a single parse call.

    Created fresh by parse_obj() and passed to every line handler, so two
    parses never share anything.
    """

    source: str = "<memory>"
    line_number: int = 0
    line: str = ""
    positions: List[Position] = field(default_factory=list)
    normals: List[Normal] = field(default_factory=list)
    texcoords: List[TexCoord] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)
    ignored: Set[str] = field(default_factory=set)

    def error(self, message: str) -> ObjParseError:
        return ObjParseError(
            message,
            source=self.source,
            line_number=self.line_number,
            line=self.line,
        )

    def finish(self) -> ObjDocument:
        return ObjDocument(
            positions=tuple(self.positions),
            normals=tuple(self.normals),
            texcoords=tuple(self.texcoords),
            faces=tuple(self.faces),
            source=self.source,
            ignored=frozenset(self.ignored),
        )


def parse_obj(
    data: Union[bytes, str],
    *,
    source: str = "<memory>",
    encoding: str = "utf-8-sig",
) -> ObjDocument:
    """
    Parse OBJ text into attribute tables and a face list.

    Supported directives (case-insensitive): v, vn, vt, f with p/t/n
    corners. Everything after '#' is a comment. Unknown directives are
    skipped and recorded in ObjDocument.ignored.

    Raises:
        ObjParseError: on a malformed number, corner or short directive.
    """
    if isinstance(data, bytes):
        text = data.decode(encoding, errors="replace")
    else:
        text = data.removeprefix("\ufeff")

    state = ParserState(source=source)

    # Lines end at "\n" only; other Unicode breaks stay inside the line.
    for line_number, raw_line in enumerate(text.split("\n"), start=1):
        raw_line = raw_line.rstrip("\r")
        state.line_number = line_number
        state.line = raw_line

        line = raw_line.split("#", 1)[0]
        tokens = line.split()
        if not tokens:
            continue

        tag = tokens[0].lower()
        handler = _HANDLERS.get(tag)
        if handler is None:
            state.ignored.add(tag)
            continue

        handler(state, tokens[1:])

    return state.finish()


def _parse_floats(state: ParserState, args: List[str], count: int) -> List[float]:
    if len(args) < count:
        raise state.error(f"expected {count} numbers, found {len(args)}")

    values = []
    for token in args[:count]:
        try:
            values.append(float(token))
        except ValueError:
            raise state.error(f"invalid number {token!r}") from None
    return values


def _parse_position(state: ParserState, args: List[str]) -> None:
    x, y, z = _parse_floats(state, args, 3)
    state.positions.append((x, y, z))


def _parse_normal(state: ParserState, args: List[str]) -> None:
    x, y, z = _parse_floats(state, args, 3)
    state.normals.append((x, y, z))


def _parse_texcoord(state: ParserState, args: List[str]) -> None:
    u, v = _parse_floats(state, args, 2)
    # OBJ puts v=0 at the bottom of the image, we want it at the top.
    state.texcoords.append((u, 1.0 - v))


def _parse_face(state: ParserState, args: List[str]) -> None:
    if len(args) < 3:
        raise state.error(f"face needs at least 3 corners, found {len(args)}")

    state.faces.append(tuple(_parse_corner(state, token) for token in args))


def _parse_corner(state: ParserState, token: str) -> CornerRef:
    """
    Parse a p/t/n corner token. All three indices are required.
    OBJ indices are 1-based.
    """
    parts = token.split("/")
    if len(parts) != 3 or not all(parts):
        raise state.error(f"face corner {token!r} is not of the form p/t/n")

    try:
        p, t, n = (int(part) for part in parts)
    except ValueError:
        raise state.error(f"face corner {token!r} has a non-integer index") from None

    return CornerRef(p - 1, t - 1, n - 1)


_HANDLERS: Dict[str, Callable[[ParserState, List[str]], None]] = {
    "v": _parse_position,
    "vn": _parse_normal,
    "vt": _parse_texcoord,
    "f": _parse_face,
}
