# objweld/types.py
from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple, TypeAlias

from objweld.errors import EmptyBoundingBoxError

Scalar: TypeAlias = float

Position: TypeAlias = Tuple[Scalar, Scalar, Scalar]
Normal: TypeAlias = Tuple[Scalar, Scalar, Scalar]
TexCoord: TypeAlias = Tuple[Scalar, Scalar]  # (u, 1 - v_raw)
Tangent: TypeAlias = Tuple[Scalar, Scalar, Scalar]


class CornerRef(NamedTuple):
    """Zero-based (position, texcoord, normal) indices of one face corner."""

    position: int
    texcoord: int
    normal: int


Face: TypeAlias = Tuple[CornerRef, ...]

_BASE_KEY = struct.Struct("<8d")
_TANGENT_KEY = struct.Struct("<11d")


@dataclass(frozen=True, slots=True, eq=False)
class ResolvedVertex:
    """
    Fully gathered vertex record, the unit of welding.

    Two vertices are equal only when every component has the same IEEE-754
    bit pattern: 0.0 and -0.0 differ, identical NaNs compare equal.
    """

    position: Position
    normal: Normal
    uv: TexCoord
    tangent: Optional[Tangent] = None

    @property
    def key(self) -> bytes:
        if self.tangent is None:
            return _BASE_KEY.pack(*self.position, *self.normal, *self.uv)
        return _TANGENT_KEY.pack(
            *self.position, *self.normal, *self.uv, *self.tangent
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedVertex):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def with_tangent(self, tangent: Tangent) -> ResolvedVertex:
        return ResolvedVertex(self.position, self.normal, self.uv, tangent)

    def flatten(self) -> Tuple[Scalar, ...]:
        """Components in buffer order: pos, normal, uv[, tangent]."""
        if self.tangent is None:
            return (*self.position, *self.normal, *self.uv)
        return (*self.position, *self.normal, *self.uv, *self.tangent)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """
    Axis-aligned box over a set of positions.

    A box built from zero positions is flagged ``empty``; its ``minimum`` and
    ``maximum`` are meaningless and must not be used.
    """

    minimum: Position
    maximum: Position
    empty: bool = False

    @staticmethod
    def empty_box() -> BoundingBox:
        inf = float("inf")
        return BoundingBox((inf, inf, inf), (-inf, -inf, -inf), empty=True)

    @property
    def is_empty(self) -> bool:
        return self.empty

    @property
    def center(self) -> Position:
        self._require_points()
        return (
            (self.minimum[0] + self.maximum[0]) * 0.5,
            (self.minimum[1] + self.maximum[1]) * 0.5,
            (self.minimum[2] + self.maximum[2]) * 0.5,
        )

    @property
    def extents(self) -> Position:
        self._require_points()
        return (
            self.maximum[0] - self.minimum[0],
            self.maximum[1] - self.minimum[1],
            self.maximum[2] - self.minimum[2],
        )

    def contains(self, point: Position) -> bool:
        if self.empty:
            return False
        return all(
            lo <= p <= hi for lo, p, hi in zip(self.minimum, point, self.maximum)
        )

    def union(self, other: BoundingBox) -> BoundingBox:
        if self.empty:
            return other
        if other.empty:
            return self
        return BoundingBox(
            (
                min(self.minimum[0], other.minimum[0]),
                min(self.minimum[1], other.minimum[1]),
                min(self.minimum[2], other.minimum[2]),
            ),
            (
                max(self.maximum[0], other.maximum[0]),
                max(self.maximum[1], other.maximum[1]),
                max(self.maximum[2], other.maximum[2]),
            ),
        )

    def as_tuple(self) -> Tuple[Position, Position]:
        self._require_points()
        return self.minimum, self.maximum

    def _require_points(self) -> None:
        if self.empty:
            raise EmptyBoundingBoxError("bounding box holds no points")
