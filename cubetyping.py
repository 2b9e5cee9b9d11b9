import typing

Face = typing.NewType('Face', str)
Face.__doc__ = \
    """
    Label of a cube face. Possible values:
        U - up,
        R - right,
        F - front,
        D - down,
        L - left,
        B - back.
    """

RotationFace = typing.NewType('RotationFace', str)
RotationFace.__doc__ = \
    """
    Name of a whole cube rotation: x, y or z.
    x follows the R turn, y follows the U turn and z follows the F turn.
    """

Notation = typing.NewType('Notation', str)
Notation.__doc__ = \
    """
    Move or sequence of moves in standard notation separated by spaces, e.g. "R U R' U2 x'".
    Lower-case face letters stand for wide turns.
    """

Pattern = typing.NewType('Pattern', list)
Pattern.__doc__ = \
    """
    Face-local orientation or permutation vector of a last layer case as stored in a case catalog.
    """

# orientation values of the 4 pieces of a face, None where the piece has no sticker of the viewed face
FaceOrientation = typing.List[typing.Optional[int]]


class Orientation(typing.NamedTuple):
    """
    Perceived orientation of the cube, described by the faces seen on the left and on the bottom.
    """
    left : Face = 'L'
    down : Face = 'D'


class CubeLike(typing.Protocol):
    """
    Snapshot of a cube in cubie representation.

    `co` - orientations of 8 corners, `eo` - orientations of 12 edges,
    `cp` - corner occupying each corner position, `ep` - edge occupying each edge position.
    """
    co : typing.Sequence[int]
    eo : typing.Sequence[int]
    cp : typing.Sequence[int]
    ep : typing.Sequence[int]

    def is_solved(self) -> bool:
        ...


StagesData = typing.Dict[str, typing.List[typing.Dict[str, typing.Any]]]
