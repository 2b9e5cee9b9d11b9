import typing

from rubik.cube import Cube

from errors     import InvariantError
from notation   import Move, split_moves, invert_moves
from cubetyping import Face, Notation
from defaults   import FACES, CORNERS, EDGES, CUBE_TURN_METHODS, DEFAULT_CUBE_STR

"""
Coordinates of the face centers in the space of rubik.cube.Cube and the index of
the piece colors which holds the sticker of the face
"""
CUBE_FACE_POINTS = {
    'U' : (0, 1, 0),
    'R' : (1, 0, 0),
    'F' : (0, 0, 1),
    'D' : (0, -1, 0),
    'L' : (-1, 0, 0),
    'B' : (0, 0, -1),
}
CUBE_FACE_AXES = {'U' : 1, 'R' : 0, 'F' : 2, 'D' : 1, 'L' : 0, 'B' : 2}


class CubeSnapshot(typing.NamedTuple):
    """
    Read-only cubie state of a cube.

    `co` - orientation of 8 corners: index within the position label of the sticker showing U or D,
    `eo` - orientation of 12 edges: 1 if stickers are reversed against the position label,
    `cp` - corner lying on each corner position, `ep` - edge lying on each edge position.
    """
    co : typing.Tuple[int, ...]
    eo : typing.Tuple[int, ...]
    cp : typing.Tuple[int, ...]
    ep : typing.Tuple[int, ...]

    def is_solved(self) -> bool:
        return (
            not any(self.co) and not any(self.eo)
            and self.cp == tuple(range(len(CORNERS)))
            and self.ep == tuple(range(len(EDGES)))
        )


class ECube(Cube):
    def __init__(self, cube_str : str = DEFAULT_CUBE_STR):
        super().__init__(cube_str)
        self._initial = self.flat_str()

    def __repr__(self):
        return self.__str__()

    def __eq__(self, other : Cube) -> bool:
        return self.flat_str() == other.flat_str()

    @staticmethod
    def get_default_cube() -> 'ECube':
        """
        Get solved version of cube with default colors using side colors parameter to generate it.
        Default cube is
            YYY
            YYY
            YYY
        BBB RRR GGG OOO
        BBB RRR GGG OOO
        BBB RRR GGG OOO
            WWW
            WWW
            WWW

        Returns
        -------
        cube : ECube
            Solved version of cube.
        """
        return ECube(DEFAULT_CUBE_STR)

    def reset(self) -> 'ECube':
        """
        Get the initial state of cube

        Returns
        -------
        cube : ECube
            Cube in initial state
        """
        return ECube(self._initial)

    def copy(self) -> 'ECube':
        """
        Get a copy of cube
        """
        cube = ECube(self.flat_str())
        cube._initial = self._initial
        return cube

    @staticmethod
    def reverse_turns(turns : Notation | typing.Iterable[str]) -> Notation:
        """
        For each turn get reversed one in reversed order

        Parameters
        ----------
        turns : str | Iterable
            Turns in standard notation to reverse

        Returns
        -------
        reversed_turns : Notation
            Reversed turns separated by spaces
        """
        return invert_moves(turns)

    @staticmethod
    def _move_methods(move : Move) -> typing.List[str]:
        """
        Names of Cube methods which perform a turn
        """
        key     = move.face.lower() if move.width == 2 else move.face
        methods = list(CUBE_TURN_METHODS[key])
        if move.amount < 0:
            methods = [method[:-1] if method.endswith('i') else method + 'i' for method in reversed(methods)]
        return methods * abs(move.amount)

    @staticmethod
    def _prepare_turns(turns : Notation | typing.Iterable[str]) -> typing.List[str]:
        """
        Translate turns in standard notation to names of Cube methods
        """
        methods = []
        for move in split_moves(turns):
            methods.extend(ECube._move_methods(move))
        return methods

    def turn(self, turns : Notation | typing.Iterable[str], reset : bool = False) -> 'ECube':
        """
        Apply turns to copy of cube and return it

        Parameters
        ----------
        turns : Notation | Iterable
            Turns in standard notation, e.g. "R U R' U' r2 M' x"
        reset : bool, optional
            If True, then the cube will be reseted to its initial state before moves

        Returns
        -------
        cube : ECube
            Cube with applied moves
        """
        cube = self.reset() if reset else self.copy()
        cube.turn_(turns)
        return cube

    def turn_(self, turns : Notation | typing.Iterable[str], reset : bool = False):
        """
        Apply turns to cube itself

        Parameters
        ----------
        turns : Notation | Iterable
            Turns in standard notation to perform on cube in it's current state
        reset : bool, optional
            If True, then the cube itself will be reseted to its initial state before moves
        """
        methods = ECube._prepare_turns(turns)
        if reset:
            Cube.__init__(self, self._initial)
        for method in methods:
            getattr(Cube, method)(self)

    def move(self, turns : Notation | typing.Iterable[str]) -> CubeSnapshot:
        """
        Apply turns to cube itself and get its new cubie state
        """
        self.turn_(turns)
        return self.snapshot()

    def _sticker(self, position : str, face : Face) -> str:
        """
        Color of the sticker of a piece position which looks at the face
        """
        point = [sum(axis) for axis in zip(*(CUBE_FACE_POINTS[letter] for letter in position))]
        piece = self.get_piece(*point)
        return piece.colors[CUBE_FACE_AXES[face]]

    def snapshot(self) -> CubeSnapshot:
        """
        Read cubie state of cube. Stickers are compared with the current centers,
        so whole cube rotations and slice turns do not break the state.

        Returns
        -------
        snapshot : CubeSnapshot
            orientations and permutations of corners and edges
        """
        center_faces = {self._sticker(face, face) : face for face in FACES}
        if len(center_faces) != len(FACES):
            raise InvariantError(f'Cube centers must have distinct colors, got {tuple(center_faces)}')

        def read(position : str) -> typing.Tuple[Face, ...]:
            return tuple(center_faces.get(self._sticker(position, letter)) for letter in position)

        co, cp = [], []
        for position in CORNERS:
            faces = read(position)
            orientation = next((i for i, face in enumerate(faces) if face in ('U', 'D')), None)
            if orientation is None:
                raise InvariantError(f'Corner at {position} has no U or D sticker: {faces}')
            color1, color2 = faces[(orientation + 1) % 3], faces[(orientation + 2) % 3]
            corner = next((j for j, label in enumerate(CORNERS) if label[1] == color1 and label[2] == color2), None)
            if corner is None:
                raise InvariantError(f'Corner at {position} has unexpected stickers {faces}')
            co.append(orientation)
            cp.append(corner)

        eo, ep = [], []
        for position in EDGES:
            faces = read(position)
            label = ''.join(face or '?' for face in faces)
            if label in EDGES:
                eo.append(0)
                ep.append(EDGES.index(label))
            elif label[::-1] in EDGES:
                eo.append(1)
                ep.append(EDGES.index(label[::-1]))
            else:
                raise InvariantError(f'Edge at {position} has unexpected stickers {faces}')

        return CubeSnapshot(tuple(co), tuple(eo), tuple(cp), tuple(ep))

    @property
    def co(self) -> typing.Tuple[int, ...]:
        return self.snapshot().co

    @property
    def eo(self) -> typing.Tuple[int, ...]:
        return self.snapshot().eo

    @property
    def cp(self) -> typing.Tuple[int, ...]:
        return self.snapshot().cp

    @property
    def ep(self) -> typing.Tuple[int, ...]:
        return self.snapshot().ep


ECube.__doc__ = "Expand of Cube class with standard notation turns and cubie state:\n" + (Cube.__doc__ or '')
