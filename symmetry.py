import typing

from itertools import product

import rotation

from errors     import InvariantError
from cubetyping import Face, RotationFace, Notation, Orientation
from defaults   import FACES
from faces      import face_vector, vector_to_face
from utils      import eq, angle_between


class SymmetryCache:
    """
    Precomputed results of the rotation resolver for every combination of faces.
    Tables are filled once on creation and only read afterwards.

    Keys are concatenated face labels:
        `notations`                 - from + to, e.g. 'UF'
        `relative_faces`            - face + from + to, e.g. 'RUF'
        `notations_from_faces`      - from1 + from2 + to1 + to2, e.g. 'LDLB'
        `relative_faces_from_faces` - face + from1 + from2 + to1 + to2
    """
    def __init__(self):
        self.notations                 : typing.Dict[str, Notation] = {}
        self.relative_faces            : typing.Dict[str, Face]     = {}
        self.notations_from_faces      : typing.Dict[str, Notation] = {}
        self.relative_faces_from_faces : typing.Dict[str, Face]     = {}
        self._build()

    def _build(self):
        for from_face, to_face in product(FACES, repeat=2):
            key = from_face + to_face
            self.notations[key] = rotation.get_rotation_notation(from_face, to_face)
            for face in FACES:
                self.relative_faces[face + key] = rotation.get_relative_face(face, from_face, to_face)

        for from1, from2, to1, to2 in product(FACES, repeat=4):
            if from1 == from2:
                continue
            from_angle = angle_between(face_vector(from1), face_vector(from2))
            to_angle   = angle_between(face_vector(to1),   face_vector(to2))
            if not eq(from_angle, to_angle):
                continue
            key    = from1 + from2 + to1 + to2
            matrix = rotation.get_rotation_matrix_from_faces((from1, from2), (to1, to2))
            self.notations_from_faces[key] = rotation.get_notation_from_matrix(matrix)
            for face in FACES:
                self.relative_faces_from_faces[face + key] = rotation.nearest_face(matrix @ face_vector(face))

    @staticmethod
    def _lookup(table : typing.Dict[str, str], key : str, name : str) -> str:
        if key not in table:
            raise InvariantError(f'No cached {name} for faces {key!r}')
        return table[key]

    def get_rotation_notation(self, from_face : Face, to_face : Face) -> Notation:
        return self._lookup(self.notations, from_face + to_face, 'rotation notation')

    def get_relative_face(self, face : Face, from_face : Face, to_face : Face) -> Face:
        return self._lookup(self.relative_faces, face + from_face + to_face, 'relative face')

    def get_rotation_notation_from_faces(self, from_faces : typing.Sequence[Face], to_faces : typing.Sequence[Face]) -> Notation:
        key = ''.join(from_faces) + ''.join(to_faces)
        return self._lookup(self.notations_from_faces, key, 'rotation notation')

    def get_relative_face_from_faces(self, face : Face, from_faces : typing.Sequence[Face], to_faces : typing.Sequence[Face]) -> Face:
        key = face + ''.join(from_faces) + ''.join(to_faces)
        return self._lookup(self.relative_faces_from_faces, key, 'relative face')

    def __len__(self) -> int:
        return len(self.notations_from_faces)


SYMMETRY_CACHE = SymmetryCache()


def get_rotation_notation(from_face : Face, to_face : Face) -> Notation:
    """
    Cached `rotation.get_rotation_notation`
    """
    return SYMMETRY_CACHE.get_rotation_notation(from_face, to_face)


def get_relative_face(face : Face, from_face : Face, to_face : Face) -> Face:
    """
    Cached `rotation.get_relative_face`
    """
    return SYMMETRY_CACHE.get_relative_face(face, from_face, to_face)


def get_rotation_notation_from_faces(from_faces : typing.Sequence[Face], to_faces : typing.Sequence[Face]) -> Notation:
    """
    Cached `rotation.get_rotation_notation_from_faces`
    """
    return SYMMETRY_CACHE.get_rotation_notation_from_faces(from_faces, to_faces)


def get_relative_face_from_faces(face : Face, from_faces : typing.Sequence[Face], to_faces : typing.Sequence[Face]) -> Face:
    """
    Cached `rotation.get_relative_face_from_faces`
    """
    return SYMMETRY_CACHE.get_relative_face_from_faces(face, from_faces, to_faces)


def get_orientation_from_rotation(orientation : Orientation, rotation_face : RotationFace, amount : int) -> Orientation:
    """
    Orientation seen by the solver after a whole cube rotation

    Parameters
    ----------
    `orientation` : Orientation
        orientation before the rotation
    `rotation_face` : RotationFace
        x, y or z as the solver sees it
    `amount` : int
        amount of quarter turns

    Returns
    -------
    `orientation` : Orientation
        new orientation, the given one is left untouched
    """
    inverse = rotation.get_matrix_from_rotation(rotation_face, amount).T
    # faces seen on the left and at the bottom if the cube was held in the reference orientation
    left = vector_to_face(inverse @ face_vector('L'))
    down = vector_to_face(inverse @ face_vector('D'))
    reference = Orientation()
    return Orientation(
        left = get_relative_face_from_faces(left, reference, orientation),
        down = get_relative_face_from_faces(down, reference, orientation),
    )
