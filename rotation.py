import typing

import numpy as np

from errors     import InvariantError
from notation   import get_notation, split_moves
from cubetyping import Face, RotationFace, Notation, Orientation
from defaults   import FACES, ROTATION_FACES
from faces      import face_vector, vector_to_face, vector_to_rotation
from utils      import eq, angle_between, is_parallel, is_antiparallel, is_perpendicular, rotation_matrix


def get_rotation_parameter(from_face : Face, to_face : Face) -> typing.Tuple[np.ndarray | None, float | None]:
    """
    Axis and angle of the rotation which moves one face onto another

    Parameters
    ----------
    `from_face` : Face
        face to move
    `to_face` : Face
        place where the face has to be moved

    Returns
    -------
    `axis` : np.ndarray | None
        axis of rotation, None if faces are equal
    `angle` : float | None
        angle of counter-clockwise rotation around axis: pi/2 or pi, None if faces are equal
    """
    if from_face == to_face:
        return None, None
    from_vector = face_vector(from_face)
    to_vector   = face_vector(to_face)
    direction   = to_vector
    if is_antiparallel(from_vector, to_vector):
        # any face perpendicular to both gives a valid half turn axis
        direction = face_vector(next(face for face in FACES if face not in (from_face, to_face)))
    axis  = np.cross(from_vector, direction)
    angle = angle_between(from_vector, to_vector)
    return axis, angle


def get_rotation_matrix(from_face : Face, to_face : Face) -> np.ndarray:
    """
    Matrix of the rotation which moves `from_face` onto `to_face`, identity for equal faces
    """
    axis, angle = get_rotation_parameter(from_face, to_face)
    if axis is None:
        return np.eye(3)
    return rotation_matrix(angle, axis)


def get_rotation(from_face : Face, to_face : Face) -> typing.Tuple[RotationFace | None, int]:
    """
    Whole cube rotation which moves one face onto another

    Parameters
    ----------
    `from_face` : Face
        face to move
    `to_face` : Face
        place where the face has to be moved

    Returns
    -------
    `rotation_face` : RotationFace | None
        x, y or z. None if faces are equal
    `amount` : int
        amount of quarter turns: -1, 1 or 2. 0 if faces are equal
    """
    axis, angle = get_rotation_parameter(from_face, to_face)
    if axis is None:
        return None, 0
    rotation_face, direction = vector_to_rotation(axis)
    if eq(angle, np.pi):
        return rotation_face, 2
    if eq(angle, np.pi / 2):
        # rotations follow clockwise face turns, the matrix angle is counter-clockwise
        return rotation_face, -direction
    raise InvariantError(f'Rotation from {from_face} to {to_face} has unexpected angle {angle}')


def get_rotation_notation(from_face : Face, to_face : Face) -> Notation:
    """
    Notation of the whole cube rotation which moves `from_face` onto `to_face`, e.g. get_rotation_notation('U', 'F') == "x'"
    """
    rotation_face, amount = get_rotation(from_face, to_face)
    if rotation_face is None:
        return ''
    return get_notation(rotation_face, amount)


def get_relative_face(face : Face, from_face : Face, to_face : Face) -> Face:
    """
    Where a face ends up after the rotation which moves `from_face` onto `to_face`

    Parameters
    ----------
    `face` : Face
        face to track
    `from_face` : Face
        face moved by rotation
    `to_face` : Face
        place where `from_face` has been moved

    Returns
    -------
    `relative_face` : Face
        new place of `face`
    """
    matrix = get_rotation_matrix(from_face, to_face)
    return vector_to_face(matrix @ face_vector(face))


def get_orientation(from_face : Face, to_face : Face) -> Orientation:
    """
    Orientation seen by the solver after the rotation which moves `from_face` onto `to_face`

    Returns
    -------
    `orientation` : Orientation
        faces which are now on the left and at the bottom
    """
    inverse = get_rotation_matrix(from_face, to_face).T
    return Orientation(
        left = vector_to_face(inverse @ face_vector('L')),
        down = vector_to_face(inverse @ face_vector('D')),
    )


def get_rotation_matrix_from_faces(from_faces : typing.Sequence[Face], to_faces : typing.Sequence[Face]) -> np.ndarray:
    """
    Matrix of the rotation which moves the first face onto the first target face
    and the second face onto the second target face at the same time.

    Parameters
    ----------
    `from_faces` : Sequence[Face]
        two faces to move
    `to_faces` : Sequence[Face]
        two target places. The angle between them has to be the angle between `from_faces`

    Returns
    -------
    `matrix` : np.ndarray
        3x3 rotation matrix
    """
    from1, from2 = (face_vector(face) for face in from_faces)
    to1,   to2   = (face_vector(face) for face in to_faces)

    if is_parallel(from1, to1):
        matrix = np.eye(3)
    elif is_antiparallel(from1, to1):
        axis   = next(face_vector(face) for face in FACES if is_perpendicular(face_vector(face), from1))
        matrix = rotation_matrix(np.pi, axis)
    else:
        matrix = rotation_matrix(angle_between(from1, to1), np.cross(from1, to1))

    # first alignment is kept by rotating around the first target
    moved = matrix @ from2
    if not is_parallel(moved, to2):
        angle = angle_between(moved, to2)
        if not is_antiparallel(moved, to2) and not is_parallel(np.cross(moved, to2), to1):
            angle = -angle
        matrix = rotation_matrix(angle, to1) @ matrix

    if not (is_parallel(matrix @ from1, to1) and is_parallel(matrix @ from2, to2)):
        raise InvariantError(f'Faces {tuple(from_faces)} can not be rotated onto {tuple(to_faces)}')
    return matrix


def get_euler_angles(m : np.ndarray) -> typing.Tuple[float, float, float]:
    """
    Euler angles of a rotation matrix. Rotations are applied around x, then y, then z axes of space.

    Parameters
    ----------
    `m` : np.ndarray
        3x3 rotation matrix

    Returns
    -------
    `angles` : Tuple[float, float, float]
        angles around x, y and z axes of space in radians
    """
    if eq(m[2, 0], 1.0):
        x = 0.0
        y = -np.pi / 2
        z = np.arctan2(-m[0, 1], m[1, 1])
    elif eq(m[2, 0], -1.0):
        x = 0.0
        y = np.pi / 2
        z = np.arctan2(-m[0, 1], m[1, 1])
    else:
        x = np.arctan2(m[2, 1], m[2, 2])
        y = np.arctan2(-m[2, 0], np.sqrt(m[2, 1]**2 + m[2, 2]**2))
        z = np.arctan2(m[1, 0], m[0, 0])
    return float(x), float(y), float(z)


def get_rotation_from_faces(from_faces : typing.Sequence[Face], to_faces : typing.Sequence[Face]) -> typing.Tuple[float, float, float]:
    """
    Euler angles of the rotation which moves two faces onto two target places, see `get_euler_angles`
    """
    return get_euler_angles(get_rotation_matrix_from_faces(from_faces, to_faces))


def _quarter_turns(angle : float) -> int:
    return int(np.rint(angle / np.pi * 2))


def get_notation_from_angles(angles : typing.Tuple[float, float, float]) -> Notation:
    """
    Notation of the whole cube rotations composing a rotation given by Euler angles

    Parameters
    ----------
    `angles` : Tuple[float, float, float]
        angles around x, y and z axes of space, multiples of pi/2

    Returns
    -------
    `notation` : Notation
        up to three rotations separated by spaces, empty string for identity
    """
    x, y, z = angles
    # space y axis is the B face and space z axis is the U face
    turns = (
        ('x', -_quarter_turns(x)),
        ('z',  _quarter_turns(y)),
        ('y', -_quarter_turns(z)),
    )
    notations = []
    for rotation_face, n in turns:
        if n % 4 != 0:
            notations.append(get_notation(rotation_face, (n + 5) % 4 - 1))
    return ' '.join(notations)


def get_notation_from_matrix(matrix : np.ndarray) -> Notation:
    """
    Notation of the whole cube rotations composing a rotation matrix, see `get_notation_from_angles`
    """
    return get_notation_from_angles(get_euler_angles(matrix))


def get_rotation_notation_from_faces(from_faces : typing.Sequence[Face], to_faces : typing.Sequence[Face]) -> Notation:
    """
    Notation of the whole cube rotations which move two faces onto two target places

    Parameters
    ----------
    `from_faces` : Sequence[Face]
        two faces to move
    `to_faces` : Sequence[Face]
        two target places

    Returns
    -------
    `notation` : Notation
        rotations in order x, z, y separated by spaces, empty string if nothing has to be rotated
    """
    return get_notation_from_angles(get_rotation_from_faces(from_faces, to_faces))


def nearest_face(vector : np.ndarray) -> Face:
    """
    Face whose vector is the nearest to the given one, the first in label order on ties
    """
    return min(FACES, key=lambda candidate: np.linalg.norm(face_vector(candidate) - vector))


def get_relative_face_from_faces(face : Face, from_faces : typing.Sequence[Face], to_faces : typing.Sequence[Face]) -> Face:
    """
    Where a face ends up after the rotation which moves two faces onto two target places
    """
    return nearest_face(get_rotation_matrix_from_faces(from_faces, to_faces) @ face_vector(face))


def get_matrix_from_rotation(rotation_face : RotationFace, amount : int) -> np.ndarray:
    """
    Matrix of a whole cube rotation

    Parameters
    ----------
    `rotation_face` : RotationFace
        x, y or z
    `amount` : int
        amount of clockwise quarter turns, negative for counter-clockwise

    Returns
    -------
    `matrix` : np.ndarray
        3x3 rotation matrix
    """
    if rotation_face not in ROTATION_FACES:
        raise InvariantError(f'Unknown rotation {rotation_face!r}, expected one of {tuple(ROTATION_FACES)}')
    return rotation_matrix(-np.pi * amount / 2, face_vector(ROTATION_FACES[rotation_face]))


def get_matrix_from_notation(notation : Notation) -> np.ndarray:
    """
    Matrix of a sequence of whole cube rotations, e.g. "x y2 z'"
    """
    matrix = np.eye(3)
    for move in split_moves(notation):
        matrix = get_matrix_from_rotation(move.face, move.amount) @ matrix
    return matrix
