import typing

import numpy as np

from numpy.typing import ArrayLike

from errors     import InvariantError
from cubetyping import Face, RotationFace
from defaults   import FACES, FACE_VECTORS, ROTATION_FACES, EPSILON


def face_vector(face : Face) -> np.ndarray:
    """
    Unit vector of a face

    Parameters
    ----------
    `face` : Face
        face label

    Returns
    -------
    `vector` : np.ndarray
        unit vector of the face as float array
    """
    if face not in FACE_VECTORS:
        raise InvariantError(f'Unknown face {face!r}, expected one of {FACES}')
    return np.array(FACE_VECTORS[face], dtype=np.float64)


def _normalize_elements(vector : ArrayLike) -> typing.Tuple[int, ...]:
    """
    Round elements of vector which has to be integral up to EPSILON
    """
    rounded = []
    for element in np.asarray(vector, dtype=np.float64):
        if abs(element - round(element)) > EPSILON:
            raise InvariantError(f'Vector {vector} is not aligned with the cube axes')
        rounded.append(int(round(element)))
    return tuple(rounded)


def vector_to_face(vector : ArrayLike) -> Face:
    """
    Get face whose unit vector is the given vector

    Parameters
    ----------
    `vector` : ArrayLike
        3-vector with integral elements up to EPSILON

    Returns
    -------
    `face` : Face
        face label
    """
    elements = _normalize_elements(vector)
    for face, fvector in FACE_VECTORS.items():
        if fvector == elements:
            return face
    raise InvariantError(f'Vector {vector} does not point to a face')


def vector_to_rotation(vector : ArrayLike) -> typing.Tuple[RotationFace, int]:
    """
    Get the whole cube rotation whose axis is the given vector.

    Parameters
    ----------
    `vector` : ArrayLike
        unit vector of one of the cube axes

    Returns
    -------
    `rotation_face` : RotationFace
        x, y or z
    `direction` : int
        1 if vector points the same way as the face of rotation, -1 if it points the opposite way
    """
    elements = _normalize_elements(vector)
    for rotation_face, face in ROTATION_FACES.items():
        if FACE_VECTORS[face] == elements:
            return rotation_face, 1
    inversed = tuple(-element for element in elements)
    for rotation_face, face in ROTATION_FACES.items():
        if FACE_VECTORS[face] == inversed:
            return rotation_face, -1
    raise InvariantError(f'Vector {vector} is not an axis of rotation')


def move_to_rotation(face : Face, amount : int) -> typing.Tuple[RotationFace, int]:
    """
    Express the axis of a face turn as whole cube rotation, e.g. L is around x axis with opposite amount

    Parameters
    ----------
    `face` : Face
        face of turn
    `amount` : int
        amount of quarter turns

    Returns
    -------
    `rotation_face` : RotationFace
        rotation around the same axis
    `amount` : int
        amount of quarter turns of the rotation
    """
    rotation_face, direction = vector_to_rotation(face_vector(face))
    return rotation_face, amount * direction


def _find_opposite_face(face : Face) -> Face:
    opposite = -face_vector(face)
    return vector_to_face(opposite)


OPPOSITE_FACES = {face : _find_opposite_face(face) for face in FACES}


def get_opposite_face(face : Face) -> Face:
    """
    Face on the other side of the cube
    """
    if face not in OPPOSITE_FACES:
        raise InvariantError(f'Unknown face {face!r}, expected one of {FACES}')
    return OPPOSITE_FACES[face]
