import typing

import numpy as np

from numpy.typing import ArrayLike

from defaults import EPSILON


def eq(a : float, b : float) -> bool:
    """
    Compare two floats with EPSILON tolerance
    """
    return abs(a - b) <= EPSILON


def angle_between(a : ArrayLike, b : ArrayLike) -> float:
    """
    Angle between two non-zero vectors in radians

    Parameters
    ----------
    `a` : ArrayLike
        first vector
    `b` : ArrayLike
        second vector

    Returns
    -------
    `angle` : float
        angle in range [0, pi]
    """
    a, b = np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64)
    cos  = np.dot(a, b) / (np.linalg.norm(a) * np.linalg.norm(b))
    return float(np.arccos(np.clip(cos, -1.0, 1.0)))


def is_parallel(a : ArrayLike, b : ArrayLike) -> bool:
    """
    Whether two vectors point in the same direction
    """
    return eq(angle_between(a, b), 0.0)


def is_antiparallel(a : ArrayLike, b : ArrayLike) -> bool:
    """
    Whether two vectors point in opposite directions
    """
    return eq(angle_between(a, b), np.pi)


def is_perpendicular(a : ArrayLike, b : ArrayLike) -> bool:
    return eq(float(np.dot(a, b)), 0.0)


def rotation_matrix(angle : float, axis : ArrayLike) -> np.ndarray:
    """
    Matrix of the counter-clockwise rotation by angle around axis (right hand rule).
    Rodrigues' rotation formula is used.

    Parameters
    ----------
    `angle` : float
        angle of rotation in radians
    `axis` : ArrayLike
        non-zero vector of rotation axis, it doesn't have to be normalized

    Returns
    -------
    `matrix` : np.ndarray
        3x3 rotation matrix
    """
    axis = np.asarray(axis, dtype=np.float64)
    k    = axis / np.linalg.norm(axis)
    K    = np.array([
        [0.0,   -k[2],  k[1]],
        [k[2],   0.0,  -k[0]],
        [-k[1],  k[0],  0.0],
    ])
    return np.eye(3) + np.sin(angle) * K + (1.0 - np.cos(angle)) * (K @ K)


def rotate_right(values : typing.Sequence, times : int) -> list:
    """
    Cyclic shift of values to the right. The input sequence is left untouched.

    Parameters
    ----------
    `values` : Sequence
        values to shift
    `times` : int
        amount of shifts

    Returns
    -------
    `shifted` : list
        new list where shifted[i] == values[i - times]
    """
    n = len(values)
    return [values[(i - times) % n] for i in range(n)]
