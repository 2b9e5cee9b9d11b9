import typing

from errors     import InvariantError
from cubetyping import Face
from defaults   import FACES, CORNERS, EDGES, FACE_PIECES_ORDER

IndexedPiece = typing.Tuple[int, str]


class FacePieces(typing.NamedTuple):
    """
    Pieces of a face in clockwise order as pairs (index, label). Corner i lies between edges i and i+1.
    """
    edges   : typing.Tuple[IndexedPiece, ...]
    corners : typing.Tuple[IndexedPiece, ...]


class F2LPair(typing.NamedTuple):
    """
    Corner of a face and the middle layer edge which is solved together with it
    """
    corner       : str
    corner_index : int
    edge         : str
    edge_index   : int


def _check_face(face : Face):
    if face not in FACES:
        raise InvariantError(f'Unknown face {face!r}, expected one of {FACES}')


def _build_face_pieces(face : Face) -> FacePieces:
    edges, corners = FACE_PIECES_ORDER[face]
    return FacePieces(
        edges   = tuple((EDGES.index(label),   label) for label in edges),
        corners = tuple((CORNERS.index(label), label) for label in corners),
    )


def _build_f2l_pairs(face : Face) -> typing.Tuple[F2LPair, ...]:
    pairs = []
    for corner_index, corner in enumerate(CORNERS):
        if face not in corner:
            continue
        letters = set(corner) - {face}
        edge_index, edge = next((i, edge) for i, edge in enumerate(EDGES) if set(edge) == letters)
        pairs.append(F2LPair(corner, corner_index, edge, edge_index))
    return tuple(pairs)


FACE_PIECES = {face : _build_face_pieces(face) for face in FACES}
CROSS_EDGES = {face : tuple((i, edge) for i, edge in enumerate(EDGES) if face in edge) for face in FACES}
F2L_PAIRS   = {face : _build_f2l_pairs(face) for face in FACES}


def get_face_pieces(face : Face) -> FacePieces:
    """
    Edges and corners of a face in clockwise order

    Parameters
    ----------
    `face` : Face
        face label

    Returns
    -------
    `face_pieces` : FacePieces
        4 edges and 4 corners as pairs (index, label)
    """
    _check_face(face)
    return FACE_PIECES[face]


def get_cross_edges(face : Face) -> typing.Tuple[IndexedPiece, ...]:
    """
    Edges which have a sticker of the face, as pairs (index, label)
    """
    _check_face(face)
    return CROSS_EDGES[face]


def get_f2l_pairs(face : Face) -> typing.Tuple[F2LPair, ...]:
    """
    Corner and edge pairs which are solved after the cross of the face

    Parameters
    ----------
    `face` : Face
        face of the cross

    Returns
    -------
    `pairs` : Tuple[F2LPair, ...]
        4 pairs, each one is a corner of the face and the edge next to it which does not touch the face
    """
    _check_face(face)
    return F2L_PAIRS[face]
