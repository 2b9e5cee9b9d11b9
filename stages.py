import typing

from functools import lru_cache

from yparams    import YParams
from errors     import InvariantError
from cubetyping import Face, CubeLike, FaceOrientation, StagesData
from pieces     import get_face_pieces, get_cross_edges, get_f2l_pairs
from faces      import get_opposite_face
from utils      import rotate_right
from defaults   import (
    FACES, CORNERS, EDGES,
    MODE_CFOP, MODE_ROUX, MODES, STAGE_SOLVED, STAGE_UNKNOWN,
    CFOP_STAGES, ROUX_STAGES, F2L_STAGES,
    PLL_SKIP, CLL_SKIP, EO_SKIP,
    DEFAULT_STAGES_PATH,
)


class CaseMatch(typing.NamedTuple):
    """
    Catalog case found for a last layer state.

    `index` - position of the case in the catalog, `direction` - amount of right rotations of
    the state, `shift` - amount added to permutation values (PLL, CLL only),
    `is_edge_oriented` - whether edges of the state are already oriented (OLL only).
    """
    index            : int
    name             : str
    direction        : int
    shift            : typing.Optional[int]  = None
    is_edge_oriented : typing.Optional[bool] = None


class RouxBlock(typing.NamedTuple):
    side             : Face
    bottom           : Face
    bottom_direction : Face


class StageResult(typing.NamedTuple):
    """
    Result of a stage check. Only `result` is always set, other fields are filled
    with whatever was computed on the way to the answer.
    """
    result           : bool
    solved_pairs     : typing.Tuple[str, ...]  = ()
    cross            : typing.Optional[Face]   = None
    oll              : typing.Optional[CaseMatch] = None
    pll              : typing.Optional[CaseMatch] = None
    roux_block       : typing.Optional[RouxBlock] = None
    bottom_direction : typing.Optional[Face]   = None
    cll              : typing.Optional[CaseMatch] = None
    lseo             : typing.Optional[CaseMatch] = None


def _default_catalogs(catalogs):
    if catalogs is not None:
        return catalogs
    # catalogs are derived from stage projections, so they are imported lazily
    from catalogs import load_catalogs
    return load_catalogs()


@lru_cache(maxsize=None)
def load_stages_data(path : str = DEFAULT_STAGES_PATH) -> StagesData:
    """
    Load order of stages of every solving method

    Parameters
    ----------
    `path` : str, optional
        path to yaml file, each method maps to a list of {id, name} where the first entry is reserved

    Returns
    -------
    `stages_data` : StagesData
        stages of every method
    """
    params = YParams(path)
    for mode in MODES:
        if mode not in params.kw:
            raise InvariantError(f'Stages of method {mode!r} are missing in {path}')
        stages = params.kw[mode]
        if not stages or stages[0].get('id') != STAGE_UNKNOWN:
            raise InvariantError(f'Stages of method {mode!r} must start with the {STAGE_UNKNOWN!r} entry')
        if len(stages) < 2:
            raise InvariantError(f'Method {mode!r} has no stages after the {STAGE_UNKNOWN!r} entry')
    return params.kw


def get_next_stage(stage : str, stages_data : StagesData = None) -> str:
    """
    Stage which follows the given one, 'solved' after the last stage of a method

    Parameters
    ----------
    `stage` : str
        stage id
    `stages_data` : StagesData, optional
        stages of every method, default ones are loaded if not given

    Returns
    -------
    `next_stage` : str
        id of the next stage
    """
    stages_data = stages_data if stages_data is not None else load_stages_data()
    for stages in stages_data.values():
        # first entry of each method is reserved for the unknown stage
        for index, stage_data in enumerate(stages):
            if index == 0:
                continue
            if stage_data['id'] == stage:
                if index == len(stages) - 1:
                    return STAGE_SOLVED
                return stages[index + 1]['id']
    raise InvariantError(f'Unknown stage {stage!r}')


def face_orientations(face : Face, cube : CubeLike, target_face : Face = None) -> typing.Tuple[FaceOrientation, FaceOrientation]:
    """
    Orientations of the `face` stickers of pieces which lie on `target_face`.
    0 means the sticker looks at `target_face`.

    Parameters
    ----------
    `face` : Face
        face whose stickers are looked for
    `cube` : CubeLike
        cube state
    `target_face` : Face, optional
        face whose pieces are examined, `face` itself by default

    Returns
    -------
    `co` : FaceOrientation
        4 corner orientations in clockwise order of `target_face`, None where the piece has no `face` sticker
    `eo` : FaceOrientation
        4 edge orientations, None where the piece has no `face` sticker
    """
    view   = target_face or face
    pieces = get_face_pieces(view)

    co = []
    for corner_index, corner in pieces.corners:
        label = CORNERS[cube.cp[corner_index]]
        if face not in label:
            co.append(None)
            continue
        co.append((3 + label.index(face) - corner.index(view) + cube.co[corner_index]) % 3)

    eo = []
    for edge_index, edge in pieces.edges:
        label = EDGES[cube.ep[edge_index]]
        if face not in label:
            eo.append(None)
            continue
        eo.append((2 + label.index(face) - edge.index(view) + cube.eo[edge_index]) % 2)

    return co, eo


def face_permutations(face : Face, cube : CubeLike, target_face : Face = None) -> typing.Tuple[FaceOrientation, FaceOrientation]:
    """
    For each piece position of `target_face`: the clockwise index among the pieces of `face`
    of the piece lying there, None if the piece does not belong to `face`

    Returns
    -------
    `cp` : FaceOrientation
        4 corner indices
    `ep` : FaceOrientation
        4 edge indices
    """
    view_pieces = get_face_pieces(target_face or face)
    face_pieces = get_face_pieces(face)
    face_corners = [corner_index for corner_index, _ in face_pieces.corners]
    face_edges   = [edge_index   for edge_index,   _ in face_pieces.edges]

    cp = [face_corners.index(cube.cp[i]) if cube.cp[i] in face_corners else None for i, _ in view_pieces.corners]
    ep = [face_edges.index(cube.ep[i])   if cube.ep[i] in face_edges   else None for i, _ in view_pieces.edges]
    return cp, ep


def merge_orientations(primary : FaceOrientation, fallback : FaceOrientation) -> FaceOrientation:
    """
    Take readings of `primary` and fill its absent ones from `fallback`
    """
    return [value if value is not None else other for value, other in zip(primary, fallback)]


def _shift(values : FaceOrientation, shift : int) -> typing.List[typing.Optional[int]]:
    return [None if value is None else (value + shift) % 4 for value in values]


def _is_crossed(cube : CubeLike, face : Face) -> bool:
    return all(cube.eo[edge_index] == 0 and cube.ep[edge_index] == edge_index for edge_index, _ in get_cross_edges(face))


def find_cross(cube : CubeLike) -> typing.Optional[Face]:
    """
    First face (in label order) whose cross edges are solved, None if there is no such face
    """
    for face in FACES:
        if _is_crossed(cube, face):
            return face
    return None


def get_oll(co : FaceOrientation, eo : FaceOrientation, catalog : typing.Sequence) -> CaseMatch:
    """
    Find OLL case of the last layer

    Parameters
    ----------
    `co` : FaceOrientation
        corner orientations of the last layer
    `eo` : FaceOrientation
        edge orientations of the last layer
    `catalog` : Sequence[Case]
        OLL cases, pattern of each case is co + eo

    Returns
    -------
    `oll` : CaseMatch
        first matching case and the amount of right rotations of the state
    """
    for direction in range(4):
        rotated_co = rotate_right(co, direction)
        rotated_eo = rotate_right(eo, direction)
        pattern    = [*rotated_co, *rotated_eo]
        for index, case in enumerate(catalog):
            if list(case.pattern) == pattern:
                return CaseMatch(
                    index, case.name, direction,
                    is_edge_oriented=all(orientation == 0 for orientation in rotated_eo),
                )
    raise InvariantError(f'No OLL case matches orientations co={co} eo={eo}')


def get_pll(cp : FaceOrientation, ep : FaceOrientation, catalog : typing.Sequence) -> CaseMatch:
    """
    Find PLL case of the last layer

    Parameters
    ----------
    `cp` : FaceOrientation
        corner permutation of the last layer
    `ep` : FaceOrientation
        edge permutation of the last layer
    `catalog` : Sequence[Case]
        PLL cases, pattern of each case is cp + ep

    Returns
    -------
    `pll` : CaseMatch
        first matching case, the amount of right rotations of the state and the shift of permutation values
    """
    for direction in range(4):
        rotated_cp = rotate_right(cp, direction)
        rotated_ep = rotate_right(ep, direction)
        for shift in range(4):
            pattern = [*_shift(rotated_cp, shift), *_shift(rotated_ep, shift)]
            for index, case in enumerate(catalog):
                if list(case.pattern) == pattern:
                    return CaseMatch(index, case.name, direction, shift=shift)
    raise InvariantError(f'No PLL case matches permutations cp={cp} ep={ep}')


def get_cll(cp : FaceOrientation, co : FaceOrientation, catalog : typing.Sequence) -> CaseMatch:
    """
    Find CLL case of the top layer corners, pattern of each catalog case is cp + co
    """
    for direction in range(4):
        rotated_cp = rotate_right(cp, direction)
        rotated_co = rotate_right(co, direction)
        for shift in range(4):
            pattern = [*_shift(rotated_cp, shift), *rotated_co]
            for index, case in enumerate(catalog):
                if list(case.pattern) == pattern:
                    return CaseMatch(index, case.name, direction, shift=shift)
    raise InvariantError(f'No CLL case matches cp={cp} co={co}')


def get_lseo(top_eo : FaceOrientation, bottom_eo : FaceOrientation, catalog : typing.Sequence) -> CaseMatch:
    """
    Find LSEO case of the last six edges

    Parameters
    ----------
    `top_eo` : FaceOrientation
        edge orientations of the top face
    `bottom_eo` : FaceOrientation
        edge orientations of the bottom face, only the amount of misoriented ones matters
    `catalog` : Sequence[Case]
        LSEO cases, pattern of each case is [amount of misoriented bottom edges, *top_eo]

    Returns
    -------
    `lseo` : CaseMatch
        first matching case and the amount of right rotations of the top face
    """
    # absent readings count as misoriented
    bottom_misorientations = sum(1 for orientation in bottom_eo if orientation != 0)
    for direction in range(4):
        pattern = [bottom_misorientations, *rotate_right(top_eo, direction)]
        for index, case in enumerate(catalog):
            if list(case.pattern) == pattern:
                return CaseMatch(index, case.name, direction)
    raise InvariantError(f'No LSEO case matches top_eo={top_eo} bottom_eo={bottom_eo}')


def is_cfop_stage_satisfied(cube : CubeLike, stage : str, cross : Face = None, catalogs = None) -> StageResult:
    """
    Check whether a CFOP stage is done

    Parameters
    ----------
    `cube` : CubeLike
        cube state
    `stage` : str
        one of cross, f2l1, f2l2, f2l3, f2l4, oll, pll, auf
    `cross` : Face, optional
        face of the cross, it is searched for if not given
    `catalogs` : Catalogs, optional
        case catalogs, default ones are loaded if not given

    Returns
    -------
    `result` : StageResult
        whether the stage is done, solved F2L pairs, the cross face and found OLL and PLL cases
    """
    if stage not in CFOP_STAGES:
        raise InvariantError(f'Unknown CFOP stage {stage!r}, expected one of {CFOP_STAGES}')

    if cross is None:
        cross = find_cross(cube)
        if cross is None:
            return StageResult(False)
    if not _is_crossed(cube, cross):
        return StageResult(False, cross=cross)
    if stage == 'cross':
        return StageResult(True, cross=cross)

    solved_pairs = tuple(
        pair.edge for pair in get_f2l_pairs(cross)
        if cube.co[pair.corner_index] == 0 and cube.cp[pair.corner_index] == pair.corner_index
        and cube.eo[pair.edge_index] == 0 and cube.ep[pair.edge_index] == pair.edge_index
    )

    if stage in F2L_STAGES:
        return StageResult(len(solved_pairs) >= F2L_STAGES[stage], solved_pairs=solved_pairs, cross=cross)
    if len(solved_pairs) != 4:
        return StageResult(False, solved_pairs=solved_pairs, cross=cross)

    catalogs = _default_catalogs(catalogs)
    last_layer = get_opposite_face(cross)
    co, eo = face_orientations(last_layer, cube)
    oll    = get_oll(co, eo, catalogs.olls)
    if stage == 'f2l4':
        return StageResult(True, solved_pairs=solved_pairs, cross=cross, oll=oll)

    if not all(orientation == 0 for orientation in [*co, *eo]):
        return StageResult(False, solved_pairs=solved_pairs, cross=cross, oll=oll)

    cp, ep = face_permutations(last_layer, cube)
    pll    = get_pll(cp, ep, catalogs.plls)
    if stage == 'oll':
        return StageResult(True, solved_pairs=solved_pairs, cross=cross, oll=oll, pll=pll)
    if stage == 'pll':
        return StageResult(pll.name == PLL_SKIP, solved_pairs=solved_pairs, cross=cross, oll=oll, pll=pll)
    return StageResult(cube.is_solved(), solved_pairs=solved_pairs, cross=cross, oll=oll, pll=pll)


def find_roux_block(cube : CubeLike) -> typing.Optional[RouxBlock]:
    """
    Find a solved 1x2x3 block

    Parameters
    ----------
    `cube` : CubeLike
        cube state

    Returns
    -------
    `block` : RouxBlock | None
        face the block lies on, the face of its bottom stickers and the direction its bottom looks at.
        None if there is no solved block
    """
    for side in FACES:
        co, eo = face_orientations(side, cube)
        cp, ep = face_permutations(side, cube)

        # 2x2 square at each corner of the side
        squares = [
            co[i] == 0 and eo[i] == 0 and eo[(i + 1) % 4] == 0
            and cp[i] is not None and cp[i] == ep[i] and (cp[i] + 1) % 4 == ep[(i + 1) % 4]
            for i in range(4)
        ]
        # two adjacent squares make the block
        start = next((i for i in range(4) if squares[i] and squares[(i + 1) % 4]), None)
        if start is None:
            continue

        edges = get_face_pieces(side).edges
        _, central_edge     = edges[ep[(start + 1) % 4]]
        _, central_position = edges[(start + 1) % 4]
        bottom           = next(face for face in central_edge     if face != side)
        bottom_direction = next(face for face in central_position if face != side)
        return RouxBlock(side, bottom, bottom_direction)
    return None


def is_roux_block_satisfied(cube : CubeLike, face : Face, bottom : Face, bottom_direction : Face) -> bool:
    """
    Check the 1x2x3 block on a face

    Parameters
    ----------
    `cube` : CubeLike
        cube state
    `face` : Face
        face the block lies on
    `bottom` : Face
        face of the bottom stickers of the block
    `bottom_direction` : Face
        direction the bottom of the block is expected to look at

    Returns
    -------
    `satisfied` : bool
        whether the block is solved
    """
    if bottom_direction == face or bottom_direction == get_opposite_face(face):
        return False

    co, eo = face_orientations(face, cube)
    cp, ep = face_permutations(face, cube)

    edges = get_face_pieces(face).edges
    bottom_index    = next((i for i, (_, edge) in enumerate(edges) if bottom in edge), None)
    direction_index = next((i for i, (_, edge) in enumerate(edges) if bottom_direction in edge), None)
    if bottom_index is None or direction_index is None:
        return False

    for offset in (3, 0, 1):
        position = (direction_index + offset) % 4
        if eo[position] != 0 or ep[position] != (bottom_index + offset) % 4:
            return False
    for offset in (3, 0):
        position = (direction_index + offset) % 4
        if co[position] != 0 or cp[position] != (bottom_index + offset) % 4:
            return False
    return True


def is_roux_stage_satisfied(cube : CubeLike, stage : str, roux_block : RouxBlock = None, catalogs = None) -> StageResult:
    """
    Check whether a Roux stage is done

    Parameters
    ----------
    `cube` : CubeLike
        cube state
    `stage` : str
        one of block1, block2, cll, lseo, lsep
    `roux_block` : RouxBlock, optional
        the first block, it is searched for if not given
    `catalogs` : Catalogs, optional
        case catalogs, default ones are loaded if not given

    Returns
    -------
    `result` : StageResult
        whether the stage is done, the block, its bottom direction and found CLL and LSEO cases
    """
    if stage not in ROUX_STAGES:
        raise InvariantError(f'Unknown Roux stage {stage!r}, expected one of {ROUX_STAGES}')

    if roux_block is None:
        roux_block = find_roux_block(cube)
        if roux_block is None:
            return StageResult(False)

    side, bottom = roux_block.side, roux_block.bottom
    anti_side = get_opposite_face(side)
    top       = get_opposite_face(bottom)

    bottom_direction = next((face for face in FACES if is_roux_block_satisfied(cube, side, bottom, face)), None)
    if bottom_direction is None:
        return StageResult(False, roux_block=roux_block)
    if stage == 'block1':
        return StageResult(True, roux_block=roux_block, bottom_direction=bottom_direction)

    if not is_roux_block_satisfied(cube, anti_side, bottom, bottom_direction):
        return StageResult(False, roux_block=roux_block, bottom_direction=bottom_direction)

    catalogs = _default_catalogs(catalogs)
    top_direction = get_opposite_face(bottom_direction)
    co, top_eo_by_top = face_orientations(top, cube, top_direction)
    cp, _             = face_permutations(top, cube, top_direction)
    cll = get_cll(cp, co, catalogs.clls)
    if stage == 'block2':
        return StageResult(True, roux_block=roux_block, bottom_direction=bottom_direction, cll=cll)
    if cll.name != CLL_SKIP:
        return StageResult(False, roux_block=roux_block, bottom_direction=bottom_direction, cll=cll)

    _, top_eo_by_bottom    = face_orientations(bottom, cube, top_direction)
    _, bottom_eo_by_top    = face_orientations(top,    cube, bottom_direction)
    _, bottom_eo_by_bottom = face_orientations(bottom, cube, bottom_direction)
    top_eo    = merge_orientations(top_eo_by_top,    top_eo_by_bottom)
    bottom_eo = merge_orientations(bottom_eo_by_top, bottom_eo_by_bottom)

    # orientation of the M slice centers is not taken into account
    lseo = get_lseo(top_eo, bottom_eo, catalogs.lseos)
    if stage == 'cll':
        return StageResult(True, roux_block=roux_block, bottom_direction=bottom_direction, cll=cll, lseo=lseo)

    is_lseo_satisfied = lseo.name == EO_SKIP and bottom in (bottom_direction, top_direction)
    if stage == 'lseo':
        return StageResult(is_lseo_satisfied, roux_block=roux_block, bottom_direction=bottom_direction, cll=cll, lseo=lseo)
    return StageResult(cube.is_solved(), roux_block=roux_block, bottom_direction=bottom_direction, cll=cll, lseo=lseo)


def is_stage_satisfied(mode : str, cube : CubeLike, stage : str, cross : Face = None, roux_block : RouxBlock = None, catalogs = None) -> StageResult:
    """
    Check whether a stage of a solving method is done, see `is_cfop_stage_satisfied` and `is_roux_stage_satisfied`
    """
    if mode == MODE_CFOP:
        return is_cfop_stage_satisfied(cube, stage, cross=cross, catalogs=catalogs)
    if mode == MODE_ROUX:
        return is_roux_stage_satisfied(cube, stage, roux_block=roux_block, catalogs=catalogs)
    raise InvariantError(f'Unknown solving method {mode!r}, expected one of {MODES}')
