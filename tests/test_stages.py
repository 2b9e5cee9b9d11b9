import pytest

from errors   import InvariantError
from catalogs import Case
from stages   import (
    RouxBlock, face_orientations, face_permutations, merge_orientations, find_cross,
    get_oll, get_pll, get_cll, get_lseo, is_cfop_stage_satisfied, find_roux_block,
    is_roux_block_satisfied, is_roux_stage_satisfied, is_stage_satisfied,
    get_next_stage, load_stages_data,
)

CFOP_STAGES = ('cross', 'f2l1', 'f2l2', 'f2l3', 'f2l4', 'oll', 'pll', 'auf')
ROUX_STAGES = ('block1', 'block2', 'cll', 'lseo', 'lsep')


def test_projections_of_solved_cube(solved_snapshot):
    assert face_orientations('U', solved_snapshot) == ([0]*4, [0]*4)
    assert face_permutations('U', solved_snapshot) == ([0, 1, 2, 3], [0, 1, 2, 3])
    # D pieces have no U stickers
    assert face_orientations('U', solved_snapshot, 'D') == ([None]*4, [None]*4)
    assert face_permutations('U', solved_snapshot, 'D') == ([None]*4, [None]*4)


def test_projections_after_u_turn(u_turn_snapshot):
    assert face_orientations('U', u_turn_snapshot) == ([0]*4, [0]*4)
    assert face_permutations('U', u_turn_snapshot) == ([3, 0, 1, 2], [3, 0, 1, 2])


def test_merge_orientations():
    assert merge_orientations([None, 1, None, 0], [0, 0, 1, 1]) == [0, 1, 1, 0]


def test_find_cross(solved_snapshot, snapshot_factory):
    assert find_cross(solved_snapshot) == 'U'
    # flipped UR edge breaks the U and R crosses
    flipped = snapshot_factory(eo=(1,) + (0,)*11)
    assert find_cross(flipped) == 'F'


def test_get_oll_rotates_state():
    catalog = [Case('Skip', '', [0]*8), Case('Case', '', [1, 1, 1, 0, 0, 0, 0, 0])]
    oll = get_oll([0, 1, 1, 1], [0, 0, 0, 0], catalog)
    assert (oll.index, oll.name, oll.direction, oll.is_edge_oriented) == (1, 'Case', 3, True)


def test_get_oll_reports_edge_orientation():
    catalog = [Case('Line', '', [0, 0, 0, 0, 1, 0, 1, 0])]
    oll = get_oll([0]*4, [0, 1, 0, 1], catalog)
    assert oll.direction == 1
    assert oll.is_edge_oriented is False


def test_get_pll_shifts_values(skip_catalogs):
    pll = get_pll([3, 0, 1, 2], [3, 0, 1, 2], skip_catalogs.plls)
    assert (pll.name, pll.direction, pll.shift) == ('PLL Skip', 0, 1)


def test_get_cll(skip_catalogs):
    cll = get_cll([2, 3, 0, 1], [0]*4, skip_catalogs.clls)
    assert (cll.name, cll.direction, cll.shift) == ('CLL Skip', 0, 2)


def test_get_lseo_counts_bottom_misorientations():
    catalog = [Case('One', None, [1, 1, 0, 0, 0])]
    lseo = get_lseo([0, 0, 1, 0], [1, 0, 0, 0], catalog)
    assert (lseo.name, lseo.direction) == ('One', 2)
    # absent readings count as misoriented
    lseo = get_lseo([1, 0, 0, 0], [0, None, 0, 0], catalog)
    assert lseo.direction == 0


def test_unmatched_case_fails_fast(skip_catalogs):
    with pytest.raises(InvariantError):
        get_oll([1, 1, 1, 0], [0]*4, skip_catalogs.olls)
    with pytest.raises(InvariantError):
        get_pll([1, 0, 2, 3], [0, 1, 2, 3], skip_catalogs.plls)
    with pytest.raises(InvariantError):
        get_lseo([1, 1, 0, 0], [0]*4, skip_catalogs.lseos)


@pytest.mark.parametrize('stage', CFOP_STAGES)
def test_solved_cube_satisfies_cfop_stages(solved_snapshot, skip_catalogs, stage):
    result = is_cfop_stage_satisfied(solved_snapshot, stage, catalogs=skip_catalogs)
    assert result.result
    assert result.cross == 'U'


def test_cfop_stages_after_u_turn(u_turn_snapshot, skip_catalogs):
    result = is_cfop_stage_satisfied(u_turn_snapshot, 'f2l4', catalogs=skip_catalogs)
    assert result.result
    assert result.cross == 'D'
    assert len(result.solved_pairs) == 4
    assert result.oll.name == 'OLL Skip'

    result = is_cfop_stage_satisfied(u_turn_snapshot, 'pll', catalogs=skip_catalogs)
    assert result.result
    assert result.pll.shift == 1
    assert not is_cfop_stage_satisfied(u_turn_snapshot, 'auf', catalogs=skip_catalogs).result


def test_cfop_stages_with_broken_cross(snapshot_factory, skip_catalogs):
    # DR edge flipped
    state = snapshot_factory(eo=(0,)*4 + (1,) + (0,)*7)
    assert not is_cfop_stage_satisfied(state, 'cross', cross='D', catalogs=skip_catalogs).result
    assert is_cfop_stage_satisfied(state, 'cross', catalogs=skip_catalogs).cross == 'U'


def test_f2l_pair_counting(snapshot_factory, skip_catalogs):
    # FR and FL edges swapped, cross on D is intact
    state = snapshot_factory(ep=(0, 1, 2, 3, 4, 5, 6, 7, 9, 8, 10, 11))
    assert find_cross(state) == 'U'
    result = is_cfop_stage_satisfied(state, 'f2l2', cross='D', catalogs=skip_catalogs)
    assert result.result
    assert result.solved_pairs == ('BL', 'BR')
    assert not is_cfop_stage_satisfied(state, 'f2l3', cross='D', catalogs=skip_catalogs).result
    assert not is_cfop_stage_satisfied(state, 'f2l4', cross='D', catalogs=skip_catalogs).result


def test_unknown_stage_fails_fast(solved_snapshot, skip_catalogs):
    with pytest.raises(InvariantError):
        is_cfop_stage_satisfied(solved_snapshot, 'block1', catalogs=skip_catalogs)
    with pytest.raises(InvariantError):
        is_roux_stage_satisfied(solved_snapshot, 'oll', catalogs=skip_catalogs)
    with pytest.raises(InvariantError):
        is_stage_satisfied('zz', solved_snapshot, 'cross', catalogs=skip_catalogs)


def test_find_roux_block(solved_snapshot, u_turn_snapshot):
    assert find_roux_block(solved_snapshot) == RouxBlock('U', 'R', 'R')
    assert find_roux_block(u_turn_snapshot) == RouxBlock('U', 'B', 'R')


def test_roux_block(solved_snapshot):
    assert is_roux_block_satisfied(solved_snapshot, 'U', 'R', 'R')
    assert is_roux_block_satisfied(solved_snapshot, 'D', 'R', 'R')
    assert not is_roux_block_satisfied(solved_snapshot, 'U', 'R', 'U')
    assert not is_roux_block_satisfied(solved_snapshot, 'U', 'R', 'D')
    assert not is_roux_block_satisfied(solved_snapshot, 'U', 'R', 'F')


@pytest.mark.parametrize('stage', ROUX_STAGES)
def test_solved_cube_satisfies_roux_stages(solved_snapshot, skip_catalogs, stage):
    result = is_roux_stage_satisfied(solved_snapshot, stage, catalogs=skip_catalogs)
    assert result.result
    assert result.roux_block == RouxBlock('U', 'R', 'R')
    assert result.bottom_direction == 'R'


def test_roux_stages_after_u_turn(u_turn_snapshot, skip_catalogs):
    assert is_roux_stage_satisfied(u_turn_snapshot, 'block1', catalogs=skip_catalogs).result
    result = is_roux_stage_satisfied(u_turn_snapshot, 'block2', catalogs=skip_catalogs)
    assert not result.result
    assert result.bottom_direction == 'R'


def test_roux_stages_with_given_block(solved_snapshot, skip_catalogs):
    block  = RouxBlock('U', 'B', 'R')
    result = is_stage_satisfied('roux', solved_snapshot, 'lsep', roux_block=block, catalogs=skip_catalogs)
    assert result.result
    assert result.bottom_direction == 'B'
    assert result.cll.name == 'CLL Skip'
    assert result.lseo.name == 'EO Skip'


def test_get_next_stage(stages_data):
    assert get_next_stage('cross', stages_data) == 'f2l1'
    assert get_next_stage('auf', stages_data) == 'solved'
    assert get_next_stage('block1', stages_data) == 'block2'
    assert get_next_stage('lsep', stages_data) == 'solved'
    for stage in ('unknown', 'bogus'):
        with pytest.raises(InvariantError):
            get_next_stage(stage, stages_data)


def test_next_stage_walks_configured_order(stages_data):
    for mode, first in (('cfop', 'cross'), ('roux', 'block1')):
        stage, visited = first, [first]
        while stage != 'solved':
            stage = get_next_stage(stage, stages_data)
            visited.append(stage)
        assert visited[:-1] == [data['id'] for data in stages_data[mode][1:]]


def test_default_stages_data(stages_data):
    assert load_stages_data() == stages_data


def test_stages_data_needs_reserved_entry(tmp_path):
    path = tmp_path / 'stages.yaml'
    path.write_text("cfop:\n  - {id: cross, name: Cross}\nroux:\n  - {id: unknown, name: Unknown}\n")
    with pytest.raises(InvariantError):
        load_stages_data(str(path))

    path = tmp_path / 'no_stages.yaml'
    path.write_text("cfop:\n  - {id: unknown, name: Unknown}\nroux:\n  - {id: unknown, name: Unknown}\n  - {id: block1, name: First Block}\n")
    with pytest.raises(InvariantError):
        load_stages_data(str(path))

    path = tmp_path / 'roux_only.yaml'
    path.write_text("roux:\n  - {id: unknown, name: Unknown}\n")
    with pytest.raises(InvariantError):
        load_stages_data(str(path))
