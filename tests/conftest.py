import pytest

from ecube    import CubeSnapshot
from catalogs import Case, Catalogs


def make_snapshot(co=None, eo=None, cp=None, ep=None) -> CubeSnapshot:
    """
    Cubie state which is solved except for the given parts
    """
    return CubeSnapshot(
        co=tuple(co) if co is not None else (0,)*8,
        eo=tuple(eo) if eo is not None else (0,)*12,
        cp=tuple(cp) if cp is not None else tuple(range(8)),
        ep=tuple(ep) if ep is not None else tuple(range(12)),
    )


@pytest.fixture
def solved_snapshot():
    return make_snapshot()


@pytest.fixture
def u_turn_snapshot():
    # state after a single U turn
    return make_snapshot(cp=(3, 0, 1, 2, 4, 5, 6, 7), ep=(3, 0, 1, 2, 4, 5, 6, 7, 8, 9, 10, 11))


@pytest.fixture
def skip_catalogs():
    return Catalogs(
        olls=(Case('OLL Skip', '', [0]*8),),
        plls=(Case('PLL Skip', '', [0, 1, 2, 3, 0, 1, 2, 3]),),
        clls=(Case('CLL Skip', '', [0, 1, 2, 3, 0, 0, 0, 0]),),
        lseos=(Case('EO Skip', None, [0, 0, 0, 0, 0]),),
    )


@pytest.fixture
def stages_data():
    return {
        'cfop': [
            {'id': 'unknown', 'name': 'Unknown'},
            {'id': 'cross', 'name': 'Cross'},
            {'id': 'f2l1', 'name': 'F2L 1'},
            {'id': 'f2l2', 'name': 'F2L 2'},
            {'id': 'f2l3', 'name': 'F2L 3'},
            {'id': 'f2l4', 'name': 'F2L 4'},
            {'id': 'oll', 'name': 'OLL'},
            {'id': 'pll', 'name': 'PLL'},
            {'id': 'auf', 'name': 'AUF'},
        ],
        'roux': [
            {'id': 'unknown', 'name': 'Unknown'},
            {'id': 'block1', 'name': 'First Block'},
            {'id': 'block2', 'name': 'Second Block'},
            {'id': 'cll', 'name': 'CMLL'},
            {'id': 'lseo', 'name': 'LSE Orientation'},
            {'id': 'lsep', 'name': 'LSE Permutation'},
        ],
    }


@pytest.fixture
def snapshot_factory():
    return make_snapshot
