import pytest

from itertools import permutations, product

from ecube    import ECube
from errors   import InvariantError
from notation import invert_moves
from stages   import face_orientations, face_permutations, get_oll, get_pll, get_cll, is_cfop_stage_satisfied
from catalogs import load_catalogs, derive_pattern, Catalogs
from defaults import OLL_SKIP, PLL_SKIP, CLL_SKIP, EO_SKIP


@pytest.fixture(scope='module')
def catalogs() -> Catalogs:
    return load_catalogs()


def _u_face(turns):
    snapshot = ECube.get_default_cube().turn(turns).snapshot()
    return face_orientations('U', snapshot), face_permutations('U', snapshot)


def test_catalog_sizes(catalogs):
    assert len(catalogs.olls)  == 58
    assert len(catalogs.plls)  == 22
    assert len(catalogs.clls)  == 45
    assert len(catalogs.lseos) == 10


def test_skip_cases_go_first(catalogs):
    assert catalogs.olls[0].name  == OLL_SKIP
    assert catalogs.plls[0].name  == PLL_SKIP
    assert catalogs.clls[0].name  == CLL_SKIP
    assert catalogs.lseos[0].name == EO_SKIP
    assert catalogs.olls[0].pattern == [0]*8
    assert catalogs.plls[0].pattern == [0, 1, 2, 3, 0, 1, 2, 3]
    assert catalogs.clls[0].pattern == [0, 1, 2, 3, 0, 0, 0, 0]
    assert catalogs.lseos[0].pattern == [0]*5


def test_catalogs_are_cached(catalogs):
    assert load_catalogs() is catalogs


def test_derive_pattern():
    assert derive_pattern('olls', '') == [0]*8
    assert derive_pattern('plls', '') == [0, 1, 2, 3, 0, 1, 2, 3]
    co, eo = derive_pattern('olls', "F R U R' U' F'")[:4], derive_pattern('olls', "F R U R' U' F'")[4:]
    assert sum(1 for orientation in eo if orientation) == 2
    assert any(co)
    with pytest.raises(InvariantError):
        derive_pattern('lseos', "M' U M")


def test_sune_is_recognised(catalogs):
    (co, eo), (cp, _) = _u_face("R U R' U R U2 R'")
    assert get_oll(co, eo, catalogs.olls).name == 'OLL 26'
    assert get_cll(cp, co, catalogs.clls).name == 'AS 1'

    (co, eo), _ = _u_face("R U2 R' U' R U' R'")
    assert get_oll(co, eo, catalogs.olls).name == 'OLL 27'


def test_t_perm_is_recognised(catalogs):
    _, (cp, ep) = _u_face("R U R' U' R' F R2 U' R' U' R U R' F'")
    match = get_pll(cp, ep, catalogs.plls)
    assert match.name == 'T'
    assert match.direction == 0 and match.shift == 0


def test_every_pll_is_recognised(catalogs):
    for case in catalogs.plls:
        _, (cp, ep) = _u_face(invert_moves(case.notation))
        assert get_pll(cp, ep, catalogs.plls).name == case.name


def _parity(permutation):
    return sum(1 for i in range(4) for j in range(i + 1, 4) if permutation[i] > permutation[j]) % 2


def test_every_last_layer_is_recognised(catalogs, snapshot_factory):
    """
    Every reachable state of the U layer above solved F2L matches an OLL and, once oriented, a PLL case
    """
    corner_twists = [co for co in product(range(3), repeat=4) if sum(co) % 3 == 0]
    edge_flips    = [eo for eo in product(range(2), repeat=4) if sum(eo) % 2 == 0]
    layer_permutations = [
        (cp, ep) for cp, ep in product(permutations(range(4)), repeat=2) if _parity(cp) == _parity(ep)
    ]
    checked = 0
    for co, eo in product(corner_twists, edge_flips):
        for cp, ep in layer_permutations:
            snapshot = snapshot_factory(
                co=(*co, 0, 0, 0, 0), eo=(*eo, *[0]*8),
                cp=(*cp, 4, 5, 6, 7), ep=(*ep, *range(4, 12)),
            )
            result = is_cfop_stage_satisfied(snapshot, 'oll', cross='D', catalogs=catalogs)
            assert result.oll is not None
            assert result.result == (not any(co) and not any(eo))
            if result.result:
                assert result.pll is not None
            checked += 1
    assert checked == 62208


def test_every_top_corner_state_is_recognised(catalogs, snapshot_factory):
    for cp in permutations(range(4)):
        for co in product(range(3), repeat=4):
            if sum(co) % 3:
                continue
            snapshot = snapshot_factory(co=(*co, 0, 0, 0, 0), cp=(*cp, 4, 5, 6, 7))
            (face_co, _), (face_cp, _) = face_orientations('U', snapshot), face_permutations('U', snapshot)
            assert get_cll(face_cp, face_co, catalogs.clls).name


def test_rotated_case_is_recognised(catalogs):
    # AUF keeps the case, the direction tells the rotation
    (co, eo), _ = _u_face("R U R' U R U2 R' U")
    match = get_oll(co, eo, catalogs.olls)
    assert match.name == 'OLL 26'
    assert match.direction != 0
    assert match.is_edge_oriented


def test_missing_skip_case(tmp_path):
    path = tmp_path / 'cases.yaml'
    path.write_text(
        "olls:\n  - [OLL 27, \"R U R' U R U2 R'\"]\n"
        "plls:\n  - [PLL Skip, '']\n"
        "clls:\n  - [CLL Skip, '']\n"
        "lseos:\n  - [EO Skip, null, [0, 0, 0, 0, 0]]\n"
    )
    with pytest.raises(InvariantError):
        load_catalogs(str(path))


def test_case_without_algorithm_and_pattern(tmp_path):
    path = tmp_path / 'cases.yaml'
    path.write_text(
        "olls:\n  - [OLL Skip, null]\n"
        "plls:\n  - [PLL Skip, '']\n"
        "clls:\n  - [CLL Skip, '']\n"
        "lseos:\n  - [EO Skip, null, [0, 0, 0, 0, 0]]\n"
    )
    with pytest.raises(InvariantError):
        load_catalogs(str(path))
