import pytest

from ecube      import ECube
from errors     import InvariantError
from tracker    import SolveTracker, Split
from cubetyping import Orientation
from defaults   import STAGE_SOLVED


def test_cfop_last_layer_adjustment():
    tracker = SolveTracker('cfop')
    assert tracker.stage == 'cross'

    assert tracker.apply('U') == 'auf'
    assert [split.stage for split in tracker.splits] == ['cross', 'f2l1', 'f2l2', 'f2l3', 'f2l4', 'oll', 'pll']
    assert all(split.move_count == 1 for split in tracker.splits)
    assert tracker.cross == 'D'
    assert tracker.last_result.pll.name == 'PLL Skip'

    assert tracker.apply("U'") == STAGE_SOLVED
    assert tracker.is_finished
    assert tracker.splits[-1] == Split('auf', 2)
    assert tracker.moves == ['U', "U'"]


def test_cfop_stays_on_broken_cross():
    # no face keeps its cross edges after R U, D does not restore any of them
    tracker = SolveTracker('cfop', cube=ECube.get_default_cube().turn('R U'))
    assert tracker.apply('D') == 'cross'
    assert tracker.last_result.cross is None
    assert tracker.splits == []
    assert not tracker.is_finished


def test_roux_top_layer_adjustment():
    tracker = SolveTracker('roux')
    assert tracker.stage == 'block1'

    assert tracker.apply('U') == 'block2'
    assert [split.stage for split in tracker.splits] == ['block1']
    assert tracker.roux_block is not None

    assert tracker.apply("U'") == STAGE_SOLVED
    assert [split.stage for split in tracker.splits] == ['block1', 'block2', 'cll', 'lseo', 'lsep']


def test_tracked_cube_is_turned():
    cube    = ECube.get_default_cube()
    tracker = SolveTracker('cfop', cube=cube)
    tracker.apply(['R', 'U'])
    assert cube == ECube.get_default_cube().turn('R U')


def test_move_events():
    tracker = SolveTracker('cfop')
    assert not tracker.on_move_event({'latest_move': {'family': 'R'}})
    assert not tracker.on_move_event({'state': 'idle'})
    assert not tracker.on_move_event(None)
    assert not tracker.on_move_event({'latest_move': {'family': '', 'amount': 1}})
    assert not tracker.on_move_event({'latest_move': {'family': 'Q', 'amount': 1}})
    assert tracker.moves == []

    assert tracker.on_move_event({'latest_move': {'family': 'U', 'amount': 1}})
    assert tracker.on_move_event({'latest_move': {'family': 'U', 'amount': -1}})
    assert tracker.moves == ['U', "U'"]
    assert tracker.is_finished


@pytest.mark.parametrize('turns, orientation', [
    ('x',      Orientation('L', 'B')),
    ("x'",     Orientation('L', 'F')),
    ('r',      Orientation('L', 'B')),
    ('M',      Orientation('L', 'F')),
    ('y',      Orientation('F', 'D')),
    ('y2',     Orientation('R', 'D')),
    ('y x',    Orientation('F', 'L')),
    ("R U R'", Orientation('L', 'D')),
])
def test_orientation_follows_rotations(turns, orientation):
    tracker = SolveTracker('cfop')
    tracker.apply(turns)
    assert tracker.orientation == orientation


def test_unknown_mode():
    with pytest.raises(InvariantError):
        SolveTracker('petrus')
