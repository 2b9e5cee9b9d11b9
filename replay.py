import argparse

from tqdm import tqdm

from ecube    import ECube
from logger   import Logger
from yparams  import YParams
from tracker  import SolveTracker
from catalogs import load_catalogs
from stages   import load_stages_data
from notation import split_moves, get_notation
from defaults import MODES, DEFAULT_CASES_PATH, DEFAULT_STAGES_PATH


def replay_solve(params_path : str) -> SolveTracker:
    """
    Replay a solve move by move and log the stage splits

    Parameters
    ----------
    `params_path` : str
        path to file with replay parameters

    Returns
    -------
    `tracker` : SolveTracker
        tracker after the last move of the solution
    """
    params = YParams(params_path)

    moves = [get_notation(move.face, move.amount, move.width) for move in split_moves(params.solution)]
    pbar   = tqdm(moves, desc='replay')
    logger = Logger(
        log_dir=params.get('log_path') or '', log_filename=params.get('log_filename') or '',
        clear=bool(params.get('clear_log')), pbar=pbar,
    )

    # SHOW PARAMETERS
    logger.tqdmlog('='*100)
    params.display(lambda message: logger.tqdmlog(message))
    logger.tqdmlog('='*100)

    if params.mode not in MODES:
        message = f'Unknown solving method {params.mode!r}, expected one of {MODES}'
        logger.tqdmlog(message, to_file=True, attention=True)
        raise SystemExit(message)

    cube = ECube.get_default_cube()
    if params.get('scramble'):
        cube.turn_(params.scramble)

    tracker = SolveTracker(
        params.mode, cube=cube,
        stages_data=load_stages_data(params.get('stages_path') or DEFAULT_STAGES_PATH),
        catalogs=load_catalogs(params.get('cases_path') or DEFAULT_CASES_PATH, logger=logger),
        logger=logger,
    )

    # REPLAY
    for move in pbar:
        tracker.apply(move)
        pbar.set_postfix(stage=tracker.stage)

    for split in tracker.splits:
        logger.splitlog(*split)
    if not tracker.is_finished:
        logger.tqdmlog(f'Solve is not finished, stopped at stage {tracker.stage}', to_file=True, attention=True)
    return tracker


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('-p', '--params_path', type=str, required=True,
        help='path to file with replay parameters')

    args = parser.parse_args()

    replay_solve(args.params_path)
