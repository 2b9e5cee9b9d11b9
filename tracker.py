import typing

from ecube      import ECube
from logger     import Logger
from errors     import InvariantError
from catalogs   import Catalogs, load_catalogs
from notation   import split_moves, get_notation, extract_move_token
from symmetry   import get_orientation_from_rotation
from faces      import move_to_rotation
from stages     import StageResult, RouxBlock, is_stage_satisfied, get_next_stage, load_stages_data
from cubetyping import Face, Notation, Orientation, StagesData
from defaults   import MODES, STAGE_SOLVED, ROTATION_FACES, SLICE_FACES


class Split(typing.NamedTuple):
    """
    Stage which has been done and the amount of moves made since the start of the solve
    """
    stage      : str
    move_count : int


class SolveTracker:
    """
    Follows a solve move by move and records when each stage of the solving method is done

    Parameters
    ----------
    `mode` : str
        solving method: cfop or roux
    `cube` : ECube, optional
        cube to track, solved cube with default colors if not given
    `stages_data` : StagesData, optional
        order of stages, default one is loaded if not given
    `catalogs` : Catalogs, optional
        case catalogs, default ones are loaded if not given
    `logger` : Logger, optional
        logger to report done stages and skipped events
    """
    def __init__(self, mode : str, cube : ECube = None, stages_data : StagesData = None, catalogs : Catalogs = None, logger : Logger = None):
        if mode not in MODES:
            raise InvariantError(f'Unknown solving method {mode!r}, expected one of {MODES}')
        self.mode        = mode
        self.cube        = cube if cube is not None else ECube.get_default_cube()
        self.stages_data = stages_data if stages_data is not None else load_stages_data()
        self.catalogs    = catalogs if catalogs is not None else load_catalogs(logger=logger)
        self.logger      = logger

        self.stage       : str = self.stages_data[mode][1]['id']
        self.moves       : typing.List[Notation] = []
        self.splits      : typing.List[Split] = []
        self.orientation : Orientation = Orientation()
        self.cross       : typing.Optional[Face] = None
        self.roux_block  : typing.Optional[RouxBlock] = None
        self.last_result : typing.Optional[StageResult] = None

    @property
    def is_finished(self) -> bool:
        return self.stage == STAGE_SOLVED

    def _update_orientation(self, face : str, amount : int, width : int):
        if face in ROTATION_FACES:
            rotation = face, amount
        elif face in SLICE_FACES:
            rotation = move_to_rotation(SLICE_FACES[face], amount)
        elif width == 2:
            rotation = move_to_rotation(face, amount)
        else:
            return
        self.orientation = get_orientation_from_rotation(self.orientation, *rotation)

    def _advance(self):
        """
        Move on through every stage which is done in the current state
        """
        snapshot = self.cube.snapshot()
        while not self.is_finished:
            result = is_stage_satisfied(
                self.mode, snapshot, self.stage,
                cross=self.cross, roux_block=self.roux_block, catalogs=self.catalogs,
            )
            self.last_result = result
            if not result.result:
                break
            if result.cross is not None:
                self.cross = result.cross
            if result.roux_block is not None:
                self.roux_block = result.roux_block
            self.splits.append(Split(self.stage, len(self.moves)))
            if self.logger:
                self.logger.tqdmlog(f'Stage {self.stage} is done after {len(self.moves)} moves', to_file=True)
            self.stage = get_next_stage(self.stage, self.stages_data)

    def apply(self, notation : Notation | typing.Iterable[str]) -> str:
        """
        Apply moves to the cube and check stages after each of them

        Parameters
        ----------
        `notation` : Notation | Iterable
            moves in standard notation

        Returns
        -------
        `stage` : str
            current stage after the moves
        """
        for move in split_moves(notation):
            token = get_notation(move.face, move.amount, move.width)
            self._update_orientation(move.face, move.amount, move.width)
            self.cube.turn_(token)
            self.moves.append(token)
            self._advance()
        return self.stage

    def on_move_event(self, event : typing.Any) -> bool:
        """
        Apply the move of a smart cube event

        Parameters
        ----------
        `event` : Any
            event like {'latest_move': {'family': 'R', 'amount': 1}}

        Returns
        -------
        `applied` : bool
            False if the event does not describe a move
        """
        token = extract_move_token(event, self.logger)
        if token is None:
            return False
        self.apply(token)
        return True
