import re
import typing

from logger     import Logger
from errors     import InvariantError
from cubetyping import Face, Notation
from defaults   import FACES, SLICE_FACES

MOVE_PATTERN = re.compile(r"(?P<face>[URFDLBMESurfdlbxyz])(?P<double>2?)(?P<prime>'?)")
MOVE_FAMILIES = (*FACES, *SLICE_FACES)


class Move(typing.NamedTuple):
    """
    Single turn. `face` is upper-case for face and slice turns and x, y, z for rotations,
    `width` is 2 for wide turns.
    """
    face   : Face
    amount : int
    width  : int = 1


def get_notation(face : Face, amount : int, width : int = 1) -> Notation:
    """
    Get notation of a turn

    Parameters
    ----------
    `face` : Face
        face, slice or rotation name of turn
    `amount` : int
        amount of quarter turns: 0, 1, -1, 2 or -2
    `width` : int, optional
        1 for single layer turn, 2 for wide turn written in lower-case

    Returns
    -------
    `notation` : Notation
        e.g. R, R', r2, x2'. Empty string for zero amount
    """
    if width not in (1, 2):
        raise InvariantError(f'Turn width must be 1 or 2, got {width}')
    notation_face = face if width == 1 else face.lower()

    if amount == 0:
        return ''
    if amount == 2:
        return f'{notation_face}2'
    if amount == 1:
        return notation_face
    if amount == -1:
        return f"{notation_face}'"
    if amount == -2:
        return f"{notation_face}2'"
    raise InvariantError(f'Amount of turn must be in range [-2, 2], got {amount}')


def parse_move(token : str) -> Move:
    """
    Parse a single turn written in standard notation

    Parameters
    ----------
    `token` : str
        turn, e.g. R, U', F2, r, M', x2

    Returns
    -------
    `move` : Move
        parsed turn
    """
    match = MOVE_PATTERN.fullmatch(token)
    if match is None:
        raise InvariantError(f'Cannot parse turn {token!r}')
    face   = match['face']
    amount = 2 if match['double'] else 1
    if match['prime']:
        amount = -amount
    if face in 'urfdlb':
        return Move(face.upper(), amount, 2)
    return Move(face, amount, 1)


def split_moves(sequence : Notation | typing.Iterable[str]) -> typing.List[Move]:
    """
    Parse sequence of turns separated by whitespaces or given as list of turns
    """
    if isinstance(sequence, str):
        sequence = sequence.split()
    return [parse_move(token) for token in sequence]


def invert_moves(sequence : Notation | typing.Iterable[str]) -> Notation:
    """
    Get the sequence which undoes the given one

    Parameters
    ----------
    `sequence` : Notation | Iterable
        turns to invert

    Returns
    -------
    `inverted` : Notation
        turns in reversed order, each one inverted
    """
    inverted = []
    for move in reversed(split_moves(sequence)):
        amount = 2 if abs(move.amount) == 2 else -move.amount
        inverted.append(get_notation(move.face, amount, move.width))
    return ' '.join(inverted)


def extract_move_token(event : typing.Any, logger : Logger = None) -> typing.Optional[Notation]:
    """
    Get turn from a move event of a smart cube.
    Event is expected to be like {'latest_move': {'family': 'R', 'amount': -1}}.

    Parameters
    ----------
    `event` : Any
        move event
    `logger` : Logger, optional
        logger to report malformed events

    Returns
    -------
    `token` : Notation | None
        face letter with optional prime, None if event does not describe a move
    """
    try:
        latest_move = event['latest_move']
        family, amount = latest_move['family'], latest_move['amount']
    except (KeyError, TypeError, IndexError) as e:
        if logger:
            logger.tqdmlog(f'Skipping malformed move event {event!r}: {e!r}', to_file=True)
        return None
    if family not in MOVE_FAMILIES or isinstance(amount, bool) or not isinstance(amount, int):
        if logger:
            logger.tqdmlog(f'Skipping move event with unknown turn {event!r}', to_file=True)
        return None
    return family + ("'" if amount == -1 else '')
