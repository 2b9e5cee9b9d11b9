import typing

from functools import lru_cache

from ecube      import ECube, CubeSnapshot
from logger     import Logger
from yparams    import YParams
from errors     import InvariantError
from notation   import invert_moves
from cubetyping import Notation, Pattern
from stages     import face_orientations, face_permutations
from defaults   import DEFAULT_CASES_PATH, OLL_SKIP, PLL_SKIP, CLL_SKIP, EO_SKIP

CATALOG_NAMES = ('olls', 'plls', 'clls', 'lseos')
SKIP_CASES    = {'olls' : OLL_SKIP, 'plls' : PLL_SKIP, 'clls' : CLL_SKIP, 'lseos' : EO_SKIP}


class Case(typing.NamedTuple):
    name     : str
    notation : typing.Optional[Notation]
    pattern  : Pattern


class Catalogs(typing.NamedTuple):
    olls  : typing.Tuple[Case, ...]
    plls  : typing.Tuple[Case, ...]
    clls  : typing.Tuple[Case, ...]
    lseos : typing.Tuple[Case, ...]


def _project(catalog_name : str, snapshot : CubeSnapshot) -> Pattern:
    co, eo = face_orientations('U', snapshot)
    cp, ep = face_permutations('U', snapshot)
    if catalog_name == 'olls':
        return Pattern([*co, *eo])
    if catalog_name == 'plls':
        return Pattern([*cp, *ep])
    if catalog_name == 'clls':
        return Pattern([*cp, *co])
    raise InvariantError(f'Pattern of {catalog_name} can not be derived from algorithm')


def derive_pattern(catalog_name : str, notation : Notation) -> Pattern:
    """
    Pattern of the case solved by an algorithm

    Parameters
    ----------
    `catalog_name` : str
        olls, plls or clls
    `notation` : Notation
        algorithm which solves the case

    Returns
    -------
    `pattern` : Pattern
        U face projection of the solved cube after the inverse algorithm
    """
    cube = ECube.get_default_cube()
    if notation:
        cube.turn_(invert_moves(notation))
    return _project(catalog_name, cube.snapshot())


def _parse_case(catalog_name : str, entry : typing.Sequence) -> Case:
    if not 2 <= len(entry) <= 3:
        raise InvariantError(f'Case of {catalog_name} must be [name, algorithm] or [name, algorithm, pattern], got {entry}')
    name, notation = str(entry[0]), entry[1]
    if len(entry) == 3:
        return Case(name, notation, Pattern(list(entry[2])))
    if notation is None:
        raise InvariantError(f'Case {name!r} of {catalog_name} has neither algorithm nor pattern')
    return Case(name, notation, derive_pattern(catalog_name, notation))


@lru_cache(maxsize=None)
def _load_catalogs(path : str) -> Catalogs:
    params   = YParams(path)
    catalogs = {}
    for catalog_name in CATALOG_NAMES:
        entries = params.kw.get(catalog_name)
        if not entries:
            raise InvariantError(f'Catalog {catalog_name!r} is missing in {path}')
        cases = tuple(_parse_case(catalog_name, entry) for entry in entries)
        if SKIP_CASES[catalog_name] not in (case.name for case in cases):
            raise InvariantError(f'Catalog {catalog_name!r} has no {SKIP_CASES[catalog_name]!r} case')
        catalogs[catalog_name] = cases
    return Catalogs(**catalogs)


def load_catalogs(path : str = DEFAULT_CASES_PATH, logger : Logger = None) -> Catalogs:
    """
    Load last layer case catalogs. Loaded catalogs are cached per path.

    Parameters
    ----------
    `path` : str, optional
        path to yaml file with catalogs
    `logger` : Logger, optional
        logger to report loading

    Returns
    -------
    `catalogs` : Catalogs
        OLL, PLL, CLL and LSEO cases
    """
    catalogs = _load_catalogs(path)
    if logger:
        sizes = ', '.join(f'{name}: {len(getattr(catalogs, name))}' for name in CATALOG_NAMES)
        logger.tqdmlog(f'Loaded case catalogs from {path} ({sizes})', to_file=True)
    return catalogs
