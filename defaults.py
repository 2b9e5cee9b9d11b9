import os

from rubik.cube import Cube

"""
Geometry of the cube faces.
Each face label is bound to a unit vector, the order of labels is the canonical order of iteration.
"""
FACE_VECTORS = {
    'U' : (0, 0, 1),
    'R' : (1, 0, 0),
    'F' : (0, -1, 0),
    'D' : (0, 0, -1),
    'L' : (-1, 0, 0),
    'B' : (0, 1, 0),
}
FACES = tuple(FACE_VECTORS.keys())

"""
Whole cube rotations and slices. Each of them follows the turn direction of the bound face
"""
ROTATION_FACES = {
    'x' : 'R',
    'y' : 'U',
    'z' : 'F',
}
SLICE_FACES = {
    'M' : 'L',
    'E' : 'D',
    'S' : 'F',
}

"""
Cubies in their solved positions.
Letter order of label is the order of stickers used by orientation values.
"""
CORNERS = ('URF', 'UFL', 'ULB', 'UBR', 'DFR', 'DLF', 'DBL', 'DRB')
EDGES   = ('UR', 'UF', 'UL', 'UB', 'DR', 'DF', 'DL', 'DB', 'FR', 'FL', 'BL', 'BR')

"""
Pieces lying on each face in clockwise order.
Corner i lies between edges i and i+1, so the order is significant.
"""
FACE_PIECES_ORDER = {
    'D' : (('DR', 'DB', 'DL', 'DF'), ('DRB', 'DBL', 'DLF', 'DFR')),
    'L' : (('UL', 'FL', 'DL', 'BL'), ('UFL', 'DLF', 'DBL', 'ULB')),
    'B' : (('UB', 'BL', 'DB', 'BR'), ('ULB', 'DBL', 'DRB', 'UBR')),
    'U' : (('UB', 'UR', 'UF', 'UL'), ('UBR', 'URF', 'UFL', 'ULB')),
    'R' : (('UR', 'BR', 'DR', 'FR'), ('UBR', 'DRB', 'DFR', 'URF')),
    'F' : (('UF', 'FR', 'DF', 'FL'), ('URF', 'DFR', 'DLF', 'UFL')),
}

"""
Tolerance of float comparisons in rotation geometry
"""
EPSILON = 1e-9

"""
Solving methods and names of the catalog cases which mean that nothing is left to do
"""
MODE_CFOP = 'cfop'
MODE_ROUX = 'roux'
MODES     = (MODE_CFOP, MODE_ROUX)

STAGE_SOLVED  = 'solved'
STAGE_UNKNOWN = 'unknown'

CFOP_STAGES = ('cross', 'f2l1', 'f2l2', 'f2l3', 'f2l4', 'oll', 'pll', 'auf')
ROUX_STAGES = ('block1', 'block2', 'cll', 'lseo', 'lsep')
F2L_STAGES  = {'f2l1' : 1, 'f2l2' : 2, 'f2l3' : 3}

OLL_SKIP = 'OLL Skip'
PLL_SKIP = 'PLL Skip'
CLL_SKIP = 'CLL Skip'
EO_SKIP  = 'EO Skip'

"""
Paths to default parameter files
"""
PARAMS_DIR          = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'params')
DEFAULT_STAGES_PATH = os.path.join(PARAMS_DIR, 'stages.yaml')
DEFAULT_CASES_PATH  = os.path.join(PARAMS_DIR, 'cases.yaml')

"""
Default colors of cube
"""
C_UP    = 'Y'
C_LEFT  = 'B'
C_FRONT = 'R'
C_RIGHT = 'G'
C_DOWN  = 'W'
C_BACK  = 'O'

"""
Predefined default cube with default colors
"""
DEFAULT_CUBE = Cube(C_UP*9 + (C_LEFT*3+C_FRONT*3+C_RIGHT*3+C_BACK*3)*3 + C_DOWN*9)
DEFAULT_CUBE_STR = DEFAULT_CUBE.flat_str()

"""
Turn methods of the rubik.cube.Cube class for every turn of standard notation.
Wide turns are a face turn together with the adjacent slice.
"""
CUBE_TURN_METHODS = {
    'U' : ('U',),  'D' : ('D',),  'R' : ('R',),
    'L' : ('L',),  'F' : ('F',),  'B' : ('B',),
    'M' : ('M',),  'E' : ('E',),  'S' : ('S',),
    'x' : ('X',),  'y' : ('Y',),  'z' : ('Z',),
    'u' : ('U', 'Ei'), 'd' : ('D', 'E'),
    'r' : ('R', 'Mi'), 'l' : ('L', 'M'),
    'f' : ('F', 'S'),  'b' : ('B', 'Si'),
}
