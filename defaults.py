"""
Face labels and notation letters
"""
# cube faces, used both as facelet labels and as notation letters of face turns
FRONT = 'F'
BACK  = 'B'
LEFT  = 'L'
RIGHT = 'R'
UP    = 'U'
DOWN  = 'D'

FACES = (FRONT, BACK, LEFT, RIGHT, UP, DOWN)

"""
Dictionary to get storage index of each face
"""
FACE_INDEX = { FACES[i] : i for i in range(len(FACES)) }

# middle layer turns: M follows L, E follows D, S follows F
MIDDLE      = 'M'
EQUATORIAL  = 'E'
STANDING    = 'S'
SLICE_FACES = (MIDDLE, EQUATORIAL, STANDING)

# whole cube rotations: x follows R, y follows U, z follows F
AXIS_X = 'x'
AXIS_Y = 'y'
AXIS_Z = 'z'
AXES   = (AXIS_X, AXIS_Y, AXIS_Z)

# lowercase face letters turn two outer layers
WIDE_FACES  = tuple(f.lower() for f in FACES)
WIDE_MARKER = 'w'

# the only division count with a single well-defined middle layer
SLICE_DIVISIONS = 3

"""
Rotation directions. Values are the notation suffixes themselves.
"""
CLOCKWISE        = ''
TURNOVER         = '2'
COUNTERCLOCKWISE = "'"
DIRECTIONS = (CLOCKWISE, TURNOVER, COUNTERCLOCKWISE)

# number of clockwise quarter turns for each direction
DIRECTION_COUNT = { CLOCKWISE : 1, TURNOVER : 2, COUNTERCLOCKWISE : 3 }

"""
Default render parameters
"""
DEFAULT_DIVISIONS = 3
DEFAULT_STYLE     = 'fru'
DEFAULT_SIZE      = 512.0

DEFAULT_COLORS = {
    FRONT : '#3f0',
    BACK  : '#03c',
    LEFT  : '#f90',
    RIGHT : '#f30',
    UP    : '#fff',
    DOWN  : '#fc0',
}

"""
Order of faces in the unfolded net and in flat strings
    U
L   F   R   B
    D
"""
NET_ROW_FACES = (LEFT, FRONT, RIGHT, BACK)
