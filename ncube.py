import typing
import functools

import numpy as np

from types import MappingProxyType

from rubik.cube import Cube

from movement   import Movement, reverse_movements
from notation   import parse_movements
from cubetyping import FaceLabel, FaceletGrid, MovementsLike
from defaults   import (
    FRONT, BACK, LEFT, RIGHT, UP, DOWN, FACES, FACE_INDEX, NET_ROW_FACES,
    MIDDLE, EQUATORIAL, STANDING, AXIS_X, AXIS_Y, AXIS_Z, AXES, SLICE_FACES,
    DIRECTIONS, SLICE_DIVISIONS, DEFAULT_DIVISIONS,
)


"""
How each movement maps to layer turns along an axis.
Layer turns along x follow R, along y follow U, along z follow F.
"""
# face -> (axis, layers are counted from the far end of the axis, turn against the axis direction)
FACE_LAYERS = {
    FRONT : (AXIS_Z, True,  False),
    BACK  : (AXIS_Z, False, True),
    LEFT  : (AXIS_X, False, True),
    RIGHT : (AXIS_X, True,  False),
    UP    : (AXIS_Y, False, False),
    DOWN  : (AXIS_Y, True,  True),
}

# slice -> (axis, turn against the axis direction)
SLICE_LAYERS = {
    MIDDLE     : (AXIS_X, True),
    EQUATORIAL : (AXIS_Y, False),
    STANDING   : (AXIS_Z, False),
}

# axis -> (face turning with the axis, opposite face)
AXIS_FACES = {
    AXIS_X : (RIGHT, LEFT),
    AXIS_Y : (UP, DOWN),
    AXIS_Z : (FRONT, BACK),
}


class CubeError(Exception):
    """
    Base class of cube errors
    """


class UndefinedMovement(CubeError):
    """
    Movement which can not be applied to the cube with its amount of divisions

    Parameters
    ----------
    `movement` : Movement
        The rejected movement
    """
    def __init__(self, movement : Movement):
        super().__init__(f'Undefined movement: {movement}')
        self.movement = movement


@functools.lru_cache(maxsize=None)
def face_transform(divisions : int) -> np.ndarray:
    """
    Get index table of clockwise quarter turn of N x N grid.
    For new grid `new = old[table]`, so table[i] is the position the i-th facelet is taken from.
    The table is shared between cubes of the same size and is read-only.

    Parameters
    ----------
    `divisions` : int
        Edge length of the grid

    Returns
    -------
    `table` : np.ndarray
        Array of N*N source positions
    """
    positions = np.arange(divisions * divisions)
    x, y  = positions % divisions, positions // divisions
    table = (divisions - x - 1) * divisions + y
    table.flags.writeable = False
    return table


class NCube:
    """
    Virtual N x N x N cube keeping colors of all facelets.
    Each face is stored as row-major grid of face labels as seen from outside the cube
    in the unfolded net
            UUU
            UUU
            UUU
        LLL FFF RRR BBB
        LLL FFF RRR BBB
        LLL FFF RRR BBB
            DDD
            DDD
            DDD

    Parameters
    ----------
    `divisions` : int
        Amount of facelets along one edge of the cube
    """
    def __init__(self, divisions : int = DEFAULT_DIVISIONS):
        if divisions < 1:
            raise ValueError(f'Cube needs at least one division, got {divisions}')
        self._divisions = divisions
        self._face_transform = face_transform(divisions)
        self._faces = np.empty((len(FACES), divisions * divisions), dtype='<U1')
        self.reset_()
        self._layer_turns = {
            AXIS_X : self._turn_layer_x,
            AXIS_Y : self._turn_layer_y,
            AXIS_Z : self._turn_layer_z,
        }

    def __repr__(self):
        return f'NCube(divisions={self._divisions})'

    def __str__(self):
        n = self._divisions
        indent = ' ' * (n + 1)
        lines  = []
        for row in range(n):
            lines.append(indent + ''.join(self._grid(UP)[row]))
        for row in range(n):
            lines.append(' '.join(''.join(self._grid(face)[row]) for face in NET_ROW_FACES))
        for row in range(n):
            lines.append(indent + ''.join(self._grid(DOWN)[row]))
        return '\n'.join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NCube):
            return NotImplemented
        return self._divisions == other._divisions and np.array_equal(self._faces, other._faces)

    def divisions(self) -> int:
        """
        Amount of facelets along one edge
        """
        return self._divisions

    def faces(self) -> typing.Mapping[FaceLabel, FaceletGrid]:
        """
        Get read-only view of the current faces

        Returns
        -------
        `faces` : Mapping
            Face label -> non-writeable row-major array of N*N facelet labels
        """
        faces = {}
        for face in FACES:
            grid = self._faces[FACE_INDEX[face]].view()
            grid.flags.writeable = False
            faces[face] = grid
        return MappingProxyType(faces)

    def flat_str(self) -> str:
        """
        Get string of all facelets in the order of the unfolded net:
        rows of U, then each row of L, F, R, B, then rows of D.
        For 3x3x3 cube this is the input format of `rubik.cube.Cube`.
        """
        parts = [''.join(self._faces[FACE_INDEX[UP]])]
        for row in range(self._divisions):
            parts.extend(''.join(self._grid(face)[row]) for face in NET_ROW_FACES)
        parts.append(''.join(self._faces[FACE_INDEX[DOWN]]))
        return ''.join(parts)

    def to_Cube(self) -> Cube:
        """
        Get `rubik.cube.Cube` version of 3x3x3 cube

        Returns
        -------
        `cube` : Cube
            Cube class object with face labels as colors
        """
        if self._divisions != 3:
            raise ValueError(f'Only 3x3x3 cube can be converted, got {self._divisions} divisions')
        return Cube(self.flat_str())

    def is_solved(self) -> bool:
        """
        Check that every face has a single color
        """
        return bool((self._faces == self._faces[:, :1]).all())

    def copy(self) -> 'NCube':
        """
        Get a copy of cube
        """
        cube = NCube(self._divisions)
        cube._faces[:] = self._faces
        return cube

    def reset(self) -> 'NCube':
        """
        Get solved cube of the same size
        """
        return NCube(self._divisions)

    def reset_(self):
        """
        Reset cube itself to solved state
        """
        for face in FACES:
            self._faces[FACE_INDEX[face], :] = face

    def apply(self, movement : Movement):
        """
        Apply one movement to the cube itself.
        The movement is checked before any facelet is moved,
        so the cube is unchanged when an error is raised.

        Parameters
        ----------
        `movement` : Movement
            Movement to apply

        Raises
        ------
        `UndefinedMovement`
            If the movement is a slice turn and the cube is not 3x3x3,
            or a face turn with more layers than the cube has
        """
        self._check(movement)
        count = movement.quarter_turns
        n = self._divisions

        if movement.is_face_turn():
            axis, from_far_end, against_axis = FACE_LAYERS[movement.face]
            layer_count = 4 - count if against_axis else count
            self._turn_face(movement.face, count)
            for i in range(movement.layers):
                self._layer_turns[axis](n - 1 - i if from_far_end else i, layer_count)

        elif movement.is_slice():
            axis, against_axis = SLICE_LAYERS[movement.face]
            self._layer_turns[axis](n // 2, 4 - count if against_axis else count)

        else:
            face, opposite = AXIS_FACES[movement.face]
            self._turn_face(face, count)
            self._turn_face(opposite, 4 - count)
            for i in range(n):
                self._layer_turns[movement.face](i, count)

    def turn(self, movements : MovementsLike, reset : bool = False) -> 'NCube':
        """
        Apply movements to copy of cube and return it

        Parameters
        ----------
        `movements` : str | Iterable
            Notation string or movements to perform on cube in it's current state
        `reset` : bool, optional
            If True, then the cube will be reseted to solved state before movements

        Returns
        -------
        `cube` : NCube
            Cube with applied movements
        """
        cube = self.reset() if reset else self.copy()
        cube.turn_(movements)
        return cube

    def turn_(self, movements : MovementsLike, reset : bool = False):
        """
        Apply movements to cube itself.
        All movements are parsed and checked first, so on error the cube is left unchanged.

        Parameters
        ----------
        `movements` : str | Iterable
            Notation string or movements to perform on cube in it's current state
        `reset` : bool, optional
            If True, then the cube itself will be reseted to solved state before movements
        """
        if isinstance(movements, str):
            movements = parse_movements(movements)
        movements = list(movements)
        for movement in movements:
            self._check(movement)
        if reset:
            self.reset_()
        for movement in movements:
            self.apply(movement)

    def undo_(self, movements : MovementsLike):
        """
        Apply reversed movements to cube itself, undoing `turn_` of the same movements
        """
        self.turn_(reverse_movements(movements))

    @staticmethod
    def get_scramble_movements(
            n_movements : int,
            divisions : int = DEFAULT_DIVISIONS,
            p : typing.Iterable = None,
            with_rotations : bool = False,
            seed : int = None,
        ) -> typing.List[Movement]:
        """
        Get N random movements applicable to the cube of given size

        Parameters
        ----------
        `n_movements` : int
            Amount of random movements
        `divisions` : int
            Size of the cube to scramble. Slices are used only for 3x3x3 cube,
            wide turns only for cubes bigger than 3x3x3
        `p` : Iterable, optional
            Probability distribution to pick movements
        `with_rotations` : bool
            Use x, y, z rotations in scramble
        `seed` : int, optional
            Seed of random generator

        Returns
        -------
        `scramble` : list
            List of movements to scramble cube
        """
        candidates = [Movement(face, 1, direction) for face in FACES for direction in DIRECTIONS]
        if divisions > 3:
            candidates += [Movement(face, 2, direction) for face in FACES for direction in DIRECTIONS]
        if divisions == SLICE_DIVISIONS:
            candidates += [Movement(face, 0, direction) for face in SLICE_FACES for direction in DIRECTIONS]
        if with_rotations:
            candidates += [Movement(face, 0, direction) for face in AXES for direction in DIRECTIONS]
        if p is not None:
            p = np.asarray(p, dtype=np.float64)
            p = p / p.sum()
        rng = np.random.default_rng(seed)
        picks = rng.choice(len(candidates), size=n_movements, p=p)
        return [candidates[i] for i in picks]

    def scramble(self, n_movements : int, reset : bool = True, p : typing.Iterable = None, with_rotations : bool = False, seed : int = None) -> 'NCube':
        """
        Returns scrambled copy of cube by N random movements

        Parameters
        ----------
        `n_movements` : int
            Amount of random movements
        `reset` : bool, optional
            If True, then the cube will be reseted to solved state before scramble
        `p` : Iterable, optional
            Probability distribution to pick movements
        `with_rotations` : bool
            Use x, y, z rotations in scramble
        `seed` : int, optional
            Seed of random generator
        """
        scramble = NCube.get_scramble_movements(n_movements, self._divisions, p, with_rotations, seed)
        return self.turn(scramble, reset=reset)

    def _check(self, movement : Movement):
        if movement.is_slice() and self._divisions != SLICE_DIVISIONS:
            raise UndefinedMovement(movement)
        if movement.is_face_turn() and not 1 <= movement.layers <= self._divisions:
            raise UndefinedMovement(movement)

    def _grid(self, face : FaceLabel) -> np.ndarray:
        """
        Writable N x N view of a face
        """
        return self._faces[FACE_INDEX[face]].reshape(self._divisions, self._divisions)

    def _turn_face(self, face : FaceLabel, count : int):
        """
        Turn facelets of the face only, without neighbouring faces.

        Parameters
        ----------
        `face` : FaceLabel
            Face to turn
        `count` : int
            Amount of clockwise quarter turns
        """
        i = FACE_INDEX[face]
        for _ in range(count % 4):
            self._faces[i] = self._faces[i][self._face_transform]

    def _turn_layer_x(self, column : int, count : int):
        """
        Turn one layer along x axis in direction of R.

        Parameters
        ----------
        `column` : int
            Column of the layer on F face
        `count` : int
            Amount of quarter turns
        """
        n = self._divisions
        front, up, back, down = self._grid(FRONT), self._grid(UP), self._grid(BACK), self._grid(DOWN)
        for _ in range(count % 4):
            front_column = front[:, column].copy()
            up_column    = up[:, column].copy()
            back_column  = back[:, n - 1 - column].copy()
            down_column  = down[:, column].copy()
            up[:, column]          = front_column
            back[:, n - 1 - column] = up_column[::-1]
            down[:, column]        = back_column[::-1]
            front[:, column]       = down_column

    def _turn_layer_y(self, row : int, count : int):
        """
        Turn one layer along y axis in direction of U.

        Parameters
        ----------
        `row` : int
            Row of the layer on R face
        `count` : int
            Amount of quarter turns
        """
        right, front, left, back = self._grid(RIGHT), self._grid(FRONT), self._grid(LEFT), self._grid(BACK)
        for _ in range(count % 4):
            right_row = right[row].copy()
            front_row = front[row].copy()
            left_row  = left[row].copy()
            back_row  = back[row].copy()
            front[row] = right_row
            left[row]  = front_row
            back[row]  = left_row
            right[row] = back_row

    def _turn_layer_z(self, row : int, count : int):
        """
        Turn one layer along z axis in direction of F.

        Parameters
        ----------
        `row` : int
            Row of the layer on U face
        `count` : int
            Amount of quarter turns
        """
        n = self._divisions
        up, right, down, left = self._grid(UP), self._grid(RIGHT), self._grid(DOWN), self._grid(LEFT)
        for _ in range(count % 4):
            up_row       = up[row].copy()
            right_column = right[:, n - 1 - row].copy()
            down_row     = down[n - 1 - row].copy()
            left_column  = left[:, row].copy()
            right[:, n - 1 - row] = up_row
            down[n - 1 - row]     = right_column[::-1]
            left[:, row]          = down_row
            up[row]               = left_column[::-1]
