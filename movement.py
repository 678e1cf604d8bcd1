import typing

from collections import namedtuple

from cubetyping import DirectionStr, MovementsLike
from defaults   import FACES, SLICE_FACES, AXES, WIDE_MARKER, DIRECTIONS, DIRECTION_COUNT, CLOCKWISE, COUNTERCLOCKWISE


class Movement(namedtuple('Movement', ('face', 'layers', 'direction'))):
    """
    One rotation of the cube

    Parameters
    ----------
    `face` : str
        Rotated face letter (F, B, L, R, U, D), slice letter (M, E, S) or axis letter (x, y, z)
    `layers` : int
        Amount of outer layers turned together with the face. Always 0 for slices and axes
    `direction` : DirectionStr
        '' for clockwise, '2' for half turn, "'" for counter-clockwise rotation
    """
    __slots__ = ()

    def __new__(cls, face : str, layers : int = 1, direction : DirectionStr = CLOCKWISE):
        if face in FACES:
            if layers < 1:
                raise ValueError(f'Face turn {face} needs at least one layer, got {layers}')
        elif face in SLICE_FACES or face in AXES:
            layers = 0
        else:
            raise ValueError(f'Unknown face {face!r}')
        if direction not in DIRECTIONS:
            raise ValueError(f'Unknown direction {direction!r}')
        return super().__new__(cls, face, layers, direction)

    def __str__(self):
        face = self.face
        if self.layers == 2:
            face = face + WIDE_MARKER
        elif self.layers > 2:
            face = f'{self.layers}{face}{WIDE_MARKER}'
        return face + self.direction

    @property
    def quarter_turns(self) -> int:
        """
        Amount of clockwise quarter turns
        """
        return DIRECTION_COUNT[self.direction]

    def is_face_turn(self) -> bool:
        return self.face in FACES

    def is_slice(self) -> bool:
        return self.face in SLICE_FACES

    def is_rotation(self) -> bool:
        return self.face in AXES

    def inverse(self) -> 'Movement':
        """
        Get the movement which undoes this one.
        Clockwise and counter-clockwise turns are swapped, half turn is its own inverse.
        """
        if self.direction == CLOCKWISE:
            return self._replace(direction=COUNTERCLOCKWISE)
        if self.direction == COUNTERCLOCKWISE:
            return self._replace(direction=CLOCKWISE)
        return self


def reverse_movements(movements : MovementsLike) -> typing.List[Movement]:
    """
    For each movement get reversed one in reversed order

    Parameters
    ----------
    `movements` : str | Iterable
        Notation string or iterable of movements to reverse

    Returns
    -------
    `reversed_movements` : list
        Movements undoing the input when applied after it
    """
    if isinstance(movements, str):
        # imported here, notation depends on this module
        from notation import parse_movements
        movements = parse_movements(movements)
    return [movement.inverse() for movement in reversed(list(movements))]
