import typing

from movement   import Movement
from cubetyping import NotationStr
from defaults   import FACES, SLICE_FACES, AXES, WIDE_FACES, WIDE_MARKER, TURNOVER, COUNTERCLOCKWISE, CLOCKWISE


class MovementParseError(Exception):
    """
    Base class of notation errors
    """


class InvalidFace(MovementParseError):
    """
    Character which is not a face, slice or axis letter

    Parameters
    ----------
    `face` : str
        The offending character
    """
    def __init__(self, face : str):
        super().__init__(f'Invalid face notation: {face}')
        self.face = face

    def __eq__(self, other) -> bool:
        return isinstance(other, InvalidFace) and self.face == other.face

    def __hash__(self):
        return hash((InvalidFace, self.face))

    def __repr__(self):
        return f'InvalidFace({self.face!r})'


class Movements:
    """
    Iterator over movements of a notation string.
    The notation is read lazily one movement at a time, so iteration can be
    stopped on the first error without scanning the rest of the string.
    Every item is either a Movement or an InvalidFace error for a single bad character;
    the iterator continues after an error.

    Parameters
    ----------
    `notation` : NotationStr
        String of movements, e.g. "R U R' U'" or "RUR'U'"
    """
    def __init__(self, notation : NotationStr):
        self._notation = notation
        self._position = 0

    def __iter__(self):
        return self

    def __next__(self) -> typing.Union[Movement, InvalidFace]:
        self._skip_whitespaces()
        char = self._next_char()
        if char is None:
            raise StopIteration

        if char in FACES:
            face, layers = char, 1
        elif char in SLICE_FACES or char in AXES:
            face, layers = char, 0
        elif char in WIDE_FACES:
            face, layers = char.upper(), 2
        else:
            return InvalidFace(char)

        # both "Rw" and "r" are used for two layer turns, "Mw" is read as "M"
        if layers == 1 or face in SLICE_FACES:
            self._skip_whitespaces()
            if self._peek() == WIDE_MARKER:
                self._next_char()
                if layers == 1:
                    layers = 2

        self._skip_whitespaces()
        direction = CLOCKWISE
        if self._peek() in (TURNOVER, COUNTERCLOCKWISE):
            direction = self._next_char()

        return Movement(face, layers, direction)

    def _peek(self) -> typing.Optional[str]:
        if self._position < len(self._notation):
            return self._notation[self._position]
        return None

    def _next_char(self) -> typing.Optional[str]:
        char = self._peek()
        if char is not None:
            self._position += 1
        return char

    def _skip_whitespaces(self):
        while self._position < len(self._notation) and self._notation[self._position].isspace():
            self._position += 1


def parse_movements(notation : NotationStr) -> typing.List[Movement]:
    """
    Parse the whole notation string

    Parameters
    ----------
    `notation` : NotationStr
        String of movements

    Returns
    -------
    `movements` : list
        Parsed movements in order

    Raises
    ------
    `InvalidFace`
        On the first unknown face character
    """
    movements = []
    for item in Movements(notation):
        if isinstance(item, MovementParseError):
            raise item
        movements.append(item)
    return movements


def format_movements(movements : typing.Iterable[Movement]) -> NotationStr:
    """
    Join movements back to notation string which `Movements` reads back unchanged

    Raises
    ------
    `ValueError`
        On face turn deeper than two layers, notation has no token for it
    """
    movements = list(movements)
    for movement in movements:
        if movement.layers > 2:
            raise ValueError(f'Movement {movement} has no notation token')
    return ' '.join(str(movement) for movement in movements)
