import typing
from numpy.typing import ArrayLike

FaceLabel    = typing.NewType('FaceLabel', str)
FaceLabel.__doc__ = \
    """
    Label of a cube face, also used as facelet color identifier.
    Possible values:
        F - front,
        B - back,
        L - left,
        R - right,
        U - up,
        D - down.
    """

FaceletGrid  = typing.NewType('FaceletGrid', ArrayLike)
FaceletGrid.__doc__ = \
    """
    Row-major array of N*N facelet labels of one face, as seen from outside the cube.
    """

NotationStr  = typing.NewType('NotationStr', str)
NotationStr.__doc__ = \
    """
    String of movements in cube notation, e.g. "R U R' U'".
    Face letters F, B, L, R, U, D turn one outer layer,
    lowercase letters or the w suffix (r, Rw) turn two layers,
    M, E, S turn the middle slice and x, y, z rotate the whole cube.
    Suffix 2 means half turn, ' means counter-clockwise turn.
    Whitespace between movements is optional.
    """

DirectionStr = typing.NewType('DirectionStr', str)
DirectionStr.__doc__ = \
    """
    Rotation direction of a movement, the notation suffix itself:
        '' - clockwise quarter turn,
        '2' - half turn,
        "'" - counter-clockwise quarter turn.
    """

# notation string or iterable of parsed movements
MovementsLike = typing.Union[NotationStr, typing.Iterable]
