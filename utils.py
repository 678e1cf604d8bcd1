import typing

from tqdm import tqdm
from collections import Counter

from ncube      import NCube
from logger     import Logger
from movement   import Movement
from notation   import Movements, MovementParseError
from cubetyping import NotationStr
from defaults   import FACES


def apply_movements(
        cube : NCube,
        notation : NotationStr,
        logger : Logger = None,
        progress : bool = False,
    ) -> typing.List[Movement]:
    """
    Parse notation lazily and apply each movement to the cube as soon as it is read.
    Stops on the first error; movements before it stay applied.

    Parameters
    ----------
    `cube` : NCube
        Cube to turn in place
    `notation` : NotationStr
        String of movements
    `logger` : Logger, optional
        Logger to report applied movements and errors
    `progress` : bool, optional
        Whether show tqdm progress bar

    Returns
    -------
    `applied` : list
        Applied movements

    Raises
    ------
    `MovementParseError`
        On unknown notation character
    `CubeError`
        On movement the cube can not perform
    """
    applied = []
    pbar = tqdm(Movements(notation), unit='move', disable=not progress, leave=False)
    try:
        for item in pbar:
            if isinstance(item, MovementParseError):
                if logger:
                    logger.tqdmlog(f'Parse error after {len(applied)} movements: {item}', to_file=True)
                raise item
            cube.apply(item)
            applied.append(item)
            if logger:
                logger.filelog(f'{len(applied):5} | {item}')
    finally:
        pbar.close()
    return applied


def face_counters(cube : NCube) -> typing.Dict[str, Counter]:
    """
    Count facelet labels on each face

    Returns
    -------
    `counters` : dict
        Face label -> Counter of facelet labels on it
    """
    faces = cube.faces()
    return { face : Counter(str(label) for label in faces[face]) for face in FACES }


def get_logf(logger : Logger):
    if logger:
        return lambda message, f=True, a=False: logger.tqdmlog(message, to_file=f, attention=a)
    return None


def logger_preprocessing(log_path : str = '', log_name : str = 'ncv', clear : bool = False) -> Logger:
    """
    Prepare logger for a command line run

    Parameters
    ----------
    `log_path` : str
        Directory for log file. Without it messages only go to console
    `log_name` : str
        Name of log file without extension
    `clear` : bool
        Whether clear log file before writing

    Returns
    -------
    `logger` : Logger
        Logger object
    """
    return Logger(log_dir=log_path, log_filename=log_name + '.log' if log_path else '', clear=clear)
