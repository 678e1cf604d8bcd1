import sys
import typing
import argparse

from ncube    import NCube, CubeError
from logger   import Logger
from yparams  import YParams
from notation import Movements, MovementParseError
from exporter import EXPORTERS, ExporterParameters, get_exporter
from utils    import apply_movements, get_logf, logger_preprocessing


def print_movements(notation : str, out : typing.TextIO = None) -> bool:
    """
    Print every parsed movement or error on its own line

    Returns
    -------
    `ok` : bool
        False if any parse error was found
    """
    out = out if out is not None else sys.stdout
    ok = True
    for item in Movements(notation):
        if isinstance(item, MovementParseError):
            ok = False
            out.write(f'Error: {item}\n')
        else:
            out.write(f'{item!r}\n')
    return ok


def render(
        notation : str,
        params : YParams,
        logger : Logger = None,
        progress : bool = False,
    ) -> str:
    """
    Apply notation to solved cube and draw its SVG picture

    Parameters
    ----------
    `notation` : str
        String of movements
    `params` : YParams
        Render parameters: divisions, style, size, colors
    `logger` : Logger, optional
        Logger for messages
    `progress` : bool, optional
        Whether show progress bar while applying movements

    Returns
    -------
    `svg` : str
        SVG document
    """
    logf = get_logf(logger)
    cube = NCube(params.divisions)
    applied = apply_movements(cube, notation, logger=logger, progress=progress)
    if logf:
        logf(f'Applied {len(applied)} movements to {params.divisions}x{params.divisions}x{params.divisions} cube, solved: {cube.is_solved()}')
    exporter = get_exporter(params.style, ExporterParameters(colors=params.colors, size=params.size))
    return exporter.to_string(cube)


def main(argv : typing.Sequence[str] = None) -> int:
    parser = argparse.ArgumentParser(description='Draw a cube after notated movements as SVG')
    parser.add_argument('notation', type=str, nargs='?', default=None,
        help='movements, e.g. "R U R\' U\'"; read from stdin when omitted')
    parser.add_argument('-n', '--divisions', type=int, default=None,
        help='amount of facelets along cube edge')
    parser.add_argument('-s', '--style', type=str, default=None, choices=sorted(EXPORTERS),
        help='drawing style: top - top layer, fru - front, right and up faces')
    parser.add_argument('--size', type=float, default=None,
        help='width and height of the image')
    parser.add_argument('-p', '--params_path', type=str, default=None,
        help='path to yaml file with render parameters')
    parser.add_argument('-o', '--output', type=str, default=None,
        help='path to output svg file, stdout when omitted')
    parser.add_argument('--parse-only', action='store_true',
        help='only print parsed movements')
    parser.add_argument('--progress', action='store_true',
        help='show progress bar while applying movements')
    parser.add_argument('--log_path', type=str, default='',
        help='directory to write log file to')

    args = parser.parse_args(argv)

    notation = args.notation if args.notation is not None else sys.stdin.read()

    if args.parse_only:
        return 0 if print_movements(notation) else 1

    logger = logger_preprocessing(args.log_path)
    try:
        params = YParams(args.params_path)
        params.update(divisions=args.divisions, style=args.style, size=args.size)
        svg = render(notation, params, logger, args.progress)
    except (MovementParseError, CubeError, ValueError, KeyError) as e:
        logger.tqdmlog(f'Error: {e}', attention=True, to_file=True)
        return 1

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(svg)
        logger.tqdmlog(f'Saved {params.style} picture to {args.output}', to_file=True)
    else:
        sys.stdout.write(svg)
    return 0


if __name__ == '__main__':
    sys.exit(main())
