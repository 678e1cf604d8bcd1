import io
import typing

import numpy as np

from collections import namedtuple

from ncube    import NCube
from defaults import FRONT, BACK, LEFT, RIGHT, UP, DEFAULT_COLORS, DEFAULT_SIZE


"""
Elements drawn by SvgEmitter. Coordinates are in the centered space,
where the shorter side of the image spans from -1 to 1 and y points up.
"""
Line              = namedtuple('Line', ('color', 'thickness', 'start', 'end'))
StrokePolygon     = namedtuple('StrokePolygon', ('color', 'thickness', 'points'))
FillPolygon       = namedtuple('FillPolygon', ('color', 'points'))
StrokeFillPolygon = namedtuple('StrokeFillPolygon', ('stroke_color', 'fill_color', 'thickness', 'points'))

SvgElement = typing.Union[Line, StrokePolygon, FillPolygon, StrokeFillPolygon]

ExporterParameters = namedtuple('ExporterParameters', ('colors', 'size'))
ExporterParameters.__doc__ = \
    """
    Parameters shared by all exporters: face label -> SVG color, and image size in pixels
    """

STROKE_COLOR     = '#000'
STROKE_THICKNESS = 0.02


class SvgEmitter:
    """
    Collects SVG elements and writes them as SVG document

    Parameters
    ----------
    `width` : float
        Width of the image
    `height` : float
        Height of the image
    """
    def __init__(self, width : float, height : float):
        self.width    = width
        self.height   = height
        self.scale    = min(width, height) / 2.0
        self.elements = []

    def add_element(self, element : SvgElement):
        self.elements.append(element)

    def emit(self, writer : typing.TextIO):
        """
        Write SVG document

        Parameters
        ----------
        `writer` : TextIO
            Text stream to write to
        """
        writer.write('<?xml version="1.0" encoding="UTF-8"?>\n')
        writer.write(f'<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="{self.width:.2f}" height="{self.height:.2f}">\n')
        for element in self.elements:
            writer.write('  ' + self._element_tag(element) + '\n')
        writer.write('</svg>\n')

    def _element_tag(self, element : SvgElement) -> str:
        if isinstance(element, Line):
            sx, sy = self._transform_point(element.start)
            ex, ey = self._transform_point(element.end)
            return (f'<line stroke-width="{element.thickness * self.scale:.5f}" stroke="{element.color}" '
                    f'x1="{sx:.5f}" y1="{sy:.5f}" x2="{ex:.5f}" y2="{ey:.5f}"/>')
        if isinstance(element, StrokePolygon):
            return (f'<polygon stroke-width="{element.thickness * self.scale:.5f}" stroke="{element.color}" '
                    f'fill="none" points="{self._points(element.points)}"/>')
        if isinstance(element, FillPolygon):
            return f'<polygon fill="{element.color}" points="{self._points(element.points)}"/>'
        if isinstance(element, StrokeFillPolygon):
            return (f'<polygon stroke-width="{element.thickness * self.scale:.5f}" stroke="{element.stroke_color}" '
                    f'fill="{element.fill_color}" points="{self._points(element.points)}"/>')
        raise TypeError(f'Unknown SVG element {element!r}')

    def _points(self, points : typing.Iterable[typing.Tuple[float, float]]) -> str:
        return ' '.join('{:.5f},{:.5f}'.format(*self._transform_point(point)) for point in points)

    def _transform_point(self, point : typing.Tuple[float, float]) -> typing.Tuple[float, float]:
        x, y = point
        return self.width / 2.0 + x * self.scale, self.height / 2.0 - y * self.scale


class Exporter:
    """
    Base class of SVG exporters. Subclasses implement `draw`.

    Parameters
    ----------
    `size` : float
        Width and height of the image
    `colors` : dict, optional
        Face label -> SVG color of its facelets
    """
    def __init__(self, size : float = DEFAULT_SIZE, colors : typing.Dict[str, str] = None):
        self.size   = size
        self.colors = dict(DEFAULT_COLORS if colors is None else colors)

    def set_params(self, params : ExporterParameters):
        """
        Set common parameters
        """
        self.size   = params.size
        self.colors = dict(params.colors)

    def write(self, cube : NCube, writer : typing.TextIO):
        """
        Draw the cube and write SVG document to text stream
        """
        emitter = SvgEmitter(self.size, self.size)
        self.draw(emitter, cube)
        emitter.emit(writer)

    def to_string(self, cube : NCube) -> str:
        buffer = io.StringIO()
        self.write(cube, buffer)
        return buffer.getvalue()

    def draw(self, emitter : SvgEmitter, cube : NCube):
        raise NotImplementedError

    def _facelet(self, emitter : SvgEmitter, label : str, points : typing.Sequence[typing.Tuple[float, float]]):
        emitter.add_element(StrokeFillPolygon(STROKE_COLOR, self.colors[label], STROKE_THICKNESS, tuple(points)))


class TopLayer(Exporter):
    """
    Draws U face from above with top rows of F, R, B, L faces around it
    """
    # half length of U face edge
    HALF  = 0.6
    # distance and depth of side strips
    GAP   = 0.04
    DEPTH = 0.2

    def draw(self, emitter : SvgEmitter, cube : NCube):
        n     = cube.divisions()
        faces = cube.faces()
        cell  = 2 * self.HALF / n
        near  = self.HALF + self.GAP
        far   = near + self.DEPTH

        up = faces[UP].reshape(n, n)
        for row in range(n):
            for column in range(n):
                left, top = -self.HALF + column * cell, self.HALF - row * cell
                self._facelet(emitter, up[row, column], [
                    (left, top), (left + cell, top), (left + cell, top - cell), (left, top - cell),
                ])

        for k in range(n):
            # F top row runs left to right below U
            left = -self.HALF + k * cell
            self._facelet(emitter, faces[FRONT][k], [(left, -near), (left + cell, -near), (left + cell, -far), (left, -far)])
            # B top row runs right to left above U
            right = self.HALF - k * cell
            self._facelet(emitter, faces[BACK][k], [(right, near), (right - cell, near), (right - cell, far), (right, far)])
            # R top row runs from front to back
            bottom = -self.HALF + k * cell
            self._facelet(emitter, faces[RIGHT][k], [(near, bottom), (far, bottom), (far, bottom + cell), (near, bottom + cell)])
            # L top row runs from back to front
            top = self.HALF - k * cell
            self._facelet(emitter, faces[LEFT][k], [(-near, top), (-far, top), (-far, top - cell), (-near, top - cell)])


class Fru(Exporter):
    """
    Draws isometric view of F, R and U faces
    """
    # the cube is projected from the corner between F, R and U faces
    SCALE = 0.8

    def draw(self, emitter : SvgEmitter, cube : NCube):
        n     = cube.divisions()
        faces = cube.faces()
        step  = 1.0 / n

        front = faces[FRONT].reshape(n, n)
        right = faces[RIGHT].reshape(n, n)
        up    = faces[UP].reshape(n, n)
        for row in range(n):
            for column in range(n):
                # F lies in plane z = 1, columns go along x and rows down along y
                origin = np.array([column * step, 1 - row * step, 1.0])
                self._facelet(emitter, front[row, column], self._quad(origin, [step, 0, 0], [0, -step, 0]))
                # R lies in plane x = 1, columns go from front to back
                origin = np.array([1.0, 1 - row * step, 1 - column * step])
                self._facelet(emitter, right[row, column], self._quad(origin, [0, 0, -step], [0, -step, 0]))
                # U lies in plane y = 1, rows go from back to front
                origin = np.array([column * step, 1.0, row * step])
                self._facelet(emitter, up[row, column], self._quad(origin, [step, 0, 0], [0, 0, step]))

    def _quad(self, origin : np.ndarray, du : typing.Sequence[float], dv : typing.Sequence[float]) -> typing.List[typing.Tuple[float, float]]:
        du, dv = np.asarray(du), np.asarray(dv)
        corners = (origin, origin + du, origin + du + dv, origin + dv)
        return [self._project(corner) for corner in corners]

    def _project(self, point : np.ndarray) -> typing.Tuple[float, float]:
        x, y, z = point
        sx = (x - z) * np.cos(np.pi / 6)
        sy = y - (x + z) * np.sin(np.pi / 6)
        return float(sx * self.SCALE), float(sy * self.SCALE)


"""
Available drawing styles
"""
EXPORTERS = {
    'top' : TopLayer,
    'fru' : Fru,
}


def get_exporter(style : str, params : ExporterParameters = None) -> Exporter:
    """
    Create exporter of given style

    Parameters
    ----------
    `style` : str
        One of EXPORTERS keys
    `params` : ExporterParameters, optional
        Common parameters to set

    Returns
    -------
    `exporter` : Exporter
        Exporter object
    """
    if style not in EXPORTERS:
        raise ValueError(f'Unknown style {style!r}, expected one of {sorted(EXPORTERS)}')
    exporter = EXPORTERS[style]()
    if params is not None:
        exporter.set_params(params)
    return exporter
