"""
Hex Palette Toolkit

Geometry and colour helpers for hexagonal-grid rendering, plus a single-file
CLI that uses them to draw a palette tessellation PNG via Pillow. Covers
regular-polygon vertex generation, cube/offset hex coordinate conversion,
HSV to RGB colour conversion and a generalised logistic easing curve.

Usage:
    python hexutils.py --debug
    python hexutils.py --width 1920 --height 1080 --radius 48 --antialias high
    python hexutils.py --import_settings settings.json
    python hexutils.py --export_settings settings.json
"""

import argparse
import json
import math
import os
import re
import sys
from typing import Dict, List, NamedTuple, NoReturn, Optional, Protocol, Sequence, Tuple

from PIL import Image, ImageColor, ImageDraw


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class InvalidArgumentError(ValueError):
    """A structural precondition of a geometry or colour call was violated."""


class DomainError(ArithmeticError):
    """A numeric evaluation is undefined for the given parameters."""


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------
class Point2D(NamedTuple):
    """A point in canvas (pixel) units."""
    x: float
    y: float


class CubeCoordinate(NamedTuple):
    """Three-axis hex cell address. Valid only when x + y + z == 0."""
    x: int
    y: int
    z: int


class OffsetCoordinate(NamedTuple):
    """Column/row hex cell address with odd rows shoved right by half a cell."""
    col: int
    row: int


class HSVColor(NamedTuple):
    """Hue (fraction of a turn), saturation and value, each in [0, 1]."""
    h: float
    s: float
    v: float


class RGBColor(NamedTuple):
    """An 8-bit colour; each channel is an int in [0, 255].

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """
    r: int
    g: int
    b: int


class LogisticParams(NamedTuple):
    """One evaluation point of the generalised logistic curve."""
    lower_asymptote: float
    upper_asymptote: float
    growth_rate: float
    growth_asymptote_shift: float
    t: float


class HexBounds(NamedTuple):
    """Bounding box of a hexagon as drawn by HexGeometry.

    Attributes:
        width: Twice the apothem, radius * sqrt(3).
        height: Twice the circumradius.
    """
    width: float
    height: float


# ---------------------------------------------------------------------------
# RenderSurface
# ---------------------------------------------------------------------------
class RenderSurface(Protocol):
    """Drawing capability required by PolygonGeometry.

    A surface builds a polygon primitive from vertices relative to the
    origin, then places it at a position on the canvas.
    """

    def polygon(self, points: Sequence[Point2D]) -> object:
        ...

    def translate(self, shape: object, position: Point2D) -> object:
        ...


class PillowSurface:
    """RenderSurface backed by a Pillow ImageDraw canvas.

    Shapes are drawn when they are translated, using whatever fill, outline
    and line width are current on the surface at that moment.

    Attributes:
        fill: Fill colour for the next placed polygon.
        outline: Outline colour, or None for no outline.
        line_width: Outline width in pixels.
    """

    def __init__(
        self,
        image: Image.Image,
        fill: Optional[Tuple[int, int, int]] = None,
        outline: Optional[Tuple[int, int, int]] = None,
        line_width: int = 0,
    ) -> None:
        """Wrap a Pillow image for polygon drawing.

        Args:
            image: The target image; drawn on in place.
            fill: Initial fill colour.
            outline: Initial outline colour.
            line_width: Initial outline width in pixels.
        """
        self._draw = ImageDraw.Draw(image)
        self.fill = fill
        self.outline = outline
        self.line_width = line_width

    def polygon(self, points: Sequence[Point2D]) -> List[Point2D]:
        """Return an unplaced polygon made of the given vertices."""
        return [Point2D(x, y) for x, y in points]

    def translate(self, shape: List[Point2D], position: Point2D) -> List[Point2D]:
        """Offset a polygon to position, draw it and return the placed vertices.

        Args:
            shape: Polygon returned by polygon().
            position: Canvas position of the polygon origin.

        Returns:
            The vertex list in canvas coordinates.
        """
        px, py = position
        placed = [Point2D(x + px, y + py) for x, y in shape]
        outline = self.outline if self.line_width > 0 else None
        self._draw.polygon(placed, fill=self.fill, outline=outline,
                           width=max(self.line_width, 1))
        return placed


# ---------------------------------------------------------------------------
# PolygonGeometry
# ---------------------------------------------------------------------------
def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


class PolygonGeometry:
    """Vertex generation for regular n-gons.

    Vertices are snapped to half-pixel boundaries (rounded, then shifted by
    -0.5) so edges land on pixel centres and stay crisp when rasterised.
    """

    def regular_polygon_vertices(self, num_points: int, radius: float) -> List[Point2D]:
        """Compute the vertices of a regular polygon centred on the origin.

        The first vertex sits half an angular step past 3 o'clock, so the
        first edge (not a vertex) crosses the positive x axis. Vertices then
        advance by 2*pi/num_points in the direction of increasing angle.

        Args:
            num_points: Number of vertices, at least 3.
            radius: Circumradius in pixels, greater than 0.

        Returns:
            num_points Point2D values.

        Raises:
            InvalidArgumentError: If num_points < 3 or radius is not a positive
                finite number.
        """
        if num_points < 3:
            raise InvalidArgumentError(
                f"A polygon needs at least 3 points, got {num_points}")
        if not 0 < radius < math.inf:
            raise InvalidArgumentError(f"Radius must be positive and finite, got {radius}")

        increment = (math.pi * 2) / num_points
        angle = increment / 2
        points: List[Point2D] = []
        for _ in range(num_points):
            points.append(Point2D(
                _round_half_up(radius * math.cos(angle)) - 0.5,
                _round_half_up(radius * math.sin(angle)) - 0.5,
            ))
            angle += increment
        return points

    def draw_regular_polygon(
        self,
        surface: RenderSurface,
        num_points: int,
        position: Point2D,
        radius: float,
    ) -> object:
        """Build a regular polygon on surface and place it at position.

        Args:
            surface: The rendering surface that materialises the polygon.
            num_points: Number of vertices, at least 3.
            position: Canvas position of the polygon centre.
            radius: Circumradius in pixels.

        Returns:
            Whatever the surface returns for the placed primitive.
        """
        points = self.regular_polygon_vertices(num_points, radius)
        return surface.translate(surface.polygon(points), Point2D(*position))


# ---------------------------------------------------------------------------
# HexGeometry
# ---------------------------------------------------------------------------
class HexGeometry(PolygonGeometry):
    """Six-sided specialisation of PolygonGeometry."""

    def draw_hexagon(self, surface: RenderSurface, position: Point2D, radius: float) -> object:
        """Draw a hexagon of the given circumradius centred at position."""
        return self.draw_regular_polygon(surface, 6, position, radius)

    def hex_bounds(self, radius: float) -> HexBounds:
        """Return the bounding box of a hexagon with circumradius radius.

        Width is twice the apothem, height twice the circumradius.

        Raises:
            InvalidArgumentError: If radius is not a positive finite number.
        """
        if not 0 < radius < math.inf:
            raise InvalidArgumentError(f"Radius must be positive and finite, got {radius}")
        return HexBounds(width=radius * math.sqrt(3), height=radius * 2)


# ---------------------------------------------------------------------------
# HexCoordinateSystem
# ---------------------------------------------------------------------------
class HexCoordinateSystem:
    """Conversion between cube and odd-row offset hex coordinates.

    Row parity uses ``row & 1``, which for Python ints is the floor parity
    (1 for every odd row, negative rows included), so both conversions are
    exact inverses over all integers.
    """

    def cube_to_offset(self, cube: CubeCoordinate) -> OffsetCoordinate:
        """Convert a cube coordinate to an offset coordinate.

        Args:
            cube: An (x, y, z) triple with x + y + z == 0.

        Returns:
            The matching (col, row) pair.

        Raises:
            InvalidArgumentError: If cube is not a triple or its components
                do not sum to zero.
        """
        if len(cube) != 3:
            raise InvalidArgumentError(
                f"Cube coordinate needs 3 components, got {len(cube)}: {tuple(cube)}")
        x, y, z = cube
        if x + y + z != 0:
            raise InvalidArgumentError(
                f"Cube coordinate components must sum to 0, got ({x}, {y}, {z})")
        return OffsetCoordinate(col=x + (z - (z & 1)) // 2, row=z)

    def offset_to_cube(self, offset: OffsetCoordinate) -> CubeCoordinate:
        """Convert an offset coordinate to a cube coordinate.

        Every integer pair is a valid offset coordinate; y is derived so the
        result always satisfies x + y + z == 0.

        Args:
            offset: The (col, row) cell.

        Returns:
            The matching (x, y, z) triple.
        """
        col, row = offset
        x = col - (row - (row & 1)) // 2
        z = row
        return CubeCoordinate(x=x, y=-x - z, z=z)

    def offset_to_pixel(self, offset: OffsetCoordinate, radius: float) -> Point2D:
        """Return the canvas centre of an offset cell.

        Cell (0, 0) touches the top-left corner of the canvas; odd rows are
        shifted right by half a hexagon width.

        Args:
            offset: The (col, row) cell.
            radius: Hexagon circumradius in pixels.

        Returns:
            The cell centre in pixels.
        """
        col, row = offset
        w, h = HexGeometry().hex_bounds(radius)
        return Point2D(
            w / 2.0 + col * w + (row & 1) * w / 2.0,
            h / 2.0 + row * h * 0.75,
        )


# ---------------------------------------------------------------------------
# ColorConverter
# ---------------------------------------------------------------------------
class ColorConverter:
    """HSV to RGB conversion and colour-string parsing."""

    # Angular width of one hue sector, in radians. Deliberately 3*pi/8 rather
    # than the textbook pi/3; palettes rendered with this toolkit depend on it.
    SECTOR_WIDTH: float = math.pi * 0.75 * 0.5

    # Channel order of (chroma, x, 0) for each hue sector.
    _SECTORS: Tuple[Tuple[int, int, int], ...] = (
        (0, 1, 2),  # (c, x, 0)
        (1, 0, 2),  # (x, c, 0)
        (2, 0, 1),  # (0, c, x)
        (2, 1, 0),  # (0, x, c)
        (1, 2, 0),  # (x, 0, c)
        (0, 2, 1),  # (c, 0, x)
    )

    def hsv_to_rgb(self, hsv: HSVColor) -> RGBColor:
        """Convert an HSV colour to 8-bit RGB.

        Args:
            hsv: Hue, saturation and value, each in [0, 1].

        Returns:
            The RGB colour, each channel in [0, 255].

        Raises:
            InvalidArgumentError: If any component lies outside [0, 1].
        """
        h, s, v = hsv
        for name, component in (("h", h), ("s", s), ("v", v)):
            if not 0.0 <= component <= 1.0:
                raise InvalidArgumentError(
                    f"HSV component '{name}' must be in [0, 1], got {component}")

        c = v * s
        hue_rad = math.pi * 2 * h
        ratio = hue_rad / self.SECTOR_WIDTH
        x = c * (1 - abs(ratio % 2 - 1))
        m = v - c

        values = (c, x, 0.0)
        order = self._SECTORS[math.floor(ratio)]
        r, g, b = (math.floor((values[i] + m) * 255) for i in order)
        return RGBColor(r, g, b)

    def parse(self, color_str: str) -> RGBColor:
        """Parse a colour string into an RGB colour.

        Accepts CSS names and hex codes (via Pillow's ImageColor) and
        comma-separated 'R,G,B' triples.

        Raises:
            ValueError: If the string is not a recognised colour.
        """
        s = color_str.strip()
        if "," in s:
            return self._parse_rgb_triple(s)
        try:
            rgb = ImageColor.getrgb(s)
        except (ValueError, AttributeError):
            raise ValueError(f"Invalid color specification: '{color_str}'")
        return RGBColor(rgb[0], rgb[1], rgb[2])

    def _parse_rgb_triple(self, s: str) -> RGBColor:
        parts = [p.strip() for p in s.split(",")]
        if len(parts) != 3:
            raise ValueError(f"RGB tuple must have 3 components, got {len(parts)}: '{s}'")
        try:
            values = [int(p) for p in parts]
        except ValueError:
            raise ValueError(f"RGB components must be integers: '{s}'")
        for value in values:
            if value < 0 or value > 255:
                raise ValueError(f"RGB values must be in [0, 255], got {value}: '{s}'")
        return RGBColor(*values)


# ---------------------------------------------------------------------------
# LogisticCurve
# ---------------------------------------------------------------------------
class LogisticCurve:
    """Generalised logistic function used for easing.

    f(t) = A + (K - A) / (1 + exp(-B*t)) ** (1/v)

    with A the lower asymptote, K the upper asymptote, B the growth rate and
    v the growth asymptote shift.
    """

    def evaluate(self, params: LogisticParams) -> float:
        """Evaluate the curve at params.t.

        Args:
            params: Asymptotes, growth rate, shift and position.

        Returns:
            The curve value.

        Raises:
            DomainError: If growth_asymptote_shift is 0, or the curve
                diverges at t for a negative shift.
        """
        lower, upper, growth, shift, t = params
        if shift == 0:
            raise DomainError("growth_asymptote_shift must be non-zero")

        try:
            denominator = (1 + math.exp(-growth * t)) ** (1 / shift)
        except OverflowError:
            # exp(-B*t) has left float range: past the lower asymptote.
            if shift > 0:
                return float(lower)
            raise DomainError(
                f"Logistic curve diverges at t={t} with shift {shift}")
        if denominator == 0:
            raise DomainError(
                f"Logistic curve diverges at t={t} with shift {shift}")
        return lower + (upper - lower) / denominator


# ---------------------------------------------------------------------------
# PaletteRenderer
# ---------------------------------------------------------------------------
class PaletteRenderer:
    """Draws an offset hex grid whose cells sweep through an HSV palette.

    Hue runs across columns; brightness is eased across rows with the
    logistic curve. Supersampling plus Lanczos downsampling provides
    anti-aliasing.
    """

    # Anti-alias scale factors.
    AA_SCALES: Dict[str, int] = {
        "off": 1,
        "low": 2,
        "medium": 4,
        "high": 8,
    }

    def __init__(self) -> None:
        self._hex = HexGeometry()
        self._coords = HexCoordinateSystem()
        self._colors = ColorConverter()
        self._curve = LogisticCurve()

    def auto_grid_size(self, width: int, height: int, radius: float) -> Tuple[int, int]:
        """Return the (columns, rows) needed to cover a width x height canvas."""
        w, h = self._hex.hex_bounds(radius)
        columns = math.ceil(width / w) + 1
        rows = math.ceil(height / (h * 0.75)) + 1
        return columns, rows

    def cell_color(
        self,
        offset: OffsetCoordinate,
        columns: int,
        rows: int,
        hue_start: float,
        hue_end: float,
        saturation: float,
        value: float,
        ease: Tuple[float, float, float, float],
    ) -> RGBColor:
        """Compute the palette colour of one grid cell.

        Args:
            offset: The cell.
            columns: Total grid columns.
            rows: Total grid rows.
            hue_start: Hue of column 0.
            hue_end: Hue of the last column.
            saturation: Saturation for every cell.
            value: Peak brightness, scaled by the easing curve per row.
            ease: (lower, upper, growth, shift) of the logistic curve.

        Returns:
            The RGB colour of the cell.
        """
        col, row = offset
        frac = col / (columns - 1) if columns > 1 else 0.0
        hue = hue_start + (hue_end - hue_start) * frac
        t = row - (rows - 1) / 2.0
        eased = self._curve.evaluate(LogisticParams(*ease, t))
        brightness = min(max(value * eased, 0.0), 1.0)
        return self._colors.hsv_to_rgb(HSVColor(hue, saturation, brightness))

    def render(
        self,
        width: int,
        height: int,
        radius: float,
        columns: int,
        rows: int,
        hue_start: float,
        hue_end: float,
        saturation: float,
        value: float,
        ease: Tuple[float, float, float, float],
        line_width: int,
        color_line: Tuple[int, int, int],
        color_background: Tuple[int, int, int],
        antialias: str,
    ) -> Tuple[Image.Image, int]:
        """Render the palette tessellation.

        Args:
            width: Target image width in pixels.
            height: Target image height in pixels.
            radius: Hexagon circumradius in pixels.
            columns: Grid columns (already resolved, >= 1).
            rows: Grid rows (already resolved, >= 1).
            hue_start: Hue of column 0.
            hue_end: Hue of the last column.
            saturation: Saturation for every cell.
            value: Peak brightness.
            ease: (lower, upper, growth, shift) of the row easing curve.
            line_width: Outline width in pixels (0 = no outline).
            color_line: Outline colour.
            color_background: Background colour.
            antialias: Anti-alias level ('off', 'low', 'medium', 'high').

        Returns:
            A tuple of (PIL Image at target resolution, polygon count drawn).
        """
        k = self.AA_SCALES.get(antialias, 1)

        img = Image.new("RGB", (width * k, height * k), tuple(color_background))
        surface = PillowSurface(img, outline=tuple(color_line), line_width=line_width * k)

        polygon_count = 0
        for row in range(rows):
            for col in range(columns):
                offset = OffsetCoordinate(col, row)
                surface.fill = tuple(self.cell_color(
                    offset, columns, rows, hue_start, hue_end,
                    saturation, value, ease))
                centre = self._coords.offset_to_pixel(offset, radius * k)
                self._hex.draw_hexagon(surface, centre, radius * k)
                polygon_count += 1

        if k > 1:
            img = img.resize((width, height), Image.LANCZOS)

        return img, polygon_count


# ---------------------------------------------------------------------------
# SettingsManager
# ---------------------------------------------------------------------------
class SettingsManager:
    """JSON import/export of CLI parameters.

    JSON values override argparse defaults; flags given explicitly on the
    command line override JSON.
    """

    PERSISTED_KEYS: List[str] = [
        "width", "height", "radius", "columns", "rows",
        "hue_start", "hue_end", "saturation", "value",
        "ease_lower", "ease_upper", "ease_growth", "ease_shift",
        "line_width", "color_line", "color_background",
        "antialias", "file", "debug",
    ]

    def export_settings(self, params: argparse.Namespace, path: str) -> None:
        """Write the persisted parameters of params to a JSON file."""
        data: Dict = {key: getattr(params, key, None) for key in self.PERSISTED_KEYS}
        with open(path, "w") as f:
            json.dump(data, f, indent=2)

    def import_settings(self, path: str) -> Dict:
        """Load a settings dictionary from a JSON file.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
        """
        with open(path, "r") as f:
            return json.load(f)

    def merge_settings(
        self,
        defaults: argparse.Namespace,
        json_settings: Dict,
        explicit_keys: set,
    ) -> argparse.Namespace:
        """Apply json_settings onto defaults, skipping explicit CLI keys."""
        for key in self.PERSISTED_KEYS:
            if key in json_settings and key not in explicit_keys:
                setattr(defaults, key, json_settings[key])
        return defaults


# ---------------------------------------------------------------------------
# Version helper
# ---------------------------------------------------------------------------
def _changelog_version(fallback: str = "0.0.0") -> str:
    """Read the highest version from CHANGELOG.md next to this module.

    Scans for ``## [X.Y.Z]`` headings (skipping ``[Unreleased]``) and returns
    the first match. Returns *fallback* when the file is missing or has no
    versioned headings.
    """
    changelog = os.path.join(os.path.dirname(os.path.abspath(__file__)), "CHANGELOG.md")
    try:
        with open(changelog, "r", encoding="utf-8") as fh:
            for line in fh:
                m = re.match(r"^##\s+\[(\d+\.\d+\.\d+)\]", line)
                if m:
                    return m.group(1)
    except OSError:
        pass
    return fallback


def _with_extension(path: str, ext: str) -> str:
    """Append ext to path unless it already ends with it (case-insensitive).

    Args:
        path: A file path as given on the command line.
        ext: The extension including the dot, e.g. '.png'.

    Returns:
        The path with the extension guaranteed.
    """
    return path if path.lower().endswith(ext) else path + ext


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------
class Application:
    """CLI entry point: parse arguments, resolve settings, render, save."""

    VERSION:      str = _changelog_version("1.0.0")
    BUILD_DATE:   str = "2026-10-17"
    TITLE:        str = "Hex Palette Toolkit"
    BANNER_WIDTH: int = 60

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Execute the full application pipeline.

        Args:
            argv: Argument list; defaults to sys.argv[1:].
        """
        args, explicit_keys = self._parse_args(argv)

        if args.import_settings:
            path = _with_extension(args.import_settings, ".json")
            try:
                manager = SettingsManager()
                args = manager.merge_settings(args, manager.import_settings(path), explicit_keys)
            except FileNotFoundError:
                self._fail(f"Settings file not found: '{path}'")
            except json.JSONDecodeError as e:
                self._fail(f"Malformed JSON in settings file: {e}")

        export_path = None
        if args.export_settings:
            export_path = _with_extension(args.export_settings, ".json")
            try:
                SettingsManager().export_settings(args, export_path)
            except IOError as e:
                self._fail(f"Cannot write settings file: {e}")

        converter = ColorConverter()
        try:
            color_line = converter.parse(args.color_line)
            color_background = converter.parse(args.color_background)
        except ValueError as e:
            self._fail(str(e))

        if args.antialias not in PaletteRenderer.AA_SCALES:
            self._fail(f"Invalid antialias level '{args.antialias}'. "
                       f"Must be one of: {', '.join(sorted(PaletteRenderer.AA_SCALES))}")

        renderer = PaletteRenderer()
        try:
            columns, rows = args.columns, args.rows
            if columns <= 0 or rows <= 0:
                auto_columns, auto_rows = renderer.auto_grid_size(
                    args.width, args.height, args.radius)
                columns = columns if columns > 0 else auto_columns
                rows = rows if rows > 0 else auto_rows

            img, polygon_count = renderer.render(
                width=args.width,
                height=args.height,
                radius=args.radius,
                columns=columns,
                rows=rows,
                hue_start=args.hue_start,
                hue_end=args.hue_end,
                saturation=args.saturation,
                value=args.value,
                ease=(args.ease_lower, args.ease_upper, args.ease_growth, args.ease_shift),
                line_width=args.line_width,
                color_line=color_line,
                color_background=color_background,
                antialias=args.antialias,
            )
        except (InvalidArgumentError, DomainError) as e:
            self._fail(str(e))

        out_file = _with_extension(args.file, ".png")
        img.save(out_file, "PNG")

        print(self._banner_text())
        print(f"  Saved: {out_file} ({self._format_file_size(os.path.getsize(out_file))})")
        if export_path:
            print(f"  Saved: {export_path} ({self._format_file_size(os.path.getsize(export_path))})")

        if args.debug:
            self._print_debug(args, columns, rows, color_line, color_background, polygon_count)
        print()

    def _fail(self, message: str) -> NoReturn:
        """Report an error on stderr and exit with status 1.

        Args:
            message: The error text, printed after 'Error: '.
        """
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)

    def _parse_args(self, argv: Optional[List[str]]) -> Tuple[argparse.Namespace, set]:
        """Parse CLI arguments and detect which were explicitly provided."""
        args = self._build_parser().parse_args(argv)

        # Second parse with SUPPRESS defaults to detect explicit keys
        explicit_args = self._build_parser(suppress_defaults=True).parse_args(argv)
        return args, set(vars(explicit_args).keys())

    def _build_parser(self, suppress_defaults: bool = False) -> argparse.ArgumentParser:
        """Build the argparse ArgumentParser.

        Args:
            suppress_defaults: If True, every default is SUPPRESS so only
                explicitly given flags appear in the namespace.
        """
        banner = self._banner_text()

        class _BannerParser(argparse.ArgumentParser):
            """ArgumentParser that prints the banner before help text."""

            def print_help(self, file=None):
                if file is None:
                    file = sys.stdout
                file.write(banner + "\n\n")
                super().print_help(file)

        def default(value):
            return argparse.SUPPRESS if suppress_defaults else value

        parser = _BannerParser(
            description="Hex Palette Toolkit - render an HSV palette as a hexagonal tessellation.",
        )
        parser.add_argument("--width", type=int, default=default(1024),
                            help="Image width in pixels (default: 1024)")
        parser.add_argument("--height", type=int, default=default(768),
                            help="Image height in pixels (default: 768)")
        parser.add_argument("--radius", type=float, default=default(32.0),
                            help="Hexagon circumradius in pixels (default: 32)")
        parser.add_argument("--columns", type=int, default=default(0),
                            help="Grid columns, 0 = fill canvas (default: 0)")
        parser.add_argument("--rows", type=int, default=default(0),
                            help="Grid rows, 0 = fill canvas (default: 0)")
        parser.add_argument("--hue_start", type=float, default=default(0.0),
                            help="Hue of the first column, 0..1 (default: 0)")
        parser.add_argument("--hue_end", type=float, default=default(1.0),
                            help="Hue of the last column, 0..1 (default: 1)")
        parser.add_argument("--saturation", type=float, default=default(0.6),
                            help="Cell saturation, 0..1 (default: 0.6)")
        parser.add_argument("--value", type=float, default=default(0.9),
                            help="Peak cell brightness, 0..1 (default: 0.9)")
        parser.add_argument("--ease_lower", type=float, default=default(0.2),
                            help="Row easing lower asymptote (default: 0.2)")
        parser.add_argument("--ease_upper", type=float, default=default(1.0),
                            help="Row easing upper asymptote (default: 1)")
        parser.add_argument("--ease_growth", type=float, default=default(0.5),
                            help="Row easing growth rate (default: 0.5)")
        parser.add_argument("--ease_shift", type=float, default=default(1.0),
                            help="Row easing growth asymptote shift, non-zero (default: 1)")
        parser.add_argument("--line_width", type=int, default=default(0),
                            help="Outline width in pixels, 0 = no outline (default: 0)")
        parser.add_argument("--color_line", type=str, default=default("black"),
                            help="Hexagon outline colour (default: black)")
        parser.add_argument("--color_background", type=str, default=default("white"),
                            help="Background colour (default: white)")
        parser.add_argument("--antialias", type=str, default=default("off"),
                            help="Anti-alias level: off, low, medium, high (default: off)")
        parser.add_argument("--file", type=str, default=default("palette.png"),
                            help="Output PNG filename (default: palette.png)")
        parser.add_argument("--debug", nargs="?", const=True, default=default(False),
                            type=self._parse_bool_flag,
                            help="Enable debug output")
        parser.add_argument("--export_settings", type=str, default=None,
                            help="Export parameters to a JSON file")
        parser.add_argument("--import_settings", type=str, default=None,
                            help="Import parameters from a JSON file")
        return parser

    def _parse_bool_flag(self, value: str) -> bool:
        if isinstance(value, bool):
            return value
        if value.lower() in ("true", "1", "yes"):
            return True
        if value.lower() in ("false", "0", "no"):
            return False
        raise argparse.ArgumentTypeError(f"Boolean value expected, got '{value}'")

    def _banner_text(self) -> str:
        inner = self.BANNER_WIDTH - 2
        lines = [
            "┌" + "─" * inner + "┐",
            f"│{'  Program:    ' + self.TITLE:<{inner}}│",
            f"│{'  Version:    ' + self.VERSION:<{inner}}│",
            f"│{'  Build Date: ' + self.BUILD_DATE:<{inner}}│",
            "└" + "─" * inner + "┘",
        ]
        return "\n".join(lines)

    def _print_debug(
        self,
        args: argparse.Namespace,
        columns: int,
        rows: int,
        color_line: RGBColor,
        color_background: RGBColor,
        polygon_count: int,
    ) -> None:
        """Print the resolved parameters to stdout."""
        bounds = HexGeometry().hex_bounds(args.radius)
        print(f"\n  Image size:       {args.width} x {args.height}")
        print(f"  Radius:           {args.radius}")
        print(f"  Hex bounds:       {bounds.width:.2f} x {bounds.height:.2f}")
        print(f"  Grid:             {columns} x {rows}")
        print(f"  Hue range:        {args.hue_start} -> {args.hue_end}")
        print(f"  Saturation:       {args.saturation}")
        print(f"  Value:            {args.value}")
        print(f"  Easing:           lower={args.ease_lower} upper={args.ease_upper} "
              f"growth={args.ease_growth} shift={args.ease_shift}")
        print(f"  Line width:       {args.line_width}")
        print(f"  Line colour:      {args.color_line} -> {tuple(color_line)}")
        print(f"  Background:       {args.color_background} -> {tuple(color_background)}")
        print(f"  Anti-alias:       {args.antialias}")
        print(f"  Polygons drawn:   {polygon_count}")

    def _format_file_size(self, size_bytes: int) -> str:
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.2f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.2f} MB"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main() -> None:
    """Main entry point for the Hex Palette Toolkit."""
    if sys.stdout and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    Application().run()


if __name__ == "__main__":
    main()
