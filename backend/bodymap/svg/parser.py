"""Path-data interpreter — SVG path mini-language → immutable ``Path``.

Single pass over the string with a cursor. Supports ``M L H V C S Q T A Z`` in
absolute and relative (lower-case) form, implicit command repetition, and
smooth-curve control-point reflection.

Malformed input never raises: the first token that cannot be read stops
interpretation and the segments emitted so far are returned.

Elliptical arcs are approximated by a single cubic whose control points sit at
1/3 and 2/3 of the chord. Rotation, large-arc and sweep flags are read but do
not change the emitted geometry.
"""

from __future__ import annotations

import logging
import math

from bodymap.svg.primitives import (
    ORIGIN,
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Path,
    Point,
    QuadCurveTo,
    Segment,
)

logger = logging.getLogger(__name__)

COMMAND_LETTERS = frozenset("MmLlHhVvCcSsQqTtAaZz")
_CUBIC_COMMANDS = frozenset("CcSs")
_QUAD_COMMANDS = frozenset("QqTt")
_DIGITS = frozenset("0123456789")
_SEPARATORS = frozenset(" \t\n\r\f\v,")


class _Abort(Exception):
    """Internal signal: the current command could not read its operands."""


class _Cursor:
    """Token reader over a path-data string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_separators(self) -> None:
        text = self.text
        while self.pos < len(text) and (text[self.pos] in _SEPARATORS or text[self.pos].isspace()):
            self.pos += 1

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def read_number(self) -> float:
        """sign? digits? ('.' digits?)? (e sign? digits)?; needs at least one mantissa digit."""
        self.skip_separators()
        text = self.text
        start = self.pos
        i = start
        n = len(text)
        has_digits = False

        if i < n and text[i] in "+-":
            i += 1
        while i < n and text[i] in _DIGITS:
            has_digits = True
            i += 1
        if i < n and text[i] == ".":
            i += 1
            while i < n and text[i] in _DIGITS:
                has_digits = True
                i += 1
        # Exponent only when followed by a sign or digit, so "2e" leaves the "e" alone.
        if i + 1 < n and text[i] in "eE" and (text[i + 1] in "+-" or text[i + 1] in _DIGITS):
            i += 1
            if text[i] in "+-":
                i += 1
            while i < n and text[i] in _DIGITS:
                i += 1

        if not has_digits:
            raise _Abort(f"expected number at offset {start}")
        token = text[start:i]
        try:
            value = float(token)
        except ValueError:
            raise _Abort(f"malformed number {token!r} at offset {start}") from None
        if not math.isfinite(value):
            raise _Abort(f"number {token!r} out of range at offset {start}")
        self.pos = i
        return value

    def read_flag(self) -> bool:
        """Single '0' or '1'; no separator needed before the next token."""
        self.skip_separators()
        ch = self.peek()
        if ch == "0" or ch == "1":
            self.pos += 1
            return ch == "1"
        raise _Abort(f"expected arc flag at offset {self.pos}")

    def read_pair(self) -> tuple[float, float]:
        return self.read_number(), self.read_number()


def _reflect(control: Point, about: Point) -> Point:
    return Point(2 * about.x - control.x, 2 * about.y - control.y)


def _arc_radius_correction(
    start: Point, end: Point, rx: float, ry: float, x_rotation_deg: float
) -> tuple[float, float]:
    """Scale radii up when they are too small to span the chord."""
    phi = math.radians(x_rotation_deg)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)
    dx = (start.x - end.x) / 2
    dy = (start.y - end.y) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    rx = abs(rx)
    ry = abs(ry)
    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        rx *= math.sqrt(lam)
        ry *= math.sqrt(lam)
    return rx, ry


def approximate_arc(
    start: Point,
    rx: float,
    ry: float,
    x_rotation_deg: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
) -> list[Segment]:
    """Chord-based stand-in for an elliptical arc.

    Non-positive radius → straight line. Coincident endpoints → nothing.
    Otherwise one cubic with controls at 1/3 and 2/3 along the chord.
    """
    if not (rx > 0 and ry > 0):
        return [LineTo(end)]
    if start == end:
        return []

    rx, ry = _arc_radius_correction(start, end, rx, ry, x_rotation_deg)
    logger.debug(
        "arc approximated as chord cubic: r=(%.3f, %.3f) large=%s sweep=%s", rx, ry, large_arc, sweep
    )

    dx = end.x - start.x
    dy = end.y - start.y
    c1 = Point(start.x + dx / 3, start.y + dy / 3)
    c2 = Point(start.x + 2 * dx / 3, start.y + 2 * dy / 3)
    return [CubicCurveTo(c1, c2, end)]


class PathInterpreter:
    """Stateful interpreter for one path-data string."""

    def __init__(self, text: str, debug: bool = False) -> None:
        self.cursor = _Cursor(text)
        self.debug = debug
        self.segments: list[Segment] = []
        self.current = ORIGIN
        self.subpath_start = ORIGIN
        self.last_control = ORIGIN
        # Command whose operands are being read, and the one executed before it.
        self.command: str | None = None
        self.previous: str | None = None

    def run(self) -> Path:
        cursor = self.cursor
        while True:
            cursor.skip_separators()
            if cursor.at_end:
                break

            ch = cursor.peek()
            if ch in COMMAND_LETTERS:
                cursor.pos += 1
                self.command = ch
                if self.debug:
                    logger.debug("command %s at offset %d", ch, cursor.pos - 1)
            elif self.command is None or self.command in "Zz":
                # Operands with nothing to repeat.
                logger.debug("path data stopped at offset %d: unexpected %r", cursor.pos, ch)
                break

            cmd = self.command
            try:
                self._execute(cmd)
            except _Abort as exc:
                logger.debug("path data stopped: %s (%d segments kept)", exc, len(self.segments))
                break

            # A move repeats as its line equivalent and is seen as such by reflection.
            if cmd == "M":
                self.command = self.previous = "L"
            elif cmd == "m":
                self.command = self.previous = "l"
            else:
                self.previous = cmd

        return Path(tuple(self.segments))

    def _emit(self, seg: Segment) -> None:
        self.segments.append(seg)
        if self.debug:
            logger.debug("  %r", seg)

    def _point(self, x: float, y: float, relative: bool) -> Point:
        if relative:
            return Point(self.current.x + x, self.current.y + y)
        return Point(x, y)

    def _execute(self, cmd: str) -> None:
        cursor = self.cursor
        relative = cmd.islower()
        kind = cmd.upper()

        if kind == "M":
            p = self._point(*cursor.read_pair(), relative)
            self.current = self.subpath_start = self.last_control = p
            self._emit(MoveTo(p))

        elif kind == "L":
            p = self._point(*cursor.read_pair(), relative)
            self.current = self.last_control = p
            self._emit(LineTo(p))

        elif kind == "H":
            x = cursor.read_number()
            p = Point(self.current.x + x if relative else x, self.current.y)
            self.current = self.last_control = p
            self._emit(LineTo(p))

        elif kind == "V":
            y = cursor.read_number()
            p = Point(self.current.x, self.current.y + y if relative else y)
            self.current = self.last_control = p
            self._emit(LineTo(p))

        elif kind == "C":
            x1, y1 = cursor.read_pair()
            x2, y2 = cursor.read_pair()
            x, y = cursor.read_pair()
            c1 = self._point(x1, y1, relative)
            c2 = self._point(x2, y2, relative)
            end = self._point(x, y, relative)
            self._emit(CubicCurveTo(c1, c2, end))
            self.last_control = c2
            self.current = end

        elif kind == "S":
            x2, y2 = cursor.read_pair()
            x, y = cursor.read_pair()
            if self.previous is not None and self.previous in _CUBIC_COMMANDS:
                c1 = _reflect(self.last_control, self.current)
            else:
                c1 = self.current
            c2 = self._point(x2, y2, relative)
            end = self._point(x, y, relative)
            self._emit(CubicCurveTo(c1, c2, end))
            self.last_control = c2
            self.current = end

        elif kind == "Q":
            x1, y1 = cursor.read_pair()
            x, y = cursor.read_pair()
            c = self._point(x1, y1, relative)
            end = self._point(x, y, relative)
            self._emit(QuadCurveTo(c, end))
            self.last_control = c
            self.current = end

        elif kind == "T":
            x, y = cursor.read_pair()
            if self.previous is not None and self.previous in _QUAD_COMMANDS:
                c = _reflect(self.last_control, self.current)
            else:
                c = self.current
            end = self._point(x, y, relative)
            self._emit(QuadCurveTo(c, end))
            self.last_control = c
            self.current = end

        elif kind == "A":
            rx = cursor.read_number()
            ry = cursor.read_number()
            rotation = cursor.read_number()
            large_arc = cursor.read_flag()
            sweep = cursor.read_flag()
            end = self._point(*cursor.read_pair(), relative)
            for seg in approximate_arc(self.current, rx, ry, rotation, large_arc, sweep, end):
                self._emit(seg)
            self.last_control = end
            self.current = end

        elif kind == "Z":
            self._emit(ClosePath())
            self.current = self.last_control = self.subpath_start


def parse_path_data(description: str, debug: bool = False) -> Path:
    """Interpret a path-data string. Best effort: never raises on malformed input."""
    path = PathInterpreter(description, debug=debug).run()
    if debug:
        logger.debug("parsed %d segments from %d chars", len(path), len(description))
    return path
