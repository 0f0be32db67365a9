"""Parser for the SVG path ``d`` attribute.

Turns path data such as ``"M 10 10 l 80 0 C 90 50 50 90 10 90 z"`` into a
list of absolute PathCommand objects.

Supported commands are moveto, lineto, cubic curveto and closepath, in both
absolute (uppercase) and relative (lowercase) form. The remaining SVG path
commands are rejected with UnsupportedCommandError rather than approximated.

The parser threads an immutable ParserState (current point, subpath start,
repeated command) through every step, so each step is a pure function of
its input state.
"""

import logging
import math
import re
from dataclasses import astuple, dataclass, replace

from svg2glif.domain import ClosePath, CurveTo, LineTo, MoveTo, PathCommand
from svg2glif.exceptions import PathParseError, UnsupportedCommandError

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SEPARATORS = frozenset(" \t\r\n\f,")

# Number of arguments consumed by one repetition of each command
ARGUMENT_COUNTS: dict[str, int] = {"M": 2, "L": 2, "C": 6, "Z": 0}

UNSUPPORTED_COMMANDS = frozenset("HhVvSsQqTtAa")


@dataclass(frozen=True, slots=True)
class ParserState:
    """Position of the pen between two parse steps.

    Attributes:
        current: Current point, start of the next segment
        subpath_start: First point of the current subpath (closepath target)
        repeat: Command letter applied to argument groups with no letter
        after_close: True when the previous command was a closepath
    """

    current: tuple[float, float] = (0.0, 0.0)
    subpath_start: tuple[float, float] = (0.0, 0.0)
    repeat: str | None = None
    after_close: bool = False


class _Scanner:
    """Cursor over path data that reads command letters and numbers."""

    def __init__(self, data: str) -> None:
        self.data = data
        self.pos = 0

    def skip_separators(self) -> None:
        while self.pos < len(self.data) and self.data[self.pos] in _SEPARATORS:
            self.pos += 1

    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def peek(self) -> str:
        return self.data[self.pos]

    def read_number(self) -> float:
        start = self.pos
        match = _NUMBER_RE.match(self.data, start)
        if match is None:
            char = self.data[start]
            if char in "+-.":
                raise PathParseError(f"malformed number starting with '{char}'", start)
            raise PathParseError(f"unexpected character '{char}'", start)

        end = match.end()
        if end < len(self.data) and self.data[end] in "eE":
            raise PathParseError(
                f"malformed number '{self.data[start:end + 1]}': exponent has no digits",
                start,
            )
        value = float(match.group())
        if not math.isfinite(value):
            raise PathParseError(f"number out of range '{match.group()}'", start)
        self.pos = end
        return value

    def read_arguments(self, letter: str, count: int) -> list[float]:
        args: list[float] = []
        while len(args) < count:
            self.skip_separators()
            if self.at_end() or self.peek().isalpha():
                raise PathParseError(
                    f"command '{letter}' expects {count} numbers, got {len(args)}",
                    self.pos,
                )
            args.append(self.read_number())
        return args


def _out_of_range(commands: list[PathCommand]) -> bool:
    return any(
        not math.isfinite(value)
        for command in commands
        for point in astuple(command)
        for value in point
    )


def _resolve(state: ParserState, relative: bool, x: float, y: float) -> tuple[float, float]:
    if relative:
        return (state.current[0] + x, state.current[1] + y)
    return (x, y)


def apply_command(
    letter: str, args: list[float], state: ParserState
) -> tuple[ParserState, list[PathCommand]]:
    """Apply one command repetition to the parser state.

    Args:
        letter: Command letter (one of MmLlCcZz)
        args: Exactly ARGUMENT_COUNTS[letter.upper()] numbers
        state: State before the command

    Returns:
        Tuple of (new state, absolute commands emitted)
    """
    command = letter.upper()
    relative = letter.islower()
    emitted: list[PathCommand] = []

    if command == "Z":
        emitted.append(ClosePath())
        new_state = replace(
            state,
            current=state.subpath_start,
            repeat="m" if relative else "M",
            after_close=True,
        )
        return new_state, emitted

    if command != "M" and state.after_close:
        # Drawing after a closepath starts a new subpath at the old start point
        emitted.append(MoveTo(state.current))

    if command == "M":
        point = _resolve(state, relative, args[0], args[1])
        emitted.append(MoveTo(point))
        new_state = ParserState(
            current=point,
            subpath_start=point,
            repeat="l" if relative else "L",
        )
    elif command == "L":
        point = _resolve(state, relative, args[0], args[1])
        emitted.append(LineTo(point))
        new_state = replace(state, current=point, repeat=letter, after_close=False)
    elif command == "C":
        control1 = _resolve(state, relative, args[0], args[1])
        control2 = _resolve(state, relative, args[2], args[3])
        end = _resolve(state, relative, args[4], args[5])
        emitted.append(CurveTo(control1, control2, end))
        new_state = replace(state, current=end, repeat=letter, after_close=False)
    else:
        raise ValueError(f"Not a supported path command: {letter!r}")

    return new_state, emitted


def parse_path(data: str) -> list[PathCommand]:
    """Parse SVG path data into absolute drawing commands.

    Args:
        data: Value of a path element's ``d`` attribute

    Returns:
        Commands in path order; empty for empty or blank path data

    Raises:
        UnsupportedCommandError: For H, V, S, Q, T and A commands
        PathParseError: For malformed numbers, wrong argument counts,
            out of range values, stray characters, or data that does not
            start with a moveto
    """
    scanner = _Scanner(data)
    state = ParserState()
    commands: list[PathCommand] = []

    scanner.skip_separators()
    while not scanner.at_end():
        position = scanner.pos
        char = scanner.peek()

        if char.isalpha():
            scanner.pos += 1
            if char in UNSUPPORTED_COMMANDS:
                raise UnsupportedCommandError(char, position)
            if char.upper() not in ARGUMENT_COUNTS:
                raise PathParseError(f"unknown command '{char}'", position)
            if not commands and char not in "Mm":
                raise PathParseError(
                    f"path data must begin with a moveto, found '{char}'", position
                )
            letter = char
        elif state.repeat is None:
            raise PathParseError("coordinates found before any command", position)
        else:
            letter = state.repeat

        args = scanner.read_arguments(letter, ARGUMENT_COUNTS[letter.upper()])
        state, emitted = apply_command(letter, args, state)
        if _out_of_range(emitted):
            raise PathParseError("coordinate out of range", position)
        commands.extend(emitted)
        scanner.skip_separators()

    logger.debug("Parsed %d path commands from %d characters", len(commands), len(data))
    return commands
