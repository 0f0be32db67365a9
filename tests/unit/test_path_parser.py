"""Tests for SVG path data parsing."""

import pytest

from svg2glif.core.path_parser import ParserState, apply_command, parse_path
from svg2glif.domain import ClosePath, CurveTo, LineTo, MoveTo
from svg2glif.exceptions import PathParseError, UnsupportedCommandError


class TestAbsoluteCommands:
    """Tests for uppercase (absolute) commands."""

    def test_closed_square(self):
        """Test a square with an explicit close."""
        commands = parse_path("M 10 10 L 90 10 L 90 90 L 10 90 Z")

        assert commands == [
            MoveTo((10.0, 10.0)),
            LineTo((90.0, 10.0)),
            LineTo((90.0, 90.0)),
            LineTo((10.0, 90.0)),
            ClosePath(),
        ]

    def test_cubic_curve(self):
        """Test a cubic curve keeps both control points."""
        commands = parse_path("M0 0 C 10 20 30 40 50 60")

        assert commands == [
            MoveTo((0.0, 0.0)),
            CurveTo((10.0, 20.0), (30.0, 40.0), (50.0, 60.0)),
        ]

    def test_empty_path(self):
        """Test empty and blank path data produce no commands."""
        assert parse_path("") == []
        assert parse_path("   \n\t ") == []


class TestRelativeCommands:
    """Tests for lowercase (relative) commands."""

    def test_relative_lineto(self):
        """Test relative lineto is resolved against the current point."""
        commands = parse_path("M 10 10 l 5 0 l 0 5")

        assert commands == [
            MoveTo((10.0, 10.0)),
            LineTo((15.0, 10.0)),
            LineTo((15.0, 15.0)),
        ]

    def test_relative_curve_uses_segment_start(self):
        """Test all curve points are relative to the segment start."""
        commands = parse_path("M 100 100 c 10 0 20 10 20 20")

        assert commands[1] == CurveTo((110.0, 100.0), (120.0, 110.0), (120.0, 120.0))

    def test_initial_relative_moveto(self):
        """Test a leading relative moveto is relative to the origin."""
        commands = parse_path("m 5 6 l 1 1")

        assert commands == [MoveTo((5.0, 6.0)), LineTo((6.0, 7.0))]

    def test_relative_after_close(self):
        """Test closepath moves the current point back to the subpath start."""
        commands = parse_path("M 10 10 L 20 10 L 20 20 z m 5 5 l 1 0")

        assert commands[4] == MoveTo((15.0, 15.0))
        assert commands[5] == LineTo((16.0, 15.0))


class TestRepetition:
    """Tests for implicit command repetition."""

    def test_repeated_lineto(self):
        """Test several coordinate pairs after one L."""
        commands = parse_path("M 0 0 L 10 0 10 10 0 10")

        assert commands[1:] == [
            LineTo((10.0, 0.0)),
            LineTo((10.0, 10.0)),
            LineTo((0.0, 10.0)),
        ]

    def test_moveto_pairs_become_lineto(self):
        """Test extra pairs after M are implicit linetos."""
        commands = parse_path("M 0 0 10 0 10 10")

        assert commands == [MoveTo((0.0, 0.0)), LineTo((10.0, 0.0)), LineTo((10.0, 10.0))]

    def test_relative_moveto_pairs_are_relative(self):
        """Test extra pairs after m are implicit relative linetos."""
        commands = parse_path("m 10 10 5 0 0 5")

        assert commands == [MoveTo((10.0, 10.0)), LineTo((15.0, 10.0)), LineTo((15.0, 15.0))]

    def test_repeated_curveto(self):
        """Test two curve argument groups after one C."""
        commands = parse_path("M 0 0 C 1 1 2 2 3 3 4 4 5 5 6 6")

        assert commands[1:] == [
            CurveTo((1.0, 1.0), (2.0, 2.0), (3.0, 3.0)),
            CurveTo((4.0, 4.0), (5.0, 5.0), (6.0, 6.0)),
        ]

    def test_coordinates_after_close_start_new_subpath(self):
        """Test bare coordinates after Z act as a moveto."""
        commands = parse_path("M 0 0 L 10 0 Z 50 50 L 60 50")

        assert commands[3:] == [MoveTo((50.0, 50.0)), LineTo((60.0, 50.0))]

    def test_drawing_after_close_reopens_at_subpath_start(self):
        """Test a lineto right after Z starts from the closed subpath start."""
        commands = parse_path("M 5 5 L 10 5 Z L 10 10")

        assert commands[3:] == [MoveTo((5.0, 5.0)), LineTo((10.0, 10.0))]


class TestNumberSyntax:
    """Tests for number tokenization."""

    def test_commas_and_whitespace(self):
        """Test commas and mixed whitespace as separators."""
        commands = parse_path("M10,20\nL\t30 , 40")

        assert commands == [MoveTo((10.0, 20.0)), LineTo((30.0, 40.0))]

    def test_minus_sign_starts_new_number(self):
        """Test numbers abutting via a minus sign."""
        commands = parse_path("M10-20L-5-5")

        assert commands == [MoveTo((10.0, -20.0)), LineTo((-5.0, -5.0))]

    def test_decimal_point_starts_new_number(self):
        """Test numbers abutting via a second decimal point."""
        commands = parse_path("M1.5.5")

        assert commands == [MoveTo((1.5, 0.5))]

    def test_exponent(self):
        """Test scientific notation."""
        commands = parse_path("M 1e2 2.5E-1")

        assert commands == [MoveTo((100.0, 0.25))]

    def test_command_without_separator(self):
        """Test command letters glued to numbers."""
        commands = parse_path("M0 0L10 10Z")

        assert commands == [MoveTo((0.0, 0.0)), LineTo((10.0, 10.0)), ClosePath()]


class TestUnsupportedCommands:
    """Tests for commands that are rejected."""

    @pytest.mark.parametrize("letter", ["Q", "q", "T", "t", "S", "s", "A", "a", "H", "h", "V", "v"])
    def test_unsupported_letters(self, letter):
        """Test each unsupported command letter is named in the error."""
        with pytest.raises(UnsupportedCommandError) as exc_info:
            parse_path(f"M 0 0 {letter} 1 2 3 4")

        assert exc_info.value.letter == letter
        assert exc_info.value.position == 6

    def test_quadratic_is_not_approximated(self):
        """Test a quadratic curve fails instead of being skipped."""
        with pytest.raises(UnsupportedCommandError, match="'Q'"):
            parse_path("M 0 0 Q 50 50 100 0 Z")


class TestParseErrors:
    """Tests for malformed path data."""

    def test_missing_argument(self):
        """Test an incomplete coordinate pair."""
        with pytest.raises(PathParseError, match="expects 2 numbers, got 1"):
            parse_path("M 10")

    def test_extra_argument(self):
        """Test a dangling number after a complete lineto."""
        with pytest.raises(PathParseError) as exc_info:
            parse_path("M 0 0 L 10 20 30")

        assert exc_info.value.position == 16

    def test_incomplete_curve(self):
        """Test a curve with too few numbers before the next command."""
        with pytest.raises(PathParseError, match="'C' expects 6 numbers, got 4"):
            parse_path("M 0 0 C 1 2 3 4 L 5 5")

    def test_malformed_exponent(self):
        """Test an exponent without digits."""
        with pytest.raises(PathParseError, match="malformed number"):
            parse_path("M 1e 2")

    def test_number_overflow(self):
        """Test a literal too large for a float is rejected."""
        with pytest.raises(PathParseError, match="out of range") as exc_info:
            parse_path("M 1e400 0")

        assert exc_info.value.position == 2

    def test_relative_overflow(self):
        """Test relative steps that overflow the current point are rejected."""
        with pytest.raises(PathParseError, match="coordinate out of range"):
            parse_path("M 1e308 0 l 1e308 0")

    def test_control_point_overflow(self):
        """Test an overflowing control point fails even if the end point is finite."""
        with pytest.raises(PathParseError, match="coordinate out of range"):
            parse_path("M 1e308 0 c 1e308 0 0 0 0 0")

    def test_lone_minus(self):
        """Test a minus sign with no digits."""
        with pytest.raises(PathParseError, match="malformed number") as exc_info:
            parse_path("M 0 - 5")

        assert exc_info.value.position == 4

    def test_unexpected_character(self):
        """Test a character that is neither a command nor a number."""
        with pytest.raises(PathParseError, match="unexpected character '#'"):
            parse_path("M 0 0 L # 5")

    def test_unknown_letter(self):
        """Test a letter that is not an SVG path command."""
        with pytest.raises(PathParseError, match="unknown command 'X'"):
            parse_path("M 0 0 X 5 5")

    def test_numbers_before_command(self):
        """Test coordinates with no command."""
        with pytest.raises(PathParseError, match="before any command") as exc_info:
            parse_path("10 10 L 20 20")

        assert exc_info.value.position == 0

    def test_must_start_with_moveto(self):
        """Test path data that starts with a lineto."""
        with pytest.raises(PathParseError, match="must begin with a moveto"):
            parse_path("L 10 10")


class TestParserState:
    """Tests for the explicit parser state transitions."""

    def test_moveto_sets_subpath_start(self):
        """Test moveto updates both current point and subpath start."""
        state, emitted = apply_command("M", [3.0, 4.0], ParserState())

        assert emitted == [MoveTo((3.0, 4.0))]
        assert state.current == (3.0, 4.0)
        assert state.subpath_start == (3.0, 4.0)
        assert state.repeat == "L"

    def test_closepath_returns_to_start(self):
        """Test closepath restores the subpath start as current point."""
        state = ParserState(current=(9.0, 9.0), subpath_start=(1.0, 2.0), repeat="L")

        new_state, emitted = apply_command("z", [], state)

        assert emitted == [ClosePath()]
        assert new_state.current == (1.0, 2.0)
        assert new_state.repeat == "m"
        assert new_state.after_close

    def test_state_is_not_mutated(self):
        """Test applying a command leaves the input state untouched."""
        state = ParserState(current=(1.0, 1.0), subpath_start=(1.0, 1.0), repeat="L")

        apply_command("l", [1.0, 1.0], state)

        assert state.current == (1.0, 1.0)
