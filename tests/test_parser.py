import pytest

from wireframe.model import DEFAULT_COLOR
from wireframe.parser import (
    MAX_COLOR,
    MAX_HEIGHT,
    MapError,
    check_line,
    normalize_line,
    parse_hex_color,
    parse_point,
    parse_row,
)


@pytest.mark.parametrize(
    "line",
    ["0 1 2\n", "-1 +2 3", "1,0xff 2\n", "1,0xFF00AA 2,255\n", "   4   5  \n", "10,0"],
)
def test_check_line_accepts_valid(line):
    assert check_line(line) is True


@pytest.mark.parametrize(
    "line",
    ["1-2", "a 1", "1,2,3", "1,0xG1", "-x", "--1", "1,", "1,0x 2", "1\t2", "1, 2"],
)
def test_check_line_rejects_invalid(line):
    assert check_line(line) is False


def test_normalize_collapses_spaces_and_uppercases_hex():
    assert normalize_line("  1   2,0xff  \n") == "1 2,0xFF"


def test_normalize_is_idempotent():
    once = normalize_line(" 3  -4,0xabcdef   5\n")
    assert normalize_line(once) == once


@pytest.mark.parametrize("line", ["", "    ", "\n", "   \n"])
def test_normalize_rejects_empty(line):
    with pytest.raises(MapError):
        normalize_line(line)


def test_parse_hex_color_default_white():
    assert parse_hex_color("0xFFFFFF") == DEFAULT_COLOR


def test_parse_hex_color_limit():
    assert parse_hex_color("0x7FFFFFFF") == MAX_COLOR
    with pytest.raises(MapError):
        parse_hex_color("0x80000000")


@pytest.mark.parametrize("value", [0, 1, 0xFF, 0x123456, 0xFF0000, MAX_COLOR])
def test_parse_hex_color_round_trip(value):
    assert parse_hex_color(f"0x{value:X}") == value
    assert parse_hex_color(f"0x{value:x}") == value


@pytest.mark.parametrize("text", ["FF", "0x", "0xZZ", "1xFF"])
def test_parse_hex_color_rejects_malformed(text):
    with pytest.raises(MapError):
        parse_hex_color(text)


def test_parse_point_plain_height_gets_default_color():
    point = parse_point("10")
    assert (point.z, point.color) == (10, DEFAULT_COLOR)


def test_parse_point_signs():
    assert parse_point("-5").z == -5
    assert parse_point("+7").z == 7


def test_parse_point_hex_color():
    point = parse_point("-5,0xFF0000")
    assert (point.z, point.color) == (-5, 0xFF0000)


def test_parse_point_decimal_color():
    point = parse_point("3,255")
    assert (point.z, point.color) == (3, 255)


def test_parse_point_decimal_color_limit():
    assert parse_point(f"1,{MAX_COLOR}").color == MAX_COLOR
    with pytest.raises(MapError):
        parse_point(f"1,{MAX_COLOR + 1}")


def test_parse_point_height_limit():
    assert parse_point(str(MAX_HEIGHT)).z == MAX_HEIGHT
    assert parse_point(f"-{MAX_HEIGHT}").z == -MAX_HEIGHT
    with pytest.raises(MapError):
        parse_point(str(MAX_HEIGHT + 1))


@pytest.mark.parametrize("token", ["x", "1a", "5,", ",0xFF"])
def test_parse_point_rejects_malformed(token):
    with pytest.raises(MapError):
        parse_point(token)


def test_parse_row_heights_in_order():
    points = parse_row("0 1 2\n")
    assert [point.z for point in points] == [0, 1, 2]
    assert all(point.color == DEFAULT_COLOR for point in points)


def test_parse_row_with_colors_and_spacing():
    points = parse_row("  4,0xff   -2  7,255 \n")
    assert [(point.z, point.color) for point in points] == [
        (4, 0xFF),
        (-2, DEFAULT_COLOR),
        (7, 255),
    ]


def test_parse_row_same_for_raw_and_normalized():
    raw = " 1,0xabc   -3  +9\n"
    assert parse_row(raw) == parse_row(normalize_line(raw))


@pytest.mark.parametrize("line", ["1 2 a\n", "1-2", "   \n", "1,2,3"])
def test_parse_row_rejects_bad_lines(line):
    with pytest.raises(MapError):
        parse_row(line)


def test_map_error_is_value_error():
    with pytest.raises(ValueError):
        parse_row("bad")