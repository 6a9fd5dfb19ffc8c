import io

from sphereview.color import Color, format_color, write_color


def test_white_maps_to_full_bytes():
    assert format_color(Color(1, 1, 1)) == "255 255 255"


def test_black_maps_to_zero_bytes():
    assert format_color(Color(0, 0, 0)) == "0 0 0"


def test_half_truncates():
    assert format_color(Color(0.5, 0.5, 0.5)) == "127 127 127"


def test_channels_keep_their_order():
    r, g, b = format_color(Color(1, 0, 0.0)).split()
    assert (r, g, b) == ("255", "0", "0")


def test_write_color_appends_newline():
    out = io.StringIO()
    write_color(out, Color(1, 1, 1))
    assert out.getvalue() == format_color(Color(1, 1, 1)) + "\n"


def test_write_color_writes_one_line_per_call():
    out = io.StringIO()
    colors = [Color(0, 0, 0), Color(1, 1, 1), Color(0.25, 0.5, 0.75)]
    for c in colors:
        write_color(out, c)
    assert out.getvalue().splitlines() == [format_color(c) for c in colors]


def test_bytes_increase_with_intensity():
    low = int(format_color(Color(0.2, 0, 0)).split()[0])
    high = int(format_color(Color(0.8, 0, 0)).split()[0])
    assert 0 <= low < high <= 255