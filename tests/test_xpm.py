import pytest

from fractol.image import Image
from fractol.xpm import (
    XpmError,
    parse_xpm,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)

OPEN_XPM = """/* XPM */
static char *open_xpm[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c #FF0000",
"X c blue",
// pixels follow
" .X",
"X. ",
};
"""


def test_xpm_from_file(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(OPEN_XPM)
    img = xpm_file_to_image(path)
    assert (img.width, img.height) == (3, 2)
    assert img.get_pixel(0, 0) == 0xFF000000
    assert img.get_pixel(1, 0) == 0xFF0000
    assert img.get_pixel(2, 0) == 0x0000FF
    assert img.get_pixel(0, 1) == 0x0000FF
    assert img.get_pixel(1, 1) == 0xFF0000
    assert img.get_pixel(2, 1) == 0xFF000000


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "absent.xpm")


def test_xpm_from_data():
    data = ["2 1 2 1", "a c #00FF00", "b c black", "ab"]
    img = xpm_to_image(data)
    assert isinstance(img, Image)
    assert (img.width, img.height) == (2, 1)
    assert img.get_pixel(0, 0) == 0x00FF00
    assert img.get_pixel(1, 0) == 0x000000


def test_xpm_to_image_rejects_plain_string():
    with pytest.raises(TypeError):
        xpm_to_image("1 1 1 1")


def test_two_word_colour_name():
    img = parse_xpm(["1 1 1 1", "a c dark red", "a"])
    assert img.get_pixel(0, 0) == 0x8B0000


def test_multi_char_keys():
    img = parse_xpm(["2 1 2 3", "aaa c #FF99FF", "bbb c cyan", "bbbaaa"])
    assert img.get_pixel(0, 0) == 0x00FFFF
    assert img.get_pixel(1, 0) == 0xFF99FF


def test_short_keys_later_entry_wins():
    img = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert img.get_pixel(0, 0) == 0x0000FF


def test_long_keys_first_entry_wins():
    img = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert img.get_pixel(0, 0) == 0xFF0000


def test_unknown_key_is_black():
    img = parse_xpm(["1 1 1 1", "a c red", "z"])
    assert img.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["3 2 1"],
        ["0 2 1 1", "a c red", "a", "a"],
        ["x 2 1 1", "a c red", "a", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["1 1 2 1", "a c red"],
    ],
)
def test_bad_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_strip_block_comment_keeps_length():
    assert strip_comments("a/* x */b") == "a" + " " * 7 + "b"


def test_strip_line_comment_blanks_through_newline():
    text = 'x // note\n"y"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result == "x" + " " * 9 + '"y"'


def test_comments_inside_strings_are_kept():
    text = '"/* keep */" "http://host"'
    assert strip_comments(text) == text