import re

from sklep.gui import dark_palette

HEX = re.compile(r"^#[0-9a-f]{6}$")


def rgb(colour):
    return tuple(int(colour[i : i + 2], 16) for i in (1, 3, 5))


def test_palette_roles():
    assert set(dark_palette()) == {
        "window",
        "base",
        "alternate_base",
        "tooltip_base",
        "text",
        "button",
        "highlight",
        "highlighted_text",
    }


def test_palette_colours_are_hex():
    colours = list(dark_palette().values())
    assert len(colours) == 8
    for colour in colours:
        match = HEX.fullmatch(colour)
        assert match is not None
        assert match.group(0) == colour


def test_fixed_colours():
    palette = dark_palette()
    assert palette["window"] == "#353535"
    assert palette["text"] == "#808080"
    assert palette["highlighted_text"] == "#ffffff"


def test_window_tooltip_and_button_share_colour():
    palette = dark_palette()
    assert palette["tooltip_base"] == palette["window"]
    assert palette["button"] == palette["window"]


def test_base_darker_than_window_and_alternate_lighter():
    palette = dark_palette()
    assert sum(rgb(palette["base"])) < sum(rgb(palette["window"]))
    assert sum(rgb(palette["alternate_base"])) > sum(rgb(palette["window"]))


def test_highlight_is_brightened_purple():
    r, g, b = rgb(dark_palette()["highlight"])
    assert max(r, g, b) > 197
    assert b > r > g


def test_base_and_alternate_base_values():
    palette = dark_palette()
    assert palette["base"] == "#2a2a2a"
    assert palette["alternate_base"] == "#424242"