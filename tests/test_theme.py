import pytest

from sticky_note import NoteColor
from theme import (
    RGBA,
    ThemeState,
    create_color_swatch,
    derive_styles,
    panel_style,
    resolve,
)


@pytest.mark.parametrize("color", list(NoteColor))
def test_every_color_has_a_theme(color):
    pair = resolve(color)
    assert isinstance(pair.background, RGBA)
    assert isinstance(pair.text, RGBA)


@pytest.mark.parametrize("value", ["Orange", 99, None])
def test_unknown_color_resolves_to_yellow(value):
    assert resolve(value) == resolve(NoteColor.YELLOW)


def test_blue_theme_values():
    pair = resolve(NoteColor.BLUE)
    assert pair.background == pytest.approx((0.80, 0.90, 0.98, 1.0))
    assert pair.text == pytest.approx((0.18, 0.22, 0.28, 1.0))


def test_yellow_theme_values():
    pair = resolve(NoteColor.YELLOW)
    assert pair.background == pytest.approx((0.99, 0.915, 0.69, 1.0))
    assert pair.text == pytest.approx((0.25, 0.2, 0.1, 1.0))


def test_color_conversions():
    color = RGBA(1.0, 0.5, 0.0, 1.0)
    assert color.to_rgba8() == (255, 128, 0, 255)
    assert color.to_hex() == "#ff8000"


def test_derive_styles_is_deterministic():
    pair = resolve(NoteColor.PINK)
    assert derive_styles(pair) == derive_styles(pair)


def test_styles_share_everything_but_font_size():
    pair = resolve(NoteColor.GREEN)
    styles = derive_styles(pair)
    assert styles.header.font_size > styles.content.font_size
    assert styles.content.font_size == styles.footer.font_size
    for style in (styles.header, styles.content, styles.footer):
        assert style.word_wrap is True
        assert style.text_color == pair.text
        assert style.background is None
        assert style.alignment == "upper_left"
        assert style.padding == (0, 0, 0, 0)
        assert style.margin == (0, 0, 0, 0)


def test_panel_style_offsets():
    style = panel_style(resolve(NoteColor.BLUE))
    assert style.background == resolve(NoteColor.BLUE).background
    assert style.border == (5, 5, 5, 5)
    assert style.margin == (5, 15, 5, 5)
    assert style.padding == (8, 8, 8, 8)


def test_color_swatch():
    swatch = create_color_swatch(resolve(NoteColor.BLUE).background)
    assert swatch.mode == "RGBA"
    assert swatch.size == (2, 2)
    assert swatch.getpixel((1, 1)) == resolve(NoteColor.BLUE).background.to_rgba8()


def test_theme_state_reuses_styles_for_same_color():
    state = ThemeState()
    first = state.styles_for(NoteColor.YELLOW)
    second = state.styles_for(NoteColor.YELLOW)
    assert first is second
    assert state.recompute_count == 1


def test_theme_state_recomputes_on_color_change():
    state = ThemeState()
    yellow = state.styles_for(NoteColor.YELLOW)
    yellow_swatch = state.swatch
    green = state.styles_for(NoteColor.GREEN)

    assert state.recompute_count == 2
    assert green is not yellow
    assert green.header.text_color != yellow.header.text_color
    assert state.theme == resolve(NoteColor.GREEN)
    assert state.swatch is not yellow_swatch
    assert state.swatch.getpixel((0, 0)) == resolve(NoteColor.GREEN).background.to_rgba8()


def test_theme_state_reset():
    state = ThemeState()
    state.styles_for(NoteColor.PURPLE)
    state.reset()
    assert state.styles is None
    assert state.theme is None
    assert state.swatch is None

    state.styles_for(NoteColor.PURPLE)
    assert state.recompute_count == 2
