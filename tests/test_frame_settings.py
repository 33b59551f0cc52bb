import pytest

from framer.models.color import parse_hex_color, rgba_to_hex
from framer.models.frame_settings import BorderStyle, FrameSettings


def test_defaults_match_solid_start_state():
    settings = FrameSettings()
    assert settings.style is BorderStyle.SOLID
    assert (settings.thickness, settings.padding, settings.font_size, settings.max_size) == (20, 150, 20, 900)
    assert settings.use_capture_date is True
    assert settings.font_name == "Courier-Bold"


@pytest.mark.parametrize(
    "style, expected",
    [
        (BorderStyle.SOLID, (20, 150, 50, 900)),
        (BorderStyle.INSTAGRAM, (5, 0, 20, 1000)),
    ],
)
def test_with_style_applies_presets(style, expected):
    settings = FrameSettings(thickness=77, padding=12, font_size=33, max_size=1234).with_style(style)
    assert settings.style is style
    assert (settings.thickness, settings.padding, settings.font_size, settings.max_size) == expected


def test_reset_keeps_caption_and_colors():
    original = FrameSettings(
        style=BorderStyle.INSTAGRAM, thickness=40, caption="hello", border_color=(1, 2, 3, 255)
    )
    reset = original.reset_to_defaults()
    assert reset.thickness == 5
    assert reset.caption == "hello"
    assert reset.border_color == (1, 2, 3, 255)
    assert original.thickness == 40


@pytest.mark.parametrize(
    "kwargs",
    [{"thickness": 0}, {"padding": -1}, {"font_size": 0}, {"max_size": 0}],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        FrameSettings(**kwargs)


def test_style_display_names_round_trip():
    for style in BorderStyle:
        assert BorderStyle.from_display_name(style.display_name) is style
    with pytest.raises(ValueError):
        BorderStyle.from_display_name("Vintage")


def test_parse_hex_color():
    assert parse_hex_color("#FF8000") == (255, 128, 0, 255)
    assert parse_hex_color("00000080") == (0, 0, 0, 128)
    assert rgba_to_hex((255, 128, 0, 255)) == "#FF8000"


@pytest.mark.parametrize("value", ["#FFF", "#GG0000", ""])
def test_parse_hex_color_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_hex_color(value)
