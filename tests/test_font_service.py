import pytest
from PIL import ImageFont

from framer.services.font_service import PREFERRED_FONTS, FontService, display_name


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Courier-Bold", "Courier Bold"),
        ("AvenirNext-DemiBoldItalic", "AvenirNext DemiBoldItalic"),
        ("Futura", "Futura"),
        ("Big-Blue-Term", "Big Blue"),
    ],
)
def test_display_name(name, expected):
    assert display_name(name) == expected


def test_available_fonts_are_sorted_and_unique(tmp_path):
    (tmp_path / "Zilla-Slab.ttf").write_bytes(b"")
    (tmp_path / "Courier-Bold.otf").write_bytes(b"")
    (tmp_path / "notes.txt").write_text("not a font")

    fonts = FontService(fonts_dir=tmp_path).available_fonts()

    assert fonts == sorted(fonts)
    assert len(fonts) == len(set(fonts))
    assert "Zilla-Slab" in fonts
    assert "notes" not in fonts
    assert set(PREFERRED_FONTS) <= set(fonts)


def test_available_fonts_without_fonts_dir(tmp_path):
    fonts = FontService(fonts_dir=tmp_path / "missing").available_fonts()
    assert fonts == sorted(PREFERRED_FONTS)


def test_resolve_never_fails(tmp_path):
    (tmp_path / "Broken-Font.ttf").write_bytes(b"not a real font")
    service = FontService(fonts_dir=tmp_path)
    for name in ("Broken-Font", "Missing-Font", ""):
        font = service.resolve(name, 24)
        assert isinstance(font, (ImageFont.FreeTypeFont, ImageFont.ImageFont))
        assert font.getbbox("Ag")[2] > 0
