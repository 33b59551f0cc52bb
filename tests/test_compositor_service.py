import logging

import numpy as np
import pytest
from PIL import Image

from framer.models.color import BLACK, WHITE
from framer.models.image_model import Rect
from framer.services.compositor_service import CompositorService
from framer.services.font_service import FontService


@pytest.fixture
def compositor(tmp_path) -> CompositorService:
    return CompositorService(FontService(fonts_dir=tmp_path))


def test_empty_caption_returns_canvas_unchanged(compositor):
    canvas = Image.new("RGBA", (200, 200), WHITE)
    result = compositor.composite(canvas, "", "Courier-Bold", 20, BLACK, (100, 100), 10, 40)
    assert result is canvas


def test_solid_caption_lands_in_bottom_band(compositor):
    # 100x60 photo, thickness 10, padding 40 -> 200x160 canvas, photo ends at y=110
    canvas = Image.new("RGBA", (200, 160), WHITE)
    result = compositor.composite(canvas, "JUL", "Courier-Bold", 20, BLACK, (100, 60), 10, 40)

    pixels = np.asarray(result.convert("L"))
    dark_rows = np.nonzero((pixels < 128).any(axis=1))[0]
    assert dark_rows.size > 0
    assert dark_rows.min() >= 110
    assert dark_rows.max() < 160
    # input canvas is not drawn on
    assert np.asarray(canvas.convert("L")).min() == 255


def ink_box(image):
    pixels = np.asarray(image.convert("L"))
    rows = np.nonzero((pixels < 128).any(axis=1))[0]
    cols = np.nonzero((pixels < 128).any(axis=0))[0]
    return cols.min(), rows.min(), cols.max(), rows.max()


def test_solid_caption_ink_is_centred_in_band(compositor):
    # 400x200 photo, thickness 20, padding 150 -> photo at (170, 170), band 370..540
    canvas = Image.new("RGBA", (740, 540), WHITE)
    result = compositor.composite(canvas, "JUL '24", "Courier-Bold", 50, BLACK, (400, 200), 20, 150)

    x0, y0, x1, y1 = ink_box(result)
    assert abs((y0 + y1) / 2 - 455) <= 2
    assert abs((x0 + x1) / 2 - 370) <= 2


def test_instagram_caption_ink_is_centred_on_photo(compositor):
    canvas = Image.new("RGBA", (1080, 1350), WHITE)
    rect = Rect(x=40, y=425, width=1000, height=500)
    result = compositor.composite(canvas, "JUL '24", "Courier-Bold", 40, BLACK, (1000, 500), 5, 0, rect)

    x0, y0, x1, y1 = ink_box(result)
    assert abs((x0 + x1) / 2 - 540) <= 2
    # ink starts right below the photo plus one border thickness
    assert abs(y0 - (rect.bottom + 5)) <= 2


def test_instagram_caption_sits_below_photo_rect(compositor):
    canvas = Image.new("RGBA", (1080, 1350), WHITE)
    rect = Rect(x=40, y=425, width=1000, height=500)
    result = compositor.composite(canvas, " - JUL '24 -", "Courier-Bold", 20, BLACK, (1000, 500), 5, 0, rect)

    pixels = np.asarray(result.convert("L"))
    dark_rows = np.nonzero((pixels < 128).any(axis=1))[0]
    dark_cols = np.nonzero((pixels < 128).any(axis=0))[0]
    assert dark_rows.min() >= rect.bottom
    assert dark_rows.max() < rect.bottom + 5 + 60
    # horizontally centred within the photo
    middle = (dark_cols.min() + dark_cols.max()) / 2
    assert abs(middle - 540) < 20


def test_anchor_solid():
    x, y = CompositorService.anchor(40, 10, (100, 60), thickness=10, padding=40)
    assert x == 50 + (100 - 40) / 2
    assert y == 50 + 60 + (50 - 10) / 2 + 10


def test_anchor_instagram():
    rect = Rect(x=40, y=425, width=1000, height=500)
    x, y = CompositorService.anchor(100, 12, (1000, 500), thickness=5, padding=0, photo_rect=rect)
    assert x == 40 + (1000 - 100) / 2
    assert y == 925 + 5 + 12


def test_unknown_font_falls_back(compositor, caplog):
    canvas = Image.new("RGBA", (200, 160), WHITE)
    with caplog.at_level(logging.WARNING, logger="framer"):
        result = compositor.composite(canvas, "abc", "No-Such-Font", 20, BLACK, (100, 60), 10, 40)
    assert result.size == canvas.size
    assert "No-Such-Font" in caplog.text
