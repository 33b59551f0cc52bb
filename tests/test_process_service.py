import numpy as np
import pytest

from framer.models.frame_settings import BorderStyle, FrameSettings
from framer.services.frame_service import CanvasAllocationError, FrameService
from framer.services.process_service import ProcessService

from conftest import make_source


def same_pixels(a, b) -> bool:
    return a.size == b.size and np.array_equal(np.asarray(a), np.asarray(b))


@pytest.mark.parametrize("style", list(BorderStyle))
def test_no_caption_is_identical_to_bare_frame(dated_source, style):
    settings = FrameSettings(caption="", use_capture_date=False).with_style(style)
    composed = ProcessService().process(dated_source, settings)
    bare = FrameService().render(dated_source, settings).image
    assert composed.caption == ""
    assert same_pixels(composed.image, bare)


@pytest.mark.parametrize("style", list(BorderStyle))
def test_date_caption_is_burned_in(dated_source, style):
    settings = FrameSettings(use_capture_date=True).with_style(style)
    composed = ProcessService().process(dated_source, settings)
    bare = FrameService().render(dated_source, settings).image
    assert composed.caption == " - JUL '24 -"
    assert composed.image.size == bare.size
    assert not same_pixels(composed.image, bare)


def test_process_is_idempotent(dated_source):
    service = ProcessService()
    for style in BorderStyle:
        settings = FrameSettings(caption="Porto").with_style(style)
        first = service.process(dated_source, settings)
        second = service.process(dated_source, settings)
        assert same_pixels(first.image, second.image)


def test_explicit_caption_overrides_date(dated_source):
    composed = ProcessService().process(dated_source, FrameSettings(caption="Porto", use_capture_date=True))
    assert composed.caption == "Porto"


def test_solid_output_size():
    source = make_source(300, 200)
    composed = ProcessService().process(source, FrameSettings(thickness=20, padding=150))
    assert composed.size == (300 + 40 + 300, 200 + 40 + 300)


def test_instagram_output_size():
    source = make_source(4000, 3000)
    settings = FrameSettings(caption="x").with_style(BorderStyle.INSTAGRAM)
    assert ProcessService().process(source, settings).size == (1080, 1350)


def test_degraded_frame_skips_caption(monkeypatch, dated_source):
    def boom(size, color):
        raise CanvasAllocationError("no memory")

    monkeypatch.setattr(FrameService, "_new_canvas", staticmethod(boom))
    composed = ProcessService().process(dated_source, FrameSettings(caption="Porto"))
    assert composed.size == (1, 1)


def test_result_carries_settings(dated_source):
    settings = FrameSettings(caption="Porto").with_style(BorderStyle.INSTAGRAM)
    composed = ProcessService().process(dated_source, settings)
    assert composed.settings is settings
