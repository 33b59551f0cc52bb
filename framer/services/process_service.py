"""Полный конвейер: подпись -> рамка -> наложение подписи.

Каждый вызов `process` зависит только от аргументов, поэтому его можно
безопасно выполнять в фоновом потоке.
"""
from __future__ import annotations

import logging
from typing import Optional

from framer.models.frame_settings import FrameSettings
from framer.models.image_model import ComposedImage, SourceImage
from framer.services.caption_service import CaptionService
from framer.services.compositor_service import CompositorService
from framer.services.frame_service import FrameService

logger = logging.getLogger(__name__)


class ProcessService:
    def __init__(
        self,
        caption_service: Optional[CaptionService] = None,
        frame_service: Optional[FrameService] = None,
        compositor_service: Optional[CompositorService] = None,
    ) -> None:
        self._captions = caption_service or CaptionService()
        self._frames = frame_service or FrameService()
        self._compositor = compositor_service or CompositorService()

    def process(self, source: SourceImage, settings: FrameSettings) -> ComposedImage:
        caption = self._captions.resolve(settings, source)
        framed = self._frames.render(source, settings)

        image = framed.image
        if caption and not framed.degraded:
            if framed.photo_rect is not None:
                image_size = (framed.photo_rect.width, framed.photo_rect.height)
            else:
                image_size = source.size
            image = self._compositor.composite(
                image,
                caption,
                font_name=settings.font_name,
                font_size=settings.font_size,
                font_color=settings.font_color,
                image_size=image_size,
                thickness=settings.thickness,
                padding=settings.padding,
                photo_rect=framed.photo_rect,
            )

        logger.debug(
            "Composed %s frame %dx%d from %dx%d, caption %r",
            settings.style.value, image.width, image.height, source.width, source.height, caption,
        )
        return ComposedImage(image=image, caption=caption, settings=settings)
