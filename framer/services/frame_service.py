"""Отрисовка рамки вокруг фотографии.

Два стиля:
- solid: цветная рамка вокруг фото в исходном размере, затем белое поле;
- instagram: фото ужимается до `max_size`, получает белое поле и цветную рамку
  и центрируется на белом холсте 1080x1350 (4:5).

Если холст не удаётся выделить, возвращается пустая белая заглушка
с флагом `degraded`, исключение наружу не пробрасывается.
"""
from __future__ import annotations

import logging
from typing import Tuple

from PIL import Image

from framer.models.color import RGBA, WHITE
from framer.models.frame_settings import BorderStyle, FrameSettings
from framer.models.image_model import FramedCanvas, Rect, SourceImage

logger = logging.getLogger(__name__)

INSTAGRAM_SIZE = (1080, 1350)


class CanvasAllocationError(RuntimeError):
    """Не удалось создать поверхность для рисования."""


class FrameService:
    def render(self, source: SourceImage, settings: FrameSettings) -> FramedCanvas:
        """Рисует рамку выбранного стиля."""
        try:
            if settings.style is BorderStyle.INSTAGRAM:
                return self.instagram_frame(
                    source.pil_image,
                    max_size=settings.max_size,
                    thickness=settings.thickness,
                    color=settings.border_color,
                    padding=settings.padding,
                )
            return self.solid_border(
                source.pil_image,
                thickness=settings.thickness,
                color=settings.border_color,
                padding=settings.padding,
            )
        except CanvasAllocationError as exc:
            logger.error("Frame rendering degraded to a blank canvas: %s", exc)
            return FramedCanvas(image=Image.new("RGBA", (1, 1), WHITE), degraded=True)

    def solid_border(self, image: Image.Image, thickness: int, color: RGBA, padding: int) -> FramedCanvas:
        bordered = self._pad(image, thickness, color)
        if padding > 0:
            bordered = self._pad(bordered, padding, WHITE)
        return FramedCanvas(image=bordered)

    def instagram_frame(
        self, image: Image.Image, max_size: int, thickness: int, color: RGBA, padding: int
    ) -> FramedCanvas:
        frame_w, frame_h = INSTAGRAM_SIZE

        # scale is not clamped to 1: small photos grow up to max_size
        new_w, new_h = self.fit_size(image.size, max_size)
        try:
            resized = image.resize((new_w, new_h), Image.Resampling.LANCZOS)
        except MemoryError as exc:
            raise CanvasAllocationError(f"cannot resize to {new_w}x{new_h}") from exc

        block = resized
        if padding > 0:
            block = self._pad(block, padding, WHITE)
        block = self._pad(block, thickness, color)

        canvas = self._new_canvas(INSTAGRAM_SIZE, WHITE)
        x = (frame_w - block.width) // 2
        y = (frame_h - block.height) // 2
        self._paste(canvas, block, (x, y))

        rect = Rect(x=x + thickness + padding, y=y + thickness + padding, width=new_w, height=new_h)
        return FramedCanvas(image=canvas, photo_rect=rect)

    @staticmethod
    def fit_size(size: Tuple[int, int], max_size: int) -> Tuple[int, int]:
        """Размер после равномерного масштабирования в квадрат `max_size`."""
        width, height = size
        scale = min(max_size / width, max_size / height)
        return max(1, int(width * scale)), max(1, int(height * scale))

    def _pad(self, image: Image.Image, amount: int, color: RGBA) -> Image.Image:
        canvas = self._new_canvas((image.width + 2 * amount, image.height + 2 * amount), color)
        self._paste(canvas, image, (amount, amount))
        return canvas

    @staticmethod
    def _paste(canvas: Image.Image, image: Image.Image, offset: Tuple[int, int]) -> None:
        try:
            canvas.paste(image, offset)
        except MemoryError as exc:
            raise CanvasAllocationError(f"cannot paste {image.width}x{image.height} onto canvas") from exc

    @staticmethod
    def _new_canvas(size: Tuple[int, int], color: RGBA) -> Image.Image:
        try:
            return Image.new("RGBA", size, color)
        except (MemoryError, ValueError) as exc:
            raise CanvasAllocationError(f"cannot allocate {size[0]}x{size[1]} canvas") from exc
