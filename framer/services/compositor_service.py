"""Наложение подписи на холст с рамкой.

Привязка подписи зависит от стиля:
- instagram: подпись по центру под фото, сдвиг вниз на толщину рамки;
- solid: подпись по центру нижнего поля (рамка + белый отступ).
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from framer.models.color import RGBA
from framer.models.image_model import Rect
from framer.services.font_service import FontService

logger = logging.getLogger(__name__)


class CompositorService:
    def __init__(self, font_service: Optional[FontService] = None) -> None:
        self._fonts = font_service or FontService()

    def composite(
        self,
        canvas: Image.Image,
        caption: str,
        font_name: str,
        font_size: int,
        font_color: RGBA,
        image_size: Tuple[float, float],
        thickness: int,
        padding: int,
        photo_rect: Optional[Rect] = None,
    ) -> Image.Image:
        """Рисует подпись на копии холста и возвращает её.

        Args:
            canvas: Холст с рамкой.
            caption: Текст подписи; пустой текст возвращает `canvas` без изменений.
            font_name: Идентификатор шрифта.
            font_size: Размер шрифта, px.
            font_color: Цвет текста, RGBA.
            image_size: Размер фото на холсте (исходный для solid, уменьшенный для instagram).
            thickness: Толщина рамки, px.
            padding: Белый отступ, px.
            photo_rect: Область фото (только instagram).
        """
        if not caption:
            return canvas

        font = self._fonts.resolve(font_name, font_size)
        result = canvas.copy()
        draw = ImageDraw.Draw(result)

        left, top, right, bottom = draw.textbbox((0, 0), caption, font=font)
        text_w = right - left
        text_h = bottom - top

        x, y = self.anchor(text_w, text_h, image_size, thickness, padding, photo_rect)
        logger.debug("Caption %r at (%.1f, %.1f), text %dx%d", caption, x, y, text_w, text_h)
        # shift by the bbox offsets so the ink box, not the text origin, sits on the anchor
        draw.text((x - left, y - text_h - top), caption, font=font, fill=font_color)
        return result

    @staticmethod
    def anchor(
        text_w: float,
        text_h: float,
        image_size: Tuple[float, float],
        thickness: int,
        padding: int,
        photo_rect: Optional[Rect] = None,
    ) -> Tuple[float, float]:
        """Точка привязки подписи; y указывает на нижнюю границу текста."""
        if photo_rect is not None:
            x = photo_rect.x + (photo_rect.width - text_w) / 2
            y = photo_rect.bottom + thickness + text_h
            return x, y

        img_w, img_h = image_size
        total = thickness + padding
        x = total + (img_w - text_w) / 2
        y = total + img_h + (total - text_h) / 2 + text_h
        return x, y
