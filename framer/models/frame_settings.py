"""Настройки рамки: стиль, толщина, отступы, подпись и шрифт.

Принципы:
- Неизменяемое значение: UI собирает новый `FrameSettings` на каждый запрос
  компоновки, сервисы никогда не мутируют настройки.
- Пресеты стилей живут рядом с моделью, а не в UI.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from framer.models.color import BLACK, RGBA


class BorderStyle(str, Enum):
    SOLID = "solid"
    INSTAGRAM = "instagram"

    @property
    def display_name(self) -> str:
        if self is BorderStyle.INSTAGRAM:
            return "Instagram (4:5)"
        return "Solid"

    @classmethod
    def from_display_name(cls, name: str) -> "BorderStyle":
        for style in cls:
            if style.display_name == name:
                return style
        raise ValueError(f"Неизвестный стиль рамки: {name!r}")


@dataclass(frozen=True)
class StylePreset:
    thickness: int
    padding: int
    font_size: int
    max_size: int


STYLE_PRESETS = {
    BorderStyle.SOLID: StylePreset(thickness=20, padding=150, font_size=50, max_size=900),
    BorderStyle.INSTAGRAM: StylePreset(thickness=5, padding=0, font_size=20, max_size=1000),
}

DEFAULT_FONT = "Courier-Bold"


@dataclass(frozen=True)
class FrameSettings:
    """Неизменяемый набор параметров одной компоновки.

    Fields:
        style: Стиль рамки.
        thickness: Толщина цветной рамки, px (> 0).
        border_color: Цвет рамки, RGBA.
        padding: Белое поле вокруг рамки (solid) или вокруг фото (instagram), px (>= 0).
        caption: Явная подпись. Непустая подпись всегда важнее даты съёмки.
        use_capture_date: Подписывать фото датой съёмки, если подпись пуста.
        font_size: Размер шрифта подписи, px (> 0).
        font_color: Цвет подписи, RGBA.
        font_name: Идентификатор шрифта, например "Courier-Bold".
        max_size: Предельный размер фото для стиля instagram, px (> 0).
    """
    style: BorderStyle = BorderStyle.SOLID
    thickness: int = 20
    border_color: RGBA = BLACK
    padding: int = 150
    caption: str = ""
    use_capture_date: bool = True
    font_size: int = 20
    font_color: RGBA = BLACK
    font_name: str = DEFAULT_FONT
    max_size: int = 900

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError(f"Толщина рамки должна быть положительной: {self.thickness}")
        if self.padding < 0:
            raise ValueError(f"Отступ не может быть отрицательным: {self.padding}")
        if self.font_size <= 0:
            raise ValueError(f"Размер шрифта должен быть положительным: {self.font_size}")
        if self.max_size <= 0:
            raise ValueError(f"Максимальный размер должен быть положительным: {self.max_size}")

    def with_style(self, style: BorderStyle) -> "FrameSettings":
        """Переключает стиль и сбрасывает толщину, отступ, шрифт и max size к пресету стиля."""
        preset = STYLE_PRESETS[style]
        return replace(
            self,
            style=style,
            thickness=preset.thickness,
            padding=preset.padding,
            font_size=preset.font_size,
            max_size=preset.max_size,
        )

    def reset_to_defaults(self) -> "FrameSettings":
        return self.with_style(self.style)
