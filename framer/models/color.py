"""Цвета в формате RGBA и разбор HEX-строк."""
from __future__ import annotations

from typing import Tuple

RGBA = Tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)


def parse_hex_color(value: str) -> RGBA:
    """Преобразует "#RRGGBB" или "#RRGGBBAA" в кортеж RGBA.

    Raises:
        ValueError: если строка не является HEX-цветом.
    """
    h = value.strip().lstrip("#")
    if len(h) not in (6, 8):
        raise ValueError(f"HEX-цвет должен содержать 6 или 8 цифр: {value!r}")
    try:
        channels = [int(h[i:i + 2], 16) for i in range(0, len(h), 2)]
    except ValueError as exc:
        raise ValueError(f"Некорректный HEX-цвет: {value!r}") from exc
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return (r, g, b, a)


def rgba_to_hex(rgba: RGBA) -> str:
    """Преобразует RGBA в HEX (без альфа)."""
    r, g, b, _a = rgba
    return f"#{r:02X}{g:02X}{b:02X}"
