"""Каталог шрифтов для подписей и загрузка шрифта по идентификатору.

Идентификатор шрифта, например "Courier-Bold", ищется сначала в папке шрифтов
приложения (`.ttf`, `.ttc`, `.otf`), затем среди системных шрифтов FreeType.
Если ничего не найдено, подставляется жирный шрифт по умолчанию того же размера.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from PIL import ImageFont

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = (".ttf", ".ttc", ".otf")

# Fonts that read well as captions on a mat.
PREFERRED_FONTS = (
    "Courier-Bold",
    "CourierPrime-Bold",
    "AmericanTypewriter",
    "Menlo-Regular",
    "Futura-Medium",
    "AvenirNext-Regular",
    "GillSans",
    "HelveticaNeue",
    "TimesNewRomanPSMT",
    "Copperplate",
)

BOLD_FALLBACKS = ("DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf")

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def display_name(font_name: str) -> str:
    """"Family-Weight" -> "Family Weight"; имена без дефиса не меняются."""
    parts = font_name.split("-")
    if len(parts) > 1:
        return f"{parts[0]} {parts[1]}"
    return font_name


class FontService:
    def __init__(self, fonts_dir: Optional[Path] = None, preferred: Iterable[str] = PREFERRED_FONTS) -> None:
        self._fonts_dir = fonts_dir
        self._preferred = tuple(preferred)

    def available_fonts(self) -> List[str]:
        """Отсортированный список идентификаторов шрифтов без повторов."""
        names = set(self._preferred)
        if self._fonts_dir is not None and self._fonts_dir.is_dir():
            for path in self._fonts_dir.iterdir():
                if path.is_file() and path.suffix.lower() in FONT_EXTENSIONS:
                    names.add(path.stem)
        return sorted(names)

    def resolve(self, font_name: str, size: int) -> Font:
        """Загружает шрифт по имени; при неудаче возвращает жирный шрифт по умолчанию."""
        font = self._load(font_name, size)
        if font is not None:
            return font
        logger.warning("Font %r not found, using bold default", font_name)
        return self.default_bold(size)

    def default_bold(self, size: int) -> Font:
        for candidate in BOLD_FALLBACKS:
            try:
                return ImageFont.truetype(candidate, size)
            except OSError:
                continue
        return ImageFont.load_default(size=size)

    def _load(self, font_name: str, size: int) -> Optional[Font]:
        if not font_name:
            return None
        for path in self._candidate_paths(font_name):
            try:
                return ImageFont.truetype(str(path), size)
            except OSError:
                continue
        return None

    def _candidate_paths(self, font_name: str) -> List[Path | str]:
        candidates: List[Path | str] = []
        if self._fonts_dir is not None:
            candidates.extend(self._fonts_dir / f"{font_name}{ext}" for ext in FONT_EXTENSIONS)
        # FreeType also searches system font folders by bare file name
        candidates.append(font_name)
        candidates.extend(f"{font_name}{ext}" for ext in FONT_EXTENSIONS)
        return candidates
