"""Выбор текста подписи: явный текст, дата съёмки или ничего."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from framer.models.frame_settings import FrameSettings
from framer.models.image_model import SourceImage

# Fixed English abbreviations; strftime("%b") follows the process locale.
MONTHS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")

MISSING_DATE_CAPTION = " - --- -"


def caption_from_date(date: Optional[datetime]) -> str:
    """Подпись вида " - JUL '24 -" или заглушка " - --- -", если даты нет."""
    if date is None:
        return MISSING_DATE_CAPTION
    return f" - {MONTHS[date.month - 1]} '{date.year % 100:02d} -"


class CaptionService:
    def resolve(self, settings: FrameSettings, source: SourceImage) -> str:
        """Определяет итоговую подпись.

        Непустая подпись из настроек возвращается как есть. Иначе, если включён
        флаг даты съёмки, подпись строится из EXIF; отсутствие даты не ошибка.
        """
        if settings.caption:
            return settings.caption
        if settings.use_capture_date:
            return caption_from_date(source.capture_date)
        return ""
