"""Сохранение готовых фотографий в папку-библиотеку.

`save_async` выполняет запись в фоне и вызывает `completion(success, error)`
ровно один раз. Повторных попыток нет: ошибка передаётся вызывающему коду.
"""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Optional

from PIL import Image

logger = logging.getLogger(__name__)

Completion = Callable[[bool, Optional[Exception]], None]


class LibraryService:
    def __init__(self, library_dir: Path, jpeg_quality: int = 95) -> None:
        self._dir = Path(library_dir)
        self._quality = jpeg_quality
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="framer-save")

    @property
    def library_dir(self) -> Path:
        return self._dir

    def save(self, image: Image.Image, name: str) -> Path:
        """Записывает изображение как JPEG и возвращает путь к файлу.

        Raises:
            OSError: если папку или файл не удалось создать.
        """
        self._dir.mkdir(parents=True, exist_ok=True)
        path = self._unique_path(name)
        rgb = image.convert("RGB") if image.mode != "RGB" else image
        rgb.save(path, "JPEG", quality=self._quality)
        logger.info("Saved %s (%dx%d)", path, image.width, image.height)
        return path

    def save_async(self, image: Image.Image, name: str, completion: Completion) -> Future:
        def run() -> Path:
            try:
                path = self.save(image, name)
            except Exception as exc:
                logger.error("Saving %s failed: %s", name, exc)
                completion(False, exc)
                raise
            completion(True, None)
            return path

        return self._executor.submit(run)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)

    def _unique_path(self, name: str) -> Path:
        stem = Path(name).stem or "framed"
        path = self._dir / f"{stem}.jpg"
        counter = 1
        while path.exists():
            path = self._dir / f"{stem}_{counter}.jpg"
            counter += 1
        return path
