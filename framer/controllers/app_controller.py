"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики обработки изображений).
- DIP: сервисы передаются снаружи; контроллер знает только их интерфейс.
Потоки:
- Компоновка выполняется в фоне (один рабочий поток), результат возвращается
  в поток Tk через `after`. Новый запрос вытесняет показ результата старого.
"""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from tkinter import filedialog, messagebox, TclError
from typing import Any, Callable, Optional

import customtkinter as ctk

from framer.models.frame_settings import BorderStyle
from framer.models.image_model import ComposedImage, SourceImage
from framer.services.font_service import FontService
from framer.services.image_service import ImageService
from framer.services.library_service import LibraryService
from framer.services.process_service import ProcessService
from framer.ui.bottom_bar import BottomBar
from framer.ui.image_viewer import ImageViewer
from framer.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Загрузка фото через `ImageService`.
    - Фоновая компоновка через `ProcessService` и показ результата.
    - Сохранение результата через `LibraryService` и показ ошибки сохранения.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    image_service: ImageService
    process_service: ProcessService
    font_service: FontService
    library_service: LibraryService

    _executor: ThreadPoolExecutor = field(
        default_factory=lambda: ThreadPoolExecutor(max_workers=1, thread_name_prefix="framer-compose")
    )
    _current_image: Optional[SourceImage] = None
    _composed: Optional[ComposedImage] = None
    _request_seq: int = 0
    _closed: bool = False

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Сохраняет слабую связность: компоненты UI ничего не знают друг о друге,
        общаются через контроллер.
        """
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_style_change = self._handle_style_change
        self.sidebar.on_reset = self._handle_reset
        self.bottom.on_preview = self._handle_preview
        self.bottom.on_save = self._handle_save

        self.sidebar.set_fonts(self.font_service.available_fonts())
        self.window.protocol("WM_DELETE_WINDOW", self._handle_close)

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите фотографию",
                filetypes=(
                    ("Images", "*.jpg *.jpeg *.png *.heic *.tiff *.webp"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not file_path:
            return

        try:
            source = self.image_service.load_image(file_path)
        except (FileNotFoundError, ValueError) as exc:
            logger.warning("Cannot open %s: %s", file_path, exc)
            self.bottom.set_status(str(exc))
            return

        self._current_image = source
        self._composed = None
        self.viewer.set_image(source.pil_image)
        self.sidebar.set_image_info(source)
        self.bottom.set_preview_enabled(True)
        self.bottom.set_save_enabled(False)
        self.bottom.set_status("Настройте рамку и нажмите «Предпросмотр»")

    def _handle_style_change(self, style: BorderStyle) -> None:
        self.sidebar.apply_settings(self.sidebar.build_settings().with_style(style))

    def _handle_reset(self) -> None:
        self.sidebar.apply_settings(self.sidebar.build_settings().reset_to_defaults())

    def _handle_preview(self) -> None:
        if self._current_image is None:
            return
        try:
            settings = self.sidebar.build_settings()
        except ValueError as exc:
            self.bottom.set_status(str(exc))
            return

        self._request_seq += 1
        seq = self._request_seq
        self.viewer.set_processing(True)
        future = self._executor.submit(self.process_service.process, self._current_image, settings)
        future.add_done_callback(lambda f: self._post(self._on_composed, seq, f))

    def _on_composed(self, seq: int, future: Future) -> None:
        # a newer request supersedes this result
        if seq != self._request_seq:
            return
        self.viewer.set_processing(False)
        try:
            composed = future.result()
        except Exception as exc:
            logger.exception("Composition failed")
            self.bottom.set_status(f"Ошибка обработки: {exc}")
            return
        self._composed = composed
        self.viewer.set_processed_image(composed.image)
        self.bottom.set_save_enabled(True)
        self.bottom.set_status(f"Готово: {composed.image.width} × {composed.image.height} px")

    def _handle_save(self) -> None:
        if self._composed is None or self._current_image is None:
            return
        name = self._current_image.path.stem if self._current_image.path else "framed"
        self.bottom.set_save_enabled(False)
        self.library_service.save_async(
            self._composed.image,
            f"{name}_framed",
            lambda ok, err: self._post(self._on_saved, ok, err),
        )

    def _on_saved(self, success: bool, error: Optional[Exception]) -> None:
        self.bottom.set_save_enabled(True)
        if success:
            self.bottom.set_status(f"Сохранено в {self.library_service.library_dir}")
            return
        messagebox.showerror("Ошибка сохранения", str(error) if error else "Неизвестная ошибка")

    def _handle_close(self) -> None:
        self._closed = True
        self._executor.shutdown(wait=False, cancel_futures=True)
        self.library_service.shutdown()
        self.window.destroy()

    # ---- Helpers ----
    def _post(self, callback: Callable[..., None], *args: Any) -> None:
        """Передаёт результат фоновой задачи в поток Tk; после закрытия окна результат отбрасывается."""
        if self._closed:
            return
        try:
            self.window.after(0, callback, *args)
        except (RuntimeError, TclError) as exc:
            # window destroyed between the flag check and the call
            logger.debug("Dropping background result, window is gone: %s", exc)
