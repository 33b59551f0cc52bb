"""Виджет предпросмотра: исходное фото или результат с рамкой.

Принципы:
- SRP: отвечает только за представление изображения.
- Чистый код: чёткое разделение публичного API и внутренних обработчиков событий.
"""
from __future__ import annotations

from typing import Optional

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk


class ImageViewer(ctk.CTkFrame):
    """Канва с изображением, вписанным в доступную область."""
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._original_image: Optional[Image.Image] = None
        self._processed_image: Optional[Image.Image] = None
        self._tk_image: Optional[ImageTk.PhotoImage] = None
        self._is_processing: bool = False
        self._hold_before_active: bool = False

        self._canvas.bind("<Configure>", self._on_canvas_resize)
        self._canvas.bind("<ButtonPress-1>", lambda _e: self._canvas.focus_set())

        # Hold space to preview "before"
        self._canvas.bind("<KeyPress-space>", self._on_space_down)
        self._canvas.bind("<KeyRelease-space>", self._on_space_up)

    # ---- Public API ----
    def set_image(self, image: Image.Image) -> None:
        """Устанавливает исходное фото и сбрасывает предыдущий результат."""
        self._original_image = image
        self._processed_image = None
        self._render_image()

    def set_processed_image(self, image: Optional[Image.Image]) -> None:
        """Устанавливает фото с рамкой (может быть None) и перерисовывает виджет."""
        self._processed_image = image
        self._render_image()

    def set_processing(self, active: bool) -> None:
        """Показывает или скрывает индикатор фоновой обработки."""
        self._is_processing = active
        self._render_image()

    # ---- Internals ----
    def _on_canvas_resize(self, _event: tk.Event) -> None:
        self._render_image()

    def _render_image(self) -> None:
        self._canvas.delete("all")
        canvas_w = max(1, int(self._canvas.winfo_width()))
        canvas_h = max(1, int(self._canvas.winfo_height()))

        image = self._current_image()
        if image is not None:
            scale = self._fit_scale(image, canvas_w, canvas_h)
            scaled_w = max(1, int(image.width * scale))
            scaled_h = max(1, int(image.height * scale))
            resized = image.resize((scaled_w, scaled_h), Image.Resampling.LANCZOS)
            self._tk_image = ImageTk.PhotoImage(resized)
            self._canvas.create_image(canvas_w // 2, canvas_h // 2, image=self._tk_image, anchor="center")

        if self._is_processing:
            self._canvas.create_text(
                canvas_w // 2, canvas_h // 2, text="Обработка…", fill="#808080", font=("TkDefaultFont", 18, "bold")
            )

    def _current_image(self) -> Optional[Image.Image]:
        if self._processed_image is not None and not self._hold_before_active:
            return self._processed_image
        return self._original_image

    @staticmethod
    def _fit_scale(image: Image.Image, canvas_w: int, canvas_h: int) -> float:
        if image.width == 0 or image.height == 0:
            return 1.0
        return max(0.01, min(1.0, canvas_w / image.width, canvas_h / image.height))

    def _get_canvas_bg(self) -> str:
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"

    def _on_space_down(self, _event: tk.Event) -> None:
        if not self._hold_before_active and self._processed_image is not None:
            self._hold_before_active = True
            self._render_image()

    def _on_space_up(self, _event: tk.Event) -> None:
        if self._hold_before_active:
            self._hold_before_active = False
            self._render_image()
