from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=64, **kwargs)

        # callbacks
        self.on_preview: Optional[Callable[[], None]] = None
        self.on_save: Optional[Callable[[], None]] = None

        # layout
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(2, weight=1)  # status stretches

        self._preview_btn = ctk.CTkButton(self, text="Предпросмотр с рамкой", command=self._emit_preview)
        self._preview_btn.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="w")

        self._save_btn = ctk.CTkButton(
            self, text="Сохранить", fg_color="green", hover_color="#0b6b0b", command=self._emit_save
        )
        self._save_btn.grid(row=0, column=1, padx=6, pady=8, sticky="w")

        self._status = ctk.StringVar(value="Откройте фотографию")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status, anchor="w")
        self._status_label.grid(row=0, column=2, padx=(12, 10), pady=8, sticky="ew")

        self.set_preview_enabled(False)
        self.set_save_enabled(False)

    # public API (sync from controller)
    def set_preview_enabled(self, enabled: bool) -> None:
        self._preview_btn.configure(state="normal" if enabled else "disabled")

    def set_save_enabled(self, enabled: bool) -> None:
        self._save_btn.configure(state="normal" if enabled else "disabled")

    def set_status(self, text: str) -> None:
        self._status.set(text)

    # events
    def _emit_preview(self) -> None:
        if self.on_preview:
            self.on_preview()

    def _emit_save(self) -> None:
        if self.on_save:
            self.on_save()
