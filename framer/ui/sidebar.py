"""Боковая панель: открытие фото, информация и параметры рамки.

Принципы:
- SRP: управляет только UI параметров, не содержит алгоритмов.
- ISP: отдаёт параметры одним значением `build_settings()`, события через `on_*`.
"""
from __future__ import annotations

from tkinter import colorchooser
from typing import Callable, Dict, List, Optional

import customtkinter as ctk

from framer.models.color import RGBA, parse_hex_color, rgba_to_hex
from framer.models.frame_settings import BorderStyle, FrameSettings
from framer.models.image_model import SourceImage
from framer.services.font_service import display_name


class Sidebar(ctk.CTkScrollableFrame):
    """Панель инструментов с блоками: файл, информация, рамка, подпись."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=300, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_style_change: Optional[Callable[[BorderStyle], None]] = None
        self.on_reset: Optional[Callable[[], None]] = None

        self._border_color: RGBA = (0, 0, 0, 255)
        self._font_color: RGBA = (0, 0, 0, 255)
        self._fonts_by_label: Dict[str, str] = {}
        self._slider_titles: Dict[int, str] = {}
        self._slider_labels: Dict[int, ctk.CTkLabel] = {}

        # File
        self._title = ctk.CTkLabel(self, text="Фото", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть изображение…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._path_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._date_val = ctk.StringVar(value="—")
        ctk.CTkLabel(self, textvariable=self._path_val, wraplength=270, anchor="w", justify="left").grid(
            row=2, column=0, padx=8, pady=(0, 2), sticky="ew"
        )
        ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w").grid(row=3, column=0, padx=8, sticky="ew")
        ctk.CTkLabel(self, textvariable=self._date_val, anchor="w").grid(row=4, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Border style
        self._style_title = ctk.CTkLabel(self, text="Стиль рамки", font=ctk.CTkFont(size=16, weight="bold"))
        self._style_title.grid(row=10, column=0, padx=8, pady=(8, 4), sticky="w")
        self._style_buttons = ctk.CTkSegmentedButton(
            self, values=[s.display_name for s in BorderStyle], command=self._emit_style_change
        )
        self._style_buttons.set(BorderStyle.SOLID.display_name)
        self._style_buttons.grid(row=11, column=0, padx=8, pady=(0, 8), sticky="ew")

        # Border settings
        self._thickness_val = ctk.StringVar()
        self._thickness_slider = self._add_slider(20, "Толщина рамки", self._thickness_val, 1, 100, 99)

        self._border_color_btn = ctk.CTkButton(self, text="Цвет рамки", command=self._pick_border_color)
        self._border_color_btn.grid(row=22, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._padding_val = ctk.StringVar()
        self._padding_slider = self._add_slider(23, "Отступ", self._padding_val, 0, 300, 300)

        # Caption
        self._caption_title = ctk.CTkLabel(self, text="Подпись", font=ctk.CTkFont(size=16, weight="bold"))
        self._caption_title.grid(row=30, column=0, padx=8, pady=(8, 4), sticky="w")

        self._caption_val = ctk.StringVar(value="")
        self._caption_entry = ctk.CTkEntry(self, textvariable=self._caption_val)
        self._caption_entry.grid(row=31, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._use_date_val = ctk.BooleanVar(value=True)
        self._use_date_switch = ctk.CTkSwitch(
            self, text="Дата снимка", variable=self._use_date_val, command=self._on_use_date_toggle
        )
        self._use_date_switch.grid(row=32, column=0, padx=8, pady=(0, 6), sticky="w")

        self._font_size_val = ctk.StringVar()
        self._font_size_slider = self._add_slider(33, "Размер шрифта", self._font_size_val, 10, 80, 70)

        self._font_color_btn = ctk.CTkButton(self, text="Цвет шрифта", command=self._pick_font_color)
        self._font_color_btn.grid(row=35, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._font_menu = ctk.CTkOptionMenu(self, values=["—"])
        self._font_menu.grid(row=36, column=0, padx=8, pady=(0, 8), sticky="ew")

        # Instagram settings (hidden for solid)
        self._max_size_val = ctk.StringVar()
        self._max_size_slider = self._add_slider(40, "Макс. размер", self._max_size_val, 500, 1500, 100)
        self._max_size_widgets = [self._slider_labels[id(self._max_size_slider)], self._max_size_slider]

        self._reset_btn = ctk.CTkButton(
            self, text="Сбросить настройки", fg_color="transparent", text_color="red", command=self._emit_reset
        )
        self._reset_btn.grid(row=50, column=0, padx=8, pady=(8, 8), sticky="ew")

        self.apply_settings(FrameSettings())

    # ---- Public API ----
    def set_image_info(self, source: SourceImage) -> None:
        """Отображает метаданные загруженной фотографии."""
        self._path_val.set(str(source.path) if source.path else "—")
        self._dims_val.set(f"{source.width} × {source.height} px")
        date = source.capture_date.strftime("%d.%m.%Y %H:%M") if source.capture_date else "нет даты"
        self._date_val.set(f"Снято: {date}")

    def set_fonts(self, font_names: List[str]) -> None:
        """Заполняет список шрифтов; в меню показываются человекочитаемые имена."""
        self._fonts_by_label = {display_name(name): name for name in font_names}
        labels = list(self._fonts_by_label) or ["—"]
        self._font_menu.configure(values=labels)

    def apply_settings(self, settings: FrameSettings) -> None:
        """Выставляет все элементы управления по значению настроек."""
        self._style_buttons.set(settings.style.display_name)
        self._set_slider(self._thickness_slider, self._thickness_val, settings.thickness)
        self._set_slider(self._padding_slider, self._padding_val, settings.padding)
        self._set_slider(self._font_size_slider, self._font_size_val, settings.font_size)
        self._set_slider(self._max_size_slider, self._max_size_val, settings.max_size)
        self._set_border_color(settings.border_color)
        self._set_font_color(settings.font_color)
        self._caption_val.set(settings.caption)
        self._use_date_val.set(settings.use_capture_date)
        self._font_menu.set(display_name(settings.font_name))
        self._fonts_by_label.setdefault(display_name(settings.font_name), settings.font_name)
        self._toggle_instagram_controls(settings.style is BorderStyle.INSTAGRAM)

    def build_settings(self) -> FrameSettings:
        """Собирает новое неизменяемое значение настроек из текущего состояния UI."""
        label = self._font_menu.get()
        return FrameSettings(
            style=BorderStyle.from_display_name(self._style_buttons.get()),
            thickness=int(round(self._thickness_slider.get())),
            border_color=self._border_color,
            padding=int(round(self._padding_slider.get())),
            caption=self._caption_val.get(),
            use_capture_date=bool(self._use_date_val.get()),
            font_size=int(round(self._font_size_slider.get())),
            font_color=self._font_color,
            font_name=self._fonts_by_label.get(label, label),
            max_size=int(round(self._max_size_slider.get())),
        )

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_style_change(self, value: str) -> None:
        style = BorderStyle.from_display_name(value)
        self._toggle_instagram_controls(style is BorderStyle.INSTAGRAM)
        if self.on_style_change:
            self.on_style_change(style)

    def _emit_reset(self) -> None:
        if self.on_reset:
            self.on_reset()

    def _on_use_date_toggle(self) -> None:
        # the date caption only shows when the explicit caption is empty
        if self._use_date_val.get():
            self._caption_val.set("")

    def _pick_border_color(self) -> None:
        _rgb, hex_color = colorchooser.askcolor(color=rgba_to_hex(self._border_color), title="Цвет рамки")
        if hex_color:
            self._set_border_color(parse_hex_color(hex_color))

    def _pick_font_color(self) -> None:
        _rgb, hex_color = colorchooser.askcolor(color=rgba_to_hex(self._font_color), title="Цвет шрифта")
        if hex_color:
            self._set_font_color(parse_hex_color(hex_color))

    # ---- Helpers ----
    def _add_slider(
        self, row: int, title: str, value_var: ctk.StringVar, lo: int, hi: int, steps: int
    ) -> ctk.CTkSlider:
        label = ctk.CTkLabel(self, textvariable=value_var, anchor="w")
        label.grid(row=row, column=0, padx=8, sticky="w")
        slider = ctk.CTkSlider(
            self, from_=lo, to=hi, number_of_steps=steps,
            command=lambda v: value_var.set(f"{title}: {int(round(v))}"),
        )
        slider.grid(row=row + 1, column=0, padx=8, pady=(0, 8), sticky="ew")
        self._slider_titles[id(slider)] = title
        self._slider_labels[id(slider)] = label
        return slider

    def _set_slider(self, slider: ctk.CTkSlider, value_var: ctk.StringVar, value: int) -> None:
        slider.set(value)
        value_var.set(f"{self._slider_titles[id(slider)]}: {int(value)}")

    def _set_border_color(self, rgba: RGBA) -> None:
        self._border_color = rgba
        self._border_color_btn.configure(text=f"Цвет рамки: {rgba_to_hex(rgba)}")

    def _set_font_color(self, rgba: RGBA) -> None:
        self._font_color = rgba
        self._font_color_btn.configure(text=f"Цвет шрифта: {rgba_to_hex(rgba)}")

    def _toggle_instagram_controls(self, visible: bool) -> None:
        for widget in self._max_size_widgets:
            if visible:
                widget.grid()
            else:
                widget.grid_remove()
