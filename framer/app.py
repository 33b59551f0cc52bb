import customtkinter as ctk

from framer.config import AppConfig
from framer.controllers.app_controller import AppController
from framer.services.compositor_service import CompositorService
from framer.services.font_service import FontService
from framer.services.image_service import ImageService
from framer.services.library_service import LibraryService
from framer.services.process_service import ProcessService
from framer.ui.image_viewer import ImageViewer
from framer.ui.sidebar import Sidebar
from framer.ui.bottom_bar import BottomBar


class FramerApp(ctk.CTk):
    def __init__(self, config: AppConfig) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Framer")
        self.minsize(900, 640)

        # root layout: left viewer, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        fonts = FontService(config.fonts_dir)
        self._controller = AppController(
            viewer=self._viewer,
            sidebar=self._sidebar,
            bottom=self._bottom,
            window=self,
            image_service=ImageService(),
            process_service=ProcessService(compositor_service=CompositorService(fonts)),
            font_service=fonts,
            library_service=LibraryService(config.library_dir, jpeg_quality=config.jpeg_quality),
        )
        self._controller.bind_events()
