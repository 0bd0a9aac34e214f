"""
Main application class for the UDP Multi Sender GUI.

This module initializes the Tkinter root, the controller, and the UI,
then starts the application's main loop.
"""
import os
import platform
import tkinter as tk
import logging
from . import configuration
from .localization import get_translator
from .controller import UdpMultiSenderController
from .ui.app_ui import AppUI
from .events import AppActions


class MainApp:
    """The main application runner."""

    def __init__(self, root: tk.Tk):
        """Initializes the application components."""
        self.root = root

        config = configuration.load_or_create_config()
        _ = get_translator(config.get('language'))
        self.root.title(_("UDP Multi Sender"))

        # 1. Create the actions and the controller.
        self.actions = AppActions()
        self.controller = UdpMultiSenderController(
            actions=self.actions,
            translator=_,
            config=config,
        )

        # 2. Open the socket before the UI asks for its local port.
        self.controller.start()

        # 3. Create the UI and hand it to the controller to complete the loop.
        self.ui = AppUI(root, self.actions, _)
        self.controller.set_ui(self.ui)

        self._set_icon()
        self.root.protocol("WM_DELETE_WINDOW", self.ui.close)

        # Start the periodic queue processing
        self._process_controller_queue()

    def _set_icon(self):
        """Sets the application icon based on the OS."""
        try:
            base_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
            icon_path_ico = os.path.join(base_dir, "app.ico")
            icon_path_png = os.path.join(base_dir, "app.png")

            if platform.system() == "Windows":
                if os.path.exists(icon_path_ico):
                    self.root.iconbitmap(icon_path_ico)
            elif os.path.exists(icon_path_png):
                photo = tk.PhotoImage(file=icon_path_png)
                self.root.iconphoto(False, photo)
        except (tk.TclError, FileNotFoundError) as e:
            logging.warning(f"Could not load application icon. {e}")

    def _process_controller_queue(self):
        """Periodically tells the controller to process its log queue."""
        if self.actions:
            self.actions.process_queue()
        self.root.after(100, self._process_controller_queue)


def main():
    """The main entry point for the application."""
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    logging.info("Application starting up.")
    root = tk.Tk()
    app = MainApp(root)
    logging.info("MainApp initialized.")
    try:
        root.mainloop()
    finally:
        app.controller.shutdown()
        logging.info("Application closed.")
