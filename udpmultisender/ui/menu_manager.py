"""
Main menu construction for the UDP Multi Sender UI.
"""
from __future__ import annotations
import tkinter as tk
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .dialog_manager import DialogManager


class MenuManager:
    """Creates and manages the main application menu bar."""

    def __init__(self, root: tk.Tk, dialog_manager: DialogManager, translator: Callable[[str], str],
                 on_exit: Callable[[], None], on_clear_log: Callable[[], None]):
        self.root = root
        self.dialog_manager = dialog_manager
        self._ = translator
        self.on_exit = on_exit
        self.on_clear_log = on_clear_log

    def setup(self):
        """Creates the main application menu bar."""
        menu_bar = tk.Menu(self.root)
        self.root.config(menu=menu_bar)

        def add_menu_item(parent_menu, item_type, label, **kwargs):
            translated_label = self._(label)
            underline = translated_label.find('&')
            if underline != -1:
                kwargs['label'] = translated_label.replace('&', '', 1)
                kwargs['underline'] = underline
            else:
                kwargs['label'] = translated_label

            if item_type == 'cascade':
                parent_menu.add_cascade(**kwargs)
            elif item_type == 'command':
                parent_menu.add_command(**kwargs)

        file_menu = tk.Menu(menu_bar, tearoff=0)
        add_menu_item(menu_bar, 'cascade', "&File", menu=file_menu)
        add_menu_item(file_menu, 'command', "E&xit", command=self.on_exit)

        edit_menu = tk.Menu(menu_bar, tearoff=0)
        add_menu_item(menu_bar, 'cascade', "&Edit", menu=edit_menu)
        add_menu_item(edit_menu, 'command', "&Clear Log", command=self.on_clear_log)

        help_menu = tk.Menu(menu_bar, tearoff=0)
        add_menu_item(menu_bar, 'cascade', "&Help", menu=help_menu)
        add_menu_item(help_menu, 'command', "&About", command=self.dialog_manager.show_about_dialog)
