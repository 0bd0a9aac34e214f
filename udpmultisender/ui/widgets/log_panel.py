"""
A widget for the scrolling activity log.
"""
import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable, Iterable

from ...models import LogEntry
from ..styling import LOG_LEVEL_COLORS

# Oldest lines are dropped past this many.
MAX_LOG_LINES = 5000


class LogPanel(ttk.Frame):
    """A read-only, auto-scrolling log view."""

    def __init__(self, parent: tk.Widget, translator: Callable[[str], str]):
        super().__init__(parent)
        self._ = translator

        self.frame = ttk.LabelFrame(self, text=self._("Log"), padding="5")
        self.frame.pack(fill=tk.BOTH, expand=True)

        text_frame = ttk.Frame(self.frame)
        text_frame.pack(fill=tk.BOTH, expand=True)
        self.log_text = tk.Text(text_frame, width=80, height=20, wrap="word", state=tk.DISABLED)
        self.log_text.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        vscrollbar = ttk.Scrollbar(text_frame, orient=tk.VERTICAL, command=self.log_text.yview)
        vscrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.log_text.config(yscrollcommand=vscrollbar.set)

        for level, color in LOG_LEVEL_COLORS.items():
            self.log_text.tag_configure(logging.getLevelName(level), foreground=color)

        self.clear_button = ttk.Button(self.frame, text=self._("Clear Log"), command=self.clear)
        self.clear_button.pack(side=tk.RIGHT, pady=(5, 0))

    def append(self, entries: Iterable[LogEntry]):
        """Appends entries and scrolls to the end."""
        self.log_text.config(state=tk.NORMAL)
        for entry in entries:
            self.log_text.insert(tk.END, entry.format() + "\n", logging.getLevelName(entry.level))

        line_count = int(self.log_text.index("end-1c").split(".")[0])
        if line_count > MAX_LOG_LINES:
            self.log_text.delete("1.0", f"{line_count - MAX_LOG_LINES}.0")
        self.log_text.see(tk.END)
        self.log_text.config(state=tk.DISABLED)

    def clear(self):
        self.log_text.config(state=tk.NORMAL)
        self.log_text.delete("1.0", tk.END)
        self.log_text.config(state=tk.DISABLED)
