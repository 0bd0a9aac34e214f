"""
Shared utility functions for UI widgets.
"""
from __future__ import annotations
from typing import Any, Callable, Optional, Tuple
from tkinter import ttk


def create_button(parent: Any, label: str, translator: Callable[[str], str], **kwargs) -> Tuple[ttk.Button, Optional[str]]:
    """
    Creates a ttk.Button from a label that may mark its mnemonic with '&'.
    Returns the button and the lowercase mnemonic key, if any.
    """
    translated_label = translator(label)
    underline = translated_label.find('&')
    mnemonic = None
    if underline != -1:
        kwargs['text'] = translated_label.replace('&', '', 1)
        kwargs['underline'] = underline
        mnemonic = translated_label[underline + 1].lower()
    else:
        kwargs['text'] = translated_label
    return ttk.Button(parent, **kwargs), mnemonic


def bind_mnemonic(widget: Any, mnemonic: Optional[str]) -> None:
    """Binds Alt+<mnemonic> on the toplevel window to invoke the widget."""
    if mnemonic:
        widget.winfo_toplevel().bind(f'<Alt-{mnemonic}>', lambda e, w=widget: w.invoke())
