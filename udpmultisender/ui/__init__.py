"""UI package for UDP Multi Sender.

The main window lives in app_ui.AppUI. It is not imported here so that the
controller can use ui.types without loading Tkinter.
"""
