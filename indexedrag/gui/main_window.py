"""
Main Window for indexedRAG GUI

Top bar, conversations sidebar, chat area and the settings window.
"""

import sys
import traceback

import customtkinter as ctk
from tkinter import messagebox

from loguru import logger

from ..utils import get_settings, get_db_path, setup_logger
from ..storage import Database
from ..session import ChatSession, SettingsEditor
from ..error_handler import (
    IndexedragError, ErrorCategory, get_failure_log
)

from .constants import *
from .sidebar import Sidebar
from .chat import ChatArea
from .settings_dialog import SettingsDialog


class IndexedragApp(ctk.CTk):
    """Main application window"""

    def __init__(self, database: Database, width: int = None, height: int = None):
        super().__init__()

        self.title(WINDOW_TITLE)
        self.geometry(f"{width or WINDOW_SIZES['main_width']}x{height or WINDOW_SIZES['main_height']}")
        self.minsize(WINDOW_SIZES['main_min_width'], WINDOW_SIZES['main_min_height'])

        # State
        self.database = database
        self.session = ChatSession(database)
        self.settings_editor = SettingsEditor(database)
        self.settings_dialog = None
        self.fatal_error = None

        # Configure grid
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._create_components()
        self._setup_keyboard_shortcuts()

    def _create_components(self):
        """Create UI components"""
        top_bar = ctk.CTkFrame(self, height=40, corner_radius=0)
        top_bar.grid(row=0, column=0, columnspan=2, sticky="ew")

        ctk.CTkButton(
            top_bar,
            text=LABELS['settings_button'],
            command=self.toggle_settings,
            width=90,
            height=28,
            fg_color="transparent",
            border_width=1,
            font=ctk.CTkFont(size=FONT_SIZES['small'])
        ).pack(side="left", padx=SPACING['minor'], pady=SPACING['tiny'])

        self.sidebar = Sidebar(self)
        self.chat = ChatArea(self, self.session, self.send_message)

    def _setup_keyboard_shortcuts(self):
        self.bind("<Control-comma>", lambda e: self.toggle_settings())
        self.bind("<Control-slash>", lambda e: self.chat.focus_input())

    def send_message(self):
        """Send the input buffer and show the stub reply"""
        self.session.send()
        self.chat.clear_input()
        self.chat.render_messages()

    def toggle_settings(self):
        """Open or close the settings window, keeping unsaved edits"""
        if self.settings_editor.toggle():
            self.settings_dialog = SettingsDialog(
                self,
                self.settings_editor,
                on_save=self.save_settings,
                on_cancel=self.cancel_settings,
                on_close=self.toggle_settings,
            )
            self.settings_dialog.after(100, self.settings_dialog.lift)
        else:
            self._close_settings_dialog()

    def save_settings(self):
        self.settings_editor.save()
        self._close_settings_dialog()

    def cancel_settings(self):
        self.settings_editor.cancel()
        self._close_settings_dialog()

    def _close_settings_dialog(self):
        if self.settings_dialog is not None:
            self.settings_dialog.destroy()
            self.settings_dialog = None

    def report_callback_exception(self, exc_type, exc_value, exc_tb):
        """Treat any storage failure inside a widget callback as fatal"""
        if isinstance(exc_value, IndexedragError):
            self.fatal_error = exc_value
            self.quit()
            return

        get_failure_log().record(exc_value, ErrorCategory.UI, "widget callback")
        logger.debug("".join(traceback.format_exception(exc_type, exc_value, exc_tb)))


def main(log_level: str = None):
    """Launch application"""
    settings = get_settings()
    setup_logger(log_level or settings.log_level, settings.log_dir)

    try:
        ctk.set_appearance_mode(settings.appearance_mode or APPEARANCE_MODE)
        ctk.set_default_color_theme(COLOR_THEME)

        database = Database(get_db_path(settings))
        app = IndexedragApp(database, settings.window_width, settings.window_height)
        app.mainloop()

        if app.fatal_error is not None:
            raise app.fatal_error

    except IndexedragError as e:
        messagebox.showerror("Error", get_failure_log().report_fatal(e))
        sys.exit(1)

    except Exception as e:
        logger.error(f"Application error: {e}")
        logger.error(f"Traceback:\n{traceback.format_exc()}")
        messagebox.showerror("Error", f"Application error:\n{e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
